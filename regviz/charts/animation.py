#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
动画时间轴模块

点的弹出与回归线的逐段绘制都由经过时间直接求值，不保留任何待执行回调
"""

import math
from dataclasses import dataclass
from typing import Dict, Any


def ease_cubic_in_out(t: float) -> float:
    """三次缓入缓出，t ∈ [0, 1]"""
    t = min(1.0, max(0.0, t)) * 2
    if t <= 1:
        return t * t * t / 2
    t -= 2
    return (t * t * t + 2) / 2


@dataclass(frozen=True)
class AnimationTimeline:
    """单一代号的动画时间轴，时间单位为秒"""
    point_duration: float = 0.5
    segment_delay: float = 0.05

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "AnimationTimeline":
        return cls(point_duration=config.get('point_duration_ms', 500) / 1000.0,
                   segment_delay=config.get('segment_delay_ms', 50) / 1000.0)

    def radius_at(self, elapsed: float, final_radius: float) -> float:
        """点半径从0增长到最终值"""
        if self.point_duration <= 0:
            return final_radius
        return final_radius * ease_cubic_in_out(elapsed / self.point_duration)

    def visible_segments(self, elapsed: float, total: int) -> int:
        """
        已绘制的折线采样点数

        第k个采样点在 k * segment_delay 时刻出现，k从0开始。
        """
        if total <= 0 or elapsed < 0:
            return 0
        if self.segment_delay <= 0 or not math.isfinite(elapsed):
            return total
        # 加上微小偏移抵消 0.1 / 0.05 这类浮点误差
        return min(total, math.floor(elapsed / self.segment_delay + 1e-9) + 1)

    def duration(self, total_segments: int) -> float:
        """整个动画所需时间"""
        line_time = max(0, total_segments - 1) * max(0.0, self.segment_delay)
        return max(self.point_duration, line_time)

    def is_complete(self, elapsed: float, total_segments: int) -> bool:
        return elapsed >= self.duration(total_segments)
