#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
场景渲染模块

把样本、拟合结果和缩放变换映射为一帧完整的二维场景。
每一帧都从状态重新计算，不保留上一帧的任何对象。
"""

import math
from dataclasses import dataclass
from typing import Dict, Any, List, Optional, Sequence, Tuple

import numpy as np

from regviz.analysis.data_generator import Point
from regviz.analysis.regression import Fit
from .animation import AnimationTimeline
from .scales import LinearScale
from .zoom import ZoomTransform, IDENTITY

TICK_SIZE = 6.0
TICK_PADDING = 3.0


@dataclass(frozen=True)
class ChartLayout:
    """图表尺寸与样式"""
    width: float = 600.0
    height: float = 400.0
    margin_top: float = 40.0
    margin_right: float = 30.0
    margin_bottom: float = 30.0
    margin_left: float = 40.0
    point_radius: float = 6.0
    point_fill: str = "#3b82f6"
    point_stroke: str = "#fff"
    point_stroke_width: float = 1.5
    line_stroke: str = "#ef4444"
    line_stroke_width: float = 2.0
    line_step: float = 0.5
    tick_count: int = 10

    @classmethod
    def from_config(cls, config: Dict[str, Any]) -> "ChartLayout":
        """从配置的 [chart] 节构建，未知键忽略"""
        known = {name: config[name] for name in cls.__dataclass_fields__ if name in config}
        return cls(**known)


@dataclass(frozen=True)
class Tick:
    value: float
    offset: float
    label: str


@dataclass(frozen=True)
class Axis:
    """坐标轴，orient 为 'bottom' 或 'left'"""
    orient: str
    translate: Tuple[float, float]
    range: Tuple[float, float]
    ticks: Tuple[Tick, ...]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'orient': self.orient,
            'translate': list(self.translate),
            'range': list(self.range),
            'ticks': [{'value': t.value, 'offset': t.offset, 'label': t.label} for t in self.ticks]
        }


@dataclass(frozen=True)
class CircleMark:
    index: int
    cx: float
    cy: float
    r: float
    data_x: float
    data_y: float

    def to_dict(self) -> Dict[str, Any]:
        return {'index': self.index, 'cx': self.cx, 'cy': self.cy, 'r': self.r,
                'data_x': self.data_x, 'data_y': self.data_y}


@dataclass(frozen=True)
class LinePath:
    points: Tuple[Tuple[float, float], ...]
    total: int

    def svg_path(self) -> str:
        if not self.points:
            return ""
        return "M" + "L".join(f"{x:.3f},{y:.3f}" for x, y in self.points)

    def to_dict(self) -> Dict[str, Any]:
        return {'points': [list(p) for p in self.points], 'total': self.total, 'd': self.svg_path()}


@dataclass(frozen=True)
class Scene:
    """一帧场景，绘制顺序：x轴、y轴、数据点、回归线"""
    layout: ChartLayout
    generation: int
    elapsed: float
    complete: bool
    transform: ZoomTransform = IDENTITY
    axes: Tuple[Axis, ...] = ()
    circles: Tuple[CircleMark, ...] = ()
    line: Optional[LinePath] = None

    @property
    def empty(self) -> bool:
        return not self.circles

    def point_at(self, x: float, y: float) -> Optional[CircleMark]:
        """
        命中测试

        Args:
            x: 图表内屏幕x坐标
            y: 图表内屏幕y坐标

        Returns:
            光标下的数据点，多个重叠时取最后绘制的
        """
        scene_x, scene_y = self.transform.invert((x, y))
        radius = self.layout.point_radius
        for circle in reversed(self.circles):
            if math.hypot(scene_x - circle.cx, scene_y - circle.cy) <= radius:
                return circle
        return None

    def to_dict(self) -> Dict[str, Any]:
        layout = self.layout
        return {
            'generation': self.generation,
            'elapsed': self.elapsed if math.isfinite(self.elapsed) else None,
            'complete': self.complete,
            'empty': self.empty,
            'width': layout.width,
            'height': layout.height,
            'transform': self.transform.to_dict(),
            'axes': [axis.to_dict() for axis in self.axes],
            'circles': [circle.to_dict() for circle in self.circles],
            'line': self.line.to_dict() if self.line else None,
            'style': {
                'point_fill': layout.point_fill,
                'point_stroke': layout.point_stroke,
                'point_stroke_width': layout.point_stroke_width,
                'line_stroke': layout.line_stroke,
                'line_stroke_width': layout.line_stroke_width
            }
        }


class SceneRenderer:
    """场景渲染器"""

    def __init__(self, layout: ChartLayout = None, timeline: AnimationTimeline = None):
        self.layout = layout or ChartLayout()
        self.timeline = timeline or AnimationTimeline()

    def scales(self, sample: Sequence[Point]) -> Tuple[LinearScale, LinearScale]:
        """x域 [0, max(x)+1]，y域 [0, max(y)+5]"""
        layout = self.layout
        max_x = max(p.x for p in sample)
        max_y = max(p.y for p in sample)
        x_scale = LinearScale((0, max_x + 1),
                              (layout.margin_left, layout.width - layout.margin_right))
        y_scale = LinearScale((0, max_y + 5),
                              (layout.height - layout.margin_bottom, layout.margin_top))
        return x_scale, y_scale

    def line_samples(self, sample: Sequence[Point], fit: Fit) -> List[Point]:
        """回归线采样点：x 从 0 到 max(x)+1（不含），步长固定"""
        stop = max(p.x for p in sample) + 1
        xs = np.arange(0, stop, self.layout.line_step)
        return [Point(float(x), float(fit.predict(x))) for x in xs]

    def render(self, sample: Sequence[Point], fit: Optional[Fit], generation: int = 0,
               elapsed: float = math.inf, transform: ZoomTransform = IDENTITY) -> Scene:
        """
        渲染一帧

        Args:
            sample: 当前样本
            fit: 当前拟合结果，无定义时为None（不画回归线）
            generation: 动画代号
            elapsed: 自动画开始经过的秒数，默认为动画结束后
            transform: 缩放平移变换

        Returns:
            完整场景
        """
        layout = self.layout
        if not sample:
            return Scene(layout, generation, elapsed, True, transform)

        x_scale, y_scale = self.scales(sample)
        axes = (
            self._axis('bottom', x_scale, (0.0, layout.height - layout.margin_bottom)),
            self._axis('left', y_scale, (layout.margin_left, 0.0)),
        )

        radius = self.timeline.radius_at(elapsed, layout.point_radius)
        circles = tuple(
            CircleMark(i, x_scale(p.x), y_scale(p.y), radius, p.x, p.y)
            for i, p in enumerate(sample)
        )

        line = None
        total_segments = 0
        if fit is not None:
            samples = self.line_samples(sample, fit)
            total_segments = len(samples)
            visible = self.timeline.visible_segments(elapsed, total_segments)
            line = LinePath(tuple((x_scale(p.x), y_scale(p.y)) for p in samples[:visible]),
                            total_segments)

        complete = self.timeline.is_complete(elapsed, total_segments)
        return Scene(layout, generation, elapsed, complete, transform, axes, circles, line)

    def _axis(self, orient: str, scale: LinearScale, translate: Tuple[float, float]) -> Axis:
        count = self.layout.tick_count
        fmt = scale.tick_format(count)
        ticks = tuple(Tick(value, scale(value), fmt(value)) for value in scale.ticks(count))
        return Axis(orient, translate, scale.range, ticks)
