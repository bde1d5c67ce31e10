#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
线性比例尺模块

将数据区间线性映射到像素区间，并生成整齐的刻度
"""

import math
from typing import List, Tuple

_E10 = math.sqrt(50)
_E5 = math.sqrt(10)
_E2 = math.sqrt(2)


def tick_step(start: float, stop: float, count: int) -> float:
    """
    计算1、2、5乘以10的幂次的刻度步长

    Args:
        start: 区间起点
        stop: 区间终点
        count: 期望刻度数

    Returns:
        刻度步长（正数），区间退化时返回0
    """
    if count <= 0 or stop == start:
        return 0.0
    step = abs(stop - start) / count
    power = math.floor(math.log10(step))
    error = step / 10 ** power
    if error >= _E10:
        factor = 10
    elif error >= _E5:
        factor = 5
    elif error >= _E2:
        factor = 2
    else:
        factor = 1
    return factor * 10 ** power


def tick_precision(step: float) -> int:
    """刻度标签需要的小数位数"""
    if step <= 0:
        return 0
    return max(0, -math.floor(math.log10(step) + 1e-12))


class LinearScale:
    """线性比例尺 domain -> range"""

    def __init__(self, domain: Tuple[float, float], range_: Tuple[float, float]):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    def __call__(self, value: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if d1 == d0:
            return (r0 + r1) / 2
        return r0 + (value - d0) / (d1 - d0) * (r1 - r0)

    def invert(self, pixel: float) -> float:
        """像素值反算为数据值"""
        d0, d1 = self.domain
        r0, r1 = self.range
        if r1 == r0:
            return (d0 + d1) / 2
        return d0 + (pixel - r0) / (r1 - r0) * (d1 - d0)

    def ticks(self, count: int = 10) -> List[float]:
        """
        生成区间内的整齐刻度值

        Args:
            count: 期望刻度数

        Returns:
            升序刻度值列表
        """
        start, stop = sorted(self.domain)
        step = tick_step(start, stop, count)
        if step == 0:
            return [start]

        # 步长小于1时用除法避免 0.1 * 3 这类浮点误差
        if step >= 1:
            i0 = math.ceil(start / step)
            i1 = math.floor(stop / step)
            return [i * step for i in range(i0, i1 + 1)]

        inverse = round(1 / step)
        i0 = math.ceil(start * inverse)
        i1 = math.floor(stop * inverse)
        return [i / inverse for i in range(i0, i1 + 1)]

    def tick_format(self, count: int = 10):
        """返回与刻度步长相匹配的标签格式化函数"""
        start, stop = sorted(self.domain)
        decimals = tick_precision(tick_step(start, stop, count))
        return lambda value: f"{value:.{decimals}f}"

    def __repr__(self) -> str:
        return f"LinearScale(domain={self.domain}, range={self.range})"
