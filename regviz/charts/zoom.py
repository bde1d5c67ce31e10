#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
缩放平移模块

提供与d3-zoom语义一致的变换与约束
"""

from dataclasses import dataclass
from typing import Tuple, Dict, Any

Point2D = Tuple[float, float]
Extent = Tuple[Point2D, Point2D]


@dataclass(frozen=True)
class ZoomTransform:
    """屏幕坐标 = 场景坐标 * k + (x, y)"""
    k: float = 1.0
    x: float = 0.0
    y: float = 0.0

    def apply(self, point: Point2D) -> Point2D:
        return (point[0] * self.k + self.x, point[1] * self.k + self.y)

    def invert(self, point: Point2D) -> Point2D:
        return ((point[0] - self.x) / self.k, (point[1] - self.y) / self.k)

    def invert_x(self, x: float) -> float:
        return (x - self.x) / self.k

    def invert_y(self, y: float) -> float:
        return (y - self.y) / self.k

    def translate(self, dx: float, dy: float) -> "ZoomTransform":
        """按场景单位平移"""
        return ZoomTransform(self.k, self.x + self.k * dx, self.y + self.k * dy)

    def to_svg(self) -> str:
        return f"translate({self.x},{self.y}) scale({self.k})"

    def to_dict(self) -> Dict[str, Any]:
        return {'k': self.k, 'x': self.x, 'y': self.y, 'svg': self.to_svg()}


IDENTITY = ZoomTransform()


class ZoomBehavior:
    """
    缩放平移行为

    缩放比例限制在 scale_extent 内，平移后场景不得拖出 translate_extent。
    """

    def __init__(self, width: float, height: float,
                 scale_extent: Tuple[float, float] = (1.0, 5.0),
                 translate_extent: Extent = None):
        self.extent: Extent = ((0.0, 0.0), (float(width), float(height)))
        self.scale_extent = (float(scale_extent[0]), float(scale_extent[1]))
        self.translate_extent: Extent = translate_extent or self.extent

        if self.scale_extent[0] <= 0 or self.scale_extent[0] > self.scale_extent[1]:
            raise ValueError(f"缩放范围无效: {scale_extent}")

    @classmethod
    def from_config(cls, width: float, height: float, config: Dict[str, Any]) -> "ZoomBehavior":
        return cls(width, height, (config.get('scale_min', 1.0), config.get('scale_max', 5.0)))

    def clamp_scale(self, k: float) -> float:
        return max(self.scale_extent[0], min(self.scale_extent[1], k))

    def constrain(self, transform: ZoomTransform) -> ZoomTransform:
        """把变换约束到平移范围内"""
        (ex0, ey0), (ex1, ey1) = self.extent
        (tx0, ty0), (tx1, ty1) = self.translate_extent

        dx0 = transform.invert_x(ex0) - tx0
        dx1 = transform.invert_x(ex1) - tx1
        dy0 = transform.invert_y(ey0) - ty0
        dy1 = transform.invert_y(ey1) - ty1

        shift_x = (dx0 + dx1) / 2 if dx1 > dx0 else (min(0.0, dx0) or max(0.0, dx1))
        shift_y = (dy0 + dy1) / 2 if dy1 > dy0 else (min(0.0, dy0) or max(0.0, dy1))
        return transform.translate(shift_x, shift_y)

    def scale_to(self, transform: ZoomTransform, k: float, anchor: Point2D) -> ZoomTransform:
        """
        以锚点为中心缩放到指定比例

        Args:
            transform: 当前变换
            k: 目标比例（会被限制在缩放范围内）
            anchor: 屏幕坐标锚点，缩放前后锚点下的场景位置不变

        Returns:
            约束后的新变换
        """
        k1 = self.clamp_scale(k)
        scene_x, scene_y = transform.invert(anchor)
        scaled = ZoomTransform(k1, anchor[0] - scene_x * k1, anchor[1] - scene_y * k1)
        return self.constrain(scaled)

    def zoom_by(self, transform: ZoomTransform, factor: float, anchor: Point2D) -> ZoomTransform:
        if factor <= 0:
            raise ValueError(f"缩放因子必须为正数，当前值: {factor}")
        return self.scale_to(transform, transform.k * factor, anchor)

    def pan_by(self, transform: ZoomTransform, dx: float, dy: float) -> ZoomTransform:
        """按屏幕像素平移"""
        return self.constrain(ZoomTransform(transform.k, transform.x + dx, transform.y + dy))
