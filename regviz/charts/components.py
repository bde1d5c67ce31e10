#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
图表组件模块

用matplotlib把场景逐元素绘制为光栅图像
"""

import io

import matplotlib

# 设置matplotlib使用非交互式后端
matplotlib.use('Agg')

import matplotlib.pyplot as plt  # noqa: E402
from matplotlib.patches import Circle  # noqa: E402

from .scene import Scene, Axis, TICK_SIZE, TICK_PADDING  # noqa: E402

AXIS_COLOR = '#000000'
AXIS_FONT_PX = 10


def _px_to_pt(pixels: float, dpi: int) -> float:
    """像素转换为matplotlib的磅值"""
    return pixels * 72.0 / dpi


def create_scene_figure(scene: Scene, dpi: int = 100, background: str = '#ffffff') -> plt.Figure:
    """
    创建与场景像素尺寸一致的图表

    Args:
        scene: 待绘制场景
        dpi: 图像分辨率，图像像素尺寸等于场景尺寸
        background: 背景颜色

    Returns:
        matplotlib图表对象
    """
    layout = scene.layout
    fig = plt.figure(figsize=(layout.width / dpi, layout.height / dpi), dpi=dpi)
    fig.patch.set_facecolor(background)

    # 坐标轴占满画布，数据坐标即像素坐标，y向下
    ax = fig.add_axes([0, 0, 1, 1])
    ax.set_xlim(0, layout.width)
    ax.set_ylim(layout.height, 0)
    ax.axis('off')

    transform = scene.transform
    for axis in scene.axes:
        _draw_axis(ax, axis, transform, dpi)

    line_width = _px_to_pt(layout.point_stroke_width, dpi)
    for circle in scene.circles:
        if circle.r <= 0:
            continue
        cx, cy = transform.apply((circle.cx, circle.cy))
        ax.add_patch(Circle((cx, cy), circle.r * transform.k,
                            facecolor=layout.point_fill, edgecolor=layout.point_stroke,
                            linewidth=line_width * transform.k))

    if scene.line is not None and len(scene.line.points) > 1:
        xs, ys = zip(*(transform.apply(p) for p in scene.line.points))
        ax.plot(xs, ys, color=layout.line_stroke,
                linewidth=_px_to_pt(layout.line_stroke_width, dpi) * transform.k,
                solid_capstyle='butt')

    return fig


def _draw_axis(ax, axis: Axis, transform, dpi: int) -> None:
    """绘制坐标轴的轴线、刻度线与刻度标签"""
    tx, ty = axis.translate
    r0, r1 = axis.range
    width = _px_to_pt(1.0, dpi) * transform.k
    font_size = _px_to_pt(AXIS_FONT_PX, dpi) * transform.k

    def line(p0, p1):
        (x0, y0), (x1, y1) = transform.apply(p0), transform.apply(p1)
        ax.plot([x0, x1], [y0, y1], color=AXIS_COLOR, linewidth=width)

    if axis.orient == 'bottom':
        line((tx + r0, ty), (tx + r1, ty))
        for tick in axis.ticks:
            line((tx + tick.offset, ty), (tx + tick.offset, ty + TICK_SIZE))
            lx, ly = transform.apply((tx + tick.offset, ty + TICK_SIZE + TICK_PADDING))
            ax.text(lx, ly, tick.label, ha='center', va='top', fontsize=font_size, color=AXIS_COLOR)
    else:
        line((tx, ty + r0), (tx, ty + r1))
        for tick in axis.ticks:
            line((tx, ty + tick.offset), (tx - TICK_SIZE, ty + tick.offset))
            lx, ly = transform.apply((tx - TICK_SIZE - TICK_PADDING, ty + tick.offset))
            ax.text(lx, ly, tick.label, ha='right', va='center', fontsize=font_size, color=AXIS_COLOR)


def figure_to_png(fig: plt.Figure, dpi: int = 100) -> bytes:
    """
    把图表编码为PNG字节并关闭图表

    Args:
        fig: matplotlib图表对象
        dpi: 图像分辨率

    Returns:
        PNG字节
    """
    buffer = io.BytesIO()
    try:
        fig.savefig(buffer, format='png', dpi=dpi, facecolor=fig.get_facecolor())
    finally:
        plt.close(fig)
    return buffer.getvalue()
