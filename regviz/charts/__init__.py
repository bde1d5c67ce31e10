"""
图表生成模块

提供比例尺、缩放、动画、场景渲染与导出组件
"""

from .scales import LinearScale
from .zoom import ZoomTransform, ZoomBehavior, IDENTITY
from .animation import AnimationTimeline, ease_cubic_in_out
from .tooltip import TooltipState
from .scene import ChartLayout, Scene, SceneRenderer
from .exporter import ChartExporter, ExportResult

__all__ = [
    'LinearScale',
    'ZoomTransform',
    'ZoomBehavior',
    'IDENTITY',
    'AnimationTimeline',
    'ease_cubic_in_out',
    'TooltipState',
    'ChartLayout',
    'Scene',
    'SceneRenderer',
    'ChartExporter',
    'ExportResult'
]
