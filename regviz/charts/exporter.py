#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
图表导出模块

把当前场景光栅化为PNG，成功与失败都以明确结果返回
"""

from dataclasses import dataclass
from typing import Optional, Dict, Any

from regviz.utils.logger import LoggerManager
from regviz.utils.exceptions import ExportError
from .components import create_scene_figure, figure_to_png
from .scene import Scene

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


@dataclass(frozen=True)
class ExportResult:
    """导出结果"""
    success: bool
    data: Optional[bytes] = None
    filename: str = "chart.png"
    mimetype: str = "image/png"
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'filename': self.filename,
            'size': len(self.data) if self.data else 0,
            'error': self.error
        }


class ChartExporter:
    """图表导出器"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        初始化导出器

        Args:
            config: 配置的 [export] 节
        """
        config = config or {}
        self.filename = config.get('filename', 'chart.png')
        self.dpi = int(config.get('dpi', 100))
        self.background = config.get('background', '#ffffff')
        self.logger = LoggerManager.get_logger("ChartExporter")

    def render_png(self, scene: Scene) -> bytes:
        """
        渲染场景为PNG字节

        Raises:
            ExportError: 场景为空或渲染失败时
        """
        if scene is None or scene.empty:
            raise ExportError("图表尚未渲染，没有可导出的内容")

        try:
            fig = create_scene_figure(scene, self.dpi, self.background)
            data = figure_to_png(fig, self.dpi)
        except Exception as e:
            raise ExportError(f"图表渲染失败: {e}") from e

        if not data.startswith(PNG_SIGNATURE):
            raise ExportError("图表渲染结果不是有效的PNG数据")
        return data

    def export(self, scene: Scene) -> ExportResult:
        """
        导出场景

        Args:
            scene: 当前场景

        Returns:
            导出结果，失败时 success 为 False 并带有错误信息
        """
        try:
            data = self.render_png(scene)
        except ExportError as e:
            self.logger.error(f"导出失败: {e}")
            return ExportResult(success=False, filename=self.filename, error=str(e))

        self.logger.info(f"导出成功: {self.filename} ({len(data)} 字节)")
        return ExportResult(success=True, data=data, filename=self.filename)
