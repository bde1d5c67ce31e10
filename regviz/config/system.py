#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
系统配置管理模块
统一管理项目中的配置文件读取和路径管理
"""

import warnings
import toml
from pathlib import Path
from typing import Dict, Any, Optional

from regviz.utils.project import ProjectPath


class SystemConfig:
    """系统配置管理器"""

    def __init__(self, config_file: Optional[str] = None):
        """
        初始化系统配置管理器

        Args:
            config_file: 系统配置文件路径，默认使用 <项目根目录>/config/system.toml
        """
        self.project_root = ProjectPath.get_project_root()
        self.config_file = config_file or str(self.project_root / "config" / "system.toml")
        self._config_cache = None

    def get_config(self, section: str = None) -> Dict[str, Any]:
        """
        获取系统配置

        Args:
            section: 配置节名，如 'logging'、'chart'等

        Returns:
            完整配置或指定节的配置
        """
        if self._config_cache is None:
            self._config_cache = self._load_config()

        if section is None:
            return self._config_cache

        return self._config_cache.get(section, {})

    def _load_config(self) -> Dict[str, Any]:
        """加载TOML格式配置文件"""
        config_path = Path(self.config_file)

        if not config_path.exists():
            warnings.warn(f"系统配置文件不存在: {config_path}")
            return {}

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                return toml.load(f) or {}
        except (OSError, toml.TomlDecodeError) as e:
            warnings.warn(f"加载系统配置失败 {config_path}: {e}")
            return {}

    def get_log_path(self) -> Path:
        """获取日志文件路径（绝对路径）"""
        config = self.get_config("logging")
        log_file = config.get("log_file", "regviz.log")
        log_dir = config.get("log_dir", "logs")
        return self.project_root / log_dir / log_file

    def get_logging_config(self) -> Dict[str, Any]:
        """获取日志配置"""
        return self.get_config("logging").copy()

    def get_data_config(self) -> Dict[str, Any]:
        """获取样本生成配置"""
        return self.get_config("data")

    def get_chart_config(self) -> Dict[str, Any]:
        """获取图表布局配置"""
        return self.get_config("chart")

    def get_animation_config(self) -> Dict[str, Any]:
        """获取动画配置"""
        return self.get_config("animation")

    def get_zoom_config(self) -> Dict[str, Any]:
        """获取缩放平移配置"""
        return self.get_config("zoom")

    def get_export_config(self) -> Dict[str, Any]:
        """获取导出配置"""
        return self.get_config("export")

    def get_web_server_config(self) -> Dict[str, Any]:
        """获取Web服务器配置"""
        return self.get_config("web_server")

    def __repr__(self) -> str:
        return f"SystemConfig(config_file={self.config_file}, project_root={self.project_root})"
