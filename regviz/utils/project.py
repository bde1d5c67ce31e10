#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
项目路径工具
提供项目根目录获取等公共路径相关功能
"""

from pathlib import Path
from regviz.utils.exceptions import ProjectRootError


class ProjectPath:
    """项目路径工具类"""

    @staticmethod
    def get_project_root() -> Path:
        """
        获取项目根目录

        Returns:
            项目根目录路径

        Raises:
            ProjectRootError: 无法找到项目根目录
        """
        # 对于regviz/utils/project.py，需要回到项目根目录
        current_file = Path.resolve(Path(__file__))
        project_root = current_file.parent.parent.parent

        if not ProjectPath._is_valid_project_root(project_root):
            project_root = ProjectPath._find_project_root_by_marker()

        return project_root

    @staticmethod
    def _is_valid_project_root(path: Path) -> bool:
        """
        验证路径是否为有效的项目根目录

        验证优先级：
        1. 主要标志：打包文件 (pyproject.toml)
        2. 次要标志：项目目录结构 (regviz/, config/, web_server/)
        """
        if not (path / "pyproject.toml").exists():
            return False

        project_indicators = [
            "regviz",      # 核心代码目录
            "config",      # 配置文件目录
            "web_server"   # Web服务目录
        ]

        # 至少包含两个核心项目目录
        found_dirs = sum(1 for indicator in project_indicators if (path / indicator).exists())
        return found_dirs >= 2

    @staticmethod
    def _find_project_root_by_marker() -> Path:
        """通过搜索项目标记文件来找到项目根目录，先沿源文件向上，再沿当前工作目录向上"""
        for start in (Path.resolve(Path(__file__)), Path.cwd().resolve()):
            current = start
            while current != current.parent:
                if ProjectPath._is_valid_project_root(current):
                    return current
                current = current.parent

        raise ProjectRootError("无法找到项目根目录，请确保在项目内执行")
