#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
工具模块

包含日志管理、项目路径、异常定义等通用工具
"""

from regviz.utils.logger import LoggerManager
from regviz.utils.project import ProjectPath
from regviz.utils.exceptions import (
    VizError,
    ConfigError,
    ProjectRootError,
    DataGenerationError,
    RegressionError,
    UndefinedFitError,
    ExportError,
    StaleGenerationError
)

__all__ = [
    "LoggerManager",
    "ProjectPath",
    "VizError",
    "ConfigError",
    "ProjectRootError",
    "DataGenerationError",
    "RegressionError",
    "UndefinedFitError",
    "ExportError",
    "StaleGenerationError"
]
