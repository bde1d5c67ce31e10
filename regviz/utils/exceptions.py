#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
异常模块
定义回归图表项目中的所有自定义异常类
"""


class VizError(Exception):
    """项目异常基类"""
    pass


class ConfigError(VizError):
    """配置相关异常"""
    pass


class ProjectRootError(VizError):
    """项目根目录相关异常"""
    pass


class DataGenerationError(VizError):
    """样本数据生成异常"""
    pass


class RegressionError(VizError):
    """回归计算异常基类"""
    pass


class UndefinedFitError(RegressionError):
    """拟合无定义异常（所有x值相同，斜率分母为零）"""

    def __init__(self, message, denominator=None):
        self.message = message
        self.denominator = denominator
        super().__init__(message)


class ExportError(VizError):
    """图表导出异常"""
    pass


class StaleGenerationError(VizError):
    """动画代号过期异常"""

    def __init__(self, requested, current):
        self.requested = requested
        self.current = current
        super().__init__(f"动画代号已过期: 请求 {requested}, 当前 {current}")
