#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分析模块通用工具函数

提供数值与方程的显示格式化
"""

import math
from typing import Optional


def format_value(value: Optional[float], decimals: int = 2) -> str:
    """
    格式化数值，保留指定小数位

    Args:
        value: 数值，None或非有限值显示为 'n/a'
        decimals: 小数位数

    Returns:
        格式化后的字符串
    """
    if value is None or not math.isfinite(value):
        return "n/a"
    return f"{value:.{decimals}f}"


def format_equation(slope: float, intercept: float, x_name: str = "x", y_name: str = "y",
                    decimals: int = 4) -> str:
    """
    格式化线性回归方程

    Args:
        slope: 斜率
        intercept: 截距
        x_name: X变量名
        y_name: Y变量名
        decimals: 小数位数

    Returns:
        方程字符串，如 'y = 2.5000 × x + 5.0000'
    """
    if abs(intercept) < 0.5 * 10 ** -decimals:
        return f"{y_name} = {slope:.{decimals}f} × {x_name}"
    elif intercept > 0:
        return f"{y_name} = {slope:.{decimals}f} × {x_name} + {intercept:.{decimals}f}"
    else:
        return f"{y_name} = {slope:.{decimals}f} × {x_name} - {abs(intercept):.{decimals}f}"
