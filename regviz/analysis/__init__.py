"""
分析模块

样本生成与最小二乘回归
"""

from .data_generator import Point, Sample, DataGenerator, generate_sample
from .regression import Fit, fit_line, RegressionAnalyzer
from .utils import format_value, format_equation

__all__ = [
    'Point',
    'Sample',
    'DataGenerator',
    'generate_sample',
    'Fit',
    'fit_line',
    'RegressionAnalyzer',
    'format_value',
    'format_equation'
]
