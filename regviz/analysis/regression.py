#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
回归分析算法模块

实现闭式最小二乘线性回归及拟合质量评估
"""

from dataclasses import dataclass
from typing import Dict, Any, List, Sequence, Tuple

import numpy as np
from scipy import stats

from regviz.utils.logger import LoggerManager
from regviz.utils.exceptions import RegressionError, UndefinedFitError
from .utils import format_equation


@dataclass(frozen=True)
class Fit:
    """线性拟合结果 y = slope * x + intercept"""
    slope: float
    intercept: float

    def predict(self, x):
        """计算拟合值，x可为标量或numpy数组"""
        return self.slope * x + self.intercept


def _as_arrays(points: Sequence[Tuple[float, float]]) -> Tuple[np.ndarray, np.ndarray]:
    data = np.asarray(points, dtype=float)
    if data.size == 0:
        raise RegressionError("样本为空，无法进行回归分析")
    if data.ndim != 2 or data.shape[1] != 2:
        raise RegressionError(f"样本格式无效，期望 (x, y) 点序列，实际形状: {data.shape}")
    return data[:, 0], data[:, 1]


def fit_line(points: Sequence[Tuple[float, float]]) -> Fit:
    """
    普通最小二乘闭式解

        slope = Σ(x−x̄)(y−ȳ) / Σ(x−x̄)²
        intercept = ȳ − slope·x̄

    与 (n·Σxy − Σx·Σy) / (n·Σx² − (Σx)²) 等价，中心化后x偏移很大时不损失精度。

    Args:
        points: (x, y) 点序列

    Returns:
        拟合结果

    Raises:
        RegressionError: 样本为空或格式无效时
        UndefinedFitError: 所有x值相同（分母为零）或结果非有限时
    """
    x, y = _as_arrays(points)
    n = len(x)

    if np.ptp(x) == 0:
        raise UndefinedFitError("所有x值相同，斜率无定义", denominator=0.0)

    x_mean = np.mean(x)
    y_mean = np.mean(y)
    dx = x - x_mean
    sxx = np.sum(dx * dx)
    # n·Σx² − (Σx)² 等于 n²·Sxx
    denominator = n * n * sxx
    if not np.isfinite(sxx) or sxx == 0:
        raise UndefinedFitError("x值的离差平方和非正或非有限，斜率无定义", denominator=float(denominator))

    slope = np.sum(dx * (y - y_mean)) / sxx
    intercept = y_mean - slope * x_mean

    if not (np.isfinite(slope) and np.isfinite(intercept)):
        raise UndefinedFitError("拟合结果非有限值", denominator=float(denominator))

    return Fit(float(slope), float(intercept))


class RegressionAnalyzer:
    """回归分析器"""

    def __init__(self):
        """初始化回归分析器"""
        self.logger = LoggerManager.get_logger("RegressionAnalyzer")

    def analyze(self, points: Sequence[Tuple[float, float]],
                x_name: str = "x", y_name: str = "y") -> Dict[str, Any]:
        """
        执行回归分析

        Args:
            points: (x, y) 点序列
            x_name: X轴名称
            y_name: Y轴名称

        Returns:
            回归分析结果字典

        Raises:
            RegressionError: 样本无效或拟合无定义时
        """
        try:
            fit = fit_line(points)
        except RegressionError as e:
            self.logger.warning(f"回归分析失败: {e}")
            raise

        x, y = _as_arrays(points)
        n = len(x)
        y_pred = fit.predict(x)
        residuals = y - y_pred
        r2 = self._r_squared(y, residuals)

        result = {
            'data_points': n,
            'slope': fit.slope,
            'intercept': fit.intercept,
            'r2': r2,
            'y_predicted': y_pred.tolist(),
            'residuals': residuals.tolist(),
            'equation': format_equation(fit.slope, fit.intercept, x_name, y_name),
            'quality': self._evaluate_regression_quality(r2, n)
        }
        result.update(self._inference(x, y, fit.slope))

        self.logger.debug(f"回归分析完成: {result['equation']}, R² = {r2:.4f}")
        return result

    def _r_squared(self, y: np.ndarray, residuals: np.ndarray) -> float:
        ss_res = float(np.sum(residuals ** 2))
        ss_tot = float(np.sum((y - np.mean(y)) ** 2))
        if ss_tot == 0.0:
            # y为常数时拟合线精确穿过所有点
            return 1.0
        return 1.0 - ss_res / ss_tot

    def _inference(self, x: np.ndarray, y: np.ndarray, slope: float) -> Dict[str, Any]:
        """
        斜率的显著性与置信区间，需要至少3个点

        Args:
            x: X数据
            y: Y数据
            slope: 闭式解斜率

        Returns:
            p值、标准误差和95%置信区间
        """
        n = len(x)
        if n < 3:
            return {'p_value': None, 'std_error': None, 'slope_ci': None}

        result = stats.linregress(x, y)
        return {
            'p_value': float(result.pvalue),
            'std_error': float(result.stderr),
            'slope_ci': self._calculate_confidence_interval(slope, float(result.stderr), n)
        }

    def _calculate_confidence_interval(self, slope: float, std_err: float, n: int) -> List[float]:
        """
        计算斜率的95%置信区间

        Args:
            slope: 斜率
            std_err: 标准误差
            n: 样本量

        Returns:
            置信区间 [lower, upper]
        """
        t_value = stats.t.ppf(0.975, n - 2)
        return [slope - t_value * std_err, slope + t_value * std_err]

    def _evaluate_regression_quality(self, r2: float, n_points: int) -> Dict[str, Any]:
        """
        评估回归质量

        Args:
            r2: 决定系数
            n_points: 数据点数量

        Returns:
            质量评估结果
        """
        if r2 >= 0.9:
            quality = 'excellent'
        elif r2 >= 0.7:
            quality = 'good'
        elif r2 >= 0.5:
            quality = 'fair'
        else:
            quality = 'poor'

        if n_points >= 10:
            sample_adequacy = 'excellent'
        elif n_points >= 7:
            sample_adequacy = 'good'
        elif n_points >= 5:
            sample_adequacy = 'fair'
        else:
            sample_adequacy = 'poor'

        return {
            'quality': quality,
            'r2': r2,
            'n_points': n_points,
            'sample_adequacy': sample_adequacy
        }
