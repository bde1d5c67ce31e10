#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
样本数据生成模块

沿已知线性趋势生成带有界均匀噪声的合成样本
"""

from typing import NamedTuple, Optional, Tuple, Dict, Any

import numpy as np

from regviz.utils.exceptions import DataGenerationError

DEFAULT_SIZE = 20
DEFAULT_SLOPE = 2.5
DEFAULT_INTERCEPT = 5.0
DEFAULT_NOISE = 2.5


class Point(NamedTuple):
    """样本点 (x, y)"""
    x: float
    y: float


Sample = Tuple[Point, ...]


def generate_sample(size: int = DEFAULT_SIZE, slope: float = DEFAULT_SLOPE,
                    intercept: float = DEFAULT_INTERCEPT, noise: float = DEFAULT_NOISE,
                    rng: Optional[np.random.Generator] = None) -> Sample:
    """
    生成合成样本

    第i个点 (i从1开始): x = i, y = slope * x + intercept + U[-noise, noise)

    Args:
        size: 样本点数量，至少为2
        slope: 趋势斜率
        intercept: 趋势截距
        noise: 噪声半宽
        rng: numpy随机数生成器，默认新建

    Returns:
        按x升序排列的样本点元组

    Raises:
        DataGenerationError: 样本数量或噪声参数无效时
    """
    if size < 2:
        raise DataGenerationError(f"样本数量至少为2，当前值: {size}")
    if noise < 0 or not np.isfinite(noise):
        raise DataGenerationError(f"噪声范围必须为非负有限值，当前值: {noise}")

    rng = rng if rng is not None else np.random.default_rng()

    x_values = np.arange(1, size + 1, dtype=float)
    offsets = rng.uniform(-noise, noise, size=size)
    y_values = slope * x_values + intercept + offsets

    return tuple(Point(float(x), float(y)) for x, y in zip(x_values, y_values))


class DataGenerator:
    """样本生成器，参数取自配置的 [data] 节"""

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        config = config or {}
        self.size = int(config.get('size', DEFAULT_SIZE))
        self.slope = float(config.get('slope', DEFAULT_SLOPE))
        self.intercept = float(config.get('intercept', DEFAULT_INTERCEPT))
        self.noise = float(config.get('noise', DEFAULT_NOISE))
        self.rng = np.random.default_rng(config.get('seed'))

        if self.size < 2:
            raise DataGenerationError(f"样本数量至少为2，当前值: {self.size}")

    def generate(self) -> Sample:
        """生成一个新样本"""
        return generate_sample(self.size, self.slope, self.intercept, self.noise, self.rng)

    def trend(self, x: float) -> float:
        """无噪声趋势值"""
        return self.slope * x + self.intercept

    def __repr__(self) -> str:
        return (f"DataGenerator(size={self.size}, slope={self.slope}, "
                f"intercept={self.intercept}, noise={self.noise})")
