#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
regviz - 交互式线性回归散点图

生成合成样本、计算最小二乘拟合，并在浏览器中渲染可缩放、可悬停、可导出的图表。
"""

__version__ = "0.1.0"
