#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
分析工具函数单元测试
"""

from regviz.analysis.utils import format_value, format_equation


class TestFormatValue:

    def test_two_decimals(self):
        assert format_value(3.14159) == "3.14"
        assert format_value(2) == "2.00"

    def test_missing_values(self):
        """测试缺失和非有限值"""
        assert format_value(None) == "n/a"
        assert format_value(float('nan')) == "n/a"
        assert format_value(float('inf')) == "n/a"


class TestFormatEquation:

    def test_positive_intercept(self):
        assert format_equation(2.5, 5.0) == "y = 2.5000 × x + 5.0000"

    def test_negative_intercept(self):
        assert format_equation(1.0, -3.0) == "y = 1.0000 × x - 3.0000"

    def test_zero_intercept(self):
        assert format_equation(1.5, 0.00001) == "y = 1.5000 × x"

    def test_custom_names(self):
        assert format_equation(1.0, 2.0, "t", "v", decimals=2) == "v = 1.00 × t + 2.00"
