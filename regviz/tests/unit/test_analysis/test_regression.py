#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
回归分析单元测试
"""

import numpy as np
import pytest

from regviz.analysis.data_generator import generate_sample
from regviz.analysis.regression import Fit, fit_line, RegressionAnalyzer
from regviz.utils.exceptions import RegressionError, UndefinedFitError


class TestFitLine:
    """fit_line测试类"""

    def test_perfectly_linear_sample(self):
        """测试完全线性样本得到精确解"""
        fit = fit_line([(1, 3), (2, 5), (3, 7)])

        assert fit.slope == 2.0
        assert fit.intercept == 1.0
        assert f"{fit.slope:.2f}" == "2.00"
        assert f"{fit.intercept:.2f}" == "1.00"

    def test_identical_x_is_undefined(self):
        """测试x全部相同时报告拟合无定义"""
        with pytest.raises(UndefinedFitError) as exc_info:
            fit_line([(1, 1), (1, 3)])

        assert exc_info.value.denominator == 0.0

    def test_single_point_is_undefined(self):
        with pytest.raises(UndefinedFitError):
            fit_line([(4, 2)])

    def test_all_zero_x_is_undefined(self):
        with pytest.raises(UndefinedFitError):
            fit_line([(0, 1), (0, 2), (0, 3)])

    def test_empty_sample(self):
        """测试空样本抛出异常"""
        with pytest.raises(RegressionError):
            fit_line([])

    def test_malformed_sample(self):
        with pytest.raises(RegressionError):
            fit_line([(1, 2, 3), (4, 5, 6)])

    def test_non_finite_values(self):
        """测试包含无穷值时报告拟合无定义"""
        with pytest.raises(UndefinedFitError):
            fit_line([(1, 1), (2, float('inf')), (3, 2)])

    def test_large_x_offset_two_points(self):
        """测试x偏移很大但互不相同时仍能拟合"""
        fit = fit_line([(1e6, 0.0), (1e6 + 1, 1.0)])

        assert fit.slope == 1.0
        assert fit.intercept == -1e6

    def test_large_x_offset_exact_line(self):
        fit = fit_line([(1e6 + i, 2.0 * i) for i in range(3)])

        assert fit.slope == 2.0
        assert fit.intercept == -2e6

    def test_large_x_offset_matches_polyfit(self):
        x = 1e6 + np.arange(5, dtype=float)
        y = np.array([0.5, 1.7, 2.2, 3.9, 4.1])
        fit = fit_line(list(zip(x, y)))
        expected_slope, expected_intercept = np.polyfit(x - 1e6, y, 1)

        assert fit.slope == pytest.approx(expected_slope, rel=1e-9)
        assert fit.predict(1e6) == pytest.approx(expected_intercept, abs=1e-6)

    def test_normal_equations_hold(self):
        """测试生成样本的拟合满足正规方程"""
        for seed in range(10):
            sample = generate_sample(rng=np.random.default_rng(seed))
            fit = fit_line(sample)
            x = np.array([p.x for p in sample])
            y = np.array([p.y for p in sample])
            residuals = y - fit.predict(x)

            assert np.isclose(np.sum(residuals), 0.0, atol=1e-9)
            assert np.isclose(np.sum(x * residuals), 0.0, atol=1e-8)

    def test_matches_polyfit(self):
        """测试与numpy最小二乘结果一致"""
        sample = generate_sample(rng=np.random.default_rng(5))
        fit = fit_line(sample)
        slope, intercept = np.polyfit([p.x for p in sample], [p.y for p in sample], 1)

        assert fit.slope == pytest.approx(slope)
        assert fit.intercept == pytest.approx(intercept)

    def test_fit_predict(self):
        fit = Fit(2.0, 1.0)

        assert fit.predict(3) == 7.0
        assert list(fit.predict(np.array([0.0, 1.0]))) == [1.0, 3.0]


class TestRegressionAnalyzer:
    """RegressionAnalyzer测试类"""

    def setup_method(self):
        """测试前准备"""
        self.analyzer = RegressionAnalyzer()

    def test_perfect_fit(self):
        """测试完全线性样本的分析结果"""
        result = self.analyzer.analyze([(1, 3), (2, 5), (3, 7)])

        assert result['slope'] == 2.0
        assert result['intercept'] == 1.0
        assert result['r2'] == pytest.approx(1.0)
        assert result['equation'] == "y = 2.0000 × x + 1.0000"
        assert result['data_points'] == 3
        assert result['residuals'] == pytest.approx([0.0, 0.0, 0.0])

    def test_generated_sample_quality(self):
        """测试生成样本的拟合质量与推断统计"""
        sample = generate_sample(rng=np.random.default_rng(1))
        result = self.analyzer.analyze(sample)

        assert result['quality']['quality'] == 'excellent'
        assert result['quality']['sample_adequacy'] == 'excellent'
        assert 0.0 <= result['p_value'] <= 1.0
        assert result['std_error'] > 0
        lower, upper = result['slope_ci']
        assert lower <= result['slope'] <= upper

    def test_two_points_skip_inference(self):
        """测试两个点时不计算推断统计"""
        result = self.analyzer.analyze([(1, 1), (2, 3)])

        assert result['p_value'] is None
        assert result['slope_ci'] is None
        assert result['slope'] == 2.0

    def test_constant_y(self):
        """测试y为常数时斜率为0且R²为1"""
        result = self.analyzer.analyze([(1, 4), (2, 4), (3, 4)])

        assert result['slope'] == 0.0
        assert result['r2'] == 1.0

    def test_negative_intercept_equation(self):
        result = self.analyzer.analyze([(1, 1), (2, 3), (3, 5)])

        assert result['equation'] == "y = 2.0000 × x - 1.0000"

    def test_undefined_fit_propagates(self):
        """测试拟合无定义时抛出异常"""
        with pytest.raises(UndefinedFitError):
            self.analyzer.analyze([(1, 1), (1, 3)])

    def test_quality_grades(self):
        """测试质量分级"""
        assert self.analyzer._evaluate_regression_quality(0.95, 20)['quality'] == 'excellent'
        assert self.analyzer._evaluate_regression_quality(0.8, 8)['quality'] == 'good'
        assert self.analyzer._evaluate_regression_quality(0.6, 5)['quality'] == 'fair'
        poor = self.analyzer._evaluate_regression_quality(0.1, 3)
        assert poor['quality'] == 'poor'
        assert poor['sample_adequacy'] == 'poor'
