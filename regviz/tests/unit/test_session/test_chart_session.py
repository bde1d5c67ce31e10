#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
图表会话单元测试
测试事件驱动的状态转换与动画代号
"""

import pytest

from regviz.analysis.data_generator import DataGenerator, Point
from regviz.analysis.regression import fit_line
from regviz.charts.zoom import IDENTITY
from regviz.session import ChartSession, ChartState
from regviz.utils.exceptions import RegressionError, StaleGenerationError

LINEAR_SAMPLE = (Point(1.0, 3.0), Point(2.0, 5.0), Point(3.0, 7.0))


class FakeClock:
    """可手动推进的时钟"""

    def __init__(self):
        self.now = 100.0

    def __call__(self):
        return self.now


class TestChartSession:
    """ChartSession测试类"""

    def setup_method(self):
        """测试前准备"""
        self.clock = FakeClock()
        self.session = ChartSession(generator=DataGenerator({'seed': 1}), clock=self.clock)

    def test_initial_state_is_empty(self):
        state = self.session.state

        assert isinstance(state, ChartState)
        assert state.generation == 0
        assert state.sample == ()
        assert state.fit is None
        assert self.session.scene().empty

    def test_generate(self):
        """测试生成样本并同时计算拟合"""
        state = self.session.generate()

        assert state.generation == 1
        assert len(state.sample) == 20
        assert [p.x for p in state.sample] == [float(i) for i in range(1, 21)]
        assert state.fit == fit_line(state.sample)
        assert state.fit_error is None
        assert not state.tooltip.visible
        assert state.started_at == 100.0

    def test_regenerate_refits(self):
        """测试新样本总是带着新拟合"""
        first = self.session.generate()
        second = self.session.generate()

        assert second.generation == 2
        assert second.sample != first.sample
        assert second.fit == fit_line(second.sample)

    def test_stale_frames_are_rejected(self):
        """测试旧代号的帧请求被拒绝"""
        self.session.generate()
        self.session.generate()

        with pytest.raises(StaleGenerationError) as exc_info:
            self.session.frame(1)

        assert exc_info.value.current == 2
        assert self.session.frame(2).generation == 2

    def test_animation_progresses_with_clock(self):
        """测试帧随时钟推进"""
        self.session.generate()

        start = self.session.frame(1)
        assert not start.complete
        assert len(start.line.points) == 1

        self.clock.now += 5.0
        finished = self.session.frame(1)
        assert finished.complete
        assert len(finished.line.points) == finished.line.total

    def test_new_generation_restarts_animation(self):
        self.session.generate()
        self.clock.now += 5.0
        self.session.generate()

        assert not self.session.frame(2).complete

    def test_degenerate_sample_reports_undefined_fit(self):
        """测试退化样本报告拟合无定义且不画回归线"""
        state = self.session.load_sample([(1, 1), (1, 3)])

        assert state.fit is None
        assert state.fit_error
        assert state.stats()['fit_defined'] is False
        assert state.stats()['slope_text'] == "n/a"
        assert self.session.scene().line is None

    def test_plain_tuples_become_points(self):
        state = self.session.load_sample([(1, 3), (2, 5), (3, 7)])

        assert state.sample == LINEAR_SAMPLE
        assert all(isinstance(p, Point) for p in state.sample)

    def test_degenerate_sample_hover_and_export(self):
        """测试拟合无定义时仍可悬停数据点并导出"""
        self.session.load_sample([(1, 1), (1, 3)])
        self.clock.now += 5.0

        scene = self.session.scene()
        assert len(scene.circles) == 2
        assert scene.line is None

        tooltip = self.session.pointer_move(305.0, 246.25, 400, 200)
        assert tooltip.visible
        assert tooltip.index == 1
        assert tooltip.lines == ("X: 1.00", "Y: 3.00")

        result = self.session.export()
        assert result.success
        assert result.data.startswith(b"\x89PNG")

    def test_malformed_sample_is_rejected(self):
        with pytest.raises(RegressionError):
            self.session.load_sample([(1, 2, 3)])

        assert self.session.state.generation == 0

    def test_stats(self):
        stats = self.session.load_sample(LINEAR_SAMPLE).stats()

        assert stats['points'] == 3
        assert stats['slope_text'] == "2.00"
        assert stats['intercept_text'] == "1.00"
        assert stats['r2'] == pytest.approx(1.0)
        assert stats['equation'] == "y = 2.0000 × x + 1.0000"

    def test_hover_shows_point_coordinates(self):
        """测试悬停数据点显示其坐标"""
        self.session.load_sample(LINEAR_SAMPLE)

        tooltip = self.session.pointer_move(172.5, 287.5, 500, 300)

        assert tooltip.visible
        assert tooltip.index == 0
        assert (tooltip.data_x, tooltip.data_y) == (1.0, 3.0)
        assert tooltip.lines == ("X: 1.00", "Y: 3.00")
        assert tooltip.position == (510.0, 310.0)

    def test_move_over_same_point_updates_position(self):
        self.session.load_sample(LINEAR_SAMPLE)
        self.session.pointer_move(172.5, 287.5, 500, 300)

        tooltip = self.session.pointer_move(174.0, 289.0, 505, 305)

        assert tooltip.index == 0
        assert (tooltip.x, tooltip.y) == (505.0, 305.0)

    def test_move_to_other_point(self):
        self.session.load_sample(LINEAR_SAMPLE)
        self.session.pointer_move(172.5, 287.5, 500, 300)

        tooltip = self.session.pointer_move(305.0, 232.5, 600, 250)

        assert tooltip.index == 1
        assert tooltip.lines == ("X: 2.00", "Y: 5.00")

    def test_leaving_points_hides_tooltip(self):
        """测试离开所有数据点后隐藏提示"""
        self.session.load_sample(LINEAR_SAMPLE)
        self.session.pointer_move(172.5, 287.5, 500, 300)

        assert not self.session.pointer_move(10, 10, 20, 20).visible

        self.session.pointer_move(172.5, 287.5, 500, 300)
        assert not self.session.pointer_leave().visible
        assert not self.session.state.tooltip.visible

    def test_generate_hides_tooltip(self):
        self.session.load_sample(LINEAR_SAMPLE)
        self.session.pointer_move(172.5, 287.5, 500, 300)

        assert not self.session.generate().tooltip.visible

    def test_zoom_and_pan(self):
        """测试缩放、平移与复位"""
        self.session.generate()

        transform = self.session.zoom_by(2, 300, 200)
        assert transform.k == 2
        assert self.session.frame(1).transform == transform

        panned = self.session.pan_by(40, 0)
        assert panned.x == transform.x + 40

        assert self.session.reset_zoom() == IDENTITY
        assert self.session.state.transform == IDENTITY

    def test_zoom_survives_regenerate(self):
        self.session.generate()
        transform = self.session.zoom_by(2, 300, 200)

        assert self.session.generate().transform == transform

    def test_export_before_generate_fails(self):
        """测试未渲染时导出返回失败结果"""
        result = self.session.export()

        assert not result.success
        assert result.error

    def test_export_after_generate(self):
        self.session.generate()
        self.clock.now += 5.0

        result = self.session.export()

        assert result.success
        assert result.filename == "chart.png"
        assert result.data

    def test_from_config(self):
        """测试按项目配置组装会话"""
        session = ChartSession.from_config(clock=self.clock)

        assert session.renderer.layout.width == 600
        assert session.zoom.scale_extent == (1.0, 5.0)
        assert session.exporter.filename == "chart.png"
        assert len(session.generate().sample) == 20

    def test_state_to_dict(self):
        self.session.load_sample(LINEAR_SAMPLE)
        data = self.session.state.to_dict()

        assert data['generation'] == 1
        assert data['points'][0] == {'x': 1.0, 'y': 3.0}
        assert data['tooltip']['visible'] is False
        assert data['transform']['k'] == 1.0
