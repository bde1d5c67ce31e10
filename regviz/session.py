#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
图表会话模块

以不可变状态快照管理样本、拟合、提示和缩放。
每个命名事件（生成、指针移动、离开、缩放、平移、导出）产生一个新快照，渲染只读取快照。
"""

import threading
import time
from dataclasses import dataclass, replace
from typing import Optional, Callable, Dict, Any, Sequence, Tuple

from regviz.analysis.data_generator import Point, Sample, DataGenerator
from regviz.analysis.regression import Fit, RegressionAnalyzer
from regviz.analysis.utils import format_value
from regviz.charts.animation import AnimationTimeline
from regviz.charts.exporter import ChartExporter, ExportResult
from regviz.charts.scene import ChartLayout, Scene, SceneRenderer
from regviz.charts.tooltip import TooltipState
from regviz.charts.zoom import ZoomTransform, ZoomBehavior, IDENTITY
from regviz.config.system import SystemConfig
from regviz.utils.exceptions import RegressionError, StaleGenerationError
from regviz.utils.logger import LoggerManager


@dataclass(frozen=True)
class ChartState:
    """图表状态快照"""
    generation: int = 0
    sample: Sample = ()
    fit: Optional[Fit] = None
    fit_error: Optional[str] = None
    analysis: Optional[Dict[str, Any]] = None
    tooltip: TooltipState = TooltipState()
    transform: ZoomTransform = IDENTITY
    started_at: float = 0.0

    def stats(self) -> Dict[str, Any]:
        """统计面板内容"""
        analysis = self.analysis or {}
        return {
            'points': len(self.sample),
            'slope': self.fit.slope if self.fit else None,
            'intercept': self.fit.intercept if self.fit else None,
            'slope_text': format_value(self.fit.slope if self.fit else None),
            'intercept_text': format_value(self.fit.intercept if self.fit else None),
            'r2': analysis.get('r2'),
            'equation': analysis.get('equation'),
            'fit_defined': self.fit is not None,
            'fit_error': self.fit_error
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            'generation': self.generation,
            'points': [{'x': p.x, 'y': p.y} for p in self.sample],
            'stats': self.stats(),
            'tooltip': self.tooltip.to_dict(),
            'transform': self.transform.to_dict()
        }


class ChartSession:
    """图表会话，串行处理所有事件"""

    def __init__(self, generator: DataGenerator = None, renderer: SceneRenderer = None,
                 zoom: ZoomBehavior = None, exporter: ChartExporter = None,
                 clock: Callable[[], float] = time.monotonic):
        self.generator = generator or DataGenerator()
        self.renderer = renderer or SceneRenderer()
        layout = self.renderer.layout
        self.zoom = zoom or ZoomBehavior(layout.width, layout.height)
        self.exporter = exporter or ChartExporter()
        self.analyzer = RegressionAnalyzer()
        self.clock = clock
        self.logger = LoggerManager.get_logger("ChartSession")
        self._lock = threading.Lock()
        self._state = ChartState()

    @classmethod
    def from_config(cls, system_config: SystemConfig = None,
                    clock: Callable[[], float] = time.monotonic) -> "ChartSession":
        """按系统配置组装会话"""
        system_config = system_config or SystemConfig()
        layout = ChartLayout.from_config(system_config.get_chart_config())
        timeline = AnimationTimeline.from_config(system_config.get_animation_config())
        return cls(
            generator=DataGenerator(system_config.get_data_config()),
            renderer=SceneRenderer(layout, timeline),
            zoom=ZoomBehavior.from_config(layout.width, layout.height, system_config.get_zoom_config()),
            exporter=ChartExporter(system_config.get_export_config()),
            clock=clock
        )

    @property
    def state(self) -> ChartState:
        return self._state

    def generate(self) -> ChartState:
        """
        生成新样本并在同一次状态转换中重新拟合

        代号加一，旧动画的后续帧请求将被拒绝。
        """
        with self._lock:
            sample = self.generator.generate()
            self._state = self._install_sample(sample)
            state = self._state
        self.logger.info(f"生成新样本: 代号 {state.generation}, {len(sample)} 个点")
        return state

    def load_sample(self, sample: Sequence[Tuple[float, float]]) -> ChartState:
        """安装外部给定的 (x, y) 序列，拟合规则与生成相同"""
        try:
            points = tuple(Point(float(x), float(y)) for x, y in sample)
        except (TypeError, ValueError) as e:
            raise RegressionError(f"样本格式无效，期望 (x, y) 点序列: {e}")

        with self._lock:
            self._state = self._install_sample(points)
            return self._state

    def _install_sample(self, sample: Sample) -> ChartState:
        fit = None
        fit_error = None
        analysis = None
        try:
            analysis = self.analyzer.analyze(sample)
            fit = Fit(analysis['slope'], analysis['intercept'])
        except RegressionError as e:
            fit_error = str(e)

        return ChartState(
            generation=self._state.generation + 1,
            sample=sample,
            fit=fit,
            fit_error=fit_error,
            analysis=analysis,
            tooltip=TooltipState.hidden(),
            transform=self._state.transform,
            started_at=self.clock()
        )

    def elapsed(self, state: ChartState = None) -> float:
        state = state or self._state
        return max(0.0, self.clock() - state.started_at)

    def scene(self, state: ChartState = None) -> Scene:
        """按当前时间渲染一帧"""
        state = state or self._state
        return self.renderer.render(state.sample, state.fit, state.generation,
                                    self.elapsed(state), state.transform)

    def frame(self, generation: int) -> Scene:
        """
        渲染指定代号的动画帧

        Args:
            generation: 请求方所属的动画代号

        Returns:
            当前场景

        Raises:
            StaleGenerationError: 代号不是当前代号时
        """
        state = self._state
        if generation != state.generation:
            raise StaleGenerationError(generation, state.generation)
        return self.scene(state)

    def pointer_move(self, x: float, y: float, client_x: float, client_y: float) -> TooltipState:
        """
        指针移动：进入数据点显示提示，在同一点上移动更新位置，离开时隐藏

        Args:
            x: 图表内x坐标
            y: 图表内y坐标
            client_x: 客户区x坐标
            client_y: 客户区y坐标

        Returns:
            新的提示状态
        """
        with self._lock:
            state = self._state
            hit = self.scene(state).point_at(x, y)
            tooltip = state.tooltip
            if hit is None:
                tooltip = TooltipState.hidden()
            elif tooltip.visible and tooltip.index == hit.index:
                tooltip = tooltip.move(client_x, client_y)
            else:
                tooltip = TooltipState.show(hit.index, hit.data_x, hit.data_y, client_x, client_y)
            self._state = replace(state, tooltip=tooltip)
            return tooltip

    def pointer_leave(self) -> TooltipState:
        with self._lock:
            self._state = replace(self._state, tooltip=TooltipState.hidden())
            return self._state.tooltip

    def zoom_by(self, factor: float, x: float, y: float) -> ZoomTransform:
        """以 (x, y) 为锚点缩放"""
        with self._lock:
            transform = self.zoom.zoom_by(self._state.transform, factor, (x, y))
            self._state = replace(self._state, transform=transform, tooltip=TooltipState.hidden())
            return transform

    def pan_by(self, dx: float, dy: float) -> ZoomTransform:
        with self._lock:
            transform = self.zoom.pan_by(self._state.transform, dx, dy)
            self._state = replace(self._state, transform=transform, tooltip=TooltipState.hidden())
            return transform

    def reset_zoom(self) -> ZoomTransform:
        with self._lock:
            self._state = replace(self._state, transform=IDENTITY)
            return IDENTITY

    def export(self) -> ExportResult:
        """导出当前场景为PNG"""
        with self._lock:
            return self.exporter.export(self.scene(self._state))
