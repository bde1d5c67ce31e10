#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
悬停提示状态模块
"""

from dataclasses import dataclass, replace
from typing import Optional, Tuple, Dict, Any

from regviz.analysis.utils import format_value

TOOLTIP_OFFSET = 10.0


@dataclass(frozen=True)
class TooltipState:
    """悬停提示状态，x/y为光标的客户区坐标"""

    visible: bool = False
    x: float = 0.0
    y: float = 0.0
    data_x: Optional[float] = None
    data_y: Optional[float] = None
    index: Optional[int] = None

    @classmethod
    def hidden(cls) -> "TooltipState":
        return cls()

    @classmethod
    def show(cls, index: int, data_x: float, data_y: float, x: float, y: float) -> "TooltipState":
        return cls(True, float(x), float(y), float(data_x), float(data_y), index)

    def move(self, x: float, y: float) -> "TooltipState":
        """光标在同一点上移动时只更新位置"""
        return replace(self, x=float(x), y=float(y))

    @property
    def lines(self) -> Tuple[str, ...]:
        if not self.visible:
            return ()
        return (f"X: {format_value(self.data_x)}", f"Y: {format_value(self.data_y)}")

    @property
    def position(self) -> Tuple[float, float]:
        """提示框左上角位置"""
        return (self.x + TOOLTIP_OFFSET, self.y + TOOLTIP_OFFSET)

    def to_dict(self) -> Dict[str, Any]:
        left, top = self.position
        return {
            'visible': self.visible,
            'x': self.x,
            'y': self.y,
            'data_x': self.data_x,
            'data_y': self.data_y,
            'index': self.index,
            'lines': list(self.lines),
            'left': left,
            'top': top
        }
