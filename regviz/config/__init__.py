#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
配置管理模块

统一的系统配置和路径管理
"""

from regviz.config.system import SystemConfig

__all__ = [
    "SystemConfig"
]
