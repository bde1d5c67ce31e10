#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
日志管理模块
提供统一的日志配置和管理功能
"""

import logging
import logging.handlers
import threading
from pathlib import Path
from typing import Dict, Any
from regviz.utils.exceptions import ConfigError


class LoggerManager:
    """日志管理器"""

    _loggers = {}  # 缓存已创建的logger
    _lock = threading.Lock()

    def __init__(self):
        """
        初始化日志管理器
        从系统配置获取所有日志配置
        """
        from regviz.config.system import SystemConfig

        try:
            self._system_config = SystemConfig()
        except Exception as e:
            raise ConfigError(f"无法初始化系统配置: {e}")

        self.logging_config = self._system_config.get_logging_config()
        self.log_path = self._system_config.get_log_path()

    @classmethod
    def get_logger(cls, name: str) -> logging.Logger:
        """
        获取或创建logger实例

        Args:
            name: logger名称

        Returns:
            配置好的logger实例

        Raises:
            ConfigError: 无法初始化系统配置时
        """
        with cls._lock:
            if name in cls._loggers:
                return cls._loggers[name]

            manager = cls()
            logger = cls._create_logger_internal(name, manager.logging_config, manager.log_path)
            cls._loggers[name] = logger
            return logger

    @classmethod
    def clear_logger_cache(cls):
        """清除logger缓存，强制重新创建"""
        with cls._lock:
            cls._loggers.clear()

    @classmethod
    def _create_logger_internal(cls, name: str, config: Dict[str, Any], log_path: Path) -> logging.Logger:
        """
        内部方法：创建配置好的logger

        Args:
            name: logger名称
            config: 日志配置
            log_path: 日志文件绝对路径

        Returns:
            配置好的logger实例
        """
        log_level_name = config.get('level', 'INFO').upper()
        log_level = getattr(logging, log_level_name, logging.INFO)

        log_path.parent.mkdir(parents=True, exist_ok=True)

        logger = logging.getLogger(name)
        logger.setLevel(log_level)
        logger.propagate = False

        # 清除已有的handlers以避免重复
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()

        cls._add_file_handler(logger, log_path, config)

        if config.get('console', True):
            cls._add_console_handler(logger, config)

        return logger

    @classmethod
    def _add_file_handler(cls, logger: logging.Logger, log_path: Path, config: Dict[str, Any]):
        """添加文件handler（每日午夜轮换）"""
        backup_count = config.get('rotation_backup_count', 7)

        file_handler = logging.handlers.TimedRotatingFileHandler(
            log_path,
            when='midnight',
            backupCount=backup_count,
            encoding='utf-8'
        )

        # 文件记录所有级别信息
        file_handler.setLevel(logging.DEBUG)

        file_format = config.get('format',
                                 '%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler.setFormatter(logging.Formatter(file_format))

        logger.addHandler(file_handler)

    @classmethod
    def _add_console_handler(cls, logger: logging.Logger, config: Dict[str, Any]):
        """添加控制台handler"""
        console_handler = logging.StreamHandler()

        console_level_name = config.get('console_level', 'ERROR').upper()
        console_level = getattr(logging, console_level_name, logging.ERROR)
        console_handler.setLevel(console_level)

        console_format = config.get('console_format', '%(levelname)s: %(message)s')
        console_handler.setFormatter(logging.Formatter(console_format))

        logger.addHandler(console_handler)

    def __repr__(self) -> str:
        return f"LoggerManager(log_path={self.log_path}, config={self.logging_config})"
