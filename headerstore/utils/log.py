"""
Logging utilities for headerstore.
headerstore的日志工具。

This module provides logging functionality for headerstore using the loguru library.
It configures logging sinks based on settings and provides a package-bound logger.
此模块使用loguru库为headerstore提供日志功能。
它根据设置配置日志输出，并提供一个绑定到本包的日志记录器。
"""

import sys

from loguru import logger as _logger

PACKAGE = 'headerstore'

# Remove the default stderr handler to avoid duplicate logs
# 移除默认的stderr处理程序以避免重复日志
for _handler in list(_logger._core.handlers.values()):
    if _handler._name == '<stderr>':
        _logger.remove(_handler._id)


def _package_filter(record):
    return record["extra"].get("package") == PACKAGE


def configure_logging(settings):
    """
    Configure logging sinks based on settings.
    根据设置配置日志输出。

    Logging can go to stderr and/or to a file, with log level, rotation and
    retention taken from the LOG_* settings. Only records emitted through
    this package's logger reach these sinks.
    日志可以输出到stderr和/或文件，日志级别、轮换和保留来自LOG_*设置。
    只有通过本包日志记录器发出的记录才会到达这些输出。

    Args:
        settings: The settings object containing logging configuration.
                 包含日志配置的设置对象。

    Returns:
        list: The ids of the handlers that were added, for later removal.
             添加的处理程序的id，用于以后移除。
    """
    handler_ids = []
    if not settings.getbool('LOG_ENABLED', True):
        return handler_ids

    formatter = settings.get('LOG_FORMAT')
    level = settings.get('LOG_LEVEL', 'INFO')
    enqueue = settings.getbool('ENQUEUE', True)

    if settings.getbool('LOG_STDOUT', True):
        handler_ids.append(_logger.add(
            sys.stderr, format=formatter, level=level, enqueue=enqueue,
            filter=_package_filter,
        ))

    if filename := settings.get('LOG_FILE'):
        handler_ids.append(_logger.add(
            sink=filename, format=formatter, encoding=settings.get('LOG_ENCODING', 'utf-8'),
            level=level, enqueue=enqueue, rotation=settings.get('LOG_ROTATION', '20MB'),
            retention=settings.get('LOG_RETENTION', 10), filter=_package_filter,
        ))
    return handler_ids


logger = _logger.bind(package=PACKAGE)
