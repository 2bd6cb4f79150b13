# -*- coding: utf-8 -*-
"""
日志配置

使用 loguru，输出格式: [时间] [级别] [模块] 消息，仅为级别着色。
"""

import sys

from loguru import logger

LOG_FORMAT = (
    "[{time:YYYY-MM-DD HH:mm:ss}] "
    "[<level>{level}</level>] "
    "[{name}] "
    "{message}"
)


def setup_logging(level: str = "INFO") -> None:
    """替换 loguru 默认 sink，输出到 stdout"""
    logger.remove()
    logger.add(sys.stdout, format=LOG_FORMAT, level=level, colorize=None)
