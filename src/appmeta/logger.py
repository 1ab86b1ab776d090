"""日志配置模块

handler 不设置级别，输出范围只由 logger 级别决定，
运行时通过 `POST /log_level` 调整 `appmeta` logger 即可生效。
"""

import logging
import sys
from typing import TextIO

from .config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

logger = logging.getLogger("appmeta")


def build_handler(stream: TextIO) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def setup_logger(level: str = LOG_LEVEL) -> logging.Logger:
    """把 stderr handler 挂到 root logger 上（只配置一次），并设置 appmeta 的初始级别"""
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        root_logger.addHandler(build_handler(sys.stderr))

    logger.setLevel(getattr(logging, level, logging.INFO))
    return logger
