"""日志配置：按子系统命名的 logger，级别可由环境变量或 .env 指定。"""
import logging
import os
from typing import Optional

from dotenv import load_dotenv

from tamagotchi.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, LOGGER_NAME

LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}

_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def get_logger(subsystem: str) -> logging.Logger:
    """返回子系统 logger，例如 tamagotchi.pet。"""
    return logging.getLogger(f"{LOGGER_NAME}.{subsystem}")


def setup_logging(level: Optional[str] = None) -> logging.Logger:
    """初始化根 logger（tamagotchi）。重复调用不会重复添加 handler。"""
    load_dotenv()
    level_name = level or os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(LEVELS.get(level_name.upper(), logging.WARNING))
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
