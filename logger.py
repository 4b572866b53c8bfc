# logger.py
"""
Application log for the tanker loading log.

Record changes, rejected inputs, export results and storage failures go to
``{LOGS_DIR}/scg_{YYYY-MM-DD}.log`` (dated in the configured timezone) and
to stdout at ``SCG_LOG_LEVEL``.
"""

import logging
import sys
from pathlib import Path

from config import AppConfig
from timezone_utils import get_local_time

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def log_file_path(logs_dir: Path, now=None) -> Path:
    day = (now or get_local_time()).strftime("%Y-%m-%d")
    return Path(logs_dir) / f"scg_{day}.log"


def setup_logger(name: str = "SCG", logs_dir: Path = None, console_level: str = None) -> logging.Logger:
    """Named logger with a dated file handler (DEBUG) and a console handler"""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)

    if logger.handlers:
        return logger

    logs_dir = Path(logs_dir or AppConfig.LOGS_DIR)
    logs_dir.mkdir(parents=True, exist_ok=True)
    formatter = logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")

    file_handler = logging.FileHandler(log_file_path(logs_dir), encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel((console_level or AppConfig.LOG_LEVEL).upper())
    console_handler.setFormatter(formatter)

    logger.addHandler(file_handler)
    logger.addHandler(console_handler)
    return logger


logger = setup_logger()


def log_info(message: str):
    logger.info(message)


def log_warning(message: str):
    logger.warning(message)


def log_error(message: str, exc_info=False):
    """Errors; pass exc_info=True inside an except block to keep the traceback"""
    logger.error(message, exc_info=exc_info)


def log_debug(message: str):
    logger.debug(message)
