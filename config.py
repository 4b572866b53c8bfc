# config.py
"""
Application configuration for the tanker loading log.
Values come from the environment (a local .env file is honoured).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}")


class AppConfig:
    """Central settings, read once at import time"""

    DB_URL = os.getenv("DB_URL", "sqlite:///scg.db")

    # Key of the single durable entry holding the whole record collection
    STORE_KEY = os.getenv("SCG_STORE_KEY", "scg_records")

    EXPORT_PREFIX = os.getenv("SCG_EXPORT_PREFIX", "situation_citerne")
    OUTPUT_DIR = Path(os.getenv("SCG_OUTPUT_DIR", "output"))
    LOGS_DIR = Path(os.getenv("SCG_LOGS_DIR", "logs"))
    LOG_LEVEL = os.getenv("SCG_LOG_LEVEL", "INFO")

    TIMEZONE = os.getenv("SCG_TIMEZONE", "UTC")
    DEFAULT_LANGUAGE = os.getenv("SCG_DEFAULT_LANGUAGE", "ar")
    APP_VERSION = os.getenv("SCG_APP_VERSION", "1.0.0")

    # Optional TTF font for Arabic glyphs in PDF reports
    REPORT_FONT_PATH = os.getenv("SCG_REPORT_FONT_PATH", "")

    SERIAL_MIN = _env_int("SCG_SERIAL_MIN", 1)
    SERIAL_MAX = _env_int("SCG_SERIAL_MAX", 8)

    @staticmethod
    def summary() -> dict:
        """Printable view of the active configuration"""
        return {
            "Database URL": AppConfig.DB_URL,
            "Store key": AppConfig.STORE_KEY,
            "Export prefix": AppConfig.EXPORT_PREFIX,
            "Output dir": str(AppConfig.OUTPUT_DIR),
            "Logs dir": str(AppConfig.LOGS_DIR),
            "Log level": AppConfig.LOG_LEVEL,
            "Timezone": AppConfig.TIMEZONE,
            "Default language": AppConfig.DEFAULT_LANGUAGE,
            "Version": AppConfig.APP_VERSION,
            "Serial range": f"{AppConfig.SERIAL_MIN:02d}-{AppConfig.SERIAL_MAX:02d}",
        }
