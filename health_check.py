# health_check.py
"""
System health check utility
Run: python health_check.py
"""

import importlib
import sys
from pathlib import Path

from sqlalchemy import inspect
from sqlalchemy.exc import SQLAlchemyError

from config import AppConfig
from timezone_utils import format_local_datetime, get_local_time

REQUIRED_TABLES = ("stored_values",)

# import name -> distribution name
REQUIRED_PACKAGES = {
    "streamlit": "streamlit",
    "sqlalchemy": "SQLAlchemy",
    "pandas": "pandas",
    "reportlab": "reportlab",
    "plotly": "plotly",
    "pytz": "pytz",
    "dotenv": "python-dotenv",
}


def check_database(bind=None):
    """Check that the database is reachable and the key-value table exists"""
    from db import engine, init_db

    bind = bind or engine
    try:
        init_db(bind)
        tables = set(inspect(bind).get_table_names())
    except SQLAlchemyError as e:
        return False, f"Database error: {e}"

    missing = [t for t in REQUIRED_TABLES if t not in tables]
    if missing:
        return False, f"Missing tables: {', '.join(missing)}"
    return True, f"Database OK - {len(REQUIRED_TABLES)} table(s) accessible at {bind.url}"


def check_dependencies(required=None):
    """Check if all required packages are installed"""
    required = required or REQUIRED_PACKAGES
    missing = []

    for module_name, dist_name in required.items():
        try:
            importlib.import_module(module_name)
        except ImportError:
            missing.append(dist_name)

    if missing:
        return False, f"Missing packages: {', '.join(missing)}"
    return True, f"All {len(required)} required packages installed"


def check_directories(dirs=None):
    """Check if required directories exist, creating them when missing"""
    dirs = dirs or [AppConfig.OUTPUT_DIR, AppConfig.LOGS_DIR]

    missing = [Path(d) for d in dirs if not Path(d).exists()]
    for d in missing:
        try:
            d.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            return False, f"Failed to create directory {d}: {e}"

    if missing:
        return True, f"Created {len(missing)} missing director(ies)"
    return True, f"All {len(dirs)} required directories exist"


def check_config():
    """Check if configuration is valid"""
    import pytz

    try:
        pytz.timezone(AppConfig.TIMEZONE)
    except pytz.UnknownTimeZoneError:
        return False, f"Unknown timezone: {AppConfig.TIMEZONE}"

    if AppConfig.SERIAL_MIN >= AppConfig.SERIAL_MAX:
        return False, f"Serial range {AppConfig.SERIAL_MIN}..{AppConfig.SERIAL_MAX} is empty"

    if AppConfig.REPORT_FONT_PATH and not Path(AppConfig.REPORT_FONT_PATH).is_file():
        return False, f"Report font not found: {AppConfig.REPORT_FONT_PATH}"

    return True, "Configuration valid"


def main():
    """Run all health checks"""
    print("=" * 60)
    print("🏥 SITUATION CITERNE HEALTH CHECK")
    print("=" * 60)
    print(f"Time: {format_local_datetime(get_local_time())} ({AppConfig.TIMEZONE})")
    for name, value in AppConfig.summary().items():
        print(f"{name}: {value}")
    print("=" * 60)

    checks = [
        ("Database", check_database),
        ("Dependencies", check_dependencies),
        ("Directories", check_directories),
        ("Configuration", check_config),
    ]

    all_passed = True

    for check_name, check_func in checks:
        passed, message = check_func()
        if passed:
            print(f"✅ {check_name:20s}: {message}")
        else:
            print(f"❌ {check_name:20s}: {message}")
            all_passed = False

    print("=" * 60)

    if all_passed:
        print("🎉 ALL CHECKS PASSED - System healthy!")
        return 0
    print("⚠️  SOME CHECKS FAILED - Review output above")
    return 1


if __name__ == "__main__":
    sys.exit(main())
