"""
Tests for health_check.py individual checks.
"""
from db import make_engine
from health_check import check_database, check_dependencies, check_directories


def test_database_check_creates_schema():
    passed, message = check_database(make_engine("sqlite://"))
    assert passed, message


def test_dependencies_check_reports_missing():
    assert check_dependencies({"json": "json"})[0]
    passed, message = check_dependencies({"json": "json", "scg_not_installed_pkg": "scg-missing"})
    assert not passed
    assert "scg-missing" in message


def test_directories_check_creates_missing(tmp_path):
    target = tmp_path / "out" / "nested"
    passed, message = check_directories([target])
    assert passed
    assert target.is_dir()
    assert "Created 1" in message
