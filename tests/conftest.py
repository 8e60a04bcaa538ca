"""
Shared pytest fixtures for logconverter tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import datetime as _datetime
import os as _os
import pathlib as _pathlib

import pytest as _pytest

import logconverter.config as config
import logconverter.core as core

# Prefix of every environment variable the settings layer reads
ENV_PREFIX = "LOGCONVERTER_"


@_pytest.fixture
def isolated_env(
    tmp_path: _pathlib.Path,
    monkeypatch: _pytest.MonkeyPatch,
) -> _pathlib.Path:
    """
    Isolate a test from the real environment and config files.

    Clears every LOGCONVERTER_* variable, points the user config directory
    at an empty temp dir and makes an empty temp dir the working directory
    (the project config root).

    Returns:
        The project directory (current working directory).
    """
    for key in list(_os.environ):
        if key.startswith(ENV_PREFIX):
            monkeypatch.delenv(key)

    user_dir = tmp_path / "user-config"
    project_dir = tmp_path / "project"
    user_dir.mkdir()
    project_dir.mkdir()

    monkeypatch.setenv("LOGCONVERTER_CONFIG_DIR", str(user_dir))
    monkeypatch.chdir(project_dir)
    return project_dir


@_pytest.fixture
def clean_settings(isolated_env: _pathlib.Path) -> config.Settings:  # noqa: ARG001
    """
    Settings instance isolated from environment and .env file.

    This fixture ensures tests get predictable default settings.
    """
    return config.Settings.construct_without_dotenv()


@_pytest.fixture
def sample_records() -> list[core.Record]:
    """A small mixed batch with properties that differ between records."""
    return [
        core.Record(
            timestamp=_datetime.datetime(2025, 4, 24, 10, 0, 0),
            level="INFO",
            message="Server started",
            event_id="STARTUP",
            properties={"Host": "localhost", "Port": 8080},
        ),
        core.Record(
            timestamp=_datetime.datetime(2025, 4, 24, 10, 5, 30),
            level="ERROR",
            message="Database connection failed",
            exception="TimeoutError: no response after 30s",
            event_id="DB001",
            properties={"Host": "db01", "Retry": True},
        ),
        core.Record(
            timestamp=_datetime.datetime(2025, 4, 24, 10, 6, 0),
            level="WARN",
            message="Slow query",
        ),
    ]
