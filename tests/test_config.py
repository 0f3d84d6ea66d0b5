from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from config import DEFAULT_DATABASE_URL, Settings
from logging_setup import setup_logging
from models import UpdateTaskRequest

_ENV_NAMES = [
    "TODO_DATABASE_URL",
    "DATABASE_URL",
    "TODO_API_URL",
    "TODO_HOST",
    "TODO_PORT",
    "TODO_DEBUG",
    "TODO_LOG_DIR",
    "TODO_API_TIMEOUT",
]


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    for name in _ENV_NAMES:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_settings_defaults(clean_env) -> None:
    settings = Settings.from_env()

    assert settings.database_url == DEFAULT_DATABASE_URL
    assert settings.port == 8000
    assert settings.api_base_url == "http://127.0.0.1:8000"
    assert settings.debug is False


def test_settings_read_environment(clean_env) -> None:
    clean_env.setenv("DATABASE_URL", "sqlite:///fallback.db")
    clean_env.setenv("TODO_API_URL", "http://todo.example/api/")
    clean_env.setenv("TODO_PORT", "9000")
    clean_env.setenv("TODO_DEBUG", "true")
    clean_env.setenv("TODO_API_TIMEOUT", "2.5")

    settings = Settings.from_env()

    assert settings.database_url == "sqlite:///fallback.db"
    assert settings.api_base_url == "http://todo.example/api"
    assert settings.port == 9000
    assert settings.debug is True
    assert settings.api_timeout == 2.5

    clean_env.setenv("TODO_DATABASE_URL", "sqlite:///preferred.db")
    assert Settings.from_env().database_url == "sqlite:///preferred.db"


def test_settings_ignore_invalid_numbers(clean_env) -> None:
    clean_env.setenv("TODO_PORT", "eighty")
    clean_env.setenv("TODO_API_TIMEOUT", "soon")

    settings = Settings.from_env()

    assert settings.port == 8000
    assert settings.api_base_url == "http://127.0.0.1:8000"
    assert settings.api_timeout == 8.0


def test_setup_logging_writes_log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    root_logger = logging.getLogger()
    foreign = logging.NullHandler()
    monkeypatch.setattr(root_logger, "handlers", [foreign])
    previous_level = root_logger.level

    try:
        setup_logging(debug=True, log_dir=tmp_path)
        assert root_logger.level == logging.DEBUG
        assert (tmp_path / "todo.log").exists()

        other_dir = tmp_path / "other"
        setup_logging(debug=False, log_dir=other_dir)
        assert root_logger.level == logging.INFO
        assert len(root_logger.handlers) == 3
        assert foreign in root_logger.handlers
        file_handlers = [h for h in root_logger.handlers if isinstance(h, RotatingFileHandler)]
        assert [Path(h.baseFilename) for h in file_handlers] == [other_dir / "todo.log"]
    finally:
        for handler in root_logger.handlers:
            handler.close()
        root_logger.setLevel(previous_level)


def test_update_request_keeps_only_sent_fields() -> None:
    assert UpdateTaskRequest(completed=False).changes() == {"completed": False}
    assert UpdateTaskRequest(task=" Neu ").changes() == {"task": "Neu"}
    assert UpdateTaskRequest(task=None).changes() == {}
