"""Settings for the todo service, read from environment variables.

Call ``env.load_env()`` first when a ``.env`` file should be honoured;
``Settings.from_env`` itself only looks at ``os.environ``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

ENV_PREFIX = "TODO"

DEFAULT_DATABASE_URL = "sqlite:///storage/todos.db"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8000
DEFAULT_LOG_DIR = "./data/logs"
DEFAULT_API_TIMEOUT = 8.0


def _k(suffix: str) -> str:
    return f"{ENV_PREFIX}_{suffix}"


def _first_env(*names: str, default: str) -> str:
    for name in names:
        value = os.getenv(name)
        if value is not None and value.strip() != "":
            return value.strip()
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    database_url: str = DEFAULT_DATABASE_URL
    api_base_url: str = f"http://127.0.0.1:{DEFAULT_PORT}"
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    debug: bool = False
    log_dir: str = DEFAULT_LOG_DIR
    api_timeout: float = DEFAULT_API_TIMEOUT

    @classmethod
    def from_env(cls) -> "Settings":
        port = _env_int(_k("PORT"), DEFAULT_PORT)
        return cls(
            database_url=_first_env(_k("DATABASE_URL"), "DATABASE_URL", default=DEFAULT_DATABASE_URL),
            api_base_url=_first_env(_k("API_URL"), default=f"http://127.0.0.1:{port}").rstrip("/"),
            host=_first_env(_k("HOST"), default=DEFAULT_HOST),
            port=port,
            debug=_env_bool(_k("DEBUG"), False),
            log_dir=_first_env(_k("LOG_DIR"), default=DEFAULT_LOG_DIR),
            api_timeout=_env_float(_k("API_TIMEOUT"), DEFAULT_API_TIMEOUT),
        )
