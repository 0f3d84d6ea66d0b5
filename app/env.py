from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

_LOADED = False


def load_env() -> Path | None:
    global _LOADED
    if _LOADED:
        return None
    _LOADED = True

    base_dir = Path(__file__).resolve().parent
    # Project root .env first, then app/.env, then the container path.
    candidates = [
        base_dir.parent / ".env",
        base_dir / ".env",
        Path("/app/.env"),
    ]

    loaded_path: Path | None = None
    for path in candidates:
        if not path.exists():
            continue
        loaded_path = path
        # Real environment variables win (Docker/K8s settings must not be shadowed).
        load_dotenv(dotenv_path=path, override=False)

    if loaded_path is not None:
        logger.debug("Environment loaded from %s", loaded_path)
    return loaded_path
