from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

APP_PATH = Path(__file__).resolve().parents[1] / "app"
if str(APP_PATH) not in sys.path:
    sys.path.insert(0, str(APP_PATH))

from api import create_app  # noqa: E402
from services.tasks import TaskStore  # noqa: E402


@pytest.fixture()
def store(tmp_path: Path):
    task_store = TaskStore(f"sqlite:///{tmp_path}/tasks.db")
    task_store.open()
    yield task_store
    task_store.close()


@pytest.fixture()
def client(tmp_path: Path):
    task_store = TaskStore(f"sqlite:///{tmp_path}/api.db")
    with TestClient(create_app(task_store)) as test_client:
        yield test_client
