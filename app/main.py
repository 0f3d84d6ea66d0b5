"""Run the todo API with its NiceGUI frontend mounted under /app."""

from __future__ import annotations

import logging

import uvicorn
from nicegui import ui

from api import create_app
from config import Settings
from env import load_env
from integrations.task_api import TaskApiClient
from logging_setup import setup_logging
from pages import render_tasks
from services.tasks import TaskStore

FRONTEND_MOUNT_PATH = "/app"

load_env()
settings = Settings.from_env()
setup_logging(debug=settings.debug, log_dir=settings.log_dir)

logger = logging.getLogger(__name__)

task_store = TaskStore(settings.database_url, echo=settings.debug)
fastapi_app = create_app(task_store)


@ui.page("/")
async def index() -> None:
    client = TaskApiClient(settings.api_base_url, timeout_s=settings.api_timeout)
    ui.context.client.on_delete(client.close)
    await render_tasks(client)


ui.run_with(
    fastapi_app,
    mount_path=FRONTEND_MOUNT_PATH,
    title="Todo List",
    favicon="✅",
)


def run() -> None:
    logger.info("Starting todo service on %s:%s", settings.host, settings.port)
    uvicorn.run(fastapi_app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
