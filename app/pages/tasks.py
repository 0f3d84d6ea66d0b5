from __future__ import annotations

import logging

from nicegui import run, ui

from integrations.task_api import TaskApiClient, TaskApiError
from styles import (
    APP_HEAD_HTML,
    C_BTN_GHOST,
    C_BTN_PRIM,
    C_CARD,
    C_CONTAINER,
    C_INPUT,
    C_PAGE_TITLE,
    C_TASK_ROW,
    C_TASK_TEXT,
    C_TASK_TEXT_DONE,
    C_TEXT_HINT,
)

logger = logging.getLogger(__name__)


async def render_tasks(client: TaskApiClient) -> None:
    ui.add_head_html(APP_HEAD_HTML)

    async def fetch_tasks() -> list[dict]:
        try:
            return await run.io_bound(client.list_tasks)
        except TaskApiError:
            logger.exception("Failed to load tasks")
            ui.notify("Could not load tasks.", color="red")
            return []

    @ui.refreshable
    async def task_list() -> None:
        tasks = await fetch_tasks()
        if not tasks:
            ui.label("No tasks yet.").classes(C_TEXT_HINT)
            return
        with ui.column().classes("w-full gap-0"):
            for item in tasks:
                with ui.row().classes(C_TASK_ROW):
                    with ui.row().classes("items-center gap-2"):
                        ui.checkbox(
                            value=bool(item.get("completed")),
                            on_change=lambda e, task_id=item["id"]: toggle(task_id, bool(e.value)),
                        )
                        ui.label(item["task"]).classes(
                            C_TASK_TEXT_DONE if item.get("completed") else C_TASK_TEXT
                        )
                    ui.button(
                        icon="delete",
                        on_click=lambda task_id=item["id"]: remove(task_id),
                    ).props("flat round dense").classes(C_BTN_GHOST)

    async def add() -> None:
        text = (task_input.value or "").strip()
        if not text:
            ui.notify("Please enter a task.", color="orange")
            return
        try:
            await run.io_bound(client.add_task, text)
        except TaskApiError:
            logger.exception("Failed to create task")
            ui.notify("Could not save the task.", color="red")
            return
        task_input.value = ""
        task_list.refresh()

    async def toggle(task_id: int, completed: bool) -> None:
        try:
            await run.io_bound(client.update_task, task_id, None, completed)
        except TaskApiError:
            logger.exception("Failed to update task %s", task_id)
            ui.notify("Could not update the task.", color="red")
        task_list.refresh()

    async def remove(task_id: int) -> None:
        try:
            await run.io_bound(client.delete_task, task_id)
        except TaskApiError:
            logger.exception("Failed to delete task %s", task_id)
            ui.notify("Could not delete the task.", color="red")
        task_list.refresh()

    with ui.column().classes(C_CONTAINER):
        ui.label("Todo List").classes(C_PAGE_TITLE)
        with ui.card().classes(f"{C_CARD} p-4 w-full gap-3"):
            with ui.row().classes("w-full items-center gap-2 no-wrap"):
                task_input = ui.input(placeholder="Enter a task").classes(C_INPUT).on("keydown.enter", add)
                ui.button("ADD", on_click=add).classes(C_BTN_PRIM)
            ui.separator().classes("my-1")
            await task_list()
