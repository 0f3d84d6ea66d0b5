from __future__ import annotations

import logging
from collections.abc import Mapping
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from data import Task, build_engine, create_schema, utc_now
from errors import StoreError, TaskNotFoundError, TaskValidationError

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"task", "completed"}


def normalize_task_text(value: Any) -> str:
    if not isinstance(value, str):
        raise TaskValidationError("task must be a string")
    text = value.strip()
    if not text:
        raise TaskValidationError("task is required")
    return text


def _validate_changes(changes: Mapping[str, Any]) -> dict[str, Any]:
    unknown = sorted(set(changes) - UPDATABLE_FIELDS)
    if unknown:
        raise TaskValidationError(f"Unknown fields: {', '.join(unknown)}")

    cleaned: dict[str, Any] = {}
    if "task" in changes:
        cleaned["task"] = normalize_task_text(changes["task"])
    if "completed" in changes:
        completed = changes["completed"]
        if not isinstance(completed, bool):
            raise TaskValidationError("completed must be a boolean")
        cleaned["completed"] = completed
    return cleaned


def _count_tasks(session: Session) -> int:
    return int(session.exec(select(func.count()).select_from(Task)).one())


class TaskStore:
    """
    Task persistence over a single SQLModel table.

    The store owns its engine: call open() before serving requests and
    close() on shutdown. Every operation runs in its own session and commits
    at most once.
    """

    def __init__(self, database_url: str, echo: bool = False) -> None:
        self.database_url = database_url
        self.echo = echo
        self._engine: Engine | None = None

    @property
    def is_open(self) -> bool:
        return self._engine is not None

    def open(self) -> None:
        if self._engine is not None:
            return
        engine: Engine | None = None
        try:
            engine = build_engine(self.database_url, echo=self.echo)
            create_schema(engine)
            with Session(engine) as session:
                total = _count_tasks(session)
        except (SQLAlchemyError, OSError) as exc:
            if engine is not None:
                engine.dispose()
            logger.exception("Failed to prepare task schema")
            raise StoreError("Could not open task store") from exc
        self._engine = engine
        logger.info("TaskStore ready url=%s total=%s", engine.url.render_as_string(hide_password=True), total)

    def close(self) -> None:
        if self._engine is None:
            return
        self._engine.dispose()
        self._engine = None
        logger.info("TaskStore closed")

    @contextmanager
    def _session(self) -> Iterator[Session]:
        if self._engine is None:
            raise StoreError("Task store is not open")
        try:
            with Session(self._engine, expire_on_commit=False) as session:
                yield session
        except SQLAlchemyError as exc:
            logger.exception("Task store operation failed")
            raise StoreError("Task store operation failed") from exc

    def create(self, task: str) -> Task:
        text = normalize_task_text(task)
        with self._session() as session:
            record = Task(task=text)
            session.add(record)
            session.commit()
            session.refresh(record)
        logger.info("Task created id=%s", record.id)
        return record

    def list(self) -> list[Task]:
        with self._session() as session:
            return list(session.exec(select(Task).order_by(Task.id)).all())

    def get(self, task_id: int) -> Task:
        with self._session() as session:
            record = session.get(Task, task_id)
            if record is None:
                raise TaskNotFoundError(task_id)
            return record

    def count(self) -> int:
        with self._session() as session:
            return _count_tasks(session)

    def update(self, task_id: int, changes: Mapping[str, Any]) -> Task:
        cleaned = _validate_changes(changes)
        with self._session() as session:
            record = session.get(Task, task_id)
            if record is None:
                raise TaskNotFoundError(task_id)
            if not cleaned:
                return record

            for key, value in cleaned.items():
                setattr(record, key, value)
            record.updated_at = utc_now()
            session.add(record)
            session.commit()
            session.refresh(record)
        logger.info("Task updated id=%s fields=%s", task_id, ",".join(sorted(cleaned)))
        return record

    def delete(self, task_id: int) -> None:
        with self._session() as session:
            record = session.get(Task, task_id)
            if record is None:
                raise TaskNotFoundError(task_id)
            session.delete(record)
            session.commit()
        logger.info("Task deleted id=%s", task_id)
