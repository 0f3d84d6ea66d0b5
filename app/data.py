from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import Engine, make_url
from sqlalchemy.pool import StaticPool
from sqlmodel import Field, SQLModel, create_engine


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# --- DB MODELLE ---
class Task(SQLModel, table=True):
    # AUTOINCREMENT keeps SQLite from handing out the id of a deleted row again.
    __table_args__ = {"sqlite_autoincrement": True}

    id: Optional[int] = Field(default=None, primary_key=True)
    task: str
    completed: bool = False
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)


def _is_memory_sqlite(database_url: str) -> bool:
    return database_url in {"sqlite://", "sqlite:///:memory:"} or "mode=memory" in database_url


def _ensure_sqlite_dir(database_url: str) -> None:
    database = make_url(database_url).database
    if not database or database == ":memory:" or database.startswith("file:"):
        return
    Path(database).parent.mkdir(parents=True, exist_ok=True)


def build_engine(database_url: str, echo: bool = False) -> Engine:
    kwargs = {"echo": echo}
    if database_url.startswith("sqlite"):
        kwargs["connect_args"] = {"check_same_thread": False}
        if _is_memory_sqlite(database_url):
            kwargs["poolclass"] = StaticPool
        else:
            _ensure_sqlite_dir(database_url)
    return create_engine(database_url, **kwargs)


def create_schema(engine: Engine) -> None:
    # TODO: Replace SQLModel.metadata.create_all with Alembic migrations when the task table gains columns.
    SQLModel.metadata.create_all(engine)
