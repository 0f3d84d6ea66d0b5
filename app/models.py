from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator


def _strip_task(value: str) -> str:
    text = value.strip()
    if not text:
        raise ValueError("task is required")
    return text


class CreateTaskRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    task: str

    @field_validator("task")
    @classmethod
    def task_not_blank(cls, value: str) -> str:
        return _strip_task(value)


class UpdateTaskRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    task: Optional[str] = None
    completed: Optional[bool] = None

    @field_validator("task")
    @classmethod
    def task_not_blank(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        return _strip_task(value)

    def changes(self) -> dict:
        # Only the fields the client actually sent; explicit nulls are dropped.
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class TaskOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    task: str
    completed: bool = False
    created_at: datetime
    updated_at: datetime


class DeleteTaskResponse(BaseModel):
    status: str = "deleted"
    id: int


class HealthResponse(BaseModel):
    status: str = "ok"
