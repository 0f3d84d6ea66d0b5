from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from errors import StoreError, TaskNotFoundError, TaskValidationError
from models import (
    CreateTaskRequest,
    DeleteTaskResponse,
    HealthResponse,
    TaskOut,
    UpdateTaskRequest,
)
from services.tasks import TaskStore

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> TaskStore:
    return request.app.state.task_store


@router.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()


@router.post("/add", response_model=TaskOut, status_code=201)
def add_task(payload: CreateTaskRequest, store: TaskStore = Depends(get_store)) -> TaskOut:
    record = store.create(payload.task)
    return TaskOut.model_validate(record)


@router.get("/", response_model=list[TaskOut])
@router.get("/tasks", response_model=list[TaskOut])
def list_tasks(store: TaskStore = Depends(get_store)) -> list[TaskOut]:
    return [TaskOut.model_validate(record) for record in store.list()]


@router.get("/tasks/{task_id}", response_model=TaskOut)
def get_task(task_id: int, store: TaskStore = Depends(get_store)) -> TaskOut:
    return TaskOut.model_validate(store.get(task_id))


@router.put("/update/{task_id}", response_model=TaskOut)
def update_task(
    task_id: int,
    payload: UpdateTaskRequest,
    store: TaskStore = Depends(get_store),
) -> TaskOut:
    record = store.update(task_id, payload.changes())
    return TaskOut.model_validate(record)


@router.delete("/delete/{task_id}", response_model=DeleteTaskResponse)
def delete_task(task_id: int, store: TaskStore = Depends(get_store)) -> DeleteTaskResponse:
    store.delete(task_id)
    return DeleteTaskResponse(id=task_id)


def _format_validation_error(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    loc = [str(part) for part in first.get("loc", ()) if part not in ("body", "path", "query")]
    message = str(first.get("msg") or "Invalid request")
    return f"{'.'.join(loc)}: {message}" if loc else message


async def _request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": _format_validation_error(exc)})


async def _task_validation_handler(request: Request, exc: TaskValidationError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


async def _task_not_found_handler(request: Request, exc: TaskNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": str(exc)})


async def _store_error_handler(request: Request, exc: StoreError) -> JSONResponse:
    logger.error("Store error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"detail": "Task store unavailable"})


def install_api(target: FastAPI, store: TaskStore) -> None:
    """Attach the task routes and their error mapping to ``target``.

    The caller is responsible for opening and closing ``store``.
    """
    target.state.task_store = store
    target.include_router(router)
    target.add_exception_handler(RequestValidationError, _request_validation_handler)
    target.add_exception_handler(TaskValidationError, _task_validation_handler)
    target.add_exception_handler(TaskNotFoundError, _task_not_found_handler)
    target.add_exception_handler(StoreError, _store_error_handler)


def create_app(store: TaskStore) -> FastAPI:
    @asynccontextmanager
    async def lifespan(_app: FastAPI):
        store.open()
        try:
            yield
        finally:
            store.close()

    api = FastAPI(title="Todo List API", lifespan=lifespan)
    install_api(api, store)
    return api
