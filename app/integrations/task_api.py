from __future__ import annotations

from typing import Any

import httpx


class TaskApiError(RuntimeError):
    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


def _error_detail(resp: httpx.Response) -> str:
    try:
        payload = resp.json()
    except ValueError:
        return resp.text or resp.reason_phrase
    if isinstance(payload, dict) and payload.get("detail"):
        return str(payload["detail"])
    return resp.reason_phrase


class TaskApiClient:
    """HTTP client for the task API, used by the NiceGUI frontend.

    Pass ``client`` to reuse an existing ``httpx.Client`` (tests hand in a
    FastAPI ``TestClient``); otherwise one is built from ``base_url``.
    """

    def __init__(
        self,
        base_url: str = "",
        timeout_s: float = 8.0,
        client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=(base_url or "").rstrip("/"), timeout=timeout_s)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def _request(self, method: str, path: str, json: dict[str, Any] | None = None) -> Any:
        try:
            resp = self._client.request(method, path, json=json)
        except (httpx.HTTPError, RuntimeError) as exc:
            # httpx raises RuntimeError once the client has been closed.
            raise TaskApiError(f"{method} {path} failed: {exc}") from exc
        if resp.is_error:
            raise TaskApiError(_error_detail(resp), status_code=resp.status_code)
        try:
            return resp.json()
        except ValueError as exc:
            raise TaskApiError(f"{method} {path} returned invalid JSON", status_code=resp.status_code) from exc

    def health(self) -> dict[str, Any]:
        return self._request("GET", "/health")

    def list_tasks(self) -> list[dict[str, Any]]:
        return self._request("GET", "/tasks")

    def add_task(self, task: str) -> dict[str, Any]:
        text = (task or "").strip()
        if not text:
            raise ValueError("task is required")
        return self._request("POST", "/add", json={"task": text})

    def update_task(
        self,
        task_id: int,
        task: str | None = None,
        completed: bool | None = None,
    ) -> dict[str, Any]:
        changes: dict[str, Any] = {}
        if task is not None:
            changes["task"] = task.strip()
        if completed is not None:
            changes["completed"] = completed
        return self._request("PUT", f"/update/{int(task_id)}", json=changes)

    def delete_task(self, task_id: int) -> dict[str, Any]:
        return self._request("DELETE", f"/delete/{int(task_id)}")
