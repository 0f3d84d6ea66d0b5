from __future__ import annotations

from .tasks import render_tasks

__all__ = ["render_tasks"]
