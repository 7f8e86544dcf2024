"""In-memory task storage."""

from .memory import TaskStore, TaskNotFoundError, generate_task_id
from .seed import default_tasks

__all__ = ["TaskStore", "TaskNotFoundError", "generate_task_id", "default_tasks"]
