"""In-memory task store."""

import threading
import uuid
from typing import Callable, Dict, Iterable, Optional

from models import Task
import logging

logger = logging.getLogger(__name__)


class TaskNotFoundError(LookupError):
    """Raised when a task id is not present in the store."""

    def __init__(self, task_id: str):
        super().__init__(task_id)
        self.task_id = task_id


def generate_task_id() -> str:
    """Return a random UUID4 string."""
    return str(uuid.uuid4())


class TaskStore:
    """Mapping of task id to Task, guarded by a single lock.

    Every operation holds the lock for its whole duration and hands out
    copies, so callers never share mutable state with the store.
    """

    def __init__(
        self,
        tasks: Optional[Iterable[Task]] = None,
        id_factory: Callable[[], str] = generate_task_id,
    ):
        self._tasks: Dict[str, Task] = {}
        self._lock = threading.Lock()
        self._id_factory = id_factory

        for task in tasks or ():
            if not task.id:
                raise ValueError("Initial tasks must carry an id")
            self._tasks[task.id] = task.model_copy(deep=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tasks)

    def __contains__(self, task_id: object) -> bool:
        with self._lock:
            return task_id in self._tasks

    def list_tasks(self) -> Dict[str, Task]:
        """Return all tasks keyed by id."""
        with self._lock:
            return {task_id: task.model_copy(deep=True) for task_id, task in self._tasks.items()}

    def get_task(self, task_id: str) -> Task:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                raise TaskNotFoundError(task_id)
            return task.model_copy(deep=True)

    def create_task(self, task: Task) -> Task:
        """Store a new task under a freshly generated id.

        Any id carried by ``task`` is ignored.
        """
        with self._lock:
            task_id = self._id_factory()
            while not task_id or task_id in self._tasks:
                task_id = self._id_factory()

            stored = task.model_copy(update={"id": task_id}, deep=True)
            self._tasks[task_id] = stored

        logger.debug(f"Stored task {task_id}")
        return stored.model_copy(deep=True)

    def update_task(self, task_id: str, task: Task) -> Task:
        """Replace the task stored under ``task_id``.

        The stored id always equals ``task_id``, whatever ``task.id`` says.
        """
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)

            stored = task.model_copy(update={"id": task_id}, deep=True)
            self._tasks[task_id] = stored

        return stored.model_copy(deep=True)

    def delete_task(self, task_id: str) -> None:
        with self._lock:
            if task_id not in self._tasks:
                raise TaskNotFoundError(task_id)
            del self._tasks[task_id]
