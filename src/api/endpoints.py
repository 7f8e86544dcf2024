"""API endpoints for task management."""

from typing import Dict

from fastapi import APIRouter, Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from models import Task
from store import TaskStore
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def get_store(request: Request) -> TaskStore:
    """Get the task store owned by the application."""
    return request.app.state.task_store


async def read_task_body(request: Request) -> Task:
    """Decode the request body as a JSON task, whatever its Content-Type."""
    body = await request.body()

    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": "Body is not valid UTF-8", "input": None}]
        ) from None

    try:
        return Task.model_validate_json(text)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        for error in errors:
            error["loc"] = ("body",) + tuple(error.get("loc", ()))
        raise RequestValidationError(errors, body=text) from e


@router.get("/tasks", response_model=Dict[str, Task])
async def list_tasks(store: TaskStore = Depends(get_store)):
    """List all tasks keyed by id."""
    return store.list_tasks()


@router.get("/tasks/{task_id}", response_model=Task)
async def get_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Get a specific task by ID."""
    return store.get_task(task_id)


@router.post("/tasks", response_model=Task, status_code=201)
async def create_task(task: Task = Depends(read_task_body), store: TaskStore = Depends(get_store)):
    """Create a new task. A client-supplied id is ignored."""
    created = store.create_task(task)

    logger.info(f"Created task {created.id}")
    return created


@router.put("/tasks/{task_id}", response_model=Task)
async def update_task(
    task_id: str,
    task: Task = Depends(read_task_body),
    store: TaskStore = Depends(get_store)
):
    """Replace a task. The stored id is always the one from the path."""
    updated = store.update_task(task_id, task)

    logger.info(f"Updated task {task_id}")
    return updated


@router.delete("/tasks/{task_id}", status_code=204)
async def delete_task(task_id: str, store: TaskStore = Depends(get_store)):
    """Delete a task."""
    store.delete_task(task_id)

    logger.info(f"Deleted task {task_id}")
    return Response(status_code=204)
