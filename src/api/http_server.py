"""FastAPI HTTP server setup."""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from config import settings
from store import TaskStore, default_tasks
from .endpoints import router
from .errors import register_error_handlers

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    logger.info(f"TaskBoard started with {len(app.state.task_store)} task(s)")

    yield

    logger.info("TaskBoard shut down")


def create_app(task_store: Optional[TaskStore] = None) -> FastAPI:
    """Build the application around ``task_store``.

    A new store is created when none is given, seeded with the demo
    tasks unless ``settings.seed_tasks`` is off.
    """
    if task_store is None:
        task_store = TaskStore(default_tasks() if settings.seed_tasks else None)

    app = FastAPI(
        title="TaskBoard",
        description="A minimal in-memory task tracker",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.task_store = task_store

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)
    app.include_router(router)

    return app
