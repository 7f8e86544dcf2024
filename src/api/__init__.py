"""HTTP API for TaskBoard."""

from .http_server import create_app
from .endpoints import router

__all__ = ["create_app", "router"]
