"""Data models for TaskBoard."""

from .task import Task

__all__ = ["Task"]
