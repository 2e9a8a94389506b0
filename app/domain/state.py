"""Holder for the single active task."""

import asyncio

from app.domain.task import Task


class TaskState:
    """Process-wide task slot.

    Owned by the DI container and passed to every use case. ``lock`` must be
    held while an action reads or mutates the task.
    """

    def __init__(self) -> None:
        self.task = Task()
        self.lock = asyncio.Lock()

    def replace(self, name: str) -> Task:
        """Discard the current task and all its votes."""
        self.task = Task(name=name)
        return self.task
