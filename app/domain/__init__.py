"""Domain models and business rules."""

from app.domain.action import Action
from app.domain.state import TaskState
from app.domain.task import Task, Vote

__all__ = ["Action", "Task", "TaskState", "Vote"]
