"""Use case for setting the task under estimation."""

import logging
from typing import List

from app.domain.state import TaskState
from app.ports.notifier import Notifier
from core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class SetTaskUseCase:
    """Replace the active task; all votes are discarded."""

    def __init__(self, state: TaskState, notifier: Notifier, command: str = "/planbot"):
        self.state = state
        self.notifier = notifier
        self.command = command

    async def execute(self, user_name: str, args: List[str]) -> str:
        if len(args) < 2:
            raise ValidationError(f"Please specify the task name. E.g. `{self.command} task T54`")
        task_name = args[1]

        self.state.replace(task_name)
        logger.info(f"{user_name} set task {task_name!r}")

        await self.notifier.broadcast(
            "Task set",
            f"@{user_name} set the task to {task_name}. All votes have been reset.",
            "good",
        )
        return f"You set the task to {task_name}. All votes have been reset."
