"""Use case for showing voting results."""

import logging
from typing import List, Tuple

from app.domain.state import TaskState
from app.domain.task import Vote
from app.ports.notifier import Notifier
from app.utils.formatting import format_general, format_points
from core.exceptions import TaskNotFoundError

logger = logging.getLogger(__name__)


class VotingPolicy:
    """Policy for calculating voting results."""

    @staticmethod
    def spread(votes: List[Vote]) -> Tuple[float, float]:
        """Return (max, min) of the vote values. ``votes`` must not be empty."""
        values = [v.value for v in votes]
        return max(values), min(values)

    @classmethod
    def render(cls, votes: List[Vote]) -> str:
        lines = [f"@{v.username}: `{format_points(v.value)}`" for v in votes]
        high, low = cls.spread(votes)
        lines.append(f"Max: `{format_general(high)}`")
        lines.append(f"Min: `{format_general(low)}`")
        return "".join(line + "\n" for line in lines)


class ShowResultsUseCase:
    """Report the votes of the active task and reset them."""

    def __init__(self, state: TaskState, notifier: Notifier, command: str = "/planbot"):
        self.state = state
        self.notifier = notifier
        self.command = command
        self.policy = VotingPolicy()

    async def execute(self, user_name: str, args: List[str]) -> str:
        task = self.state.task
        if not task.is_set:
            raise TaskNotFoundError(
                f"No task set. Please specify a task first. E.g. `{self.command} task T65`"
            )

        if not task.votes:
            return f"No votes on current task {task.name}"

        listing = self.policy.render(task.votes)
        task.reset_votes()
        logger.info(f"{user_name} requested results for {task.name!r}")

        await self.notifier.broadcast(f"Results for task {task.name}", listing, "good")
        return "Results were printed in channel"
