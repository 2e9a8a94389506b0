"""Use case for casting a vote."""

import logging
from typing import List

from app.domain.state import TaskState
from app.ports.notifier import Notifier
from core.exceptions import InvalidVoteError, TaskNotFoundError, ValidationError
from core.validators import parse_story_points

logger = logging.getLogger(__name__)


class CastVoteUseCase:
    """Use case for casting a vote on current task."""

    def __init__(self, state: TaskState, notifier: Notifier, command: str = "/planbot"):
        self.state = state
        self.notifier = notifier
        self.command = command

    async def execute(self, user_name: str, args: List[str]) -> str:
        """Append a vote; the same user may vote more than once."""
        task = self.state.task
        if not task.is_set:
            raise TaskNotFoundError(
                f"No task set. Please specify a task first. E.g. `{self.command} task T65`"
            )

        if len(args) < 2:
            raise ValidationError(f"Please specify the vote value. E.g. `{self.command} vote 3`")
        story_points = args[1]

        try:
            value = parse_story_points(story_points)
        except InvalidVoteError as e:
            logger.debug(f"Rejected vote {story_points!r} from {user_name}: {e.message}")
            raise InvalidVoteError(
                f"Please specify a float value for points. E.g. `{self.command} vote 3`",
                error_code=e.error_code,
            ) from e

        task.add_vote(user_name, value)
        logger.info(f"{user_name} voted on {task.name!r} ({len(task.votes)} votes)")

        await self.notifier.broadcast(
            "Vote received",
            f"@{user_name} voted on task `{task.name}`.\nVoters: {task.voters}",
            "good",
        )
        return f"You voted `{story_points}` story points on task `{task.name}`"
