"""Slash command dispatcher."""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from fastapi import status
from pydantic import BaseModel

from app.domain.action import Action
from app.domain.state import TaskState
from app.usecases.cast_vote import CastVoteUseCase
from app.usecases.set_task import SetTaskUseCase
from app.usecases.show_results import ShowResultsUseCase
from core.exceptions import NotifierError, PlanbotException

logger = logging.getLogger(__name__)


EPHEMERAL = "ephemeral"


class CommandResponse(BaseModel):
    """Reply returned to Slack for a slash command."""

    response_type: str = EPHEMERAL
    text: str
    goto_location: str = ""
    attachments: Optional[Any] = None


class CommandDispatcher:
    """Routes ``/planbot <action> [arg]`` to the matching use case."""

    def __init__(
        self,
        state: TaskState,
        set_task: SetTaskUseCase,
        cast_vote: CastVoteUseCase,
        show_results: ShowResultsUseCase,
        command: str = "/planbot",
    ):
        self.state = state
        self.set_task = set_task
        self.cast_vote = cast_vote
        self.show_results = show_results
        self.command = command

    async def handle(self, user_name: str, args: Sequence[str]) -> Tuple[CommandResponse, int]:
        """Run one command and return (response, http status)."""
        args = list(args)
        if not args:
            text = f"Please define something to do after the slash command. E.g. `{self.command} task T54`"
            return CommandResponse(text=text), status.HTTP_400_BAD_REQUEST

        text, code = await self._route(user_name, args)
        return CommandResponse(text=text), code

    async def _route(self, user_name: str, args: List[str]) -> Tuple[str, int]:
        action = Action.parse(args[0])
        if action is None:
            logger.info(f"Unknown action {args[0]!r} from {user_name}")
            return f"Invalid item after the slash command: `{args[0]}`.", status.HTTP_400_BAD_REQUEST

        if action is Action.TASK:
            use_case = self.set_task
        elif action is Action.VOTE:
            use_case = self.cast_vote
        else:
            use_case = self.show_results

        async with self.state.lock:
            try:
                return await use_case.execute(user_name, args), status.HTTP_200_OK
            except NotifierError as e:
                logger.error(f"Broadcast failed for {action.value}: {e.message}")
                return e.message, status.HTTP_500_INTERNAL_SERVER_ERROR
            except PlanbotException as e:
                return e.message, status.HTTP_400_BAD_REQUEST
            except Exception:
                logger.exception(f"Unhandled error in {action.value} command")
                return "Unknown Error", status.HTTP_500_INTERNAL_SERVER_ERROR
