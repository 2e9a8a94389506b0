"""Dependency injection container."""

import logging
from typing import Optional

from app.adapters.null_notifier import NullNotifier
from app.adapters.slack_notifier import SlackWebhookNotifier
from app.dispatcher import CommandDispatcher
from app.domain.state import TaskState
from app.ports.notifier import Notifier
from app.usecases.cast_vote import CastVoteUseCase
from app.usecases.set_task import SetTaskUseCase
from app.usecases.show_results import ShowResultsUseCase
from core.exceptions import ConfigurationError
import config

logger = logging.getLogger(__name__)


def build_notifier() -> Notifier:
    """Create notifier from configuration."""
    url = config.SLACK_WEBHOOK_URL
    if not url:
        logger.warning("SLACK_WEBHOOK_URL is not set, broadcasts will only be logged")
        return NullNotifier()
    if not url.startswith(("http://", "https://")):
        raise ConfigurationError(f"SLACK_WEBHOOK_URL must be an http(s) URL, got {url!r}")
    return SlackWebhookNotifier(
        webhook_url=url,
        channel=config.SLACK_CHANNEL,
        username=config.SLACK_USERNAME,
        icon_emoji=config.SLACK_ICON_EMOJI,
        timeout=config.SLACK_TIMEOUT,
    )


class DIContainer:
    """Dependency injection container."""

    def __init__(
        self,
        notifier: Optional[Notifier] = None,
        state: Optional[TaskState] = None,
        command: Optional[str] = None,
    ):
        self._notifier = notifier or build_notifier()
        self._state = state or TaskState()
        self.command = command or config.SLASH_COMMAND

        # Use cases
        self.set_task = SetTaskUseCase(self._state, self._notifier, self.command)
        self.cast_vote = CastVoteUseCase(self._state, self._notifier, self.command)
        self.show_results = ShowResultsUseCase(self._state, self._notifier, self.command)

        self.dispatcher = CommandDispatcher(
            self._state,
            self.set_task,
            self.cast_vote,
            self.show_results,
            command=self.command,
        )

    @property
    def notifier(self) -> Notifier:
        """Get notifier."""
        return self._notifier

    @property
    def state(self) -> TaskState:
        """Get task state."""
        return self._state

    async def cleanup(self) -> None:
        """Cleanup resources."""
        await self._notifier.close()
