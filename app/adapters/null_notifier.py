"""No-op notifier (used when no Slack webhook is configured)."""

import logging

from app.ports.notifier import Notifier

logger = logging.getLogger(__name__)


class NullNotifier(Notifier):
    """Logs broadcasts instead of sending them."""

    async def broadcast(self, title: str, text: str, color: str) -> None:
        logger.info(f"[{color}] {title}: {text}")

    async def close(self) -> None:
        return None
