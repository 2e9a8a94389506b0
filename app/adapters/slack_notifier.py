"""Slack incoming-webhook adapter for Notifier interface."""

import asyncio
import logging
from typing import Any, Dict, Optional

import aiohttp

from app.ports.notifier import Notifier
from core.exceptions import NotifierError

logger = logging.getLogger(__name__)


class SlackWebhookNotifier(Notifier):
    """Posts attachments to a Slack incoming webhook."""

    def __init__(
        self,
        webhook_url: str,
        channel: Optional[str] = None,
        username: Optional[str] = None,
        icon_emoji: Optional[str] = None,
        timeout: int = 10,
    ):
        self.webhook_url = webhook_url
        self.channel = channel
        self.username = username
        self.icon_emoji = icon_emoji
        self._session: Optional[aiohttp.ClientSession] = None
        self._timeout = aiohttp.ClientTimeout(total=timeout)

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self._timeout)
        return self._session

    async def close(self) -> None:
        """Close aiohttp session."""
        if self._session and not self._session.closed:
            await self._session.close()

    def build_payload(self, title: str, text: str, color: str) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "link_names": 1,
            "attachments": [
                {
                    "fallback": f"{title}: {text}",
                    "title": title,
                    "text": text,
                    "color": color,
                    "mrkdwn_in": ["text"],
                }
            ],
        }
        if self.channel:
            payload["channel"] = self.channel
        if self.username:
            payload["username"] = self.username
        if self.icon_emoji:
            payload["icon_emoji"] = self.icon_emoji
        return payload

    async def broadcast(self, title: str, text: str, color: str) -> None:
        """Send attachment message to the webhook."""
        session = await self._get_session()
        payload = self.build_payload(title, text, color)

        try:
            async with session.post(self.webhook_url, json=payload) as resp:
                if resp.status != 200:
                    body = await resp.text()
                    logger.error(f"Slack webhook returned status {resp.status}: {body}")
                    raise NotifierError(
                        f"Slack returned status {resp.status}: {body}",
                        error_code="slack_status",
                    )
        except NotifierError:
            raise
        except asyncio.TimeoutError as e:
            logger.error(f"Slack webhook timed out after {self._timeout.total}s")
            raise NotifierError(
                f"Slack webhook timed out after {self._timeout.total}s",
                error_code="slack_timeout",
            ) from e
        except aiohttp.ClientError as e:
            logger.error(f"Slack webhook unavailable: {e}")
            raise NotifierError(f"Slack unavailable: {e}", error_code="slack_unavailable") from e
        except Exception as e:
            logger.error(f"Failed to send to Slack webhook: {e}")
            raise NotifierError(f"Failed to send to Slack: {e}", error_code="slack_error") from e
        logger.debug(f"Broadcast sent: {title}")
