"""Notifier interface for broadcasting messages to the channel."""

from abc import ABC, abstractmethod


class Notifier(ABC):
    """Interface for sending notifications/messages."""

    @abstractmethod
    async def broadcast(self, title: str, text: str, color: str) -> None:
        """Post a message to the shared channel.

        Raises NotifierError when delivery fails.
        """
        pass

    @abstractmethod
    async def close(self) -> None:
        """Cleanup resources."""
        pass
