"""Slack HTTP transport layer."""

from app.transport.slack.commands import router as commands_router
from app.transport.slack.health import router as health_router

__all__ = ["commands_router", "health_router"]
