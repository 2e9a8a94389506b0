"""Adapters implementing ports."""

from app.adapters.null_notifier import NullNotifier
from app.adapters.slack_notifier import SlackWebhookNotifier

__all__ = ["NullNotifier", "SlackWebhookNotifier"]
