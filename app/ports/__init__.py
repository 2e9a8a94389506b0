"""Ports (interfaces) for external collaborators."""

from app.ports.notifier import Notifier

__all__ = ["Notifier"]
