"""
Core components shared across the application
"""
from .exceptions import (
    ConfigurationError,
    InvalidVoteError,
    NotifierError,
    PlanbotException,
    TaskNotFoundError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "InvalidVoteError",
    "NotifierError",
    "PlanbotException",
    "TaskNotFoundError",
    "ValidationError",
]
