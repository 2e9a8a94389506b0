"""
Custom exceptions for the application
"""
from typing import Optional


class PlanbotException(Exception):
    """Base exception for Planbot"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(PlanbotException):
    """Missing or malformed command argument"""
    pass


class TaskNotFoundError(PlanbotException):
    """No task has been set yet"""
    pass


class InvalidVoteError(PlanbotException):
    """Vote value is not a number"""
    pass


class NotifierError(PlanbotException):
    """Broadcast to the channel failed"""
    pass


class ConfigurationError(PlanbotException):
    """Configuration error"""
    pass
