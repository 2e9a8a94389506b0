"""Slash command actions."""

from enum import Enum
from typing import Optional


class Action(Enum):
    TASK = "task"
    VOTE = "vote"
    RESULTS = "results"

    @classmethod
    def parse(cls, word: str) -> Optional["Action"]:
        """Exact, case-sensitive lookup. Returns None for unknown words."""
        try:
            return cls(word)
        except ValueError:
            return None
