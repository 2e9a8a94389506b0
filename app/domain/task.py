"""Task and vote models for Planning Poker."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class Vote:
    """One participant's story-point estimate."""

    username: str
    value: float

    def to_dict(self) -> Dict[str, Any]:
        """Convert vote to dictionary."""
        return {"username": self.username, "value": self.value}


@dataclass
class Task:
    """Represents the task currently being estimated.

    An empty name means no task has been set.
    """

    name: str = ""
    votes: List[Vote] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Convert task to dictionary."""
        return {
            "name": self.name,
            "votes": [v.to_dict() for v in self.votes],
        }

    @property
    def is_set(self) -> bool:
        return self.name != ""

    @property
    def voters(self) -> str:
        """Voter roster in arrival order, duplicates included."""
        return ", ".join(f"@{v.username}" for v in self.votes)

    def add_vote(self, username: str, value: float) -> Vote:
        vote = Vote(username=username, value=value)
        self.votes.append(vote)
        return vote

    def reset_votes(self) -> None:
        self.votes = []
