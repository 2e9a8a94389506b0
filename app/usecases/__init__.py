"""Use cases (application layer)."""

from app.usecases.cast_vote import CastVoteUseCase
from app.usecases.set_task import SetTaskUseCase
from app.usecases.show_results import ShowResultsUseCase, VotingPolicy

__all__ = [
    "SetTaskUseCase",
    "CastVoteUseCase",
    "ShowResultsUseCase",
    "VotingPolicy",
]
