"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteResponse, CastVoteUseCase
from .get_my_votes import GetMyVotesRequest, GetMyVotesResponse, GetMyVotesUseCase
from .reconcile_votes import ReconcileVotesResponse, ReconcileVotesUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteResponse",
    "CastVoteUseCase",
    "GetMyVotesRequest",
    "GetMyVotesResponse",
    "GetMyVotesUseCase",
    "ReconcileVotesResponse",
    "ReconcileVotesUseCase",
]
