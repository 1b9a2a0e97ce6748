"""Domain services."""

from .base import Service
from .feature_service import FeatureService
from .user_service import UserService
from .vote_service import VoteOutcome, VoteService

__all__ = [
    "FeatureService",
    "Service",
    "UserService",
    "VoteOutcome",
    "VoteService",
]
