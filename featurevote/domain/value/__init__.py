"""Domain value objects."""

from featurevote.domain.value.identifiers import FeatureId, UserId, VoteId
from featurevote.domain.value.types import FeatureSummary, VoteAction

__all__ = [
    # Identifiers
    "UserId",
    "FeatureId",
    "VoteId",
    # Types
    "FeatureSummary",
    "VoteAction",
]
