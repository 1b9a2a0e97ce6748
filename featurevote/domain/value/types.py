"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import Field

from featurevote.domain.value.common import ValueObject
from featurevote.domain.value.identifiers import FeatureId


class VoteAction(str, Enum):
    """What a cast-or-move call did to the ledger."""

    CREATED = "created"  # User had no vote; one was created
    UNCHANGED = "unchanged"  # User already voted for this feature
    MOVED = "moved"  # Vote moved from another feature


class FeatureSummary(ValueObject):
    """Projection of a feature returned by vote operations."""

    id: FeatureId
    title: str
    vote_count: int = Field(ge=0)
