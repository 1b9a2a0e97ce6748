"""Feature aggregate root.

Features are requests that users vote on. ``vote_count`` is a cached
aggregate of the vote ledger, never the source of truth.
"""

from datetime import datetime

from pydantic import Field

from featurevote.domain.model.common import DomainModel
from featurevote.domain.value import FeatureId, FeatureSummary, UserId


class Feature(DomainModel):
    """Feature request aggregate root.

    Business rules:
    - vote_count equals the number of ledger rows referencing this feature
    - vote_count never drops below zero
    """

    id: FeatureId
    title: str = Field(min_length=1, max_length=100)
    description: str = Field(min_length=1, max_length=500)
    vote_count: int = Field(default=0, ge=0)
    created_by_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    def summary(self) -> FeatureSummary:
        """Project to the summary returned by vote operations."""
        return FeatureSummary(id=self.id, title=self.title, vote_count=self.vote_count)
