"""In-memory feature repository for testing."""

from datetime import datetime
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from featurevote.domain.model.feature import Feature
from featurevote.domain.repository.feature import FeatureRepository
from featurevote.domain.value import FeatureId, UserId


class InMemoryFeatureRepository(FeatureRepository):
    """In-memory implementation of FeatureRepository for testing."""

    def __init__(self) -> None:
        self._features: dict[FeatureId, Feature] = {}

    async def find_by_id(self, feature_id: FeatureId) -> Optional[Feature]:
        """Find a feature by ID."""
        return self._features.get(feature_id)

    async def find_by_ids(self, feature_ids: Sequence[FeatureId]) -> list[Feature]:
        """Find several features at once."""
        return [self._features[fid] for fid in feature_ids if fid in self._features]

    async def find_all_ranked(self) -> list[Feature]:
        """Find all features, most voted first."""
        return sorted(
            self._features.values(),
            key=lambda f: (-f.vote_count, f.created_at, f.id),
        )

    async def find_by_creator(self, user_id: UserId) -> list[Feature]:
        """Find features created by a user."""
        features = [f for f in self._features.values() if f.created_by_id == user_id]
        return sorted(features, key=lambda f: f.created_at)

    async def save(self, feature: Feature) -> Feature:
        """Save or update a feature.

        An update keeps the stored vote_count; only the ledger changes it.
        """
        existing = self._features.get(feature.id)
        if existing:
            feature = feature.model_copy(update={"vote_count": existing.vote_count})
        self._features[feature.id] = feature
        return feature

    async def increment_vote_count(self, feature_id: FeatureId) -> Optional[Feature]:
        """Increment vote_count by 1."""
        feature = self._features.get(feature_id)
        if not feature:
            return None
        updated = feature.model_copy(
            update={"vote_count": feature.vote_count + 1, "updated_at": datetime.now()}
        )
        self._features[feature_id] = updated
        return updated

    async def decrement_vote_count(self, feature_id: FeatureId) -> Optional[Feature]:
        """Decrement vote_count by 1.

        Raises:
            IntegrityError: If the counter would drop below zero
        """
        feature = self._features.get(feature_id)
        if not feature:
            return None
        if feature.vote_count == 0:
            raise IntegrityError("vote_count_non_negative", None, Exception())
        updated = feature.model_copy(
            update={
                "vote_count": feature.vote_count - 1,
                "updated_at": datetime.now(),
            }
        )
        self._features[feature_id] = updated
        return updated

    def snapshot(self) -> dict[FeatureId, Feature]:
        """Copy the current state (features are immutable, a shallow copy is enough)."""
        return dict(self._features)

    def restore(self, snapshot: dict[FeatureId, Feature]) -> None:
        """Reset to a previously taken snapshot."""
        self._features = dict(snapshot)
