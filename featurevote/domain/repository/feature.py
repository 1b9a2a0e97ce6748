"""Feature repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from featurevote.domain.model.feature import Feature
from featurevote.domain.value import FeatureId, UserId


class FeatureRepository(ABC):
    """Repository for Feature aggregate (and its vote counter).

    Defines the contract for feature persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, feature_id: FeatureId) -> Optional[Feature]:
        """Find a feature by ID.

        Args:
            feature_id: The feature's unique identifier

        Returns:
            The feature if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, feature_ids: Sequence[FeatureId]) -> List[Feature]:
        """Find several features at once (batch query).

        Args:
            feature_ids: IDs to look up

        Returns:
            Features that exist, in no particular order
        """
        pass

    @abstractmethod
    async def find_all_ranked(self) -> List[Feature]:
        """Find all features ordered for the ranking view.

        Ordering: vote_count descending, then created_at ascending,
        then id ascending.

        Returns:
            Snapshot list of every feature
        """
        pass

    @abstractmethod
    async def find_by_creator(self, user_id: UserId) -> List[Feature]:
        """Find features created by a user.

        Args:
            user_id: The creator's user ID

        Returns:
            Features ordered by creation time
        """
        pass

    @abstractmethod
    async def save(self, feature: Feature) -> Feature:
        """Save a feature (create or update).

        Args:
            feature: The feature to save

        Returns:
            The saved feature
        """
        pass

    @abstractmethod
    async def increment_vote_count(self, feature_id: FeatureId) -> Optional[Feature]:
        """Atomically increment vote_count by 1.

        Uses SQL-level arithmetic to avoid lost updates. Only the vote
        ledger transaction may call this.

        Args:
            feature_id: The feature ID

        Returns:
            The updated feature, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def decrement_vote_count(self, feature_id: FeatureId) -> Optional[Feature]:
        """Atomically decrement vote_count by 1.

        Only the vote ledger transaction may call this.

        Args:
            feature_id: The feature ID

        Returns:
            The updated feature, or None if it doesn't exist

        Raises:
            IntegrityError: If the counter would drop below zero
        """
        pass
