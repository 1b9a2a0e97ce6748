"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from featurevote.domain.model.vote import Vote
from featurevote.domain.value import FeatureId, UserId, VoteId


class VoteRepository(ABC):
    """Repository for Vote entity (the vote ledger).

    Defines the contract for vote persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID.

        Args:
            vote_id: The vote's unique identifier

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId) -> Optional[Vote]:
        """Find a user's vote.

        A user holds at most one vote, so this returns a single row.

        Args:
            user_id: The user's ID

        Returns:
            The vote if the user has voted, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_user_and_feature(
        self, user_id: UserId, feature_id: FeatureId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific feature.

        Args:
            user_id: The user's ID
            feature_id: The feature's ID

        Returns:
            The vote if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        feature_id: Optional[FeatureId] = None,
        user_id: Optional[UserId] = None,
    ) -> List[Vote]:
        """Find votes matching the optional filters.

        Args:
            feature_id: Only votes on this feature
            user_id: Only votes by this user

        Returns:
            Votes ordered by creation time
        """
        pass

    @abstractmethod
    async def count_by_feature(self, feature_id: FeatureId) -> int:
        """Count ledger rows referencing a feature.

        Args:
            feature_id: The feature's ID

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create).

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already has a vote
        """
        pass

    @abstractmethod
    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID.

        Args:
            vote_id: The vote ID to delete

        Returns:
            True if a vote was deleted, False if none existed
        """
        pass

    @abstractmethod
    async def delete_by_user_and_feature(
        self, user_id: UserId, feature_id: FeatureId
    ) -> bool:
        """Delete a user's vote on a specific feature.

        Args:
            user_id: The user's ID
            feature_id: The feature's ID

        Returns:
            True if a vote was deleted, False if no vote existed
        """
        pass
