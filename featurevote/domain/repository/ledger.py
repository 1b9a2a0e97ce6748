"""Vote ledger unit of work.

Every change to the vote ledger is paired with the matching change to a
feature's ``vote_count`` inside one atomic unit. Counters must never be
touched outside a ``VoteTransaction``.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Optional

from featurevote.domain.error import NotFoundError, TransactionAbortedError
from featurevote.domain.model.vote import Vote
from featurevote.domain.repository.feature import FeatureRepository
from featurevote.domain.repository.vote import VoteRepository
from featurevote.domain.value import FeatureId, FeatureSummary, UserId


class VoteTransaction:
    """Paired ledger/counter primitives bound to one atomic unit.

    The repositories passed in must share the unit's transaction. The
    owning ``VoteLedger`` commits when the unit exits cleanly and rolls
    back on any exception, so a primitive that fails halfway leaves
    nothing behind.
    """

    def __init__(
        self,
        vote_repository: VoteRepository,
        feature_repository: FeatureRepository,
    ) -> None:
        """Initialize transaction.

        Args:
            vote_repository: Vote repository bound to this unit
            feature_repository: Feature repository bound to this unit
        """
        self.vote_repository = vote_repository
        self.feature_repository = feature_repository

    async def find_vote_by_user(self, user_id: UserId) -> Optional[Vote]:
        """Read the user's current vote inside the unit."""
        return await self.vote_repository.find_by_user(user_id)

    async def find_vote_by_user_and_feature(
        self, user_id: UserId, feature_id: FeatureId
    ) -> Optional[Vote]:
        """Read the user's vote on one feature inside the unit."""
        return await self.vote_repository.find_by_user_and_feature(user_id, feature_id)

    async def get_feature_summary(
        self, feature_id: FeatureId
    ) -> Optional[FeatureSummary]:
        """Read a feature's current projection inside the unit."""
        feature = await self.feature_repository.find_by_id(feature_id)
        return feature.summary() if feature else None

    async def create_vote_and_increment(self, vote: Vote) -> FeatureSummary:
        """Insert a vote row and increment its feature's counter.

        Args:
            vote: The new vote

        Returns:
            Updated projection of the voted feature

        Raises:
            NotFoundError: If the feature disappeared
            IntegrityError: If the user already has a vote
        """
        await self.vote_repository.save(vote)
        feature = await self.feature_repository.increment_vote_count(vote.feature_id)
        if feature is None:
            raise NotFoundError("Feature", str(vote.feature_id))
        return feature.summary()

    async def delete_vote_and_decrement(
        self, user_id: UserId, feature_id: FeatureId
    ) -> Optional[FeatureSummary]:
        """Delete the user's vote on a feature and decrement the counter.

        Args:
            user_id: The voter
            feature_id: The feature the vote is on

        Returns:
            Updated projection, or None if no vote row matched
        """
        vote = await self.find_vote_by_user_and_feature(user_id, feature_id)
        if vote is None:
            return None

        deleted = await self.vote_repository.delete(vote.id)
        if not deleted:
            raise TransactionAbortedError(f"Vote {vote.id} changed concurrently")

        feature = await self.feature_repository.decrement_vote_count(feature_id)
        if feature is None:
            raise NotFoundError("Feature", str(feature_id))
        return feature.summary()

    async def move_vote(self, old_vote: Vote, new_vote: Vote) -> FeatureSummary:
        """Move a user's vote to another feature.

        Deletes the old row, decrements the old counter, inserts the new
        row and increments the new counter.

        Args:
            old_vote: The user's current vote
            new_vote: The replacement vote (same user, other feature)

        Returns:
            Updated projection of the new feature

        Raises:
            TransactionAbortedError: If the old vote no longer exists
            NotFoundError: If either feature disappeared
        """
        if old_vote.user_id != new_vote.user_id:
            raise ValueError("A vote can only move between features of one user")

        deleted = await self.vote_repository.delete(old_vote.id)
        if not deleted:
            # The old row went away after it was read; the unit is stale
            raise TransactionAbortedError(f"Vote {old_vote.id} changed concurrently")

        old_feature = await self.feature_repository.decrement_vote_count(
            old_vote.feature_id
        )
        if old_feature is None:
            raise NotFoundError("Feature", str(old_vote.feature_id))

        return await self.create_vote_and_increment(new_vote)


class VoteLedger(ABC):
    """Opens atomic units over the vote ledger and feature counters.

    Units for the same user are serialized; units for different users may
    run concurrently.
    """

    @abstractmethod
    def transaction(
        self, user_id: UserId
    ) -> AbstractAsyncContextManager[VoteTransaction]:
        """Open a unit of work for one user's vote.

        Usage:
            async with ledger.transaction(user_id) as tx:
                current = await tx.find_vote_by_user(user_id)
                ...

        Args:
            user_id: The user whose vote will be read or changed

        Returns:
            Async context manager yielding a VoteTransaction. Commits on
            clean exit, rolls back on exception.

        Raises:
            TransactionAbortedError: If the store aborted the unit
            ConflictError: On an integrity violation
        """
        pass
