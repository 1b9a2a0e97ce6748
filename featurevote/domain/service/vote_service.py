"""Vote domain service.

Coordinates the one-vote-per-user state machine. Given a user and a
feature it decides between creating a vote, leaving the current one alone
or moving it, and applies the paired ledger/counter change in a single
ledger transaction.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Awaitable, Callable, Optional, TypeVar
from uuid import uuid4

import logfire

from featurevote.domain.error import NotFoundError, TransactionAbortedError
from featurevote.domain.model import Vote
from featurevote.domain.repository import VoteLedger, VoteRepository
from featurevote.domain.value import (
    FeatureId,
    FeatureSummary,
    UserId,
    VoteAction,
    VoteId,
)

from .base import Service
from .feature_service import FeatureService
from .user_service import UserService

T = TypeVar("T")


@dataclass(frozen=True)
class VoteOutcome:
    """Result of a cast-or-move call."""

    vote: Vote
    feature: FeatureSummary
    action: VoteAction


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        vote_ledger: VoteLedger,
        feature_service: FeatureService,
        user_service: UserService,
        transaction_retries: int = 1,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository (reads only)
            vote_ledger: Ledger that opens atomic vote units
            feature_service: Feature domain service
            user_service: User domain service
            transaction_retries: Retries for an aborted ledger transaction
        """
        self.vote_repository = vote_repository
        self.vote_ledger = vote_ledger
        self.feature_service = feature_service
        self.user_service = user_service
        self.transaction_retries = transaction_retries

    async def cast_or_move_vote(
        self, feature_id: FeatureId, user_id: UserId
    ) -> VoteOutcome:
        """Cast a user's vote for a feature, moving it if needed.

        - No current vote: create one and increment the feature.
        - Current vote on this feature: nothing changes (not an error).
        - Current vote elsewhere: delete it, decrement the old feature,
          create the new vote and increment the new feature, atomically.

        Args:
            feature_id: Feature to vote for
            user_id: Voting user

        Returns:
            The user's vote, the voted feature's projection and the action taken

        Raises:
            NotFoundError: If the feature or the user doesn't exist
            ConflictError: On an integrity violation in the ledger
            TransactionAbortedError: If the transaction kept aborting
        """
        with logfire.span(
            "vote_service.cast_or_move_vote",
            feature_id=str(feature_id),
            user_id=str(user_id),
        ):
            await self.feature_service.get_feature_by_id(feature_id)
            await self.user_service.get_by_id(user_id)

            outcome = await self._run_with_retry(
                "cast_or_move_vote", lambda: self._cast_or_move(feature_id, user_id)
            )

            logfire.info(
                "Vote cast",
                action=outcome.action.value,
                vote_id=str(outcome.vote.id),
                feature_id=str(feature_id),
                user_id=str(user_id),
                vote_count=outcome.feature.vote_count,
            )
            return outcome

    async def _cast_or_move(self, feature_id: FeatureId, user_id: UserId) -> VoteOutcome:
        async with self.vote_ledger.transaction(user_id) as tx:
            existing = await tx.find_vote_by_user(user_id)

            if existing and existing.feature_id == feature_id:
                summary = await tx.get_feature_summary(feature_id)
                if summary is None:
                    raise NotFoundError("Feature", str(feature_id))
                return VoteOutcome(
                    vote=existing, feature=summary, action=VoteAction.UNCHANGED
                )

            new_vote = Vote(
                id=VoteId(uuid4()),
                user_id=user_id,
                feature_id=feature_id,
                created_at=datetime.now(),
            )

            if existing is None:
                summary = await tx.create_vote_and_increment(new_vote)
                return VoteOutcome(
                    vote=new_vote, feature=summary, action=VoteAction.CREATED
                )

            summary = await tx.move_vote(existing, new_vote)
            logfire.info(
                "Vote moved",
                user_id=str(user_id),
                from_feature_id=str(existing.feature_id),
                to_feature_id=str(feature_id),
            )
            return VoteOutcome(vote=new_vote, feature=summary, action=VoteAction.MOVED)

    async def remove_vote(self, feature_id: FeatureId, user_id: UserId) -> FeatureSummary:
        """Remove a user's vote from a feature.

        Deletes the vote row and decrements the feature's counter in one
        ledger transaction.

        Args:
            feature_id: Feature the vote is on
            user_id: Voting user

        Returns:
            Updated projection of the feature

        Raises:
            NotFoundError: If the user doesn't exist, or has no vote on this feature
            TransactionAbortedError: If the transaction kept aborting
        """
        with logfire.span(
            "vote_service.remove_vote",
            feature_id=str(feature_id),
            user_id=str(user_id),
        ):
            await self.user_service.get_by_id(user_id)

            summary = await self._run_with_retry(
                "remove_vote", lambda: self._remove(feature_id, user_id)
            )
            if summary is None:
                logfire.warn(
                    "No vote to remove",
                    feature_id=str(feature_id),
                    user_id=str(user_id),
                )
                raise NotFoundError("Vote", f"user {user_id} on feature {feature_id}")

            logfire.info(
                "Vote removed",
                feature_id=str(feature_id),
                user_id=str(user_id),
                vote_count=summary.vote_count,
            )
            return summary

    async def _remove(
        self, feature_id: FeatureId, user_id: UserId
    ) -> Optional[FeatureSummary]:
        async with self.vote_ledger.transaction(user_id) as tx:
            return await tx.delete_vote_and_decrement(user_id, feature_id)

    async def _run_with_retry(
        self, operation: str, work: Callable[[], Awaitable[T]]
    ) -> T:
        """Run a ledger unit, retrying it when the store aborts it.

        An aborted unit applied nothing, so running it again from the top
        (including the read of the current vote) is safe.
        """
        attempt = 0
        while True:
            try:
                return await work()
            except TransactionAbortedError as e:
                if attempt >= self.transaction_retries:
                    logfire.error(
                        "Vote transaction aborted, giving up",
                        operation=operation,
                        attempts=attempt + 1,
                        error=str(e),
                    )
                    raise
                attempt += 1
                logfire.warn(
                    "Vote transaction aborted, retrying",
                    operation=operation,
                    attempt=attempt,
                    error=str(e),
                )

    async def get_vote_for_user(self, user_id: UserId) -> Vote | None:
        """Get a user's current vote.

        Args:
            user_id: User ID

        Returns:
            The vote, or None if the user hasn't voted
        """
        return await self.vote_repository.find_by_user(user_id)

    async def list_votes(
        self,
        feature_id: FeatureId | None = None,
        user_email: str | None = None,
    ) -> list[Vote]:
        """List votes, optionally filtered by feature and/or voter email.

        Args:
            feature_id: Only votes on this feature
            user_email: Only votes by the user with this email

        Returns:
            Matching votes. An unknown email matches nothing.
        """
        with logfire.span(
            "vote_service.list_votes",
            feature_id=str(feature_id) if feature_id else None,
            user_email=user_email,
        ):
            user_id = None
            if user_email is not None:
                user = await self.user_service.get_user_by_email(user_email)
                if user is None:
                    return []
                user_id = user.id

            votes = await self.vote_repository.find_all(
                feature_id=feature_id, user_id=user_id
            )
            logfire.info("Votes listed", count=len(votes))
            return votes
