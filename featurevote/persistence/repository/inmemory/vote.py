"""In-memory vote repository for testing."""

from typing import Optional

from sqlalchemy.exc import IntegrityError

from featurevote.domain.model.vote import Vote
from featurevote.domain.repository.vote import VoteRepository
from featurevote.domain.value import FeatureId, UserId, VoteId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: dict[VoteId, Vote] = {}

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        return self._votes.get(vote_id)

    async def find_by_user(self, user_id: UserId) -> Optional[Vote]:
        """Find a user's vote."""
        for vote in self._votes.values():
            if vote.user_id == user_id:
                return vote
        return None

    async def find_by_user_and_feature(
        self, user_id: UserId, feature_id: FeatureId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific feature."""
        vote = await self.find_by_user(user_id)
        if vote and vote.feature_id == feature_id:
            return vote
        return None

    async def find_all(
        self,
        feature_id: Optional[FeatureId] = None,
        user_id: Optional[UserId] = None,
    ) -> list[Vote]:
        """Find votes matching the optional filters."""
        votes = list(self._votes.values())
        if feature_id is not None:
            votes = [v for v in votes if v.feature_id == feature_id]
        if user_id is not None:
            votes = [v for v in votes if v.user_id == user_id]
        return sorted(votes, key=lambda v: (v.created_at, v.id))

    async def count_by_feature(self, feature_id: FeatureId) -> int:
        """Count votes on a feature."""
        return sum(1 for v in self._votes.values() if v.feature_id == feature_id)

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already has a vote
        """
        if await self.find_by_user(vote.user_id):
            raise IntegrityError("Duplicate vote for user", None, Exception())

        self._votes[vote.id] = vote
        return vote

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        return self._votes.pop(vote_id, None) is not None

    async def delete_by_user_and_feature(
        self, user_id: UserId, feature_id: FeatureId
    ) -> bool:
        """Delete a user's vote on a specific feature."""
        vote = await self.find_by_user_and_feature(user_id, feature_id)
        if not vote:
            return False
        del self._votes[vote.id]
        return True

    def snapshot(self) -> dict[VoteId, Vote]:
        """Copy the current state (votes are immutable, a shallow copy is enough)."""
        return dict(self._votes)

    def restore(self, snapshot: dict[VoteId, Vote]) -> None:
        """Reset to a previously taken snapshot."""
        self._votes = dict(snapshot)
