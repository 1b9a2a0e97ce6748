"""In-memory vote ledger for testing."""

import asyncio
from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.exc import DBAPIError

from featurevote.domain.repository.ledger import VoteLedger, VoteTransaction
from featurevote.domain.value import UserId
from featurevote.persistence.error import translate_db_error

from .feature import InMemoryFeatureRepository
from .vote import InMemoryVoteRepository


class InMemoryVoteLedger(VoteLedger):
    """In-memory implementation of VoteLedger for testing.

    A single lock serializes all units. Each unit snapshots the vote and
    feature stores on entry and restores them if the unit raises.
    """

    def __init__(
        self,
        vote_repository: InMemoryVoteRepository,
        feature_repository: InMemoryFeatureRepository,
    ) -> None:
        self.vote_repository = vote_repository
        self.feature_repository = feature_repository
        self._lock = asyncio.Lock()

    @asynccontextmanager
    async def transaction(self, user_id: UserId) -> AsyncIterator[VoteTransaction]:
        """Open a serialized unit that rolls back on error."""
        async with self._lock:
            votes = self.vote_repository.snapshot()
            features = self.feature_repository.snapshot()
            try:
                yield VoteTransaction(
                    vote_repository=self.vote_repository,
                    feature_repository=self.feature_repository,
                )
            except BaseException as e:
                self.vote_repository.restore(votes)
                self.feature_repository.restore(features)
                if isinstance(e, DBAPIError):
                    translated = translate_db_error(e)
                    if translated is not e:
                        raise translated from e
                raise
