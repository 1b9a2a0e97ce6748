"""PostgreSQL implementation of the vote ledger."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from sqlalchemy import select, text
from sqlalchemy.exc import DBAPIError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from featurevote.config import DatabaseSettings
from featurevote.domain.error import NotFoundError
from featurevote.domain.repository import VoteLedger, VoteTransaction
from featurevote.domain.value import UserId
from featurevote.persistence.error import translate_db_error
from featurevote.persistence.repository.feature import PostgresFeatureRepository
from featurevote.persistence.repository.vote import PostgresVoteRepository
from featurevote.persistence.tables import users_table


class PostgresVoteLedger(VoteLedger):
    """Vote ledger backed by PostgreSQL transactions.

    Each unit runs on its own session and database transaction, independent
    of the request session. Units for the same user serialize on a
    ``SELECT ... FOR UPDATE`` of the user's row, so two concurrent moves
    can't both read the same current vote.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        database_settings: DatabaseSettings,
    ) -> None:
        """Initialize ledger.

        Args:
            session_factory: Factory for transaction sessions
            database_settings: Lock and statement timeouts
        """
        self.session_factory = session_factory
        self.database_settings = database_settings

    @asynccontextmanager
    async def transaction(self, user_id: UserId) -> AsyncIterator[VoteTransaction]:
        """Open a locked, atomic unit for one user's vote."""
        with logfire.span("vote_ledger.transaction", user_id=str(user_id)):
            try:
                async with self.session_factory() as session:
                    async with session.begin():
                        await self._apply_timeouts(session)
                        await self._lock_user(session, user_id)
                        yield VoteTransaction(
                            vote_repository=PostgresVoteRepository(session),
                            feature_repository=PostgresFeatureRepository(session),
                        )
            except DBAPIError as e:
                translated = translate_db_error(e)
                if translated is e:
                    raise
                logfire.warn(
                    "Vote transaction rolled back",
                    user_id=str(user_id),
                    error=str(translated),
                    error_type=type(translated).__name__,
                )
                raise translated from e

    async def _apply_timeouts(self, session: AsyncSession) -> None:
        # SET does not accept bind parameters; values are ints from settings
        lock_timeout = int(self.database_settings.lock_timeout_ms)
        statement_timeout = int(self.database_settings.statement_timeout_ms)
        await session.execute(text(f"SET LOCAL lock_timeout = {lock_timeout}"))
        await session.execute(
            text(f"SET LOCAL statement_timeout = {statement_timeout}")
        )

    async def _lock_user(self, session: AsyncSession, user_id: UserId) -> None:
        stmt = (
            select(users_table.c.id)
            .where(users_table.c.id == user_id)
            .with_for_update()
        )
        result = await session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("User", str(user_id))
