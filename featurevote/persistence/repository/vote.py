"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from featurevote.domain.model import Vote
from featurevote.domain.repository import VoteRepository
from featurevote.domain.value import FeatureId, UserId, VoteId
from featurevote.persistence.mappers import row_to_vote, vote_to_dict
from featurevote.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, vote_id: VoteId) -> Optional[Vote]:
        """Find a vote by ID."""
        stmt = select(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user(self, user_id: UserId) -> Optional[Vote]:
        """Find a user's vote."""
        stmt = select(votes_table).where(votes_table.c.user_id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_user_and_feature(
        self, user_id: UserId, feature_id: FeatureId
    ) -> Optional[Vote]:
        """Find a user's vote on a specific feature."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.feature_id == feature_id,
            )
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_all(
        self,
        feature_id: Optional[FeatureId] = None,
        user_id: Optional[UserId] = None,
    ) -> List[Vote]:
        """Find votes matching the optional filters."""
        stmt = select(votes_table)
        if feature_id is not None:
            stmt = stmt.where(votes_table.c.feature_id == feature_id)
        if user_id is not None:
            stmt = stmt.where(votes_table.c.user_id == user_id)
        stmt = stmt.order_by(votes_table.c.created_at.asc(), votes_table.c.id.asc())

        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def count_by_feature(self, feature_id: FeatureId) -> int:
        """Count votes on a feature."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.feature_id == feature_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete(self, vote_id: VoteId) -> bool:
        """Delete a vote by ID."""
        stmt = delete(votes_table).where(votes_table.c.id == vote_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def delete_by_user_and_feature(
        self, user_id: UserId, feature_id: FeatureId
    ) -> bool:
        """Delete a user's vote on a specific feature."""
        stmt = delete(votes_table).where(
            and_(
                votes_table.c.user_id == user_id,
                votes_table.c.feature_id == feature_id,
            )
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]
