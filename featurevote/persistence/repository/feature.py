"""PostgreSQL implementation of Feature repository."""

from typing import List, Optional, Sequence

from sqlalchemy import func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from featurevote.domain.model import Feature
from featurevote.domain.repository import FeatureRepository
from featurevote.domain.value import FeatureId, UserId
from featurevote.persistence.mappers import feature_to_dict, row_to_feature
from featurevote.persistence.tables import features_table


class PostgresFeatureRepository(FeatureRepository):
    """PostgreSQL implementation of FeatureRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, feature_id: FeatureId) -> Optional[Feature]:
        """Find a feature by ID."""
        stmt = select(features_table).where(features_table.c.id == feature_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_feature(row._asdict()) if row else None

    async def find_by_ids(self, feature_ids: Sequence[FeatureId]) -> List[Feature]:
        """Find several features at once."""
        if not feature_ids:
            return []
        stmt = select(features_table).where(features_table.c.id.in_(feature_ids))
        result = await self.session.execute(stmt)
        return [row_to_feature(row._asdict()) for row in result.fetchall()]

    async def find_all_ranked(self) -> List[Feature]:
        """Find all features, most voted first."""
        stmt = select(features_table).order_by(
            features_table.c.vote_count.desc(),
            features_table.c.created_at.asc(),
            features_table.c.id.asc(),
        )
        result = await self.session.execute(stmt)
        return [row_to_feature(row._asdict()) for row in result.fetchall()]

    async def find_by_creator(self, user_id: UserId) -> List[Feature]:
        """Find features created by a user."""
        stmt = (
            select(features_table)
            .where(features_table.c.created_by_id == user_id)
            .order_by(features_table.c.created_at.asc())
        )
        result = await self.session.execute(stmt)
        return [row_to_feature(row._asdict()) for row in result.fetchall()]

    async def save(self, feature: Feature) -> Feature:
        """Save a feature (create or update)."""
        feature_dict = feature_to_dict(feature)

        existing = await self.find_by_id(feature.id)
        if existing:
            # vote_count is owned by the vote ledger; never overwrite it here
            feature_dict.pop("vote_count")
            stmt = (
                update(features_table)
                .where(features_table.c.id == feature.id)
                .values(**feature_dict)
            )
        else:
            stmt = insert(features_table).values(**feature_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return feature

    async def increment_vote_count(self, feature_id: FeatureId) -> Optional[Feature]:
        """Atomically increment vote_count by 1."""
        stmt = (
            update(features_table)
            .where(features_table.c.id == feature_id)
            .values(
                vote_count=features_table.c.vote_count + 1,
                updated_at=func.now(),
            )
            .returning(*features_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_feature(row._asdict()) if row else None

    async def decrement_vote_count(self, feature_id: FeatureId) -> Optional[Feature]:
        """Atomically decrement vote_count by 1; the CHECK rejects negatives."""
        stmt = (
            update(features_table)
            .where(features_table.c.id == feature_id)
            .values(
                vote_count=features_table.c.vote_count - 1,
                updated_at=func.now(),
            )
            .returning(*features_table.c)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_feature(row._asdict()) if row else None
