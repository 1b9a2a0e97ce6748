"""SQLAlchemy table definitions.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("email", String(255), nullable=False),
    Column("name", String(255), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_users_email"),
)

# ============================================================================
# FEATURES TABLE
# ============================================================================
features_table = Table(
    "features",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(100), nullable=False),
    Column("description", Text, nullable=False),
    # Cached count of rows in votes referencing this feature
    Column("vote_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_by_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("vote_count >= 0", name="vote_count_non_negative"),
)

Index(
    "idx_features_ranking",
    features_table.c.vote_count.desc(),
    features_table.c.created_at,
    features_table.c.id,
)
Index("idx_features_created_by_id", features_table.c.created_by_id)

# ============================================================================
# VOTES TABLE (the ledger)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "feature_id",
        UUID,
        ForeignKey("features.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # One vote per user across all features
    UniqueConstraint("user_id", name="uq_votes_user_id"),
)

Index("idx_votes_feature_id", votes_table.c.feature_id)
