"""initial_schema

Create the schema for Feature Vote:
- Users (created externally, identified by email)
- Features (requests with a cached vote_count)
- Votes (the ledger: at most one row per user)

Revision ID: 3c1f9a2d7b40
Revises:
Create Date: 2025-02-03 10:12:44.318205

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a2d7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )

    # ========================================================================
    # FEATURES table
    # ========================================================================
    op.create_table(
        "features",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("title", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("vote_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_by_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["created_by_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("vote_count >= 0", name="vote_count_non_negative"),
    )
    # Serves the ranking read: vote_count desc, oldest first on ties
    op.create_index(
        "idx_features_ranking",
        "features",
        [sa.text("vote_count DESC"), "created_at", "id"],
    )
    op.create_index("idx_features_created_by_id", "features", ["created_by_id"])

    # ========================================================================
    # VOTES table (the ledger)
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("feature_id", sa.UUID(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["feature_id"], ["features.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        # One vote per user across all features
        sa.UniqueConstraint("user_id", name="uq_votes_user_id"),
    )
    op.create_index("idx_votes_feature_id", "votes", ["feature_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_votes_feature_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_features_created_by_id", table_name="features")
    op.drop_index("idx_features_ranking", table_name="features")
    op.drop_table("features")
    op.drop_table("users")
