"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we map rows by hand
instead of using SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict
from uuid import UUID

from featurevote.domain.model import Feature, User, Vote
from featurevote.domain.value import FeatureId, UserId, VoteId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        email=row["email"],
        name=row["name"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_feature(row: Dict[str, Any]) -> Feature:
    """Convert database row to Feature domain model.

    Args:
        row: Database row as dict

    Returns:
        Feature domain model
    """
    return Feature(
        id=FeatureId(_uuid(row["id"])),
        title=row["title"],
        description=row["description"],
        vote_count=row["vote_count"],
        created_by_id=UserId(_uuid(row["created_by_id"])),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def feature_to_dict(feature: Feature) -> Dict[str, Any]:
    """Convert Feature domain model to database dict."""
    return feature.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        feature_id=FeatureId(_uuid(row["feature_id"])),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()
