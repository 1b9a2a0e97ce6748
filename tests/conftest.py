"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from featurevote.domain.model import Feature, User
from featurevote.domain.value import FeatureId, UserId

# Spans and events go nowhere during tests
logfire.configure(send_to_logfire=False, console=False)

_BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_user(email: str = "alice@example.com", name: str = "Alice Johnson") -> User:
    """Build a user with a fresh ID."""
    return User(
        id=UserId(uuid4()),
        email=email,
        name=name,
        created_at=_BASE_TIME,
    )


def make_feature(
    creator: User,
    title: str = "Dark Mode Support",
    description: str = "Add a dark theme for late-night study sessions",
    vote_count: int = 0,
    offset_seconds: int = 0,
) -> Feature:
    """Build a feature created by ``creator``.

    ``offset_seconds`` shifts created_at so tests can control insertion order.
    """
    created_at = _BASE_TIME + timedelta(seconds=offset_seconds)
    return Feature(
        id=FeatureId(uuid4()),
        title=title,
        description=description,
        vote_count=vote_count,
        created_by_id=creator.id,
        created_at=created_at,
        updated_at=created_at,
    )
