"""Domain model entities."""

from featurevote.domain.model.feature import Feature
from featurevote.domain.model.user import User
from featurevote.domain.model.vote import Vote

__all__ = [
    "User",
    "Feature",
    "Vote",
]
