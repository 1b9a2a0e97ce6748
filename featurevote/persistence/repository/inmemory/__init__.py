"""In-memory repository implementations for testing."""

from .feature import InMemoryFeatureRepository
from .ledger import InMemoryVoteLedger
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryFeatureRepository",
    "InMemoryUserRepository",
    "InMemoryVoteLedger",
    "InMemoryVoteRepository",
]
