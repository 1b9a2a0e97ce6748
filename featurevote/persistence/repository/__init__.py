"""PostgreSQL repository implementations."""

from featurevote.persistence.repository.feature import PostgresFeatureRepository
from featurevote.persistence.repository.ledger import PostgresVoteLedger
from featurevote.persistence.repository.user import PostgresUserRepository
from featurevote.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresFeatureRepository",
    "PostgresVoteRepository",
    "PostgresVoteLedger",
]
