"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from featurevote.domain.repository.feature import FeatureRepository
from featurevote.domain.repository.ledger import VoteLedger, VoteTransaction
from featurevote.domain.repository.user import UserRepository
from featurevote.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "FeatureRepository",
    "VoteRepository",
    "VoteLedger",
    "VoteTransaction",
]
