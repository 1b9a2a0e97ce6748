"""Strongly typed identifiers for domain entities.

Using NewType keeps user, feature and vote IDs from being mixed up.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
FeatureId = NewType("FeatureId", UUID)
VoteId = NewType("VoteId", UUID)
