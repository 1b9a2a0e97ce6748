"""Vote entity.

Each user holds at most one vote across all features. Changing it deletes
the old row and creates a new one; rows are never updated in place.
"""

from datetime import datetime

from pydantic import Field

from featurevote.domain.model.common import DomainModel
from featurevote.domain.value import FeatureId, UserId, VoteId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per user (enforced by database unique constraint)
    - Owned jointly by its user and its feature
    """

    id: VoteId
    user_id: UserId
    feature_id: FeatureId
    created_at: datetime = Field(default_factory=datetime.now)
