"""User entity.

Users are created externally (seed script or a registration system) and
are identified by email at the API boundary.
"""

from datetime import datetime

from pydantic import Field

from featurevote.domain.model.common import DomainModel
from featurevote.domain.value import UserId


class User(DomainModel):
    """A registered user. Holds zero or one vote."""

    id: UserId
    email: str = Field(min_length=3, max_length=255)
    name: str = Field(min_length=1, max_length=255)
    created_at: datetime = Field(default_factory=datetime.now)
