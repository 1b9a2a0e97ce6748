"""Base use case and shared response models."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from featurevote.domain.model import Feature, User, Vote
from featurevote.domain.value import FeatureSummary


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


class CamelModel(BaseModel):
    """Response model serialized with camelCase keys (``voteCount``)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserSummaryItem(CamelModel):
    """Public fields of a user."""

    id: str
    name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserSummaryItem":
        return cls(id=str(user.id), name=user.name, email=user.email)


class FeatureSummaryItem(CamelModel):
    """Feature projection returned by vote operations."""

    id: str
    title: str
    vote_count: int

    @classmethod
    def from_summary(cls, summary: FeatureSummary) -> "FeatureSummaryItem":
        return cls(id=str(summary.id), title=summary.title, vote_count=summary.vote_count)

    @classmethod
    def from_feature(cls, feature: Feature) -> "FeatureSummaryItem":
        return cls.from_summary(feature.summary())


class VoteItem(CamelModel):
    """A vote row."""

    id: str
    user_id: str
    feature_id: str
    created_at: datetime

    @classmethod
    def from_vote(cls, vote: Vote) -> "VoteItem":
        return cls(
            id=str(vote.id),
            user_id=str(vote.user_id),
            feature_id=str(vote.feature_id),
            created_at=vote.created_at,
        )
