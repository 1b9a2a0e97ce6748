"""Get feature use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from featurevote.application.usecase.base import (
    BaseUseCase,
    CamelModel,
    UserSummaryItem,
    VoteItem,
)
from featurevote.domain.service import FeatureService, UserService, VoteService
from featurevote.domain.value import FeatureId


class GetFeatureRequest(BaseModel):
    """Get feature request."""

    feature_id: str  # UUID string


class GetFeatureResponse(CamelModel):
    """Feature with its creator and votes."""

    id: str
    title: str
    description: str
    vote_count: int
    created_by: UserSummaryItem | None
    votes: list[VoteItem]
    created_at: datetime
    updated_at: datetime


class GetFeatureUseCase(BaseUseCase):
    """Use case for fetching a single feature."""

    def __init__(
        self,
        feature_service: FeatureService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get feature use case.

        Args:
            feature_service: Feature domain service
            user_service: User domain service
            vote_service: Vote domain service
        """
        self.feature_service = feature_service
        self.user_service = user_service
        self.vote_service = vote_service

    async def execute(self, request: GetFeatureRequest) -> GetFeatureResponse:
        """Execute get feature flow.

        Raises:
            NotFoundError: If the feature doesn't exist
        """
        feature_id = FeatureId(UUID(request.feature_id))
        feature = await self.feature_service.get_feature_by_id(feature_id)

        creators = await self.user_service.get_users_by_ids([feature.created_by_id])
        creator = creators.get(feature.created_by_id)
        votes = await self.vote_service.list_votes(feature_id=feature_id)

        return GetFeatureResponse(
            id=str(feature.id),
            title=feature.title,
            description=feature.description,
            vote_count=feature.vote_count,
            created_by=UserSummaryItem.from_user(creator) if creator else None,
            votes=[VoteItem.from_vote(vote) for vote in votes],
            created_at=feature.created_at,
            updated_at=feature.updated_at,
        )
