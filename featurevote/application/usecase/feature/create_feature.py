"""Create feature use case."""

from datetime import datetime

from pydantic import BaseModel

from featurevote.application.usecase.base import BaseUseCase, CamelModel, UserSummaryItem
from featurevote.domain.service import FeatureService, UserService


class CreateFeatureRequest(BaseModel):
    """Create feature request."""

    title: str
    description: str
    created_by_email: str


class CreateFeatureResponse(CamelModel):
    """Create feature response."""

    id: str
    title: str
    description: str
    vote_count: int
    created_by: UserSummaryItem
    created_at: datetime
    updated_at: datetime


class CreateFeatureUseCase(BaseUseCase):
    """Use case for submitting a new feature request."""

    def __init__(self, feature_service: FeatureService, user_service: UserService) -> None:
        """Initialize create feature use case.

        Args:
            feature_service: Feature domain service
            user_service: User domain service
        """
        self.feature_service = feature_service
        self.user_service = user_service

    async def execute(self, request: CreateFeatureRequest) -> CreateFeatureResponse:
        """Execute create feature flow.

        Raises:
            NotFoundError: If no user has the creator email
        """
        feature = await self.feature_service.create_feature(
            title=request.title,
            description=request.description,
            created_by_email=request.created_by_email,
        )
        creator = await self.user_service.get_by_id(feature.created_by_id)

        return CreateFeatureResponse(
            id=str(feature.id),
            title=feature.title,
            description=feature.description,
            vote_count=feature.vote_count,
            created_by=UserSummaryItem.from_user(creator),
            created_at=feature.created_at,
            updated_at=feature.updated_at,
        )
