"""List features use case (ranking view)."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from featurevote.application.usecase.base import BaseUseCase, CamelModel, UserSummaryItem
from featurevote.domain.service import FeatureService, UserService


class FeatureListItem(CamelModel):
    """Feature list item in response."""

    id: str
    rank: int
    title: str
    description: str
    vote_count: int
    created_by: UserSummaryItem | None
    created_at: datetime
    updated_at: datetime


class ListFeaturesRequest(BaseModel):
    """List features request."""

    pass


class ListFeaturesResponse(BaseModel):
    """List features response."""

    features: list[FeatureListItem]


class ListFeaturesUseCase(BaseUseCase):
    """Use case for listing features ranked by votes."""

    def __init__(self, feature_service: FeatureService, user_service: UserService) -> None:
        """Initialize list features use case.

        Args:
            feature_service: Feature domain service
            user_service: User domain service
        """
        self.feature_service = feature_service
        self.user_service = user_service

    async def execute(self, request: ListFeaturesRequest) -> ListFeaturesResponse:
        """Execute list features flow.

        Args:
            request: List features request

        Returns:
            Features ordered by vote count, with their creators
        """
        with logfire.span("list_features.execute"):
            features = await self.feature_service.list_features_ranked()

            # Batch query to avoid N+1 on creators
            creators = await self.user_service.get_users_by_ids(
                [feature.created_by_id for feature in features]
            )

            items = [
                FeatureListItem(
                    id=str(feature.id),
                    rank=position,
                    title=feature.title,
                    description=feature.description,
                    vote_count=feature.vote_count,
                    created_by=(
                        UserSummaryItem.from_user(creators[feature.created_by_id])
                        if feature.created_by_id in creators
                        else None
                    ),
                    created_at=feature.created_at,
                    updated_at=feature.updated_at,
                )
                for position, feature in enumerate(features, start=1)
            ]

            return ListFeaturesResponse(features=items)
