"""List votes use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from featurevote.application.usecase.base import (
    BaseUseCase,
    CamelModel,
    FeatureSummaryItem,
    UserSummaryItem,
)
from featurevote.domain.service import FeatureService, UserService, VoteService
from featurevote.domain.value import FeatureId


class VoteListItem(CamelModel):
    """Vote with its user and feature."""

    id: str
    user_id: str
    feature_id: str
    created_at: datetime
    user: UserSummaryItem | None
    feature: FeatureSummaryItem | None


class ListVotesRequest(BaseModel):
    """List votes request."""

    feature_id: str | None = None  # UUID string
    user_email: str | None = None


class ListVotesResponse(BaseModel):
    """List votes response."""

    votes: list[VoteListItem]


class ListVotesUseCase(BaseUseCase):
    """Use case for listing votes with optional filters."""

    def __init__(
        self,
        vote_service: VoteService,
        user_service: UserService,
        feature_service: FeatureService,
    ) -> None:
        """Initialize list votes use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service
            feature_service: Feature domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service
        self.feature_service = feature_service

    async def execute(self, request: ListVotesRequest) -> ListVotesResponse:
        """Execute list votes flow."""
        feature_id = FeatureId(UUID(request.feature_id)) if request.feature_id else None
        votes = await self.vote_service.list_votes(
            feature_id=feature_id, user_email=request.user_email
        )

        # Batch queries to avoid N+1
        users = await self.user_service.get_users_by_ids([v.user_id for v in votes])
        features = await self.feature_service.get_features_by_ids(
            [v.feature_id for v in votes]
        )

        items = [
            VoteListItem(
                id=str(vote.id),
                user_id=str(vote.user_id),
                feature_id=str(vote.feature_id),
                created_at=vote.created_at,
                user=(
                    UserSummaryItem.from_user(users[vote.user_id])
                    if vote.user_id in users
                    else None
                ),
                feature=(
                    FeatureSummaryItem.from_feature(features[vote.feature_id])
                    if vote.feature_id in features
                    else None
                ),
            )
            for vote in votes
        ]
        return ListVotesResponse(votes=items)
