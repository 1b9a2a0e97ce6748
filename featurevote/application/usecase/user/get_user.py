"""Get user use case."""

from datetime import datetime

from pydantic import BaseModel

from featurevote.application.usecase.base import (
    BaseUseCase,
    CamelModel,
    FeatureSummaryItem,
    VoteItem,
)
from featurevote.domain.service import FeatureService, UserService, VoteService


class CurrentVoteItem(VoteItem):
    """The user's vote with the feature it is on."""

    feature: FeatureSummaryItem | None


class GetUserRequest(BaseModel):
    """Get user request."""

    email: str


class GetUserResponse(CamelModel):
    """User with the features they created and their current vote."""

    id: str
    email: str
    name: str
    created_at: datetime
    features: list[FeatureSummaryItem]
    vote: CurrentVoteItem | None


class GetUserUseCase(BaseUseCase):
    """Use case for looking a user up by email."""

    def __init__(
        self,
        user_service: UserService,
        feature_service: FeatureService,
        vote_service: VoteService,
    ) -> None:
        """Initialize get user use case.

        Args:
            user_service: User domain service
            feature_service: Feature domain service
            vote_service: Vote domain service
        """
        self.user_service = user_service
        self.feature_service = feature_service
        self.vote_service = vote_service

    async def execute(self, request: GetUserRequest) -> GetUserResponse:
        """Execute get user flow.

        Raises:
            NotFoundError: If no user has this email
        """
        user = await self.user_service.get_by_email(request.email)
        created = await self.feature_service.list_features_by_creator(user.id)

        current_vote = None
        vote = await self.vote_service.get_vote_for_user(user.id)
        if vote:
            voted = await self.feature_service.get_features_by_ids([vote.feature_id])
            feature = voted.get(vote.feature_id)
            current_vote = CurrentVoteItem(
                **VoteItem.from_vote(vote).model_dump(),
                feature=FeatureSummaryItem.from_feature(feature) if feature else None,
            )

        return GetUserResponse(
            id=str(user.id),
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            features=[FeatureSummaryItem.from_feature(f) for f in created],
            vote=current_vote,
        )
