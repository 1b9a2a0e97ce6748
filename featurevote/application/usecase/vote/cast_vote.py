"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from featurevote.application.usecase.base import (
    BaseUseCase,
    CamelModel,
    FeatureSummaryItem,
    VoteItem,
)
from featurevote.domain.service import UserService, VoteService
from featurevote.domain.value import FeatureId, VoteAction


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    feature_id: str  # UUID string
    user_email: str


class CastVoteResponse(CamelModel):
    """Cast vote response."""

    vote: VoteItem
    feature: FeatureSummaryItem
    action: VoteAction


class CastVoteUseCase(BaseUseCase):
    """Use case for voting on a feature, moving an existing vote if needed."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize cast vote use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Resolves the email to a user, then casts or moves the vote.

        Raises:
            NotFoundError: If the feature or the user doesn't exist
        """
        feature_id = FeatureId(UUID(request.feature_id))
        user = await self.user_service.get_by_email(request.user_email)

        outcome = await self.vote_service.cast_or_move_vote(feature_id, user.id)

        return CastVoteResponse(
            vote=VoteItem.from_vote(outcome.vote),
            feature=FeatureSummaryItem.from_summary(outcome.feature),
            action=outcome.action,
        )
