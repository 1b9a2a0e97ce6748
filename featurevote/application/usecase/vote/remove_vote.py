"""Remove vote use case."""

from uuid import UUID

from pydantic import BaseModel

from featurevote.application.usecase.base import BaseUseCase, CamelModel, FeatureSummaryItem
from featurevote.domain.service import UserService, VoteService
from featurevote.domain.value import FeatureId


class RemoveVoteRequest(BaseModel):
    """Remove vote request."""

    feature_id: str  # UUID string
    user_email: str


class RemoveVoteResponse(CamelModel):
    """Remove vote response."""

    message: str
    feature: FeatureSummaryItem


class RemoveVoteUseCase(BaseUseCase):
    """Use case for withdrawing a vote from a feature."""

    def __init__(self, vote_service: VoteService, user_service: UserService) -> None:
        """Initialize remove vote use case.

        Args:
            vote_service: Vote domain service
            user_service: User domain service
        """
        self.vote_service = vote_service
        self.user_service = user_service

    async def execute(self, request: RemoveVoteRequest) -> RemoveVoteResponse:
        """Execute remove vote flow.

        Raises:
            NotFoundError: If the user doesn't exist or has no vote on the feature
        """
        feature_id = FeatureId(UUID(request.feature_id))
        user = await self.user_service.get_by_email(request.user_email)

        summary = await self.vote_service.remove_vote(feature_id, user.id)

        return RemoveVoteResponse(
            message="Vote removed successfully",
            feature=FeatureSummaryItem.from_summary(summary),
        )
