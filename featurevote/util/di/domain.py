"""Domain layer DI providers."""

from dishka import Scope, provide

from featurevote.config import VotingSettings
from featurevote.domain.repository import (
    FeatureRepository,
    UserRepository,
    VoteLedger,
    VoteRepository,
)
from featurevote.domain.service import FeatureService, UserService, VoteService
from featurevote.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Vote mutations don't use the request session; they run in ledger units.
    """

    scope = Scope.REQUEST

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_feature_service(
        self, feature_repository: FeatureRepository, user_service: UserService
    ) -> FeatureService:
        """Provide feature domain service."""
        return FeatureService(
            feature_repository=feature_repository, user_service=user_service
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        vote_ledger: VoteLedger,
        feature_service: FeatureService,
        user_service: UserService,
        voting_settings: VotingSettings,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            vote_ledger=vote_ledger,
            feature_service=feature_service,
            user_service=user_service,
            transaction_retries=voting_settings.transaction_retries,
        )
