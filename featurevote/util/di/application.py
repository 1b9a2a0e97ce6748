"""Application layer DI providers."""

from dishka import Scope, provide

from featurevote.application.usecase.feature import (
    CreateFeatureUseCase,
    GetFeatureUseCase,
    ListFeaturesUseCase,
)
from featurevote.application.usecase.user import GetUserUseCase
from featurevote.application.usecase.vote import (
    CastVoteUseCase,
    ListVotesUseCase,
    RemoveVoteUseCase,
)
from featurevote.domain.service import FeatureService, UserService, VoteService
from featurevote.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Feature use cases
    @provide(scope=Scope.REQUEST)
    def get_list_features_use_case(
        self, feature_service: FeatureService, user_service: UserService
    ) -> ListFeaturesUseCase:
        """Provide list features use case."""
        return ListFeaturesUseCase(
            feature_service=feature_service, user_service=user_service
        )

    @provide(scope=Scope.REQUEST)
    def get_get_feature_use_case(
        self,
        feature_service: FeatureService,
        user_service: UserService,
        vote_service: VoteService,
    ) -> GetFeatureUseCase:
        """Provide get feature use case."""
        return GetFeatureUseCase(
            feature_service=feature_service,
            user_service=user_service,
            vote_service=vote_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_feature_use_case(
        self, feature_service: FeatureService, user_service: UserService
    ) -> CreateFeatureUseCase:
        """Provide create feature use case."""
        return CreateFeatureUseCase(
            feature_service=feature_service, user_service=user_service
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_remove_vote_use_case(
        self, vote_service: VoteService, user_service: UserService
    ) -> RemoveVoteUseCase:
        """Provide remove vote use case."""
        return RemoveVoteUseCase(vote_service=vote_service, user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_list_votes_use_case(
        self,
        vote_service: VoteService,
        user_service: UserService,
        feature_service: FeatureService,
    ) -> ListVotesUseCase:
        """Provide list votes use case."""
        return ListVotesUseCase(
            vote_service=vote_service,
            user_service=user_service,
            feature_service=feature_service,
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_get_user_use_case(
        self,
        user_service: UserService,
        feature_service: FeatureService,
        vote_service: VoteService,
    ) -> GetUserUseCase:
        """Provide get user use case."""
        return GetUserUseCase(
            user_service=user_service,
            feature_service=feature_service,
            vote_service=vote_service,
        )
