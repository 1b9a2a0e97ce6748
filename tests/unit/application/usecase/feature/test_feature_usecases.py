"""Unit tests for feature use cases."""

import pytest

from featurevote.application.usecase.feature import (
    CreateFeatureRequest,
    CreateFeatureUseCase,
    GetFeatureRequest,
    GetFeatureUseCase,
    ListFeaturesRequest,
    ListFeaturesUseCase,
)
from featurevote.domain.error import NotFoundError
from featurevote.domain.repository import FeatureRepository, UserRepository
from featurevote.domain.service import VoteService
from tests.conftest import make_feature, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListFeaturesUseCase:
    """Tests for ListFeaturesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_ranked_features_with_creators(self, unit_env):
        """Features come back ranked, numbered and with their creator."""
        # Arrange
        use_case = await unit_env.get(ListFeaturesUseCase)
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        feature_repo = await unit_env.get(FeatureRepository)
        alice = await user_repo.save(make_user())
        quiet = await feature_repo.save(make_feature(alice, "Calendar Integration"))
        popular = await feature_repo.save(
            make_feature(alice, "Dark Mode Support", offset_seconds=1)
        )
        await vote_service.cast_or_move_vote(popular.id, alice.id)

        # Act
        response = await use_case.execute(ListFeaturesRequest())

        # Assert
        assert [item.id for item in response.features] == [str(popular.id), str(quiet.id)]
        assert [item.rank for item in response.features] == [1, 2]
        top = response.features[0]
        assert top.vote_count == 1
        assert top.created_by.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_serializes_with_camel_case_keys(self, unit_env):
        """Response fields use camelCase on the wire."""
        use_case = await unit_env.get(ListFeaturesUseCase)
        user_repo = await unit_env.get(UserRepository)
        feature_repo = await unit_env.get(FeatureRepository)
        alice = await user_repo.save(make_user())
        await feature_repo.save(make_feature(alice))

        response = await use_case.execute(ListFeaturesRequest())
        item = response.features[0].model_dump(by_alias=True)

        assert {"voteCount", "createdBy", "createdAt", "updatedAt"} <= item.keys()


class TestGetFeatureUseCase:
    """Tests for GetFeatureUseCase."""

    @pytest.mark.asyncio
    async def test_returns_feature_with_votes(self, unit_env):
        use_case = await unit_env.get(GetFeatureUseCase)
        vote_service = await unit_env.get(VoteService)
        user_repo = await unit_env.get(UserRepository)
        feature_repo = await unit_env.get(FeatureRepository)
        alice = await user_repo.save(make_user())
        feature = await feature_repo.save(make_feature(alice))
        outcome = await vote_service.cast_or_move_vote(feature.id, alice.id)

        response = await use_case.execute(GetFeatureRequest(feature_id=str(feature.id)))

        assert response.vote_count == 1
        assert response.created_by.name == "Alice Johnson"
        assert [v.id for v in response.votes] == [str(outcome.vote.id)]

    @pytest.mark.asyncio
    async def test_unknown_feature_raises_not_found(self, unit_env):
        use_case = await unit_env.get(GetFeatureUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                GetFeatureRequest(feature_id="00000000-0000-0000-0000-000000000000")
            )


class TestCreateFeatureUseCase:
    """Tests for CreateFeatureUseCase."""

    @pytest.mark.asyncio
    async def test_creates_feature(self, unit_env):
        """A created feature starts with zero votes and names its creator."""
        use_case = await unit_env.get(CreateFeatureUseCase)
        user_repo = await unit_env.get(UserRepository)
        await user_repo.save(make_user())

        response = await use_case.execute(
            CreateFeatureRequest(
                title="Mobile App Offline Mode",
                description="Study without an internet connection",
                created_by_email="alice@example.com",
            )
        )

        assert response.title == "Mobile App Offline Mode"
        assert response.vote_count == 0
        assert response.created_by.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_unknown_creator_raises_not_found(self, unit_env):
        use_case = await unit_env.get(CreateFeatureUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateFeatureRequest(
                    title="Mobile App Offline Mode",
                    description="Study without an internet connection",
                    created_by_email="nobody@example.com",
                )
            )
