"""Feature domain service."""

from datetime import datetime
from typing import Sequence
from uuid import uuid4

import logfire

from featurevote.domain.error import NotFoundError
from featurevote.domain.model import Feature
from featurevote.domain.repository import FeatureRepository
from featurevote.domain.value import FeatureId, UserId

from .base import Service
from .user_service import UserService


class FeatureService(Service):
    """Domain service for feature operations and the ranking view."""

    def __init__(
        self, feature_repository: FeatureRepository, user_service: UserService
    ) -> None:
        """Initialize feature service.

        Args:
            feature_repository: Feature repository
            user_service: User domain service
        """
        self.feature_repository = feature_repository
        self.user_service = user_service

    async def get_feature_by_id(self, feature_id: FeatureId) -> Feature:
        """Get a feature by ID.

        Args:
            feature_id: Feature ID

        Returns:
            Feature entity

        Raises:
            NotFoundError: If feature not found
        """
        with logfire.span("feature_service.get_feature_by_id", feature_id=str(feature_id)):
            feature = await self.feature_repository.find_by_id(feature_id)
            if not feature:
                logfire.warn("Feature not found", feature_id=str(feature_id))
                raise NotFoundError("Feature", str(feature_id))
            return feature

    async def list_features_ranked(self) -> list[Feature]:
        """List every feature for the ranking view.

        Ordered by vote_count descending. Ties go to the feature created
        first, then to the lower ID, so repeated calls agree.

        Returns:
            Snapshot list of features
        """
        with logfire.span("feature_service.list_features_ranked"):
            features = await self.feature_repository.find_all_ranked()
            logfire.info("Features ranked", count=len(features))
            return features

    async def get_features_by_ids(
        self, feature_ids: Sequence[FeatureId]
    ) -> dict[FeatureId, Feature]:
        """Batch-load features keyed by ID.

        Args:
            feature_ids: IDs to load

        Returns:
            Mapping of ID to feature for the features that exist
        """
        if not feature_ids:
            return {}
        features = await self.feature_repository.find_by_ids(list(set(feature_ids)))
        return {feature.id: feature for feature in features}

    async def list_features_by_creator(self, user_id: UserId) -> list[Feature]:
        """List features a user created.

        Args:
            user_id: Creator's user ID

        Returns:
            Features ordered by creation time
        """
        return await self.feature_repository.find_by_creator(user_id)

    async def create_feature(
        self, title: str, description: str, created_by_email: str
    ) -> Feature:
        """Create a feature request on behalf of a user.

        Args:
            title: Feature title
            description: Feature description
            created_by_email: Email of the requesting user

        Returns:
            Created feature with zero votes

        Raises:
            NotFoundError: If no user has the given email
        """
        with logfire.span(
            "feature_service.create_feature", title=title, created_by=created_by_email
        ):
            creator = await self.user_service.get_by_email(created_by_email)

            now = datetime.now()
            feature = Feature(
                id=FeatureId(uuid4()),
                title=title,
                description=description,
                vote_count=0,
                created_by_id=creator.id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.feature_repository.save(feature)
            logfire.info(
                "Feature created", feature_id=str(saved.id), creator_id=str(creator.id)
            )
            return saved
