"""Feature use cases."""

from .create_feature import (
    CreateFeatureRequest,
    CreateFeatureResponse,
    CreateFeatureUseCase,
)
from .get_feature import GetFeatureRequest, GetFeatureResponse, GetFeatureUseCase
from .list_features import (
    FeatureListItem,
    ListFeaturesRequest,
    ListFeaturesResponse,
    ListFeaturesUseCase,
)

__all__ = [
    "CreateFeatureRequest",
    "CreateFeatureResponse",
    "CreateFeatureUseCase",
    "FeatureListItem",
    "GetFeatureRequest",
    "GetFeatureResponse",
    "GetFeatureUseCase",
    "ListFeaturesRequest",
    "ListFeaturesResponse",
    "ListFeaturesUseCase",
]
