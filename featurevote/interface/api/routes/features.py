"""Feature routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import Field

from featurevote.application.usecase.base import CamelModel
from featurevote.application.usecase.feature import (
    CreateFeatureRequest,
    CreateFeatureResponse,
    CreateFeatureUseCase,
    FeatureListItem,
    GetFeatureRequest,
    GetFeatureResponse,
    GetFeatureUseCase,
    ListFeaturesRequest,
    ListFeaturesUseCase,
)
from featurevote.interface.api.schemas import EMAIL_PATTERN, ApiResponse

router = APIRouter(prefix="/features", tags=["features"], route_class=DishkaRoute)


class CreateFeatureAPIRequest(CamelModel):
    """API request for creating a feature."""

    title: str = Field(min_length=5, max_length=100)
    description: str = Field(min_length=10, max_length=500)
    created_by_email: str = Field(pattern=EMAIL_PATTERN)


@router.get("", response_model=ApiResponse[list[FeatureListItem]])
async def list_features(
    list_features_use_case: FromDishka[ListFeaturesUseCase],
) -> ApiResponse[list[FeatureListItem]]:
    """List all features ranked by vote count.

    Returns:
        Features, most voted first, each with its creator
    """
    response = await list_features_use_case.execute(ListFeaturesRequest())
    return ApiResponse(data=response.features)


@router.get("/{feature_id}", response_model=ApiResponse[GetFeatureResponse])
async def get_feature(
    feature_id: UUID,
    get_feature_use_case: FromDishka[GetFeatureUseCase],
) -> ApiResponse[GetFeatureResponse]:
    """Get a feature with its creator and votes.

    Args:
        feature_id: Feature UUID
        get_feature_use_case: Get feature use case from DI

    Returns:
        Feature details

    Raises:
        NotFoundError: If the feature doesn't exist (mapped to 404)
    """
    response = await get_feature_use_case.execute(
        GetFeatureRequest(feature_id=str(feature_id))
    )
    return ApiResponse(data=response)


@router.post(
    "",
    response_model=ApiResponse[CreateFeatureResponse],
    status_code=status.HTTP_201_CREATED,
)
async def create_feature(
    request: CreateFeatureAPIRequest,
    create_feature_use_case: FromDishka[CreateFeatureUseCase],
) -> ApiResponse[CreateFeatureResponse]:
    """Create a feature request.

    Args:
        request: Title, description and the requesting user's email
        create_feature_use_case: Create feature use case from DI

    Returns:
        Created feature with zero votes

    Raises:
        NotFoundError: If no user has the given email (mapped to 404)
    """
    response = await create_feature_use_case.execute(
        CreateFeatureRequest(
            title=request.title,
            description=request.description,
            created_by_email=request.created_by_email,
        )
    )
    return ApiResponse(data=response)
