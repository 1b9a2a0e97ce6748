"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Path

from featurevote.application.usecase.user import (
    GetUserRequest,
    GetUserResponse,
    GetUserUseCase,
)
from featurevote.interface.api.schemas import EMAIL_PATTERN, ApiResponse

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{email}", response_model=ApiResponse[GetUserResponse])
async def get_user(
    get_user_use_case: FromDishka[GetUserUseCase],
    email: str = Path(pattern=EMAIL_PATTERN),
) -> ApiResponse[GetUserResponse]:
    """Look a user up by email.

    Args:
        get_user_use_case: Get user use case from DI
        email: User's email address

    Returns:
        User with the features they created and their current vote

    Raises:
        NotFoundError: If no user has this email (mapped to 404)
    """
    response = await get_user_use_case.execute(GetUserRequest(email=email))
    return ApiResponse(data=response)
