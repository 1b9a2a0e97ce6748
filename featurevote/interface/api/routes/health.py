"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from featurevote.config import Settings
from featurevote.interface.api.schemas import ApiResponse

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    version: str
    environment: str


@router.get("/health", response_model=ApiResponse[HealthResponse])
async def health_check(settings: FromDishka[Settings]) -> ApiResponse[HealthResponse]:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return ApiResponse(
        data=HealthResponse(
            status="healthy",
            timestamp=datetime.now(),
            version="0.1.0",
            environment=settings.environment,
        )
    )
