"""FastAPI application."""

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from featurevote.config import Settings
from featurevote.interface.api.routes import features, health, users, votes
from featurevote.interface.error import register_exception_handlers
from featurevote.util.di.container import create_container, setup_di
from featurevote.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py does.

    Args:
        container: DI container to serve requests from. Defaults to the
            production container built from the environment.
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Feature Vote API",
        description="Backend API for Feature Vote - rank feature requests by the votes of their users",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.api.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_di(
        app_instance, container if container is not None else create_container()
    )

    register_exception_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(features.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(users.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
