"""
FastAPI Application
===================

Main FastAPI app setup with the GraphQL endpoint and middleware.
"""
import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from car_rental.api.v1 import create_graphql_router
from car_rental.core.config import Settings
from car_rental.core.logging_config import configure_logging
from car_rental.di.container import DIContainer, get_container
from car_rental.infrastructure.db.database import Database

logger = logging.getLogger(__name__)

SERVICE_NAME = "Car Rental API"
SERVICE_VERSION = "1.0.0"


def create_application(container: Optional[DIContainer] = None) -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - GraphQL route registration
    - Table creation and engine disposal on shutdown

    Args:
        container: DI container to serve from (defaults to the global one)

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    container = container or get_container()
    settings = container.get(Settings)
    configure_logging(settings.log_level)

    database = container.get(Database)
    if settings.database_auto_create:
        database.create_all()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("%s %s serving GraphQL at %s", SERVICE_NAME, SERVICE_VERSION, settings.graphql_path)
        yield
        database.dispose()
        logger.info("Database connections closed")

    application = FastAPI(
        title=SERVICE_NAME,
        description="GraphQL API for car rental management",
        version=SERVICE_VERSION,
        lifespan=lifespan,
    )
    application.state.container = container

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(create_graphql_router(settings), prefix=settings.graphql_path)

    @application.get("/")
    async def root():
        """Root endpoint - service info."""
        return {
            "status": "running",
            "service": SERVICE_NAME,
            "version": SERVICE_VERSION,
            "graphql": settings.graphql_path,
        }

    @application.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    return application


if __name__ == "__main__":
    import uvicorn

    app_container = get_container()
    app_settings = app_container.get(Settings)
    uvicorn.run(create_application(app_container), host=app_settings.host, port=app_settings.port)
