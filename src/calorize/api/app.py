"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from calorize.api.auth import router as auth_router
from calorize.api.diets import router as diets_router
from calorize.api.foods import router as foods_router
from calorize.api.friends import router as friends_router
from calorize.api.meals import router as meals_router
from calorize.api.profile import router as profile_router
from calorize.app_logging import configure_logging
from calorize.containers import AppContainer
from calorize.domain.errors import (
    AuthenticationError,
    ConflictError,
    DataAccessError,
    InvalidArgumentError,
    NotFoundError,
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        app.state.container.close_resources()

    app = FastAPI(title="Calorize", lifespan=lifespan)
    app.state.container = container

    app.include_router(auth_router)
    app.include_router(profile_router)
    app.include_router(foods_router)
    app.include_router(meals_router)
    app.include_router(friends_router)
    app.include_router(diets_router)

    @app.exception_handler(InvalidArgumentError)
    async def invalid_argument(_: Request, exc: InvalidArgumentError) -> JSONResponse:
        return _error(status.HTTP_422_UNPROCESSABLE_ENTITY, str(exc))

    @app.exception_handler(AuthenticationError)
    async def unauthenticated(_: Request, exc: AuthenticationError) -> JSONResponse:
        return _error(status.HTTP_401_UNAUTHORIZED, str(exc))

    @app.exception_handler(NotFoundError)
    async def not_found(_: Request, exc: NotFoundError) -> JSONResponse:
        return _error(status.HTTP_404_NOT_FOUND, str(exc))

    @app.exception_handler(ConflictError)
    async def conflict(_: Request, exc: ConflictError) -> JSONResponse:
        return _error(status.HTTP_409_CONFLICT, str(exc))

    @app.exception_handler(DataAccessError)
    async def data_access(request: Request, exc: DataAccessError) -> JSONResponse:
        logger.error("Storage failure on %s %s", request.method, request.url.path)
        detail = "Something went wrong while saving or loading data."
        if container.settings.debug:
            detail = f"{detail} ({exc})"
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, detail)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _error(status_code: int, detail: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail})
