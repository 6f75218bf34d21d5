"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from dish_assistant.api.admin import router as admin_router
from dish_assistant.api.ai import router as ai_router
from dish_assistant.api.chat import router as chat_router
from dish_assistant.api.dependencies import error_response
from dish_assistant.api.edamam import router as edamam_router
from dish_assistant.app_logging import configure_logging
from dish_assistant.containers import AppContainer

INTERNAL_ERROR = "Internal server error"
INTERNAL_ERROR_MESSAGE = "Помилка сервера. Спробуйте ще раз пізніше."

logger = logging.getLogger(__name__)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(ai_router)
    app.include_router(chat_router)
    app.include_router(edamam_router)
    app.include_router(admin_router)

    @app.exception_handler(Exception)
    async def unhandled_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "Unhandled error: method=%s path=%s error=%s",
            request.method,
            request.url.path,
            exc,
        )
        return error_response(
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            INTERNAL_ERROR,
            INTERNAL_ERROR_MESSAGE,
        )

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
