"""FastAPI application entrypoint for the hotel API."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from hotel.api.middleware.logging import LoggingMiddleware
from hotel.api.routes import health, menu, person
from hotel.core.config import settings
from hotel.core.database import database_manager
from hotel.core.exceptions import ApplicationError
from hotel.core.logging import configure_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncIterator[None]:
    """Open the shared MongoDB client on startup and close it on shutdown."""

    await database_manager.initialize()
    try:
        yield
    finally:
        await database_manager.close()


def create_app() -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    application = FastAPI(
        title=settings.API_TITLE,
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.ALLOWED_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_middleware(LoggingMiddleware)

    application.include_router(health.router)
    application.include_router(person.router)
    application.include_router(menu.router)

    @application.exception_handler(ApplicationError)
    async def handle_application_error(request: Request, exc: ApplicationError):
        """Return `{error, details}` bodies for application layer exceptions."""

        if exc.status_code >= 500:
            logger.error("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.details)
        else:
            logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
        return JSONResponse(status_code=exc.status_code, content=exc.to_content())

    return application


app = create_app()
