"""Greeting, connectivity probe and metrics endpoints."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import PlainTextResponse
from pymongo.errors import PyMongoError

from hotel.api.dependencies import get_database_manager
from hotel.core.database import DatabaseManager
from hotel.core.exceptions import DatabaseUnavailableError
from hotel.utils.monitoring import render_metrics

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

GREETING = "Hello! Welcome to my hotel. How can I help you?"


@router.get("/", response_class=PlainTextResponse)
async def welcome() -> str:
    return GREETING


@router.get("/testdb", response_class=PlainTextResponse)
async def test_database(manager: DatabaseManager = Depends(get_database_manager)) -> PlainTextResponse:
    """Ping MongoDB and report whether it answered.

    Takes the manager rather than the database so an unopened connection is
    reported here as a failed check.
    """

    try:
        await manager.database.command("ping")
    except (PyMongoError, DatabaseUnavailableError) as exc:
        logger.error("MongoDB ping failed: %s", exc)
        return PlainTextResponse(
            f"MongoDB connection failed: {exc}",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return PlainTextResponse("MongoDB is connected and operational!")


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    payload, content_type = render_metrics()
    return Response(content=payload, media_type=content_type)
