from __future__ import annotations

import json
from typing import Any

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorDatabase

from hotel.core.database import DatabaseManager, database_manager
from hotel.core.exceptions import BadRequestError
from hotel.utils.validators import check_person_payload


async def get_db() -> AsyncIOMotorDatabase:
    return database_manager.database


async def get_database_manager() -> DatabaseManager:
    return database_manager


async def read_json_body(request: Request) -> Any:
    body = await request.body()
    if not body:
        return {}
    try:
        return json.loads(body)
    except ValueError:
        return {}


async def validated_person_payload(request: Request) -> dict:
    """Gate person creation on required fields and a 10 digit mobile number."""

    payload = await read_json_body(request)
    error = check_person_payload(payload)
    if error is not None:
        raise BadRequestError(error)
    return payload
