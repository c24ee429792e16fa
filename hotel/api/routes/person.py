"""Staff (person) endpoints."""
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo.errors import PyMongoError

from hotel.api.dependencies import get_db, validated_person_payload
from hotel.core.database import PEOPLE_COLLECTION
from hotel.core.exceptions import BadRequestError, PersistenceError
from hotel.models.person import Person, PersonCreate
from hotel.utils.validators import INVALID_WORK_TYPE, parse_work_type

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/person", tags=["person"])

# Stored documents that no longer fit the schema are reported like driver failures.
DECODE_ERRORS = (PyMongoError, ValidationError)


def _people(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[PEOPLE_COLLECTION]


@router.post("", response_model=Person, response_model_exclude_none=True)
async def create_person(
    payload: dict = Depends(validated_person_payload),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> Person:
    """Register a staff member."""

    try:
        document = PersonCreate.model_validate(payload).to_document()
        result = await _people(db).insert_one(document)
        document["_id"] = result.inserted_id
        person = Person.from_document(document)
    except DECODE_ERRORS as exc:
        raise PersistenceError.from_exception("Internal Server Error", exc) from exc

    logger.info("Data saved successfully: %s", person.id)
    return person


@router.get("", response_model=List[Person], response_model_exclude_none=True)
async def list_people(db: AsyncIOMotorDatabase = Depends(get_db)) -> List[Person]:
    try:
        documents = await _people(db).find().to_list(length=None)
        return [Person.from_document(doc) for doc in documents]
    except DECODE_ERRORS as exc:
        raise PersistenceError.from_exception("Error fetching people", exc) from exc


@router.get("/{work_type}", response_model=List[Person], response_model_exclude_none=True)
async def list_people_by_work(work_type: str, db: AsyncIOMotorDatabase = Depends(get_db)) -> List[Person]:
    """List staff with the given role: chef, waiter or manager."""

    work = parse_work_type(work_type)
    if work is None:
        raise BadRequestError(INVALID_WORK_TYPE)

    try:
        documents = await _people(db).find({"work": work.value}).to_list(length=None)
        return [Person.from_document(doc) for doc in documents]
    except DECODE_ERRORS as exc:
        raise PersistenceError.from_exception("Error fetching data", exc) from exc
