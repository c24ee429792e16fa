"""Restaurant menu endpoints."""
from __future__ import annotations

import logging
from typing import Any, List

from bson import ObjectId
from bson.errors import BSONError
from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorCollection, AsyncIOMotorDatabase
from pydantic import ValidationError
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from hotel.api.dependencies import get_db, read_json_body
from hotel.core.database import MENU_COLLECTION
from hotel.core.exceptions import NotFoundError, PersistenceError
from hotel.models.menu import DeleteMenuItemResponse, MenuItem, MenuItemCreate, MenuItemUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/menu", tags=["menu"])

NOT_FOUND = "Menu item not found"

# Malformed identifiers and stored documents that no longer fit the schema
# are reported like driver failures.
DRIVER_ERRORS = (PyMongoError, BSONError, ValidationError)


def _menu(db: AsyncIOMotorDatabase) -> AsyncIOMotorCollection:
    return db[MENU_COLLECTION]


def _require(document: dict | None) -> MenuItem:
    if document is None:
        raise NotFoundError(NOT_FOUND)
    return MenuItem.from_document(document)


@router.post("", response_model=MenuItem, status_code=status.HTTP_201_CREATED)
async def create_menu_item(
    payload: Any = Depends(read_json_body),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> MenuItem:
    """Add a dish or drink to the menu.

    Only the schema's required, enum and default rules apply here; unlike
    staff registration there is no request-level gate.
    """

    try:
        document = MenuItemCreate.model_validate(payload).to_document()
        result = await _menu(db).insert_one(document)
        document["_id"] = result.inserted_id
        return MenuItem.from_document(document)
    except DRIVER_ERRORS as exc:
        raise PersistenceError.from_exception("Error saving menu item", exc) from exc


@router.get("", response_model=List[MenuItem])
async def list_menu_items(db: AsyncIOMotorDatabase = Depends(get_db)) -> List[MenuItem]:
    try:
        documents = await _menu(db).find().to_list(length=None)
        return [MenuItem.from_document(doc) for doc in documents]
    except DRIVER_ERRORS as exc:
        raise PersistenceError.from_exception("Error fetching menu items", exc) from exc


@router.get("/{item_id}", response_model=MenuItem)
async def get_menu_item(item_id: str, db: AsyncIOMotorDatabase = Depends(get_db)) -> MenuItem:
    try:
        document = await _menu(db).find_one({"_id": ObjectId(item_id)})
        return _require(document)
    except DRIVER_ERRORS as exc:
        raise PersistenceError.from_exception("Error fetching menu item", exc) from exc


@router.put("/{item_id}", response_model=MenuItem)
async def update_menu_item(
    item_id: str,
    payload: Any = Depends(read_json_body),
    db: AsyncIOMotorDatabase = Depends(get_db),
) -> MenuItem:
    """Replace the supplied fields and return the updated item."""

    collection = _menu(db)
    try:
        query = {"_id": ObjectId(item_id)}
        changes = MenuItemUpdate.model_validate(payload).to_update()
        if changes:
            document = await collection.find_one_and_update(
                query, {"$set": changes}, return_document=ReturnDocument.AFTER
            )
        else:
            document = await collection.find_one(query)
        return _require(document)
    except DRIVER_ERRORS as exc:
        raise PersistenceError.from_exception("Error updating menu item", exc) from exc


@router.delete("/{item_id}", response_model=DeleteMenuItemResponse)
async def delete_menu_item(item_id: str, db: AsyncIOMotorDatabase = Depends(get_db)) -> DeleteMenuItemResponse:
    try:
        document = await _menu(db).find_one_and_delete({"_id": ObjectId(item_id)})
        deleted = _require(document)
    except DRIVER_ERRORS as exc:
        raise PersistenceError.from_exception("Error deleting menu item", exc) from exc

    logger.info("Deleted menu item %s", deleted.id)
    return DeleteMenuItemResponse(message="Menu item deleted successfully", deletedItem=deleted)
