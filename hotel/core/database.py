"""Database connectivity layer for the hotel API."""

from __future__ import annotations

import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from hotel.core.config import settings
from hotel.core.exceptions import DatabaseUnavailableError

logger = logging.getLogger(__name__)

PEOPLE_COLLECTION = "people"
MENU_COLLECTION = "menuitems"


class DatabaseManager:
    """Owns the MongoDB client for the lifetime of the process."""

    def __init__(self, url: Optional[str] = None, database_name: Optional[str] = None) -> None:
        self.url = url or str(settings.MONGODB_URL)
        self.database_name = database_name or settings.MONGODB_DATABASE
        self.mongodb: Optional[AsyncIOMotorClient] = None

    async def initialize(self) -> None:
        """Open the client and make sure the collection indexes exist."""

        logger.info("Connecting to MongoDB database %s", self.database_name)
        self.mongodb = AsyncIOMotorClient(self.url, serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS)

        try:
            await self.database[PEOPLE_COLLECTION].create_index([("email", ASCENDING)], unique=True)
        except PyMongoError as exc:
            # The server may come up after us; requests will surface the failure.
            logger.warning("Could not ensure unique email index: %s", exc)
        else:
            logger.info("Database manager initialized")

    async def close(self) -> None:
        if self.mongodb is not None:
            logger.info("Closing MongoDB connection")
            self.mongodb.close()
            self.mongodb = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        if self.mongodb is None:
            raise DatabaseUnavailableError("Database connection is not initialized")
        return self.mongodb[self.database_name]


# Singleton instance shared by the request handlers
database_manager = DatabaseManager()
