"""MongoDB connection handle.

One MongoConnection is opened in the app lifespan, stored on
``app.state.mongo`` and handed to repositories explicitly. Nothing
imports a live client as a module global.
"""

from typing import Any

from fastapi import Request
from loguru import logger
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase


class MongoConnection:
    def __init__(self):
        self.client: AsyncMongoClient | None = None
        self.db: AsyncDatabase | None = None

    @property
    def is_connected(self) -> bool:
        return self.client is not None

    async def connect(self, url: str, db_name: str, timeout_ms: int = 5000) -> None:
        if self.client is not None:
            return
        self.client = AsyncMongoClient(url, serverSelectionTimeoutMS=timeout_ms, tz_aware=True)
        self.db = self.client[db_name]
        logger.info("MongoDB client created for database {}", db_name)

    async def disconnect(self) -> None:
        if self.client is None:
            return
        await self.client.close()
        self.client = None
        self.db = None
        logger.info("MongoDB client closed")

    def get_collection(self, name: str) -> AsyncCollection:
        if self.db is None:
            raise RuntimeError("MongoDB is not connected — call connect() first")
        return self.db[name]

    async def ping(self) -> bool:
        """Return True if the server answers a ping."""
        if self.client is None:
            return False
        try:
            await self.client.admin.command("ping")
            return True
        except Exception as e:
            logger.warning("MongoDB ping failed: {}", e)
            return False

    @staticmethod
    def map_document(document: dict[str, Any]) -> dict[str, Any]:
        """Replace Mongo's ``_id`` with a string ``id``."""
        mapped = {k: v for k, v in document.items() if k != "_id"}
        mapped["id"] = str(document["_id"])
        return mapped


def get_db(request: Request) -> MongoConnection:
    return request.app.state.mongo
