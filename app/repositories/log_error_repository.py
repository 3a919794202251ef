"""Server error log in the ``errors`` collection."""

from ..database import MongoConnection
from ..models import ErrorLog
from ..protocols import LogErrorRepository

ERRORS_COLLECTION = "errors"


class LogErrorMongoRepository(LogErrorRepository):
    def __init__(self, connection: MongoConnection):
        self.connection = connection

    async def log(self, stack: str) -> None:
        collection = self.connection.get_collection(ERRORS_COLLECTION)
        await collection.insert_one(ErrorLog(stack=stack).model_dump())
