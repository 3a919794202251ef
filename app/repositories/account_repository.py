"""Account persistence in the ``accounts`` collection."""

from ..database import MongoConnection
from ..models import Account, AddAccountInput
from ..protocols import AddAccountRepository

ACCOUNTS_COLLECTION = "accounts"


class AccountMongoRepository(AddAccountRepository):
    def __init__(self, connection: MongoConnection):
        self.connection = connection

    async def add(self, data: AddAccountInput) -> Account:
        collection = self.connection.get_collection(ACCOUNTS_COLLECTION)
        document = data.model_dump()
        result = await collection.insert_one(document)
        # insert_one sets _id on the dict it was given
        document.setdefault("_id", result.inserted_id)
        return Account(**MongoConnection.map_document(document))
