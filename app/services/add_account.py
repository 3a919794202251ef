"""AddAccount use case backed by a Hasher and an AddAccountRepository.

Usage:
    add_account = DbAddAccount(BcryptAdapter(12), AccountMongoRepository(conn))
    account = await add_account.execute(AddAccountInput(name=..., email=..., password=...))
"""

from loguru import logger

from app.models import Account, AddAccountInput
from app.protocols import AddAccount, AddAccountRepository, Hasher


class DbAddAccount(AddAccount):
    def __init__(self, hasher: Hasher, add_account_repository: AddAccountRepository):
        self.hasher = hasher
        self.add_account_repository = add_account_repository

    async def execute(self, data: AddAccountInput) -> Account:
        hashed_password = await self.hasher.hash(data.password)
        account = await self.add_account_repository.add(
            data.model_copy(update={"password": hashed_password})
        )
        logger.info("Account {} created for {}", account.id, account.email)
        return account
