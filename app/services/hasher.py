"""Password hashing with bcrypt.

bcrypt is CPU-bound on purpose, so hashing runs in a worker thread to
keep the event loop free for other requests.
"""

import asyncio

import bcrypt

from app.protocols import Hasher


class BcryptAdapter(Hasher):
    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    async def hash(self, value: str) -> str:
        return await asyncio.to_thread(self._hash_sync, value)

    def _hash_sync(self, value: str) -> str:
        # bcrypt only looks at the first 72 bytes; newer releases raise instead
        secret = value.encode("utf-8")[:72]
        return bcrypt.hashpw(secret, bcrypt.gensalt(rounds=self.rounds)).decode("utf-8")
