"""Password hashing backed by bcrypt."""

import asyncio

import bcrypt


class BcryptHasher:
    """Implements both ``HashGenerator`` and ``HashComparer``.

    bcrypt is CPU bound, so each call runs in a worker thread.
    """

    def __init__(self, rounds: int = 12):
        self.rounds = rounds

    async def hash(self, plain: str) -> str:
        return await asyncio.to_thread(self._hash, plain)

    async def compare(self, plain: str, hashed: str) -> bool:
        return await asyncio.to_thread(self._compare, plain, hashed)

    def _hash(self, plain: str) -> str:
        return bcrypt.hashpw(
            plain.encode("utf-8"), bcrypt.gensalt(rounds=self.rounds)
        ).decode("utf-8")

    @staticmethod
    def _compare(plain: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(plain.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
