import asyncio
import logging

import bcrypt

from src.app.services.password_hasher import IPasswordHasher

logger = logging.getLogger(__name__)

# bcrypt only looks at the first 72 bytes of a password
BCRYPT_MAX_BYTES = 72


def _to_bcrypt_bytes(password: str) -> bytes:
    return password.encode("utf-8")[:BCRYPT_MAX_BYTES]


class BcryptPasswordHasher(IPasswordHasher):
    """
    bcrypt implementation of IPasswordHasher.

    Hashing is CPU bound, so both operations run in a worker thread
    to keep the event loop serving other requests.
    """

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    async def hash(self, password: str) -> str:
        return await asyncio.to_thread(self._hash, password)

    async def verify(self, password: str, password_hash: str) -> bool:
        return await asyncio.to_thread(self._verify, password, password_hash)

    def _hash(self, password: str) -> str:
        hashed = bcrypt.hashpw(_to_bcrypt_bytes(password), bcrypt.gensalt(self.rounds))
        return hashed.decode("utf-8")

    def _verify(self, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_to_bcrypt_bytes(password), password_hash.encode("utf-8"))
        except (ValueError, TypeError, AttributeError):
            logger.warning("Stored password hash is malformed")
            return False
