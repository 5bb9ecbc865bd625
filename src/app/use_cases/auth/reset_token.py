"""
Reset token primitives.

The cleartext token is 32 random bytes (hex) followed by the user id. The id
suffix is not secret; the random part is the only source of entropy. Only the
SHA-256 digest of the cleartext is ever persisted.
"""

import hashlib
import secrets
from uuid import UUID

RESET_TOKEN_BYTES = 32


def generate_reset_token(user_id: UUID) -> str:
    return secrets.token_bytes(RESET_TOKEN_BYTES).hex() + str(user_id)


def hash_reset_token(token: str) -> str:
    return hashlib.sha256(token.encode("utf-8")).hexdigest()
