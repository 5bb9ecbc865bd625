from abc import ABC, abstractmethod


class IPasswordHasher(ABC):
    """One-way adaptive password hashing - application layer"""

    @abstractmethod
    async def hash(self, password: str) -> str:
        """Hash a plaintext password with a fresh salt"""
        pass

    @abstractmethod
    async def verify(self, password: str, password_hash: str) -> bool:
        """
        Compare a plaintext password with a stored hash.

        Returns False on mismatch and on malformed hashes, never raises.
        """
        pass
