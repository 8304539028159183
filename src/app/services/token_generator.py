import hashlib
from abc import ABC, abstractmethod


class TokenGenerator(ABC):
    """Supplies unique, high-entropy opaque token values"""

    @abstractmethod
    def generate(self) -> str:
        pass


def hash_token(token: str) -> str:
    """SHA-256 digest under which a token value is stored and looked up"""
    return hashlib.sha256(token.encode()).hexdigest()
