from abc import ABC, abstractmethod


class PasswordHasher(ABC):
    """One-way credential hashing - plaintext never leaves this boundary"""

    @abstractmethod
    def hash(self, password: str) -> str:
        pass

    @abstractmethod
    def verify(self, password: str, password_hash: str) -> bool:
        pass

    @abstractmethod
    def burn(self) -> None:
        """Spend the cost of one verification without a stored hash"""
        pass
