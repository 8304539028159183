from abc import ABC, abstractmethod
from datetime import datetime

from src.domain.entities import Account


class PasswordResetNotifier(ABC):
    """Delivers a freshly issued reset token to the account holder"""

    @abstractmethod
    async def send_reset_token(self, account: Account, token: str, expires_at: datetime) -> None:
        pass
