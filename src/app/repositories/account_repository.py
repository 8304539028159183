from abc import ABC, abstractmethod
from datetime import datetime
from typing import Collection, List, Optional
from uuid import UUID

from src.domain.entities import Account


class IAccountRepository(ABC):
    """Account repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        pass

    @abstractmethod
    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        pass

    @abstractmethod
    async def exists_by_email(self, email: str) -> bool:
        """Check whether an account already uses this email"""
        pass

    @abstractmethod
    async def list_all(self) -> List[Account]:
        """List every account"""
        pass

    @abstractmethod
    async def search_by_name(self, name: str) -> List[Account]:
        """Case-insensitive partial match on account name"""
        pass

    @abstractmethod
    async def list_active_by_role(self, role_id: UUID) -> List[Account]:
        """List active accounts holding the given role"""
        pass

    @abstractmethod
    async def count_active_by_roles(
        self, role_ids: Collection[UUID], exclude_account_id: Optional[UUID] = None
    ) -> int:
        """Count active accounts holding any of the given roles"""
        pass

    @abstractmethod
    async def create(self, account: Account) -> Account:
        """Create a new account"""
        pass

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Update existing account"""
        pass

    @abstractmethod
    async def increment_failed_login(self, account: Account) -> int:
        """
        Add one to the failure counter in a single statement.

        Reloads the account and returns the counter as stored, so
        concurrent failures are never lost.
        """
        pass

    @abstractmethod
    async def lock_until(self, account: Account, locked_until: datetime, now: datetime) -> bool:
        """
        Lock the account unless a lock is already running at now.

        Returns True only for the call that applied the lock.
        """
        pass
