from datetime import datetime
from typing import Collection, List, Optional
from uuid import UUID

from sqlalchemy import func, or_
from sqlmodel import col, select, update
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.account_repository import IAccountRepository
from src.domain.base import utc_now
from src.domain.entities import Account


class AccountRepository(IAccountRepository):
    """Account repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[Account]:
        """Get account by email address"""
        stmt = select(Account).where(Account.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, account_id: UUID) -> Optional[Account]:
        """Get account by ID"""
        stmt = select(Account).where(Account.id == account_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        """Check whether an account already uses this email"""
        return await self.get_by_email(email) is not None

    async def list_all(self) -> List[Account]:
        """List every account"""
        stmt = select(Account).order_by(Account.created_at)
        result = await self.session.exec(stmt)
        return list(result.all())

    async def search_by_name(self, name: str) -> List[Account]:
        """Case-insensitive partial match on account name"""
        stmt = (
            select(Account)
            .where(col(Account.name).ilike(f"%{name}%"))
            .order_by(Account.name)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def list_active_by_role(self, role_id: UUID) -> List[Account]:
        """List active accounts holding the given role"""
        stmt = (
            select(Account)
            .where(Account.role_id == role_id, Account.active == True)  # noqa: E712
            .order_by(Account.created_at)
        )
        result = await self.session.exec(stmt)
        return list(result.all())

    async def count_active_by_roles(
        self, role_ids: Collection[UUID], exclude_account_id: Optional[UUID] = None
    ) -> int:
        """Count active accounts holding any of the given roles"""
        if not role_ids:
            return 0

        stmt = select(func.count(Account.id)).where(
            col(Account.role_id).in_(list(role_ids)),
            Account.active == True,  # noqa: E712
        )
        if exclude_account_id is not None:
            stmt = stmt.where(Account.id != exclude_account_id)

        result = await self.session.exec(stmt)
        return result.one()

    async def create(self, account: Account) -> Account:
        """Create a new account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def update(self, account: Account) -> Account:
        """Update existing account"""
        self.session.add(account)
        await self.session.flush()
        await self.session.refresh(account)
        return account

    async def increment_failed_login(self, account: Account) -> int:
        """Counter arithmetic runs in the database, not on the loaded value"""
        stmt = (
            update(Account)
            .where(Account.id == account.id)
            .values(
                failed_login_count=Account.failed_login_count + 1,
                updated_at=utc_now(),
            )
            .execution_options(synchronize_session=False)
        )
        await self.session.execute(stmt)
        await self.session.flush()
        await self.session.refresh(account)
        return account.failed_login_count

    async def lock_until(self, account: Account, locked_until: datetime, now: datetime) -> bool:
        """Conditional update, so only one concurrent failure applies the lock"""
        stmt = (
            update(Account)
            .where(
                Account.id == account.id,
                or_(col(Account.locked_until).is_(None), col(Account.locked_until) <= now),
            )
            .values(locked_until=locked_until)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        await self.session.refresh(account)
        return result.rowcount == 1
