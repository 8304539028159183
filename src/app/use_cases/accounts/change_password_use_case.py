"""
Change Password Use Case
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.password_policy import DEFAULT_MIN_LENGTH, validate_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent
from .dtos import ChangePasswordResponse

logger = logging.getLogger(__name__)


class ChangePasswordUseCase:
    """
    Use case for changing a known password.

    Business Rules:
    - Current password must verify against the stored hash
    - New password must meet the password policy
    - Login lockout state is left untouched
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        password_min_length: int = DEFAULT_MIN_LENGTH,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.password_min_length = password_min_length

    async def execute(
        self, account_id: UUID, current_password: str, new_password: str
    ) -> Result[ChangePasswordResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            if not self.password_hasher.verify(current_password, account.password_hash):
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Current password is incorrect")
                )

            password_validation = validate_password(new_password, self.password_min_length)
            if password_validation.is_err():
                return Return.err(password_validation.error)

            account.password_hash = self.password_hasher.hash(new_password)
            account.updated_at = utc_now()
            await self.uow.accounts.update(account)

            await self.uow.audit_events.create(
                AuditEvent(account_id=account.id, action="password_changed")
            )

            await self.uow.commit()

            logger.info("Password changed for account %s", account.id)
            return Return.ok(
                ChangePasswordResponse(status="success", message="Password changed successfully")
            )
