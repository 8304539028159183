"""
Change Account Status Use Case

Activates or deactivates an account.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent
from src.domain.security import AdminGuard
from .admin_count import count_other_active_admins
from .dtos import AccountStatusResponse

logger = logging.getLogger(__name__)


class ChangeAccountStatusUseCase:
    """
    Use case for activating/deactivating an account.

    Business Rules:
    - Activation is always allowed
    - Deactivating the last active administrator fails with
      LAST_ADMIN_PROTECTED and changes nothing
    """

    def __init__(self, uow: UnitOfWork, admin_guard: AdminGuard = None):
        self.uow = uow
        self.admin_guard = admin_guard or AdminGuard()

    async def execute(self, account_id: UUID, active: bool) -> Result[AccountStatusResponse]:
        async with self.uow:
            logger.info("Changing status of account %s to active=%s", account_id, active)

            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            if not active and account.active:
                role = await self.uow.roles.get_by_id(account.role_id)
                if role is not None:
                    other_admins = await count_other_active_admins(self.uow, account.id)
                    guard = self.admin_guard.check_can_deactivate_or_demote(role, other_admins)
                    if guard.is_err():
                        logger.warning(
                            "Refused to deactivate last administrator %s", account.id
                        )
                        return Return.err(guard.error)

            previous = account.active
            account.active = active
            account.updated_at = utc_now()
            await self.uow.accounts.update(account)

            await self.uow.audit_events.create(
                AuditEvent(
                    account_id=account.id,
                    action="account_status_changed",
                    event_metadata={"previous": previous, "active": active},
                )
            )

            await self.uow.commit()

            message = "Account activated" if active else "Account deactivated"
            return Return.ok(AccountStatusResponse(status="updated", message=message))
