"""
Update Account Use Case

Changes profile fields and role of an account.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent
from src.domain.security import AdminGuard
from .admin_count import count_other_active_admins
from .dtos import AccountResponse, UpdateAccountCommand

logger = logging.getLogger(__name__)


class UpdateAccountUseCase:
    """
    Use case for updating an account.

    Business Rules:
    - Email uniqueness is checked only when the email changes
    - New role must exist and be active
    - Moving an administrator to a role without the administer capability
      is a demotion and must leave another active administrator behind
    - Nothing is written when any rule fails
    """

    def __init__(self, uow: UnitOfWork, admin_guard: AdminGuard = None):
        self.uow = uow
        self.admin_guard = admin_guard or AdminGuard()

    async def execute(
        self, account_id: UUID, command: UpdateAccountCommand
    ) -> Result[AccountResponse]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            if command.email != account.email:
                if await self.uow.accounts.exists_by_email(command.email):
                    return Return.err(
                        Error("EMAIL_ALREADY_EXISTS", "Email is already in use")
                    )

            current_role = await self.uow.roles.get_by_id(account.role_id)
            new_role = current_role

            if command.role_id != account.role_id:
                new_role = await self.uow.roles.get_by_id(command.role_id)
                if new_role is None:
                    return Return.err(Error("ROLE_NOT_FOUND", "Role not found"))
                if not new_role.active:
                    return Return.err(Error("ROLE_INACTIVE", "Role is not active"))

                is_demotion = (
                    current_role is not None
                    and current_role.is_admin
                    and not new_role.is_admin
                )
                if is_demotion and account.active:
                    other_admins = await count_other_active_admins(self.uow, account.id)
                    guard = self.admin_guard.check_can_deactivate_or_demote(
                        current_role, other_admins
                    )
                    if guard.is_err():
                        logger.warning("Refused to demote last administrator %s", account.id)
                        return Return.err(guard.error)

            changes = {}
            if command.name != account.name:
                changes["name"] = command.name
            if command.email != account.email:
                changes["email"] = command.email
            if new_role is not None and new_role.id != account.role_id:
                changes["role"] = new_role.name

            account.name = command.name
            account.email = command.email
            account.role_id = command.role_id
            account.updated_at = utc_now()
            account = await self.uow.accounts.update(account)

            await self.uow.audit_events.create(
                AuditEvent(
                    account_id=account.id,
                    action="account_updated",
                    event_metadata={"changes": changes},
                )
            )

            await self.uow.commit()

            return Return.ok(AccountResponse.from_entity(account, new_role))
