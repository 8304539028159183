"""
Create Account Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.password_hasher import PasswordHasher
from src.app.services.password_policy import DEFAULT_MIN_LENGTH, validate_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Account, AuditEvent
from .dtos import AccountResponse, CreateAccountCommand

logger = logging.getLogger(__name__)


class CreateAccountUseCase:
    """
    Use case for creating an account.

    Business Rules:
    - Email must be unique
    - Role must exist and be active
    - Password must meet the password policy and is stored hashed
    - New accounts start active with a clean login state
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

    async def execute(self, command: CreateAccountCommand) -> Result[AccountResponse]:
        async with self.uow:
            logger.info("Creating account for %s", command.email)

            if await self.uow.accounts.exists_by_email(command.email):
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "An account with this email already exists")
                )

            password_validation = validate_password(command.password, self.password_min_length)
            if password_validation.is_err():
                return Return.err(password_validation.error)

            role = await self.uow.roles.get_by_id(command.role_id)
            if role is None:
                return Return.err(Error("ROLE_NOT_FOUND", "Role not found"))
            if not role.active:
                return Return.err(Error("ROLE_INACTIVE", "Role is not active"))

            account = Account(
                name=command.name,
                email=command.email,
                password_hash=self.password_hasher.hash(command.password),
                role_id=role.id,
                active=True,
            )
            account = await self.uow.accounts.create(account)

            await self.uow.audit_events.create(
                AuditEvent(
                    account_id=account.id,
                    action="account_created",
                    event_metadata={"email": account.email, "role": role.name},
                )
            )

            await self.uow.commit()

            logger.info("Account created: %s", account.id)
            return Return.ok(AccountResponse.from_entity(account, role))
