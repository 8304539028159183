"""
Login Use Case

Authenticates an account and maintains its failed-login lockout state.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.clock import Clock
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent
from src.domain.security import MAX_FAILED_ATTEMPTS, LoginAttemptTracker, LoginState
from .dtos import LoginResponse

logger = logging.getLogger(__name__)


class LoginUseCase:
    """
    Use case for account login.

    Business Rules:
    - Locked accounts are refused before the password is checked, so a
      locked account never reveals whether a guess was right
    - Constant-time password comparison to prevent timing attacks
    - Every wrong password increments the failure counter in the database,
      so parallel guesses cannot overwrite each other's increments
    - The 5th consecutive failure locks the account for 15 minutes
    - Account must be active
    - Success resets the counter, clears any lock and records last access
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        clock: Clock,
        tracker: LoginAttemptTracker = None,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.clock = clock
        self.tracker = tracker or LoginAttemptTracker()

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: Account email
            password: Plain text password

        Returns:
            Result with LoginResponse, or Error

        Errors:
            - INVALID_CREDENTIALS: Unknown email or wrong password
            - ACCOUNT_LOCKED: Too many failed attempts, lock still running
            - ACCOUNT_DISABLED: Account is deactivated
        """
        async with self.uow:
            now = self.clock.now()

            account = await self.uow.accounts.get_by_email(email)

            if account is None:
                # Hash dummy password to maintain constant time
                self.password_hasher.burn()
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            state = LoginState.from_account(account)

            # Gate before credential comparison
            if self.tracker.is_locked(state, now):
                logger.info("Login refused for locked account %s", account.id)
                return Return.err(
                    Error(
                        "ACCOUNT_LOCKED",
                        f"Account is locked until {state.locked_until.isoformat()}",
                    )
                )

            if not self.password_hasher.verify(password, account.password_hash):
                # Concurrent failures each see their own increment
                count = await self.uow.accounts.increment_failed_login(account)
                outcome = self.tracker.record_failure(
                    state.model_copy(update={"failed_login_count": count - 1}), now
                )

                await self.uow.audit_events.create(
                    AuditEvent(
                        account_id=account.id,
                        action="login_failed",
                        event_metadata={"failed_login_count": count},
                    )
                )

                just_locked = False
                if outcome.just_locked:
                    just_locked = await self.uow.accounts.lock_until(
                        account, outcome.state.locked_until, now
                    )

                if just_locked:
                    logger.warning(
                        "Account %s locked after %d failed login attempts",
                        account.id,
                        count,
                    )
                    await self.uow.audit_events.create(
                        AuditEvent(
                            account_id=account.id,
                            action="account_locked",
                            event_metadata={
                                "threshold": MAX_FAILED_ATTEMPTS,
                                "locked_until": outcome.state.locked_until.isoformat(),
                            },
                        )
                    )

                await self.uow.commit()

                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email or password")
                )

            if not account.active:
                return Return.err(
                    Error("ACCOUNT_DISABLED", "Account is disabled")
                )

            role = await self.uow.roles.get_by_id(account.role_id)

            self.tracker.record_success(state, now).apply_to(account)
            account.updated_at = utc_now()
            await self.uow.accounts.update(account)

            await self.uow.audit_events.create(
                AuditEvent(
                    account_id=account.id,
                    action="login_succeeded",
                    event_metadata={"email": email},
                )
            )

            await self.uow.commit()

            return Return.ok(
                LoginResponse(
                    account_id=str(account.id),
                    name=account.name,
                    email=account.email,
                    role=role.name if role else "",
                    last_access_at=account.last_access_at,
                )
            )
