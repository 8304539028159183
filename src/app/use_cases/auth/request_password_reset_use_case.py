"""
Request Password Reset Use Case

Handles generating and delivering password reset tokens.
"""

import logging

from libs.result import Result, Return
from src.app.services.clock import Clock
from src.app.services.reset_notifier import PasswordResetNotifier
from src.app.services.token_generator import TokenGenerator, hash_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import AuditEvent, PasswordResetToken
from src.domain.security import PasswordResetLifecycle
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)

SENT_MESSAGE = "If the email exists, a password reset link has been sent"


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Token value comes from the token generator, only its SHA-256 is stored
    - Expiry window (hours) is supplied by configuration
    - No email enumeration (same response for valid/invalid emails)
    - Earlier outstanding tokens of the account stay valid
    - Audit event created for security tracking
    """

    def __init__(
        self,
        uow: UnitOfWork,
        token_generator: TokenGenerator,
        notifier: PasswordResetNotifier,
        clock: Clock,
        valid_hours: int,
        lifecycle: PasswordResetLifecycle = None,
    ):
        self.uow = uow
        self.token_generator = token_generator
        self.notifier = notifier
        self.clock = clock
        self.valid_hours = valid_hours
        self.lifecycle = lifecycle or PasswordResetLifecycle()

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: Account email address

        Returns:
            Result with reset status, or Error

        Errors:
            - INVALID_CONFIGURATION: Configured validity is not a positive
              number of hours (reported whether or not the email exists)
        """
        validation = self.lifecycle.validate_valid_hours(self.valid_hours)
        if validation.is_err():
            logger.error("Password reset misconfigured: %s", validation.error.message)
            return Return.err(validation.error)

        async with self.uow:
            account = await self.uow.accounts.get_by_email(email)

            if account is None:
                return Return.ok(
                    RequestPasswordResetResponse(status="sent", message=SENT_MESSAGE)
                )

            now = self.clock.now()
            plain_token = self.token_generator.generate()

            issued = self.lifecycle.issue_token(
                account.id, hash_token(plain_token), self.valid_hours, now
            )
            if issued.is_err():
                return Return.err(issued.error)

            state = issued.value
            reset_token = PasswordResetToken(
                account_id=state.account_id,
                token_hash=state.token_hash,
                used=state.used,
                expires_at=state.expires_at,
                created_at=state.created_at,
            )
            await self.uow.password_reset_tokens.create(reset_token)

            await self.uow.audit_events.create(
                AuditEvent(
                    account_id=account.id,
                    action="password_reset_requested",
                    event_metadata={
                        "token_id": str(reset_token.id),
                        "expires_at": state.expires_at.isoformat(),
                    },
                )
            )

            await self.uow.commit()
            logger.info(
                "Password reset token issued for account %s, expires %s",
                account.id,
                state.expires_at.isoformat(),
            )

            # Deliver only once the token is durable
            await self.notifier.send_reset_token(account, plain_token, state.expires_at)

            return Return.ok(
                RequestPasswordResetResponse(status="sent", message=SENT_MESSAGE)
            )
