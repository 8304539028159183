"""
Confirm Password Reset Use Case

Redeems a reset token and replaces the account password.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.clock import Clock
from src.app.services.password_hasher import PasswordHasher
from src.app.services.password_policy import DEFAULT_MIN_LENGTH, validate_password
from src.app.services.token_generator import hash_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import AuditEvent
from src.domain.security import PasswordResetLifecycle, ResetTokenState, errors
from .dtos import ConfirmPasswordResetResponse

logger = logging.getLogger(__name__)


class ConfirmPasswordResetUseCase:
    """
    Use case for confirming password reset.

    Business Rules:
    - Token is validated by hashing and comparing with stored hash
    - A used token is rejected before expiry is considered
    - Token must not be expired
    - New password must meet the password policy
    - The used flag is claimed with a conditional update, so a token is
      redeemed at most once even under concurrent requests
    - Password hash and used flag are committed together
    - Audit event created for security tracking
    """

    def __init__(
        self,
        uow: UnitOfWork,
        password_hasher: PasswordHasher,
        clock: Clock,
        password_min_length: int = DEFAULT_MIN_LENGTH,
        lifecycle: PasswordResetLifecycle = None,
    ):
        self.uow = uow
        self.password_hasher = password_hasher
        self.clock = clock
        self.password_min_length = password_min_length
        self.lifecycle = lifecycle or PasswordResetLifecycle()

    async def execute(self, token: str, new_password: str) -> Result[ConfirmPasswordResetResponse]:
        """
        Execute confirm password reset use case.

        Args:
            token: Password reset token (plain text as delivered)
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - INVALID_PASSWORD: Password does not meet the policy
            - INVALID_TOKEN: Token not found
            - TOKEN_ALREADY_USED: Token has already been used
            - TOKEN_EXPIRED: Token has expired
            - ACCOUNT_NOT_FOUND: Token points at a missing account
        """
        async with self.uow:
            password_validation = validate_password(new_password, self.password_min_length)
            if password_validation.is_err():
                return Return.err(password_validation.error)

            reset_token = await self.uow.password_reset_tokens.get_by_token_hash(
                hash_token(token)
            )

            if reset_token is None:
                return Return.err(
                    Error(
                        "INVALID_TOKEN",
                        "Invalid or expired password reset token",
                    )
                )

            redeemed = self.lifecycle.redeem(
                ResetTokenState.from_token(reset_token), self.clock.now()
            )
            if redeemed.is_err():
                return Return.err(redeemed.error)

            account = await self.uow.accounts.get_by_id(reset_token.account_id)
            if account is None:
                return Return.err(
                    Error(
                        "ACCOUNT_NOT_FOUND",
                        "Account not found",
                    )
                )

            # Claim the token before any other write; a concurrent redemption
            # that read the same unused row loses here
            if not await self.uow.password_reset_tokens.mark_used(reset_token.id):
                logger.warning("Concurrent redemption of reset token %s refused", reset_token.id)
                return Return.err(errors.token_already_used())

            account.password_hash = self.password_hasher.hash(new_password)
            account.updated_at = utc_now()
            await self.uow.accounts.update(account)

            await self.uow.audit_events.create(
                AuditEvent(
                    account_id=account.id,
                    action="password_reset_confirmed",
                    event_metadata={"token_id": str(reset_token.id)},
                )
            )

            await self.uow.commit()

            logger.info("Password reset completed for account %s", account.id)

            return Return.ok(
                ConfirmPasswordResetResponse(
                    status="success",
                    message="Password has been reset successfully",
                )
            )
