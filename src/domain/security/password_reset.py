"""
Password reset token issuance and redemption.
"""

from datetime import datetime, timedelta
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from libs.result import Result, Return
from . import errors


class ResetTokenState(BaseModel):
    """Snapshot of a reset token's validity fields"""

    model_config = ConfigDict(frozen=True)

    account_id: UUID
    token_hash: str
    expires_at: datetime
    used: bool = False
    created_at: datetime

    @classmethod
    def from_token(cls, token) -> "ResetTokenState":
        return cls(
            account_id=token.account_id,
            token_hash=token.token_hash,
            expires_at=token.expires_at,
            used=token.used,
            created_at=token.created_at,
        )


class PasswordResetLifecycle:
    """
    Single-use, time-bounded password reset tokens.

    Business Rules:
    - Expiry window is chosen by the caller, in whole positive hours
    - Redeemable iff not used and now is strictly before expiry
    - A used token reports TOKEN_ALREADY_USED even once it has also expired
    - Issuing a token does not touch other tokens of the same account
    """

    def validate_valid_hours(self, valid_hours) -> Result[None]:
        # bool is an int subclass
        if isinstance(valid_hours, bool) or not isinstance(valid_hours, int) or valid_hours <= 0:
            return Return.err(
                errors.invalid_configuration(
                    f"Reset token validity must be a positive number of hours, got {valid_hours!r}"
                )
            )
        return Return.ok(None)

    def issue_token(
        self, account_id: UUID, token_hash: str, valid_hours: int, now: datetime
    ) -> Result[ResetTokenState]:
        validation = self.validate_valid_hours(valid_hours)
        if validation.is_err():
            return Return.err(validation.error)

        return Return.ok(
            ResetTokenState(
                account_id=account_id,
                token_hash=token_hash,
                expires_at=now + timedelta(hours=valid_hours),
                used=False,
                created_at=now,
            )
        )

    def is_redeemable(self, state: ResetTokenState, now: datetime) -> bool:
        return not state.used and now < state.expires_at

    def redeem(self, state: ResetTokenState, now: datetime) -> Result[ResetTokenState]:
        if state.used:
            return Return.err(errors.token_already_used())

        if now >= state.expires_at:
            return Return.err(errors.token_expired())

        return Return.ok(state.model_copy(update={"used": True}))
