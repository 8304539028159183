"""
Failed-login counting and temporary lockout.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

MAX_FAILED_ATTEMPTS = 5
LOCKOUT_DURATION = timedelta(minutes=15)


class LoginState(BaseModel):
    """Snapshot of the login-security fields of an account"""

    model_config = ConfigDict(frozen=True)

    failed_login_count: int = Field(default=0, ge=0)
    locked_until: Optional[datetime] = None
    last_access_at: Optional[datetime] = None

    @classmethod
    def from_account(cls, account) -> "LoginState":
        return cls(
            failed_login_count=account.failed_login_count or 0,
            locked_until=account.locked_until,
            last_access_at=account.last_access_at,
        )

    def apply_to(self, account) -> None:
        account.failed_login_count = self.failed_login_count
        account.locked_until = self.locked_until
        account.last_access_at = self.last_access_at


class FailureOutcome(BaseModel):
    model_config = ConfigDict(frozen=True)

    state: LoginState
    just_locked: bool


class LoginAttemptTracker:
    """
    Decides, for every login outcome, the next login state of an account.

    State machine:
    - failure below threshold: counter + 1
    - failure reaching the threshold (or beyond): counter + 1, locked for
      LOCKOUT_DURATION from now (re-locking extends, never stacks)
    - success: counter 0, lock cleared, last access = now
    - lock expiry is implicit: is_locked compares against now, the counter
      is kept until the next success
    """

    def is_locked(self, state: LoginState, now: datetime) -> bool:
        return state.locked_until is not None and now < state.locked_until

    def record_success(self, state: LoginState, now: datetime) -> LoginState:
        return state.model_copy(
            update={"failed_login_count": 0, "locked_until": None, "last_access_at": now}
        )

    def record_failure(self, state: LoginState, now: datetime) -> FailureOutcome:
        was_locked = self.is_locked(state, now)
        count = state.failed_login_count + 1

        locked_until = state.locked_until
        if count >= MAX_FAILED_ATTEMPTS:
            locked_until = now + LOCKOUT_DURATION

        next_state = state.model_copy(
            update={"failed_login_count": count, "locked_until": locked_until}
        )
        just_locked = not was_locked and self.is_locked(next_state, now)
        return FailureOutcome(state=next_state, just_locked=just_locked)
