"""
Account security state machine.

Pure decision logic over immutable snapshots. Nothing here performs I/O or
reads the clock: callers pass "now" in and persist whatever comes back.
"""

from .admin_guard import AdminGuard
from .capabilities import ADMIN_ROLE_NAMES, resolve_capabilities
from .login_attempts import (
    LOCKOUT_DURATION,
    MAX_FAILED_ATTEMPTS,
    FailureOutcome,
    LoginAttemptTracker,
    LoginState,
)
from .password_reset import PasswordResetLifecycle, ResetTokenState

__all__ = [
    "AdminGuard",
    "ADMIN_ROLE_NAMES",
    "resolve_capabilities",
    "LOCKOUT_DURATION",
    "MAX_FAILED_ATTEMPTS",
    "FailureOutcome",
    "LoginAttemptTracker",
    "LoginState",
    "PasswordResetLifecycle",
    "ResetTokenState",
]
