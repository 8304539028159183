"""
Account Security Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import Capability

# Export all entities
from .role import Role
from .account import Account
from .password_reset_token import PasswordResetToken
from .audit_event import AuditEvent

__all__ = [
    # Enums
    "Capability",
    # Entities
    "Role",
    "Account",
    "PasswordResetToken",
    "AuditEvent",
]
