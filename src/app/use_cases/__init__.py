"""
Use Cases

Organized into domain folders:
- auth/: Login lockout and password recovery
- accounts/: Account administration
- roles/: Role directory
"""

from .auth import (
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
)
from .accounts import (
    CreateAccountUseCase,
    GetAccountUseCase,
    ListAccountsUseCase,
    UpdateAccountUseCase,
    ChangePasswordUseCase,
    ChangeAccountStatusUseCase,
    GetAuditTrailUseCase,
)
from .roles import (
    CreateRoleUseCase,
    ListRolesUseCase,
)

__all__ = [
    # Auth
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    # Accounts
    "CreateAccountUseCase",
    "GetAccountUseCase",
    "ListAccountsUseCase",
    "UpdateAccountUseCase",
    "ChangePasswordUseCase",
    "ChangeAccountStatusUseCase",
    "GetAuditTrailUseCase",
    # Roles
    "CreateRoleUseCase",
    "ListRolesUseCase",
]
