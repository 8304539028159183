"""
Account Administration Use Cases

Account lifecycle managed by administrators.
"""

from .create_account_use_case import CreateAccountUseCase
from .get_account_use_case import GetAccountUseCase
from .list_accounts_use_case import ListAccountsUseCase
from .update_account_use_case import UpdateAccountUseCase
from .change_password_use_case import ChangePasswordUseCase
from .change_account_status_use_case import ChangeAccountStatusUseCase
from .get_audit_trail_use_case import GetAuditTrailUseCase
from .dtos import (
    CreateAccountCommand,
    UpdateAccountCommand,
    AccountResponse,
    AccountStatusResponse,
    ChangePasswordResponse,
    AuditEventResponse,
)

__all__ = [
    # Use Cases
    "CreateAccountUseCase",
    "GetAccountUseCase",
    "ListAccountsUseCase",
    "UpdateAccountUseCase",
    "ChangePasswordUseCase",
    "ChangeAccountStatusUseCase",
    "GetAuditTrailUseCase",
    # DTOs - Commands
    "CreateAccountCommand",
    "UpdateAccountCommand",
    # DTOs - Responses
    "AccountResponse",
    "AccountStatusResponse",
    "ChangePasswordResponse",
    "AuditEventResponse",
]
