"""
Account Administration DTOs

Command and Response classes for account management.
"""

from datetime import datetime
from typing import Any, Dict, Optional
from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import Account, AuditEvent, Role


# ============================================================================
# Command DTOs
# ============================================================================


class CreateAccountCommand(BaseModel):
    """Command to create a new account"""

    name: str
    email: str
    password: str
    role_id: UUID


class UpdateAccountCommand(BaseModel):
    """Command to update profile and role of an account"""

    name: str
    email: str
    role_id: UUID


# ============================================================================
# Response DTOs
# ============================================================================


class AccountResponse(BaseModel):
    """Account as exposed outside the service (never the password hash)"""

    id: str
    name: str
    email: str
    role_id: str
    role_name: str
    active: bool
    failed_login_count: int
    locked_until: Optional[datetime] = None
    last_access_at: Optional[datetime] = None
    created_at: datetime

    @classmethod
    def from_entity(cls, account: Account, role: Optional[Role]) -> "AccountResponse":
        return cls(
            id=str(account.id),
            name=account.name,
            email=account.email,
            role_id=str(account.role_id),
            role_name=role.name if role else "",
            active=account.active,
            failed_login_count=account.failed_login_count,
            locked_until=account.locked_until,
            last_access_at=account.last_access_at,
            created_at=account.created_at,
        )


class AccountStatusResponse(BaseModel):
    """Response for activate/deactivate"""

    status: str
    message: str


class ChangePasswordResponse(BaseModel):
    """Response for password change"""

    status: str
    message: str


class AuditEventResponse(BaseModel):
    """Single entry of an account's audit trail"""

    action: str
    timestamp: datetime
    metadata: Dict[str, Any]

    @classmethod
    def from_entity(cls, event: AuditEvent) -> "AuditEventResponse":
        return cls(
            action=event.action,
            timestamp=event.created_at,
            metadata=event.event_metadata or {},
        )
