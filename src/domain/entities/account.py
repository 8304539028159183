"""
Account Entity

Identity record together with its login-security state.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class Account(SQLModel, table=True):
    """
    Account entity - a person who can authenticate against the service.

    Business Rules:
    - Email must be unique across all accounts
    - Password stored as bcrypt hash (cost factor 12)
    - 5 consecutive failed logins lock the account for 15 minutes
    - A locked account is refused before its password is checked
    - Successful login resets the failure counter and clears the lock
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=50)
    email: str = Field(unique=True, index=True, max_length=100)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role_id: UUID = Field(foreign_key="roles.id", index=True)
    active: bool = Field(default=True)

    # Login security state
    failed_login_count: int = Field(default=0, ge=0)
    locked_until: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    last_access_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_account_role_active", "role_id", "active"),)
