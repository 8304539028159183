"""
Role Entity

Read-mostly reference data describing what an account may do.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from src.domain.base import utc_now
from .enums import Capability


class Role(SQLModel, table=True):
    """
    Role entity - named authorization level.

    Business Rules:
    - Name is unique
    - Capabilities are resolved once, when the role is defined, and stored
      with it; privilege checks read capabilities, never the display name
    - Inactive roles cannot be assigned to accounts
    """

    __tablename__ = "roles"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(unique=True, index=True, max_length=50)
    description: Optional[str] = Field(default=None, max_length=255)
    active: bool = Field(default=True)

    capabilities: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    def has_capability(self, capability: Capability) -> bool:
        return capability.value in (self.capabilities or [])

    @property
    def is_admin(self) -> bool:
        return self.has_capability(Capability.administer)
