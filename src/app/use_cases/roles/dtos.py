from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from src.domain.entities import Role


class CreateRoleCommand(BaseModel):
    """Command to define a new role"""

    name: str
    description: Optional[str] = None


class RoleResponse(BaseModel):
    """Role as exposed by the role directory"""

    id: str
    name: str
    description: Optional[str] = None
    active: bool
    capabilities: List[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, role: Role) -> "RoleResponse":
        return cls(
            id=str(role.id),
            name=role.name,
            description=role.description,
            active=role.active,
            capabilities=list(role.capabilities or []),
            created_at=role.created_at,
        )
