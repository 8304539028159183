"""
Role Directory Use Cases
"""

from .create_role_use_case import CreateRoleUseCase
from .list_roles_use_case import ListRolesUseCase
from .dtos import CreateRoleCommand, RoleResponse

__all__ = [
    "CreateRoleUseCase",
    "ListRolesUseCase",
    "CreateRoleCommand",
    "RoleResponse",
]
