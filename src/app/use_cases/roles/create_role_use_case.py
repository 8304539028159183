"""
Create Role Use Case
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Role
from src.domain.security import resolve_capabilities
from .dtos import CreateRoleCommand, RoleResponse

logger = logging.getLogger(__name__)


class CreateRoleUseCase:
    """
    Use case for defining a role.

    Business Rules:
    - Role name is unique
    - Capabilities are resolved from the name here, once, and stored
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: CreateRoleCommand) -> Result[RoleResponse]:
        async with self.uow:
            existing = await self.uow.roles.get_by_name(command.name)
            if existing is not None:
                return Return.err(
                    Error("ROLE_ALREADY_EXISTS", f"Role {command.name} already exists")
                )

            role = Role(
                name=command.name,
                description=command.description,
                capabilities=resolve_capabilities(command.name),
            )
            role = await self.uow.roles.create(role)
            await self.uow.commit()

            logger.info("Role %s defined with capabilities %s", role.name, role.capabilities)
            return Return.ok(RoleResponse.from_entity(role))
