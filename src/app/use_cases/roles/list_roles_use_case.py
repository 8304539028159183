from typing import List

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import RoleResponse


class ListRolesUseCase:
    """Use case for listing the role directory"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[List[RoleResponse]]:
        async with self.uow:
            roles = await self.uow.roles.list_all()
            return Return.ok([RoleResponse.from_entity(role) for role in roles])
