from typing import List, Optional
from uuid import UUID

from libs.result import Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AccountResponse


class ListAccountsUseCase:
    """
    Use case for listing accounts.

    Filters (name takes precedence over role):
    - name: case-insensitive partial match
    - role_id: active accounts holding that role
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, name: Optional[str] = None, role_id: Optional[UUID] = None
    ) -> Result[List[AccountResponse]]:
        async with self.uow:
            if name and name.strip():
                accounts = await self.uow.accounts.search_by_name(name.strip())
            elif role_id is not None:
                accounts = await self.uow.accounts.list_active_by_role(role_id)
            else:
                accounts = await self.uow.accounts.list_all()

            roles = {role.id: role for role in await self.uow.roles.list_all()}

            return Return.ok(
                [
                    AccountResponse.from_entity(account, roles.get(account.role_id))
                    for account in accounts
                ]
            )
