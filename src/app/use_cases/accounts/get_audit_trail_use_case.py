"""
Get Audit Trail Use Case

Retrieves the security events recorded for one account.
"""

from typing import List
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from .dtos import AuditEventResponse


class GetAuditTrailUseCase:
    """
    Use case for retrieving an account's audit trail.

    Business Rules:
    - Account must exist
    - Results ordered by newest first
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, account_id: UUID, limit: int = 50) -> Result[List[AuditEventResponse]]:
        async with self.uow:
            account = await self.uow.accounts.get_by_id(account_id)
            if account is None:
                return Return.err(Error("ACCOUNT_NOT_FOUND", "Account not found"))

            events = await self.uow.audit_events.list_by_account(account_id, limit=limit)
            return Return.ok([AuditEventResponse.from_entity(event) for event in events])
