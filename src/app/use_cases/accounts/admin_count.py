from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork


async def count_other_active_admins(uow: UnitOfWork, account_id: UUID) -> int:
    """Active accounts, other than account_id, whose role holds the administer capability"""
    roles = await uow.roles.list_all()
    admin_role_ids = [role.id for role in roles if role.is_admin]
    return await uow.accounts.count_active_by_roles(
        admin_role_ids, exclude_account_id=account_id
    )
