from typing import List, Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.roles import (
    CreateRoleCommand,
    CreateRoleUseCase,
    ListRolesUseCase,
    RoleResponse,
)
from src.depends import get_unit_of_work

router = APIRouter(
    prefix="/roles",
    tags=["Roles"],
    dependencies=[Depends(verify_admin_api_key)],
)


class CreateRoleRequest(BaseModel):
    """
    Create role HTTP request payload
    """

    name: str = Field(..., min_length=3, max_length=50, description="Role name")
    description: Optional[str] = Field(None, max_length=255)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=RoleResponse)
async def create_role(request: CreateRoleRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Define Role

    Capabilities are derived from the name when the role is created.

    Raises:
        - 409 Conflict: Role name already exists
    """
    use_case = CreateRoleUseCase(uow)
    result = await use_case.execute(
        CreateRoleCommand(name=request.name, description=request.description)
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[RoleResponse])
async def list_roles(uow: UnitOfWork = Depends(get_unit_of_work)):
    """List Roles"""
    use_case = ListRolesUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise_for_error(result.error)

    return result.value
