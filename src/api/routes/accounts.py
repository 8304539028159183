from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.password_hasher import PasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.accounts import (
    CreateAccountCommand,
    CreateAccountUseCase,
    GetAccountUseCase,
    ListAccountsUseCase,
    UpdateAccountCommand,
    UpdateAccountUseCase,
    ChangePasswordUseCase,
    ChangeAccountStatusUseCase,
    GetAuditTrailUseCase,
    AccountResponse,
    AccountStatusResponse,
    ChangePasswordResponse,
    AuditEventResponse,
)
from src.depends import get_password_hasher, get_unit_of_work

router = APIRouter(
    prefix="/accounts",
    tags=["Accounts"],
    dependencies=[Depends(verify_admin_api_key)],
)


class CreateAccountRequest(BaseModel):
    """
    Create account HTTP request payload
    """

    name: str = Field(..., min_length=2, max_length=50, description="Display name")
    email: EmailStr = Field(..., max_length=100, description="Account email address")
    password: str = Field(..., description="Initial password")
    role_id: UUID = Field(..., description="Role to assign")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AccountResponse)
async def create_account(
    request: CreateAccountRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Create Account

    Raises:
        - 400 Bad Request: Password policy violation or inactive role
        - 404 Not Found: Role not found
        - 409 Conflict: Email already exists
    """
    command = CreateAccountCommand(
        name=request.name,
        email=request.email,
        password=request.password,
        role_id=request.role_id,
    )
    use_case = CreateAccountUseCase(
        uow, password_hasher, password_min_length=ApplicationConfig.PASSWORD_MIN_LENGTH
    )
    result = await use_case.execute(command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("", status_code=status.HTTP_200_OK, response_model=List[AccountResponse])
async def list_accounts(
    name: Optional[str] = Query(None, description="Partial, case-insensitive name match"),
    role_id: Optional[UUID] = Query(None, description="Active accounts holding this role"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Accounts

    Optional filters: name search, or active accounts of one role.
    """
    use_case = ListAccountsUseCase(uow)
    result = await use_case.execute(name=name, role_id=role_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get("/{account_id}", status_code=status.HTTP_200_OK, response_model=AccountResponse)
async def get_account(account_id: UUID, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Get Account

    Raises:
        - 404 Not Found: Account not found
    """
    use_case = GetAccountUseCase(uow)
    result = await use_case.execute(account_id)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class UpdateAccountRequest(BaseModel):
    """
    Update account HTTP request payload
    """

    name: str = Field(..., min_length=2, max_length=50)
    email: EmailStr = Field(..., max_length=100)
    role_id: UUID


@router.put("/{account_id}", status_code=status.HTTP_200_OK, response_model=AccountResponse)
async def update_account(
    account_id: UUID,
    request: UpdateAccountRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Account

    Raises:
        - 404 Not Found: Account or role not found
        - 409 Conflict: Email in use, or demoting the last administrator
    """
    command = UpdateAccountCommand(
        name=request.name, email=request.email, role_id=request.role_id
    )
    use_case = UpdateAccountUseCase(uow)
    result = await use_case.execute(account_id, command)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ChangeStatusRequest(BaseModel):
    """
    Change account status HTTP request payload
    """

    active: bool = Field(..., description="Whether the account may authenticate")


@router.patch(
    "/{account_id}/status",
    status_code=status.HTTP_200_OK,
    response_model=AccountStatusResponse,
)
async def change_account_status(
    account_id: UUID,
    request: ChangeStatusRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Activate / Deactivate Account

    Raises:
        - 404 Not Found: Account not found
        - 409 Conflict: Deactivating the last active administrator
    """
    use_case = ChangeAccountStatusUseCase(uow)
    result = await use_case.execute(account_id, request.active)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ChangePasswordRequest(BaseModel):
    """
    Change password HTTP request payload
    """

    current_password: str = Field(..., description="Current password")
    new_password: str = Field(..., description="New password")


@router.patch(
    "/{account_id}/password",
    status_code=status.HTTP_200_OK,
    response_model=ChangePasswordResponse,
)
async def change_password(
    account_id: UUID,
    request: ChangePasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Change Password

    Raises:
        - 400 Bad Request: New password violates the policy
        - 401 Unauthorized: Current password incorrect
        - 404 Not Found: Account not found
    """
    use_case = ChangePasswordUseCase(
        uow, password_hasher, password_min_length=ApplicationConfig.PASSWORD_MIN_LENGTH
    )
    result = await use_case.execute(
        account_id, request.current_password, request.new_password
    )

    if result.is_err():
        raise_for_error(result.error)

    return result.value


@router.get(
    "/{account_id}/audit-events",
    status_code=status.HTTP_200_OK,
    response_model=List[AuditEventResponse],
)
async def get_audit_events(
    account_id: UUID,
    limit: int = Query(50, ge=1, le=100, description="Maximum number of events to return"),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Account Audit Trail

    Returns the account's security events, newest first.

    Raises:
        - 404 Not Found: Account not found
    """
    use_case = GetAuditTrailUseCase(uow)
    result = await use_case.execute(account_id, limit=limit)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
