from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from src.api.error import raise_for_error
from src.app.services.clock import Clock
from src.app.services.password_hasher import PasswordHasher
from src.app.services.reset_notifier import PasswordResetNotifier
from src.app.services.token_generator import TokenGenerator
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    LoginUseCase,
    RequestPasswordResetUseCase,
    ConfirmPasswordResetUseCase,
    LoginResponse,
    RequestPasswordResetResponse,
    ConfirmPasswordResetResponse,
)
from src.depends import (
    get_clock,
    get_password_hasher,
    get_reset_notifier,
    get_token_generator,
    get_unit_of_work,
)

router = APIRouter(prefix="/auth", tags=["Authentication"])


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    Validates incoming login request.
    """

    email: EmailStr = Field(..., description="Account email address")
    password: str = Field(..., description="Account password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    clock: Clock = Depends(get_clock),
):
    """
    Account Login

    Checks the lockout state first, then the password. Five consecutive
    failures lock the account for fifteen minutes.

    Raises:
        - 401 Unauthorized: Invalid credentials
        - 403 Forbidden: Account disabled
        - 423 Locked: Account temporarily locked
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow, password_hasher, clock)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class RequestPasswordResetRequest(BaseModel):
    """
    Request password reset HTTP request payload
    """

    email: EmailStr = Field(..., description="Account email address")


@router.post(
    "/request-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def request_password_reset(
    request: RequestPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    token_generator: TokenGenerator = Depends(get_token_generator),
    notifier: PasswordResetNotifier = Depends(get_reset_notifier),
    clock: Clock = Depends(get_clock),
):
    """
    Request Password Reset

    Issues a single-use reset token and hands it to the notifier.

    Security:
        - No email enumeration (same response for valid/invalid emails)
        - The token is never part of the HTTP response

    Returns:
        - 200 OK: Always returns success (no enumeration)
        - 500 Internal Server Error: Misconfigured expiry window
    """
    use_case = RequestPasswordResetUseCase(
        uow,
        token_generator,
        notifier,
        clock,
        valid_hours=ApplicationConfig.PASSWORD_RESET_TOKEN_VALID_HOURS,
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        raise_for_error(result.error)

    return result.value


class ConfirmPasswordResetRequest(BaseModel):
    """
    Confirm password reset HTTP request payload
    """

    token: str = Field(..., description="Password reset token")
    new_password: str = Field(..., description="New password")


@router.post(
    "/confirm-password-reset",
    status_code=status.HTTP_200_OK,
    response_model=ConfirmPasswordResetResponse,
)
async def confirm_password_reset(
    request: ConfirmPasswordResetRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    password_hasher: PasswordHasher = Depends(get_password_hasher),
    clock: Clock = Depends(get_clock),
):
    """
    Confirm Password Reset

    Redeems the token and sets the new password in one transaction.

    Raises:
        - 400 Bad Request: Invalid token or password policy violation
        - 409 Conflict: Token already used
        - 410 Gone: Token expired
        - 500 Internal Server Error: Server error
    """
    use_case = ConfirmPasswordResetUseCase(
        uow,
        password_hasher,
        clock,
        password_min_length=ApplicationConfig.PASSWORD_MIN_LENGTH,
    )
    result = await use_case.execute(request.token, request.new_password)

    if result.is_err():
        raise_for_error(result.error)

    return result.value
