"""
Unit tests for ChangePasswordUseCase
"""
from uuid import uuid4

import pytest

from src.app.use_cases.accounts.change_password_use_case import ChangePasswordUseCase
from src.domain.entities import Account

CURRENT = "CurrentPass123!"


@pytest.fixture
def account(password_hasher):
    return Account(
        id=uuid4(),
        name="Ana Ruiz",
        email="ana@example.com",
        password_hash=password_hasher.hash(CURRENT),
        role_id=uuid4(),
        failed_login_count=3,
    )


@pytest.mark.asyncio
async def test_change_password(mock_uow, password_hasher, account):
    mock_uow.accounts.get_by_id.return_value = account

    result = await ChangePasswordUseCase(mock_uow, password_hasher).execute(
        account.id, CURRENT, "BrandNewPass456!"
    )

    assert result.is_ok()
    assert password_hasher.verify("BrandNewPass456!", account.password_hash)
    assert account.failed_login_count == 3
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_wrong_current_password(mock_uow, password_hasher, account):
    mock_uow.accounts.get_by_id.return_value = account
    original_hash = account.password_hash

    result = await ChangePasswordUseCase(mock_uow, password_hasher).execute(
        account.id, "NotMyPassword!", "BrandNewPass456!"
    )

    assert result.error.code == "INVALID_CREDENTIALS"
    assert account.password_hash == original_hash
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_new_password_policy(mock_uow, password_hasher, account):
    mock_uow.accounts.get_by_id.return_value = account

    result = await ChangePasswordUseCase(mock_uow, password_hasher).execute(
        account.id, CURRENT, "short"
    )

    assert result.error.code == "INVALID_PASSWORD"
    mock_uow.accounts.update.assert_not_called()


@pytest.mark.asyncio
async def test_account_not_found(mock_uow, password_hasher):
    result = await ChangePasswordUseCase(mock_uow, password_hasher).execute(
        uuid4(), CURRENT, "BrandNewPass456!"
    )

    assert result.error.code == "ACCOUNT_NOT_FOUND"
