"""
Unit tests for ChangeAccountStatusUseCase

Covers the last-administrator protection.
"""
from uuid import uuid4

import pytest

from src.app.use_cases.accounts.change_account_status_use_case import (
    ChangeAccountStatusUseCase,
)
from src.domain.entities import Account, Role
from src.domain.security import resolve_capabilities
from tests.helpers.fakes import audit_actions


def make_role(name):
    return Role(id=uuid4(), name=name, capabilities=resolve_capabilities(name))


def make_account(role, active=True):
    return Account(
        id=uuid4(),
        name="Some One",
        email=f"{uuid4().hex[:8]}@example.com",
        password_hash="hash",
        role_id=role.id,
        active=active,
    )


@pytest.fixture
def admin_role():
    return make_role("ADMIN")


@pytest.fixture
def editor_role():
    return make_role("EDITOR")


@pytest.mark.asyncio
async def test_cannot_deactivate_last_admin(mock_uow, admin_role, editor_role):
    account = make_account(admin_role)
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.roles.get_by_id.return_value = admin_role
    mock_uow.roles.list_all.return_value = [admin_role, editor_role]
    mock_uow.accounts.count_active_by_roles.return_value = 0

    result = await ChangeAccountStatusUseCase(mock_uow).execute(account.id, False)

    assert result.is_err()
    assert result.error.code == "LAST_ADMIN_PROTECTED"
    assert account.active is True
    mock_uow.accounts.update.assert_not_called()
    mock_uow.commit.assert_not_called()

    mock_uow.accounts.count_active_by_roles.assert_called_once_with(
        [admin_role.id], exclude_account_id=account.id
    )


@pytest.mark.asyncio
async def test_admin_with_another_admin_can_be_deactivated(mock_uow, admin_role):
    account = make_account(admin_role)
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.roles.get_by_id.return_value = admin_role
    mock_uow.roles.list_all.return_value = [admin_role]
    mock_uow.accounts.count_active_by_roles.return_value = 1

    result = await ChangeAccountStatusUseCase(mock_uow).execute(account.id, False)

    assert result.is_ok()
    assert result.value.message == "Account deactivated"
    assert account.active is False
    assert audit_actions(mock_uow) == ["account_status_changed"]
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_non_admin_can_always_be_deactivated(mock_uow, admin_role, editor_role):
    account = make_account(editor_role)
    mock_uow.accounts.get_by_id.return_value = account
    mock_uow.roles.get_by_id.return_value = editor_role
    mock_uow.roles.list_all.return_value = [admin_role, editor_role]
    mock_uow.accounts.count_active_by_roles.return_value = 0

    result = await ChangeAccountStatusUseCase(mock_uow).execute(account.id, False)

    assert result.is_ok()
    assert account.active is False


@pytest.mark.asyncio
async def test_activation_skips_guard(mock_uow, admin_role):
    account = make_account(admin_role, active=False)
    mock_uow.accounts.get_by_id.return_value = account

    result = await ChangeAccountStatusUseCase(mock_uow).execute(account.id, True)

    assert result.is_ok()
    assert result.value.message == "Account activated"
    assert account.active is True
    mock_uow.accounts.count_active_by_roles.assert_not_called()


@pytest.mark.asyncio
async def test_account_not_found(mock_uow):
    result = await ChangeAccountStatusUseCase(mock_uow).execute(uuid4(), False)

    assert result.error.code == "ACCOUNT_NOT_FOUND"
    mock_uow.commit.assert_not_called()
