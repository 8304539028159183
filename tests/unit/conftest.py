from datetime import datetime

import pytest
from unittest.mock import AsyncMock, MagicMock

from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from tests.helpers.fakes import FixedClock


async def _echo(entity):
    return entity


async def _increment_failed_login(account):
    account.failed_login_count += 1
    return account.failed_login_count


async def _lock_until(account, locked_until, now):
    if account.locked_until is not None and now < account.locked_until:
        return False
    account.locked_until = locked_until
    return True


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Mock repositories
    uow.accounts = MagicMock()
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.exists_by_email = AsyncMock(return_value=False)
    uow.accounts.list_all = AsyncMock(return_value=[])
    uow.accounts.search_by_name = AsyncMock(return_value=[])
    uow.accounts.list_active_by_role = AsyncMock(return_value=[])
    uow.accounts.count_active_by_roles = AsyncMock(return_value=0)
    uow.accounts.create = AsyncMock(side_effect=_echo)
    uow.accounts.update = AsyncMock(side_effect=_echo)
    uow.accounts.increment_failed_login = AsyncMock(side_effect=_increment_failed_login)
    uow.accounts.lock_until = AsyncMock(side_effect=_lock_until)

    uow.roles = MagicMock()
    uow.roles.get_by_id = AsyncMock(return_value=None)
    uow.roles.get_by_name = AsyncMock(return_value=None)
    uow.roles.list_all = AsyncMock(return_value=[])
    uow.roles.create = AsyncMock(side_effect=_echo)

    uow.password_reset_tokens = MagicMock()
    uow.password_reset_tokens.create = AsyncMock(side_effect=_echo)
    uow.password_reset_tokens.get_by_token_hash = AsyncMock(return_value=None)
    uow.password_reset_tokens.mark_used = AsyncMock(return_value=True)

    uow.audit_events = MagicMock()
    uow.audit_events.create = AsyncMock(side_effect=_echo)
    uow.audit_events.list_by_account = AsyncMock(return_value=[])

    return uow


@pytest.fixture
def clock():
    return FixedClock(datetime(2024, 3, 1, 12, 0, 0))


@pytest.fixture(scope="session")
def password_hasher():
    # Low cost factor keeps the suite fast
    return BcryptPasswordHasher(rounds=4)
