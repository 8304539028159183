"""
Unit tests for RequestPasswordResetUseCase
"""
from datetime import timedelta
from uuid import uuid4

import pytest

from src.app.services.token_generator import hash_token
from src.app.use_cases.auth.request_password_reset_use_case import (
    RequestPasswordResetUseCase,
)
from src.domain.entities import Account
from tests.helpers.fakes import (
    CapturingResetNotifier,
    SequenceTokenGenerator,
    audit_actions,
)


@pytest.fixture
def account():
    return Account(
        id=uuid4(),
        name="Ana Ruiz",
        email="ana@example.com",
        password_hash="hash",
        role_id=uuid4(),
    )


@pytest.fixture
def notifier():
    return CapturingResetNotifier()


@pytest.fixture
def token_generator():
    return SequenceTokenGenerator()


def make_use_case(mock_uow, token_generator, notifier, clock, valid_hours=24):
    return RequestPasswordResetUseCase(
        mock_uow, token_generator, notifier, clock, valid_hours=valid_hours
    )


@pytest.mark.asyncio
async def test_issues_hashed_token(mock_uow, token_generator, notifier, clock, account):
    mock_uow.accounts.get_by_email.return_value = account
    use_case = make_use_case(mock_uow, token_generator, notifier, clock)

    result = await use_case.execute("ana@example.com")

    assert result.is_ok()
    assert result.value.status == "sent"

    stored = mock_uow.password_reset_tokens.create.call_args.args[0]
    assert stored.account_id == account.id
    assert stored.token_hash == hash_token("reset-token-1")
    assert stored.used is False
    assert stored.expires_at == clock.now() + timedelta(hours=24)

    assert notifier.sent == [("ana@example.com", "reset-token-1", stored.expires_at)]
    assert audit_actions(mock_uow) == ["password_reset_requested"]
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_expiry_follows_configured_hours(
    mock_uow, token_generator, notifier, clock, account
):
    mock_uow.accounts.get_by_email.return_value = account
    use_case = make_use_case(mock_uow, token_generator, notifier, clock, valid_hours=2)

    await use_case.execute("ana@example.com")

    stored = mock_uow.password_reset_tokens.create.call_args.args[0]
    assert stored.expires_at == clock.now() + timedelta(hours=2)


@pytest.mark.asyncio
async def test_unknown_email_same_response(mock_uow, token_generator, notifier, clock):
    use_case = make_use_case(mock_uow, token_generator, notifier, clock)

    result = await use_case.execute("nobody@example.com")

    assert result.is_ok()
    assert result.value.status == "sent"
    mock_uow.password_reset_tokens.create.assert_not_called()
    mock_uow.commit.assert_not_called()
    assert notifier.sent == []
    assert token_generator.issued == []


@pytest.mark.asyncio
@pytest.mark.parametrize("valid_hours", [0, -3])
async def test_invalid_configuration(
    mock_uow, token_generator, notifier, clock, account, valid_hours
):
    mock_uow.accounts.get_by_email.return_value = account
    use_case = make_use_case(
        mock_uow, token_generator, notifier, clock, valid_hours=valid_hours
    )

    result = await use_case.execute("ana@example.com")

    assert result.is_err()
    assert result.error.code == "INVALID_CONFIGURATION"
    mock_uow.accounts.get_by_email.assert_not_called()
    assert notifier.sent == []


@pytest.mark.asyncio
async def test_previous_tokens_left_alone(
    mock_uow, token_generator, notifier, clock, account
):
    mock_uow.accounts.get_by_email.return_value = account
    use_case = make_use_case(mock_uow, token_generator, notifier, clock)

    await use_case.execute("ana@example.com")
    await use_case.execute("ana@example.com")

    assert mock_uow.password_reset_tokens.create.call_count == 2
    mock_uow.password_reset_tokens.mark_used.assert_not_called()
    assert [sent[1] for sent in notifier.sent] == ["reset-token-1", "reset-token-2"]
