"""
Unit tests for PasswordResetLifecycle
"""
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.domain.security import PasswordResetLifecycle

T0 = datetime(2024, 3, 1, 9, 0, 0)


@pytest.fixture
def lifecycle():
    return PasswordResetLifecycle()


def issue(lifecycle, valid_hours, now=T0):
    result = lifecycle.issue_token(uuid4(), "a" * 64, valid_hours, now)
    assert result.is_ok()
    return result.value


def test_issue_token_sets_expiry_from_valid_hours(lifecycle):
    account_id = uuid4()

    result = lifecycle.issue_token(account_id, "b" * 64, 24, T0)

    assert result.is_ok()
    token = result.value
    assert token.account_id == account_id
    assert token.used is False
    assert token.created_at == T0
    assert token.expires_at == T0 + timedelta(hours=24)


@pytest.mark.parametrize("valid_hours", [0, -1, True, 1.5, "2", None])
def test_issue_token_rejects_invalid_validity(lifecycle, valid_hours):
    result = lifecycle.issue_token(uuid4(), "c" * 64, valid_hours, T0)

    assert result.is_err()
    assert result.error.code == "INVALID_CONFIGURATION"


def test_one_hour_token_boundary(lifecycle):
    token = issue(lifecycle, 1)

    assert lifecycle.is_redeemable(token, token.expires_at - timedelta(seconds=1)) is True
    assert lifecycle.is_redeemable(token, token.expires_at) is False
    assert lifecycle.is_redeemable(token, token.expires_at + timedelta(seconds=1)) is False


def test_redeem_marks_used(lifecycle):
    token = issue(lifecycle, 1)

    result = lifecycle.redeem(token, T0 + timedelta(minutes=30))

    assert result.is_ok()
    assert result.value.used is True
    assert token.used is False  # snapshot untouched
    assert lifecycle.is_redeemable(result.value, T0 + timedelta(minutes=31)) is False


def test_redeem_at_expiry_fails_expired(lifecycle):
    token = issue(lifecycle, 1)

    result = lifecycle.redeem(token, token.expires_at)

    assert result.is_err()
    assert result.error.code == "TOKEN_EXPIRED"


def test_redeem_twice_fails_already_used(lifecycle):
    token = issue(lifecycle, 1)
    now = T0 + timedelta(minutes=10)

    first = lifecycle.redeem(token, now)
    second = lifecycle.redeem(first.value, now)

    assert first.is_ok()
    assert second.is_err()
    assert second.error.code == "TOKEN_ALREADY_USED"


def test_used_takes_precedence_over_expiry(lifecycle):
    token = issue(lifecycle, 24)

    first = lifecycle.redeem(token, T0 + timedelta(hours=23))
    assert first.is_ok()

    again = lifecycle.redeem(first.value, T0 + timedelta(hours=23, minutes=1))
    assert again.error.code == "TOKEN_ALREADY_USED"

    long_after = lifecycle.redeem(first.value, T0 + timedelta(days=3))
    assert long_after.error.code == "TOKEN_ALREADY_USED"
