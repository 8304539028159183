"""
Unit tests for AdminGuard and role capability resolution
"""
import pytest

from src.domain.entities import Capability, Role
from src.domain.security import AdminGuard, resolve_capabilities


def make_role(name):
    return Role(name=name, capabilities=resolve_capabilities(name))


@pytest.fixture
def guard():
    return AdminGuard()


@pytest.mark.parametrize("name", ["ADMIN", "ADMINISTRADOR"])
def test_last_admin_cannot_be_deactivated(guard, name):
    role = make_role(name)

    assert guard.can_deactivate_or_demote(role, 0) is False

    result = guard.check_can_deactivate_or_demote(role, 0)
    assert result.is_err()
    assert result.error.code == "LAST_ADMIN_PROTECTED"


@pytest.mark.parametrize("count", [1, 2, 10])
def test_admin_with_other_admins_can_be_deactivated(guard, count):
    role = make_role("ADMIN")

    assert guard.can_deactivate_or_demote(role, count) is True
    assert guard.check_can_deactivate_or_demote(role, count).is_ok()


@pytest.mark.parametrize("name", ["MANAGER", "EDITOR", "VIEWER", "admin"])
@pytest.mark.parametrize("count", [0, 1, 5])
def test_non_admin_roles_always_allowed(guard, name, count):
    assert guard.can_deactivate_or_demote(make_role(name), count) is True


def test_admin_names_are_case_sensitive():
    assert Capability.administer.value not in resolve_capabilities("admin")
    assert Capability.administer.value not in resolve_capabilities("Administrador")


def test_capability_resolution():
    assert set(resolve_capabilities("ADMIN")) == {
        "administer",
        "manage_users",
        "create_campaigns",
    }
    assert set(resolve_capabilities("MANAGER")) == {"manage_users", "create_campaigns"}
    assert resolve_capabilities("VIEWER") == []
    assert resolve_capabilities("EDITOR") == ["create_campaigns"]


def test_renamed_role_keeps_admin_capability(guard):
    role = make_role("ADMIN")
    role.name = "Platform Owners"

    assert role.is_admin is True
    assert guard.can_deactivate_or_demote(role, 0) is False
