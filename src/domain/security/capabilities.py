from typing import FrozenSet, List

from src.domain.entities.enums import Capability

# Case-sensitive
ADMIN_ROLE_NAMES: FrozenSet[str] = frozenset({"ADMIN", "ADMINISTRADOR"})
USER_MANAGER_ROLE_NAMES: FrozenSet[str] = ADMIN_ROLE_NAMES | {"MANAGER"}
READ_ONLY_ROLE_NAMES: FrozenSet[str] = frozenset({"VIEWER"})


def resolve_capabilities(role_name: str) -> List[str]:
    """
    Resolve the capability set for a role at definition time.

    The result is stored on the role, so renaming it later neither grants
    nor revokes anything.
    """
    capabilities = []
    if role_name in ADMIN_ROLE_NAMES:
        capabilities.append(Capability.administer.value)
    if role_name in USER_MANAGER_ROLE_NAMES:
        capabilities.append(Capability.manage_users.value)
    if role_name not in READ_ONLY_ROLE_NAMES:
        capabilities.append(Capability.create_campaigns.value)
    return capabilities
