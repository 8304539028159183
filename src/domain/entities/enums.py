"""
Account Security Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class Capability(str, Enum):
    """Privilege tag attached to a role when the role is defined"""

    administer = "administer"
    manage_users = "manage_users"
    create_campaigns = "create_campaigns"
