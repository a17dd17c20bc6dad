"""Role enumerations."""

from draftroom.core.enums.positions import Role, RoleGroup

__all__ = [
    "Role",
    "RoleGroup",
]
