"""Membership domain entities and permission derivation."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from core.exceptions import UnknownRoleError


class Role(StrEnum):
    """Role of a device within a group. Closed set."""

    CREATOR = "creator"
    MEMBER = "member"


def parse_role(value: str) -> Role:
    """Convert a stored role string to a Role, failing closed on anything else."""
    try:
        return Role(value)
    except ValueError:
        raise UnknownRoleError(value) from None


@dataclass(frozen=True)
class PermissionSet:
    """Capabilities granted by a role."""

    can_invite: bool
    can_leave: bool
    can_delete_group: bool


_PERMISSIONS: dict[Role, PermissionSet] = {
    Role.CREATOR: PermissionSet(can_invite=True, can_leave=True, can_delete_group=True),
    Role.MEMBER: PermissionSet(can_invite=False, can_leave=True, can_delete_group=False),
}


def derive_permissions(role: Role | str) -> PermissionSet:
    """Derive the capability set for a role.

    Raises:
        UnknownRoleError: If the role is not one of the known roles.
    """
    if not isinstance(role, Role):
        role = parse_role(role)
    return _PERMISSIONS[role]


@dataclass
class Membership:
    """Domain entity binding a device to a group with a role."""

    group_id: str
    device_id: str
    role: Role = Role.MEMBER
    joined_at: datetime = field(default_factory=datetime.utcnow)


@dataclass
class PermissionStatus:
    """Result of a permission query for a device in a group."""

    is_member: bool
    is_creator: bool = False
    role: Role | None = None
    permissions: PermissionSet | None = None

    @classmethod
    def non_member(cls) -> "PermissionStatus":
        return cls(is_member=False)

    @classmethod
    def for_role(cls, role: Role) -> "PermissionStatus":
        return cls(
            is_member=True,
            is_creator=role == Role.CREATOR,
            role=role,
            permissions=derive_permissions(role),
        )
