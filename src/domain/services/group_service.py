"""Group service layer with business logic."""

from typing import Callable, List, Optional

import structlog

from core.exceptions import (
    GroupNotFoundError,
    InsufficientPermissionsError,
    MembershipNotFoundError,
    NotAGroupMemberError,
    ValidationError,
)
from domain.entities.group import Group
from domain.entities.invite import CREATED_BY_CREATOR, Invite
from domain.entities.membership import (
    Membership,
    PermissionStatus,
    Role,
    derive_permissions,
)
from domain.repositories.unit_of_work import IUnitOfWork

logger = structlog.get_logger()

GROUP_NAME_MAX_LENGTH = 100


def require_device_id(device_id: Optional[str]) -> str:
    """Return the stripped device ID or raise ValidationError."""
    if device_id is None or not device_id.strip():
        raise ValidationError("device_id is required", field="device_id")
    return device_id.strip()


class GroupService:
    """Service layer for group creation, lookup and permissions."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def list_groups(self) -> List[Group]:
        """Get all groups, newest first."""
        async with self._uow_factory() as uow:
            return await uow.groups.list_all()

    async def get_by_id(self, group_id: str) -> Group:
        """Get a group with its invite code attached when one exists."""
        async with self._uow_factory() as uow:
            group = await uow.groups.get(group_id)
            if not group:
                raise GroupNotFoundError(group_id)

            invite = await uow.invites.get_by_group_id(group_id)
            if invite:
                group.invite_code = invite.invite_code
            return group

    async def create(
        self,
        name: str,
        description: Optional[str] = None,
        device_id: Optional[str] = None,
    ) -> Group:
        """Create a group together with its default invite.

        The group, its invite and (when ``device_id`` is given) the creator's
        membership are written in one transaction; a failure in any step
        leaves nothing behind.

        Raises:
            ValidationError: If the name is empty or too long after trimming.
        """
        name = (name or "").strip()
        if not name:
            raise ValidationError("Group name is required", field="name")
        if len(name) > GROUP_NAME_MAX_LENGTH:
            raise ValidationError(
                f"Group name must be at most {GROUP_NAME_MAX_LENGTH} characters",
                field="name",
            )
        if description is not None and not description.strip():
            description = None
        if device_id is not None:
            device_id = require_device_id(device_id)

        async with self._uow_factory() as uow:
            created = await uow.groups.create(Group(name=name, description=description))

            invite = await uow.invites.create(
                Invite(group_id=created.id, created_by=CREATED_BY_CREATOR)
            )

            if device_id:
                await uow.members.create(
                    Membership(group_id=created.id, device_id=device_id, role=Role.CREATOR)
                )

            await uow.commit()

        created.invite_code = invite.invite_code
        logger.info(
            "group_created",
            group_id=created.id,
            with_creator=device_id is not None,
        )
        return created

    async def get_permissions(
        self, group_id: str, device_id: Optional[str]
    ) -> PermissionStatus:
        """Describe what a device may do in a group.

        A device that is not a member gets a non-member status rather than
        an error.

        Raises:
            ValidationError: If ``device_id`` is missing (checked before any
                store access).
            UnknownRoleError: If the stored role is not a known role.
        """
        device_id = require_device_id(device_id)

        async with self._uow_factory() as uow:
            role = await uow.members.get_role(group_id, device_id)

        if role is None:
            return PermissionStatus.non_member()
        return PermissionStatus.for_role(role)

    async def leave(self, group_id: str, device_id: Optional[str]) -> None:
        """Remove a device's membership from a group."""
        device_id = require_device_id(device_id)

        async with self._uow_factory() as uow:
            group = await uow.groups.get(group_id)
            if not group:
                raise GroupNotFoundError(group_id)

            role = await uow.members.get_role(group_id, device_id)
            if role is None:
                raise MembershipNotFoundError(group_id, device_id)
            if not derive_permissions(role).can_leave:
                raise InsufficientPermissionsError("can_leave")

            await uow.members.delete(group_id, device_id)
            await uow.commit()

        logger.info("group_left", group_id=group_id, role=role.value)

    async def list_members(
        self, group_id: str, device_id: Optional[str]
    ) -> List[Membership]:
        """List a group's members. Only members of the group may ask.

        Raises:
            ValidationError: If ``device_id`` is missing.
            GroupNotFoundError: If the group does not exist.
            NotAGroupMemberError: If the caller is not a member.
        """
        device_id = require_device_id(device_id)

        async with self._uow_factory() as uow:
            group = await uow.groups.get(group_id)
            if not group:
                raise GroupNotFoundError(group_id)

            if await uow.members.get_role(group_id, device_id) is None:
                raise NotAGroupMemberError(group_id)

            return await uow.members.list_by_group(group_id)
