"""Invite service layer: resolving invite codes and joining groups."""

from typing import Callable, Optional

import structlog

from core.exceptions import AlreadyAGroupMemberError, ConflictError, InviteNotFoundError
from domain.entities.invite import InvitePreview
from domain.entities.membership import Membership, Role
from domain.repositories.unit_of_work import IUnitOfWork
from domain.services.group_service import require_device_id

logger = structlog.get_logger()


class InviteService:
    """Service layer for invite-code workflows."""

    def __init__(self, uow_factory: Callable[[], IUnitOfWork]) -> None:
        self._uow_factory = uow_factory

    async def preview(self, invite_code: str) -> InvitePreview:
        """Resolve an invite code to the group it grants access to.

        Raises:
            InviteNotFoundError: If no invite (or its group) matches the code.
        """
        async with self._uow_factory() as uow:
            invite = await uow.invites.get_by_code(invite_code)
            if not invite:
                raise InviteNotFoundError()

            group = await uow.groups.get(invite.group_id)
            if not group:
                raise InviteNotFoundError()

            return InvitePreview(
                invite_id=invite.id,
                group_id=group.id,
                group_name=group.name,
                group_description=group.description,
                member_count=await uow.members.count_by_group(group.id),
            )

    async def join(self, invite_code: str, device_id: Optional[str]) -> Membership:
        """Join the invite's group as a regular member.

        Args:
            invite_code: The public invite code.
            device_id: The joining device.

        Returns:
            The new Membership.

        Raises:
            ValidationError: If ``device_id`` is missing.
            InviteNotFoundError: If the code does not resolve.
            AlreadyAGroupMemberError: If the device already belongs to the group.
        """
        device_id = require_device_id(device_id)

        async with self._uow_factory() as uow:
            invite = await uow.invites.get_by_code(invite_code)
            if not invite:
                raise InviteNotFoundError()

            existing = await uow.members.get_role(invite.group_id, device_id)
            if existing is not None:
                raise AlreadyAGroupMemberError(invite.group_id, device_id)

            try:
                membership = await uow.members.create(
                    Membership(group_id=invite.group_id, device_id=device_id, role=Role.MEMBER)
                )
            except ConflictError as exc:
                # A concurrent join for the same device won the insert
                raise AlreadyAGroupMemberError(invite.group_id, device_id) from exc
            await uow.commit()

        logger.info("group_joined", group_id=membership.group_id, invite_id=invite.id)
        return membership
