"""Invite repository protocol."""

from typing import Protocol

from domain.entities.invite import Invite


class IInviteRepository(Protocol):
    """Repository interface for Invite entities."""

    async def create(self, invite: Invite) -> Invite:
        """Create a new invite. Raises ConflictError on a duplicate ID or code."""
        ...

    async def get_by_group_id(self, group_id: str) -> Invite | None:
        """Get the (earliest) invite issued for a group."""
        ...

    async def get_by_code(self, invite_code: str) -> Invite | None:
        """Get an invite by its public code."""
        ...
