"""Membership repository protocol."""

from typing import List, Protocol

from domain.entities.membership import Membership, Role


class IMembershipRepository(Protocol):
    """Repository interface for Membership entities."""

    async def get_role(self, group_id: str, device_id: str) -> Role | None:
        """Get a device's role in a group. Raises UnknownRoleError on bad data."""
        ...

    async def create(self, membership: Membership) -> Membership:
        """Create a membership. Raises ConflictError if the pair exists."""
        ...

    async def delete(self, group_id: str, device_id: str) -> bool:
        """Delete a membership. Returns False if there was none."""
        ...

    async def list_by_group(self, group_id: str) -> List[Membership]:
        """List a group's members, earliest joined first."""
        ...

    async def count_by_group(self, group_id: str) -> int:
        """Count a group's members."""
        ...
