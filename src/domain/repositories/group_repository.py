"""Group repository protocol."""

from typing import Protocol

from domain.entities.group import Group


class IGroupRepository(Protocol):
    """Repository interface for Group entities."""

    async def get(self, id: str) -> Group | None:
        """Get a group by ID."""
        ...

    async def list_all(self) -> list[Group]:
        """Get all groups, newest first (ties broken by ID, descending)."""
        ...

    async def create(self, group: Group) -> Group:
        """Create a new group. Raises ConflictError on a duplicate ID."""
        ...
