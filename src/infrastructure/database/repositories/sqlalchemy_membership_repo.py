"""SQLAlchemy implementation of Membership repository."""

from typing import List

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ConflictError
from domain.entities.membership import Membership, Role, parse_role
from infrastructure.database.models import MemberModel


class SQLAlchemyMembershipRepository:
    """SQLAlchemy implementation of IMembershipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_role(self, group_id: str, device_id: str) -> Role | None:
        """Get a device's role in a group."""
        stmt = select(MemberModel.role).where(
            MemberModel.group_id == group_id,
            MemberModel.device_id == device_id,
        )
        result = await self._session.execute(stmt)
        role = result.scalar_one_or_none()
        return parse_role(role) if role is not None else None

    async def create(self, membership: Membership) -> Membership:
        """Add a device to a group."""
        model = self._to_model(membership)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Membership already exists",
                details={
                    "group_id": membership.group_id,
                    "device_id": membership.device_id,
                },
            ) from exc
        await self._session.refresh(model)
        return self._to_entity(model)

    async def delete(self, group_id: str, device_id: str) -> bool:
        """Remove a device from a group."""
        stmt = delete(MemberModel).where(
            MemberModel.group_id == group_id,
            MemberModel.device_id == device_id,
        )
        result = await self._session.execute(stmt)
        await self._session.flush()
        return bool(result.rowcount)  # type: ignore[attr-defined]

    async def list_by_group(self, group_id: str) -> List[Membership]:
        """List a group's members, earliest joined first."""
        stmt = (
            select(MemberModel)
            .where(MemberModel.group_id == group_id)
            .order_by(MemberModel.joined_at.asc(), MemberModel.device_id.asc())
        )
        result = await self._session.execute(stmt)
        return [self._to_entity(m) for m in result.scalars().all()]

    async def count_by_group(self, group_id: str) -> int:
        """Count a group's members."""
        stmt = select(func.count()).select_from(MemberModel).where(
            MemberModel.group_id == group_id
        )
        result = await self._session.execute(stmt)
        return result.scalar_one()

    def _to_entity(self, model: MemberModel) -> Membership:
        """Convert ORM model to domain entity."""
        return Membership(
            group_id=model.group_id,
            device_id=model.device_id,
            role=parse_role(model.role),
            joined_at=model.joined_at,
        )

    def _to_model(self, entity: Membership) -> MemberModel:
        """Convert domain entity to ORM model."""
        return MemberModel(
            group_id=entity.group_id,
            device_id=entity.device_id,
            role=entity.role.value,
            joined_at=entity.joined_at,
        )
