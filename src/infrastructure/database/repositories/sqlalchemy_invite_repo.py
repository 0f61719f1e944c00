"""SQLAlchemy implementation of Invite repository."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from core.exceptions import ConflictError
from domain.entities.invite import Invite
from infrastructure.database.models import InviteModel


class SQLAlchemyInviteRepository:
    """SQLAlchemy implementation of IInviteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, invite: Invite) -> Invite:
        """Create a new invite."""
        model = self._to_model(invite)
        self._session.add(model)
        try:
            await self._session.flush()
        except IntegrityError as exc:
            raise ConflictError(
                "Invite already exists",
                details={"invite_id": invite.id},
            ) from exc
        await self._session.refresh(model)
        return self._to_entity(model)

    async def get_by_group_id(self, group_id: str) -> Invite | None:
        """Get the earliest invite issued for a group."""
        stmt = (
            select(InviteModel)
            .where(InviteModel.group_id == group_id)
            .order_by(InviteModel.id)
            .limit(1)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_by_code(self, invite_code: str) -> Invite | None:
        """Get an invite by its public code."""
        stmt = select(InviteModel).where(InviteModel.invite_code == invite_code)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    def _to_entity(self, model: InviteModel) -> Invite:
        """Convert ORM model to domain entity."""
        return Invite(
            id=model.id,
            group_id=model.group_id,
            invite_code=model.invite_code,
            created_by=model.created_by,
        )

    def _to_model(self, entity: Invite) -> InviteModel:
        """Convert domain entity to ORM model."""
        return InviteModel(
            id=entity.id,
            group_id=entity.group_id,
            invite_code=entity.invite_code,
            created_by=entity.created_by,
        )
