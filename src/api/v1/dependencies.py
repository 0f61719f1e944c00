"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.group_service import GroupService
from domain.services.invite_service import InviteService
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_group_service() -> GroupService:
    """Get Group service instance."""
    return GroupService(get_uow_factory())


@lru_cache
def get_invite_service() -> InviteService:
    """Get Invite service instance."""
    return InviteService(get_uow_factory())
