"""Unit tests for SQLAlchemyUnitOfWork failure handling."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.exc import TimeoutError as PoolTimeoutError

from core.exceptions import ConflictError, StorageError, StorageTimeoutError
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


@pytest.fixture
def session() -> MagicMock:
    session = MagicMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    return session


@pytest.fixture
def uow(session: MagicMock) -> SQLAlchemyUnitOfWork:
    return SQLAlchemyUnitOfWork(MagicMock(return_value=session))


class TestUnitOfWork:
    def test_repositories_require_context(self, uow: SQLAlchemyUnitOfWork):
        with pytest.raises(RuntimeError):
            _ = uow.groups

    @pytest.mark.asyncio
    async def test_commit_and_close_on_success(
        self, uow: SQLAlchemyUnitOfWork, session: MagicMock
    ):
        async with uow:
            await uow.commit()

        session.commit.assert_awaited_once()
        session.rollback.assert_not_called()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_driver_timeout_becomes_storage_timeout(
        self, uow: SQLAlchemyUnitOfWork, session: MagicMock
    ):
        with pytest.raises(StorageTimeoutError):
            async with uow:
                raise TimeoutError()

        session.rollback.assert_awaited_once()
        session.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_pool_timeout_becomes_storage_timeout(
        self, uow: SQLAlchemyUnitOfWork, session: MagicMock
    ):
        with pytest.raises(StorageTimeoutError):
            async with uow:
                raise PoolTimeoutError("QueuePool limit reached")

    @pytest.mark.asyncio
    async def test_driver_error_becomes_storage_error(
        self, uow: SQLAlchemyUnitOfWork, session: MagicMock
    ):
        with pytest.raises(StorageError) as exc_info:
            async with uow:
                raise OperationalError("SELECT 1", {}, Exception("server closed"))

        assert not isinstance(exc_info.value, StorageTimeoutError)
        assert "server closed" not in exc_info.value.message
        # Left for the API exception handler to log
        assert isinstance(exc_info.value.__cause__, OperationalError)
        session.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_application_errors_pass_through(
        self, uow: SQLAlchemyUnitOfWork, session: MagicMock
    ):
        with pytest.raises(ConflictError):
            async with uow:
                raise ConflictError()

        session.rollback.assert_awaited_once()
