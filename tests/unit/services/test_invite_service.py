"""Unit tests for InviteService."""

import pytest

from core.exceptions import (
    AlreadyAGroupMemberError,
    ConflictError,
    ErrorCode,
    InviteNotFoundError,
    ValidationError,
)
from domain.entities.group import Group
from domain.entities.invite import Invite
from domain.entities.membership import Role
from domain.services.invite_service import InviteService
from tests.unit.conftest import FakeUnitOfWork


@pytest.fixture
def service(uow: FakeUnitOfWork) -> InviteService:
    return InviteService(lambda: uow)


@pytest.fixture
def group() -> Group:
    return Group(name="Book Club", description="Monthly reads")


@pytest.fixture
def invite(group: Group) -> Invite:
    return Invite(group_id=group.id)


class TestPreview:
    @pytest.mark.asyncio
    async def test_resolves_group_details(
        self, service: InviteService, uow: FakeUnitOfWork, group: Group, invite: Invite
    ):
        uow.invites.get_by_code.return_value = invite
        uow.groups.get.return_value = group
        uow.members.count_by_group.return_value = 3

        result = await service.preview(invite.invite_code)

        assert result.invite_id == invite.id
        assert result.group_id == group.id
        assert result.group_name == "Book Club"
        assert result.group_description == "Monthly reads"
        assert result.member_count == 3
        uow.members.count_by_group.assert_awaited_once_with(group.id)
        uow.invites.get_by_code.assert_awaited_once_with(invite.invite_code)

    @pytest.mark.asyncio
    async def test_unknown_code(self, service: InviteService, uow: FakeUnitOfWork):
        uow.invites.get_by_code.return_value = None

        with pytest.raises(InviteNotFoundError):
            await service.preview("nope")

    @pytest.mark.asyncio
    async def test_invite_whose_group_is_gone(
        self, service: InviteService, uow: FakeUnitOfWork, invite: Invite
    ):
        uow.invites.get_by_code.return_value = invite
        uow.groups.get.return_value = None

        with pytest.raises(InviteNotFoundError):
            await service.preview(invite.invite_code)


class TestJoin:
    @pytest.mark.asyncio
    async def test_joins_as_member(
        self, service: InviteService, uow: FakeUnitOfWork, invite: Invite, device_id: str
    ):
        uow.invites.get_by_code.return_value = invite
        uow.members.get_role.return_value = None
        uow.members.create.side_effect = lambda m: m

        result = await service.join(invite.invite_code, device_id)

        assert result.group_id == invite.group_id
        assert result.device_id == device_id
        assert result.role == Role.MEMBER
        assert uow.committed

    @pytest.mark.asyncio
    async def test_rejects_existing_member(
        self, service: InviteService, uow: FakeUnitOfWork, invite: Invite, device_id: str
    ):
        uow.invites.get_by_code.return_value = invite
        uow.members.get_role.return_value = Role.CREATOR

        with pytest.raises(AlreadyAGroupMemberError):
            await service.join(invite.invite_code, device_id)

        uow.members.create.assert_not_called()
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_lost_insert_race_reports_already_a_member(
        self, service: InviteService, uow: FakeUnitOfWork, invite: Invite, device_id: str
    ):
        # Both joins saw no role; the second insert hits the primary key
        uow.invites.get_by_code.return_value = invite
        uow.members.get_role.return_value = None
        uow.members.create.side_effect = ConflictError("Membership already exists")

        with pytest.raises(AlreadyAGroupMemberError) as exc_info:
            await service.join(invite.invite_code, device_id)

        assert exc_info.value.error_code == ErrorCode.ALREADY_A_GROUP_MEMBER
        assert exc_info.value.status_code == 409
        assert not uow.committed

    @pytest.mark.asyncio
    async def test_unknown_code(
        self, service: InviteService, uow: FakeUnitOfWork, device_id: str
    ):
        uow.invites.get_by_code.return_value = None

        with pytest.raises(InviteNotFoundError):
            await service.join("nope", device_id)

    @pytest.mark.asyncio
    async def test_requires_device_id(self, service: InviteService, uow: FakeUnitOfWork):
        with pytest.raises(ValidationError):
            await service.join("code", "")

        assert uow.entered == 0
