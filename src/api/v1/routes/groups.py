"""Group API routes."""

from fastapi import APIRouter, Depends, Query, status

from api.v1.dependencies import get_group_service
from api.v1.schemas.group import (
    GroupCreate,
    GroupDetailResponse,
    GroupListResponse,
    GroupMemberListResponse,
    GroupResponse,
    LeaveGroupRequest,
    PermissionSetResponse,
    PermissionStatusDetailResponse,
    PermissionStatusResponse,
)
from api.v1.schemas.common import ErrorResponse, MessageResponse
from api.v1.schemas.invite import MembershipResponse
from domain.entities.group import Group
from domain.entities.membership import PermissionStatus
from domain.services.group_service import GroupService

router = APIRouter(
    prefix="/groups",
    tags=["groups"],
)


@router.get(
    "",
    response_model=GroupListResponse,
    response_model_exclude_unset=True,
    summary="List groups",
    responses={
        200: {"description": "All groups, newest first"},
    },
)
async def list_groups(
    service: GroupService = Depends(get_group_service),
) -> GroupListResponse:
    """Get all groups ordered by creation time, newest first."""
    groups = await service.list_groups()
    data = [_build_group_response(g) for g in groups]
    return GroupListResponse(data=data, meta={"total": len(data)})


@router.post(
    "",
    response_model=GroupDetailResponse,
    response_model_exclude_unset=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a group",
    responses={
        201: {"description": "Group and its default invite created"},
        400: {"model": ErrorResponse, "description": "Group name is empty or too long"},
    },
)
async def create_group(
    body: GroupCreate,
    service: GroupService = Depends(get_group_service),
) -> GroupDetailResponse:
    """Create a group with a default invite code."""
    group = await service.create(
        name=body.name or "",
        description=body.description,
        device_id=body.device_id,
    )
    return GroupDetailResponse(data=_build_group_response(group))


@router.get(
    "/{group_id}",
    response_model=GroupDetailResponse,
    response_model_exclude_unset=True,
    summary="Get a group",
    responses={
        200: {"description": "Group with its invite code, when it has one"},
        404: {"model": ErrorResponse, "description": "Group not found"},
    },
)
async def get_group(
    group_id: str,
    service: GroupService = Depends(get_group_service),
) -> GroupDetailResponse:
    """Get a group by ID."""
    group = await service.get_by_id(group_id)
    return GroupDetailResponse(data=_build_group_response(group))


@router.get(
    "/{group_id}/permissions",
    response_model=PermissionStatusDetailResponse,
    summary="Query a device's permissions",
    responses={
        200: {"description": "Membership and derived permissions"},
        400: {"model": ErrorResponse, "description": "device_id is missing"},
    },
)
async def get_permissions(
    group_id: str,
    device_id: str | None = Query(None, max_length=255),
    service: GroupService = Depends(get_group_service),
) -> PermissionStatusDetailResponse:
    """Describe a device's role and capabilities in a group."""
    result = await service.get_permissions(group_id, device_id)
    return PermissionStatusDetailResponse(data=_build_permission_response(result))


@router.post(
    "/{group_id}/leave",
    response_model=MessageResponse,
    summary="Leave a group",
    responses={
        200: {"description": "Membership removed"},
        400: {"model": ErrorResponse, "description": "device_id is missing"},
        404: {"model": ErrorResponse, "description": "Group not found or device is not a member"},
    },
)
async def leave_group(
    group_id: str,
    body: LeaveGroupRequest,
    service: GroupService = Depends(get_group_service),
) -> MessageResponse:
    """Remove the device's membership from the group."""
    await service.leave(group_id, body.device_id)
    return MessageResponse(message="Left group successfully")


@router.get(
    "/{group_id}/members",
    response_model=GroupMemberListResponse,
    summary="List group members",
    responses={
        200: {"description": "Members, earliest joined first"},
        400: {"model": ErrorResponse, "description": "device_id is missing"},
        403: {"model": ErrorResponse, "description": "Caller is not a member of the group"},
        404: {"model": ErrorResponse, "description": "Group not found"},
    },
)
async def list_members(
    group_id: str,
    device_id: str | None = Query(None, max_length=255),
    service: GroupService = Depends(get_group_service),
) -> GroupMemberListResponse:
    """List a group's members, visible to members only."""
    members = await service.list_members(group_id, device_id)
    data = [
        MembershipResponse(
            group_id=m.group_id,
            device_id=m.device_id,
            role=m.role.value,
            joined_at=m.joined_at,
        )
        for m in members
    ]
    return GroupMemberListResponse(data=data, meta={"total": len(data)})


def _build_group_response(group: Group) -> GroupResponse:
    """Convert domain entity to response schema, leaving out a missing invite code."""
    extra = {"invite_code": group.invite_code} if group.invite_code else {}
    return GroupResponse(
        id=group.id,
        name=group.name,
        description=group.description,
        created_at=group.created_at,
        **extra,
    )


def _build_permission_response(result: PermissionStatus) -> PermissionStatusResponse:
    """Convert a permission status to its response schema."""
    permissions = None
    if result.permissions:
        permissions = PermissionSetResponse(
            can_invite=result.permissions.can_invite,
            can_leave=result.permissions.can_leave,
            can_delete_group=result.permissions.can_delete_group,
        )
    return PermissionStatusResponse(
        is_member=result.is_member,
        is_creator=result.is_creator,
        role=result.role.value if result.role else None,
        permissions=permissions,
    )
