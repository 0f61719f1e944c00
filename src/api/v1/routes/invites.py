"""Invite API routes."""

from fastapi import APIRouter, Depends, status

from api.v1.dependencies import get_invite_service
from api.v1.schemas.common import ErrorResponse
from api.v1.schemas.invite import (
    InvitePreviewDetailResponse,
    InvitePreviewResponse,
    JoinGroupRequest,
    MembershipDetailResponse,
    MembershipResponse,
)
from domain.services.invite_service import InviteService

router = APIRouter(
    prefix="/invites",
    tags=["invites"],
)


@router.get(
    "/{invite_code}",
    response_model=InvitePreviewDetailResponse,
    summary="Preview an invite",
    responses={
        200: {"description": "The group this invite grants access to"},
        404: {"model": ErrorResponse, "description": "Invalid invite code"},
    },
)
async def preview_invite(
    invite_code: str,
    service: InviteService = Depends(get_invite_service),
) -> InvitePreviewDetailResponse:
    """Resolve an invite code without joining."""
    preview = await service.preview(invite_code)
    return InvitePreviewDetailResponse(
        data=InvitePreviewResponse(
            invite_id=preview.invite_id,
            group_id=preview.group_id,
            group_name=preview.group_name,
            group_description=preview.group_description,
            member_count=preview.member_count,
        )
    )


@router.post(
    "/{invite_code}/join",
    response_model=MembershipDetailResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Join a group",
    responses={
        201: {"description": "Device added to the group as a member"},
        400: {"model": ErrorResponse, "description": "device_id is missing"},
        404: {"model": ErrorResponse, "description": "Invalid invite code"},
        409: {"model": ErrorResponse, "description": "Already a group member"},
    },
)
async def join_group(
    invite_code: str,
    body: JoinGroupRequest,
    service: InviteService = Depends(get_invite_service),
) -> MembershipDetailResponse:
    """Join the invite's group as a regular member."""
    membership = await service.join(invite_code, body.device_id)
    return MembershipDetailResponse(
        data=MembershipResponse(
            group_id=membership.group_id,
            device_id=membership.device_id,
            role=membership.role.value,
            joined_at=membership.joined_at,
        )
    )
