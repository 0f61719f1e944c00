"""Pydantic schemas for Invite API."""

from datetime import datetime

from pydantic import BaseModel, Field


class InvitePreviewResponse(BaseModel):
    """The group an invite code grants access to."""

    invite_id: str
    group_id: str
    group_name: str
    group_description: str | None
    member_count: int


class InvitePreviewDetailResponse(BaseModel):
    """Schema for invite preview response."""

    data: InvitePreviewResponse


class JoinGroupRequest(BaseModel):
    """Schema for joining a group with an invite code."""

    device_id: str | None = Field(None, max_length=255)


class MembershipResponse(BaseModel):
    """Schema for Membership response."""

    group_id: str
    device_id: str
    role: str
    joined_at: datetime


class MembershipDetailResponse(BaseModel):
    """Schema for single Membership response."""

    data: MembershipResponse
