"""Pydantic schemas for Group API."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from api.v1.schemas.invite import MembershipResponse


class GroupCreate(BaseModel):
    """Schema for creating a group.

    ``name`` is trimmed and length-checked by the service, so padding around
    a valid name is accepted and whitespace-only names fail like empty ones.
    """

    name: str | None = None
    description: str | None = Field(None, max_length=500)
    device_id: str | None = Field(
        None,
        max_length=255,
        description="Device that becomes the group's creator member",
    )


class GroupResponse(BaseModel):
    """Schema for Group response. ``invite_code`` is omitted when the group has none."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    description: str | None
    created_at: datetime
    invite_code: str | None = None


class GroupListResponse(BaseModel):
    """Schema for list of Groups response."""

    data: list[GroupResponse]
    meta: dict[str, Any] = Field(default_factory=dict)


class GroupDetailResponse(BaseModel):
    """Schema for single Group response."""

    data: GroupResponse


class PermissionSetResponse(BaseModel):
    """Capabilities derived from a member's role."""

    can_invite: bool
    can_leave: bool
    can_delete_group: bool


class PermissionStatusResponse(BaseModel):
    """A device's membership and permissions in a group."""

    is_member: bool
    is_creator: bool
    role: str | None
    permissions: PermissionSetResponse | None = None


class PermissionStatusDetailResponse(BaseModel):
    """Schema for permission query response."""

    data: PermissionStatusResponse


class LeaveGroupRequest(BaseModel):
    """Schema for leaving a group."""

    device_id: str | None = Field(None, max_length=255)


class GroupMemberListResponse(BaseModel):
    """Schema for a group's member list."""

    data: list[MembershipResponse]
    meta: dict[str, Any] = Field(default_factory=dict)
