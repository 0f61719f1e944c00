"""Invite domain entity."""

from dataclasses import dataclass, field

from core.identifiers import new_id, new_invite_code

INVITE_ID_PREFIX = "invite"

# created_by value for the default invite issued at group creation
CREATED_BY_CREATOR = "creator"


@dataclass
class Invite:
    """Domain entity for a group invite."""

    group_id: str
    created_by: str = CREATED_BY_CREATOR
    id: str = field(default_factory=lambda: new_id(INVITE_ID_PREFIX))
    invite_code: str = field(default_factory=new_invite_code)


@dataclass
class InvitePreview:
    """An invite resolved together with the group it grants access to."""

    invite_id: str
    group_id: str
    group_name: str
    group_description: str | None = None
    member_count: int = 0
