"""Group domain entity."""

from dataclasses import dataclass, field
from datetime import datetime

from core.identifiers import new_id

GROUP_ID_PREFIX = "group"


@dataclass
class Group:
    """Domain entity for a group.

    ``invite_code`` is not stored on the group row; it is attached by the
    service when the group is read together with its invite.
    """

    name: str
    id: str = field(default_factory=lambda: new_id(GROUP_ID_PREFIX))
    description: str | None = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    invite_code: str | None = None
