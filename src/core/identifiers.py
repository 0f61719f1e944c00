"""Identifier and invite-code generation.

Record ids have the shape ``<prefix>_<time_ns>_<random>``:

* ``time_ns`` is ``time.time_ns()`` zero-padded to 19 digits, so ids sort
  lexically in creation order.
* ``random`` is 16 hex characters (64 bits) from :mod:`secrets`, so ids
  generated in the same nanosecond by uncoordinated callers still differ.

Invite codes double as join secrets and carry no time component: 24
characters drawn uniformly from ``[a-z0-9]``, about 124 bits of entropy.
"""

import secrets
import string
import time

INVITE_CODE_ALPHABET = string.ascii_lowercase + string.digits
INVITE_CODE_LENGTH = 24

_RANDOM_BYTES = 8
_TIME_WIDTH = 19


def new_id(prefix: str) -> str:
    """Return a new opaque identifier such as ``group_1760..._9f2c...``."""
    return f"{prefix}_{time.time_ns():0{_TIME_WIDTH}d}_{secrets.token_hex(_RANDOM_BYTES)}"


def new_invite_code() -> str:
    """Return a new random invite code."""
    return "".join(secrets.choice(INVITE_CODE_ALPHABET) for _ in range(INVITE_CODE_LENGTH))
