"""Walk Identifiers — format check for caller-supplied walk ids.

Invariants:
    - A walk id is exactly 32 hexadecimal characters (uuid4().hex)
    - Validation is pure: no storage access, no side effects
    - parse_walk_id() returns the canonical lowercase form
"""

import re
import uuid

from app.core.domain_types import WalkId
from app.core.errors import ErrorContext, InvalidIdentifierError

WALK_ID_LENGTH = 32

_WALK_ID_RE = re.compile(r"[0-9a-fA-F]{32}")


def new_walk_id() -> WalkId:
    """Store-side id factory, used as the ORM column default."""
    return WalkId(uuid.uuid4().hex)


def is_valid_walk_id(value: object) -> bool:
    return isinstance(value, str) and _WALK_ID_RE.fullmatch(value) is not None


def parse_walk_id(value: str) -> WalkId:
    """Return the canonical id or raise InvalidIdentifierError."""
    if not is_valid_walk_id(value):
        raise InvalidIdentifierError(value, ErrorContext(walk_id=None))
    return WalkId(value.lower())
