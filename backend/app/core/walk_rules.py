"""Walk Rules — pure checks applied by the mutation handlers before any write.

Invariants:
    - Creation requires non-empty name, address, category (updates do not)
    - append_unique_keyword never introduces a duplicate; it tolerates
      duplicates already present in stored data
    - Keyword comparison is exact string equality (case-sensitive)
    - year_token keeps the first 4 characters of the caller's value
"""

from typing import Any

from app.core.domain_types import REQUIRED_WALK_FIELDS, YEAR_TOKEN_LENGTH
from app.core.errors import (
    DuplicateKeywordError, ErrorContext, RecordValidationError,
)


def missing_required_fields(data: dict[str, Any]) -> list[str]:
    """Required fields that are absent, None, or an empty string."""
    return [name for name in REQUIRED_WALK_FIELDS if not data.get(name)]


def check_required_fields(data: dict[str, Any]) -> None:
    missing = missing_required_fields(data)
    if missing:
        raise RecordValidationError(missing)


def append_unique_keyword(
    keywords: list[str] | None, keyword: str, walk_id: str | None = None,
) -> list[str]:
    """Return a new list with keyword appended, or raise DuplicateKeywordError."""
    current = list(keywords or [])
    if keyword in current:
        raise DuplicateKeywordError(keyword, ErrorContext(walk_id=walk_id))
    current.append(keyword)
    return current


def year_token(value: str) -> str:
    return value[:YEAR_TOKEN_LENGTH]
