"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - WalkId wraps the 32-char hex token; raw path values go through parse_walk_id
    - Required creation fields listed once, in REQUIRED_WALK_FIELDS
    - Defaults for query builders live here, not in routes

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

WalkId = NewType("WalkId", str)


# ─── Constants ───────────────────────────────────────────────────

REQUIRED_WALK_FIELDS: tuple[str, ...] = ("name", "address", "category")

KEYWORD_RICHNESS_THRESHOLD = 5

YEAR_TOKEN_LENGTH = 4
