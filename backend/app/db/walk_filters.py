"""Walk Filters — turn endpoint parameters into SQLAlchemy statements.

Invariants:
    - Builders only construct statements; execution belongs to services/
    - Substring terms are matched literally (LIKE wildcards escaped)
    - Free-text search is case-insensitive; every other substring match is not
    - A walk with no keywords counts as zero keywords, never as an error
    - Year results are ordered by entry_date as text, not as a parsed date

Design Decisions:
    - One function per filter kind: each is testable by compiling or running
      against SQLite without an HTTP layer
    - contains()/icontains() with autoescape over regexp_match: portable across
      PostgreSQL and SQLite, and a caller's '.' or '(' never changes the match
"""

from sqlalchemy import ColumnElement, Select, func, or_, select

from app.core.domain_types import KEYWORD_RICHNESS_THRESHOLD, WalkId
from app.core.walk_rules import year_token
from app.models.walk import Walk


def all_walks() -> Select:
    return select(Walk)


def walk_by_id(walk_id: WalkId) -> Select:
    """Single walk by canonical id. Caller must have run parse_walk_id first."""
    return select(Walk).where(Walk.id == walk_id)


def text_search_clause(term: str) -> ColumnElement[bool]:
    """name OR intro_text contains term, ignoring case.

    An empty term matches every walk that has either field set.
    """
    return or_(
        Walk.name.icontains(term, autoescape=True),
        Walk.intro_text.icontains(term, autoescape=True),
    )


def text_search(term: str) -> Select:
    return select(Walk).where(text_search_clause(term))


def with_website() -> Select:
    return select(Walk).where(Walk.website_url.is_not(None))


def keyword_count() -> ColumnElement[int]:
    return func.coalesce(func.json_array_length(Walk.keywords), 0)


def keyword_rich(threshold: int = KEYWORD_RICHNESS_THRESHOLD) -> Select:
    """Walks with strictly more than `threshold` keywords."""
    return select(Walk).where(keyword_count() > threshold)


def published_in(year: str) -> Select:
    """Walks whose entry_date contains the year token, oldest first (text order)."""
    token = year_token(year)
    return (
        select(Walk)
        .where(Walk.entry_date.contains(token, autoescape=True))
        .order_by(Walk.entry_date.asc())
    )


def address_contains_clause(fragment: str) -> ColumnElement[bool]:
    return Walk.address.contains(fragment, autoescape=True)


def count_where(clause: ColumnElement[bool]) -> Select:
    return select(func.count()).select_from(Walk).where(clause)


def count_in_arrondissement(number: str) -> Select:
    """Count of walks whose address contains `number`.

    Plain substring: "1" also counts addresses containing "11" or "21".
    """
    return count_where(address_contains_clause(number))


def description_contains_clause(fragment: str) -> ColumnElement[bool]:
    return Walk.description_text.contains(fragment, autoescape=True)
