"""Walk Aggregations — grouping and distinct-value statements.

Invariants:
    - Grouping key is the raw address string (no case or whitespace folding)
    - Distinct categories exclude NULL; order is whatever the database returns
"""

from sqlalchemy import Select, func, select

from app.models.walk import Walk


def count_by_address() -> Select:
    return (
        select(Walk.address, func.count().label("count"))
        .group_by(Walk.address)
    )


def distinct_categories() -> Select:
    return (
        select(Walk.category)
        .where(Walk.category.is_not(None))
        .distinct()
    )
