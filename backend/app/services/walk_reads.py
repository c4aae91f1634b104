"""Walk Reads — executes filter and aggregation statements for GET endpoints.

Invariants:
    - get_by_id validates the id before touching the database
    - Empty result sets are returned as empty lists, never as errors
    - Statement construction lives in db/; this class only runs them

Design Decisions:
    - keyword threshold injected at construction: settings stay out of db/
"""

import logging

from sqlalchemy import Select
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import KEYWORD_RICHNESS_THRESHOLD, WalkId
from app.core.errors import ErrorContext, ResourceNotFoundError
from app.core.identifiers import parse_walk_id
from app.db import walk_aggregations, walk_filters
from app.models.walk import Walk

logger = logging.getLogger(__name__)


class WalkReads:
    """Read-only walk queries."""

    def __init__(
        self, db: AsyncSession,
        keyword_threshold: int = KEYWORD_RICHNESS_THRESHOLD,
    ):
        self.db = db
        self.keyword_threshold = keyword_threshold

    async def _walks(self, statement: Select) -> list[Walk]:
        result = await self.db.execute(statement)
        return list(result.scalars().all())

    async def find(self, walk_id: WalkId) -> Walk | None:
        result = await self.db.execute(walk_filters.walk_by_id(walk_id))
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Walk]:
        return await self._walks(walk_filters.all_walks())

    async def get_by_id(self, raw_id: str) -> Walk:
        walk_id = parse_walk_id(raw_id)
        walk = await self.find(walk_id)
        if walk is None:
            raise ResourceNotFoundError(
                "Walk", walk_id, ErrorContext(walk_id=walk_id),
            )
        return walk

    async def search(self, term: str) -> list[Walk]:
        return await self._walks(walk_filters.text_search(term))

    async def with_website(self) -> list[Walk]:
        return await self._walks(walk_filters.with_website())

    async def keyword_rich(self) -> list[Walk]:
        return await self._walks(
            walk_filters.keyword_rich(self.keyword_threshold),
        )

    async def published_in(self, year: str) -> list[Walk]:
        return await self._walks(walk_filters.published_in(year))

    async def count_in_arrondissement(self, number: str) -> int:
        result = await self.db.execute(
            walk_filters.count_in_arrondissement(number),
        )
        return result.scalar_one()

    async def count_by_address(self) -> list[dict]:
        result = await self.db.execute(walk_aggregations.count_by_address())
        return [
            {"address": address, "count": count}
            for address, count in result.all()
        ]

    async def distinct_categories(self) -> list[str]:
        result = await self.db.execute(
            walk_aggregations.distinct_categories(),
        )
        return list(result.scalars().all())
