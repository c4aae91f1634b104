"""Walk Mutations — create, keyword append, partial update, bulk rename, delete.

Invariants:
    - Every id-taking operation validates the id before any storage access
    - create requires non-empty name, address, category; replace_fields does not
    - append_keyword never stores a duplicate: the fetch-check-write runs under
      a per-id KeyedLock plus a row lock (SELECT ... FOR UPDATE)
    - replace_fields writes only the fields the caller sent; id is never written
    - bulk_rename is not atomic across rows; the summary reports what changed

Design Decisions:
    - replace_fields is a single UPDATE ... WHERE id RETURNING: the caller gets
      the row its own statement wrote, no lock
    - delete returns a WalkResponse snapshot taken before the row is removed
    - Domain failures roll back explicitly so row locks are released before
      the per-id lock is handed to the next waiter
"""

import logging

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.domain_types import WalkId
from app.core.errors import ErrorContext, ResourceNotFoundError, WalksError
from app.core.identifiers import parse_walk_id
from app.core.walk_rules import append_unique_keyword, check_required_fields
from app.db import walk_filters
from app.infrastructure.keyed_lock import KeyedLock
from app.models.walk import Walk
from app.schemas.walk import (
    BulkUpdateSummary, WalkCreate, WalkResponse, WalkUpdate,
)

logger = logging.getLogger(__name__)


def _not_found(walk_id: WalkId) -> ResourceNotFoundError:
    return ResourceNotFoundError("Walk", walk_id, ErrorContext(walk_id=walk_id))


class WalkMutations:
    """Write handlers for walks."""

    def __init__(self, db: AsyncSession, keyword_locks: KeyedLock):
        self.db = db
        self.keyword_locks = keyword_locks

    async def _find_for_update(self, walk_id: WalkId) -> Walk | None:
        result = await self.db.execute(
            walk_filters.walk_by_id(walk_id).with_for_update(),
        )
        return result.scalar_one_or_none()

    async def create(self, data: WalkCreate) -> Walk:
        fields = data.to_storage()
        check_required_fields(fields)

        walk = Walk(**fields)
        self.db.add(walk)
        await self.db.commit()
        await self.db.refresh(walk)
        logger.info("Walk created", extra={"walk_id": walk.id})
        return walk

    async def append_keyword(self, raw_id: str, keyword: str) -> Walk:
        walk_id = parse_walk_id(raw_id)
        async with self.keyword_locks.hold(walk_id):
            try:
                walk = await self._find_for_update(walk_id)
                if walk is None:
                    raise _not_found(walk_id)
                walk.keywords = append_unique_keyword(
                    walk.keywords, keyword, walk_id,
                )
                await self.db.commit()
            except WalksError:
                await self.db.rollback()
                raise
            await self.db.refresh(walk)
        logger.info(
            "Keyword appended",
            extra={"walk_id": walk_id, "keyword": keyword},
        )
        return walk

    async def replace_fields(self, raw_id: str, data: WalkUpdate) -> Walk:
        walk_id = parse_walk_id(raw_id)
        fields = data.to_storage()
        if fields:
            stmt = (
                update(Walk)
                .where(Walk.id == walk_id)
                .values(**fields)
                .returning(Walk)
                .execution_options(synchronize_session=False)
            )
        else:
            stmt = walk_filters.walk_by_id(walk_id)

        result = await self.db.execute(
            stmt.execution_options(populate_existing=True),
        )
        walk = result.scalar_one_or_none()
        if walk is None:
            await self.db.rollback()
            raise _not_found(walk_id)
        if fields:
            await self.db.commit()
        logger.info(
            f"Walk updated ({', '.join(sorted(fields)) or 'no fields'})",
            extra={"walk_id": walk_id},
        )
        return walk

    async def bulk_rename(self, search: str, new_name: str) -> BulkUpdateSummary:
        """Set name on every walk whose description_text contains `search`."""
        clause = walk_filters.description_contains_clause(search)
        matched = (
            await self.db.execute(walk_filters.count_where(clause))
        ).scalar_one()
        result = await self.db.execute(
            update(Walk)
            .where(clause, Walk.name.is_distinct_from(new_name))
            .values(name=new_name)
            .execution_options(synchronize_session=False),
        )
        await self.db.commit()
        summary = BulkUpdateSummary(
            matched_count=matched, modified_count=result.rowcount,
        )
        logger.info(
            "Bulk rename applied",
            extra={
                "matched_count": summary.matched_count,
                "modified_count": summary.modified_count,
            },
        )
        return summary

    async def delete(self, raw_id: str) -> WalkResponse:
        walk_id = parse_walk_id(raw_id)
        walk = await self._find_for_update(walk_id)
        if walk is None:
            await self.db.rollback()
            raise _not_found(walk_id)
        snapshot = WalkResponse.model_validate(walk)
        await self.db.delete(walk)
        await self.db.commit()
        logger.info("Walk deleted", extra={"walk_id": walk_id})
        return snapshot
