"""API Dependencies — build per-request walk services from app.state handles.

Invariants:
    - One AsyncSession per request, shared by the services built for it
    - KeyedLock is process-wide (app.state), never per request
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.infrastructure.database import get_db
from app.infrastructure.keyed_lock import KeyedLock
from app.services.walk_mutations import WalkMutations
from app.services.walk_reads import WalkReads


def get_keyword_locks(request: Request) -> KeyedLock:
    locks = getattr(request.app.state, "keyword_locks", None)
    if locks is None:
        raise RuntimeError("Keyword locks not initialized")
    return locks


async def get_walk_reads(db: AsyncSession = Depends(get_db)) -> WalkReads:
    return WalkReads(
        db, keyword_threshold=get_settings().keyword_richness_threshold,
    )


async def get_walk_mutations(
    db: AsyncSession = Depends(get_db),
    keyword_locks: KeyedLock = Depends(get_keyword_locks),
) -> WalkMutations:
    return WalkMutations(db, keyword_locks)
