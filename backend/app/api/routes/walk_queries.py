"""Walk Query Routes — read-only endpoints over the walks catalog.

Invariants:
    - Every handler delegates to WalkReads; no statement building here
    - Null/absent walk fields are omitted from responses
    - Empty matches return 200 with [] (or count 0), never 404

Design Decisions:
    - French paths kept (/site-internet, /mot-cle, /publie, ...): they are the
      public contract existing clients call
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_walk_reads
from app.schemas.walk import AddressCount, WalkCount, WalkResponse
from app.services.walk_reads import WalkReads

router = APIRouter(tags=["walks"])


@router.get(
    "/all", response_model=list[WalkResponse], response_model_exclude_none=True,
)
async def list_walks(reads: WalkReads = Depends(get_walk_reads)):
    """List every walk."""
    return await reads.list_all()


@router.get(
    "/id/{walk_id}", response_model=WalkResponse,
    response_model_exclude_none=True,
)
async def get_walk(walk_id: str, reads: WalkReads = Depends(get_walk_reads)):
    """Fetch one walk. 400 on malformed id, 404 when absent."""
    return await reads.get_by_id(walk_id)


@router.get(
    "/search/{search}", response_model=list[WalkResponse],
    response_model_exclude_none=True,
)
async def search_walks(search: str, reads: WalkReads = Depends(get_walk_reads)):
    """Case-insensitive substring search on name and intro text."""
    return await reads.search(search)


@router.get(
    "/site-internet", response_model=list[WalkResponse],
    response_model_exclude_none=True,
)
async def walks_with_website(reads: WalkReads = Depends(get_walk_reads)):
    return await reads.with_website()


@router.get(
    "/mot-cle", response_model=list[WalkResponse],
    response_model_exclude_none=True,
)
async def keyword_rich_walks(reads: WalkReads = Depends(get_walk_reads)):
    """Walks with more than the configured number of keywords."""
    return await reads.keyword_rich()


@router.get(
    "/publie/{year}", response_model=list[WalkResponse],
    response_model_exclude_none=True,
)
async def walks_published_in(year: str, reads: WalkReads = Depends(get_walk_reads)):
    """Walks entered in `year`, oldest entry_date first."""
    return await reads.published_in(year)


@router.get("/arrondissement/{number}", response_model=WalkCount)
async def count_walks_in_arrondissement(
    number: str, reads: WalkReads = Depends(get_walk_reads),
):
    return WalkCount(count=await reads.count_in_arrondissement(number))


@router.get("/synthese", response_model=list[AddressCount])
async def walks_per_address(reads: WalkReads = Depends(get_walk_reads)):
    """Number of walks per distinct address."""
    return await reads.count_by_address()


@router.get("/categories", response_model=list[str])
async def walk_categories(reads: WalkReads = Depends(get_walk_reads)):
    return await reads.distinct_categories()
