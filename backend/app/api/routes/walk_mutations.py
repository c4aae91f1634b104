"""Walk Mutation Routes — create, update, keyword append, bulk rename, delete.

Invariants:
    - Bodies are shape-checked by Pydantic before reaching the handler
    - Business failures raise WalksError subclasses, rendered by error_handlers
    - Successful mutations return 200 with the walk or a summary object
"""

from fastapi import APIRouter, Depends

from app.api.dependencies import get_walk_mutations
from app.schemas.walk import (
    BulkRename, BulkUpdateSummary, KeywordAppend,
    WalkCreate, WalkResponse, WalkUpdate,
)
from app.services.walk_mutations import WalkMutations

router = APIRouter(tags=["walks"])


@router.post(
    "/add", response_model=WalkResponse, response_model_exclude_none=True,
)
async def create_walk(
    body: WalkCreate, mutations: WalkMutations = Depends(get_walk_mutations),
):
    """Create a walk. name, address and category are required."""
    return await mutations.create(body)


@router.put(
    "/add-mot-cle/{walk_id}", response_model=WalkResponse,
    response_model_exclude_none=True,
)
async def append_keyword(
    walk_id: str,
    body: KeywordAppend,
    mutations: WalkMutations = Depends(get_walk_mutations),
):
    """Append a keyword unless it is already present."""
    return await mutations.append_keyword(walk_id, body.keyword)


@router.put(
    "/update-one/{walk_id}", response_model=WalkResponse,
    response_model_exclude_none=True,
)
async def update_walk(
    walk_id: str,
    body: WalkUpdate,
    mutations: WalkMutations = Depends(get_walk_mutations),
):
    """Merge the supplied fields into the walk."""
    return await mutations.replace_fields(walk_id, body)


@router.put("/update-many/{search}", response_model=BulkUpdateSummary)
async def rename_matching_walks(
    search: str,
    body: BulkRename,
    mutations: WalkMutations = Depends(get_walk_mutations),
):
    """Rename every walk whose description contains `search`."""
    return await mutations.bulk_rename(search, body.name)


@router.delete(
    "/delete/{walk_id}", response_model=WalkResponse,
    response_model_exclude_none=True,
)
async def delete_walk(
    walk_id: str, mutations: WalkMutations = Depends(get_walk_mutations),
):
    """Delete a walk and return its last state."""
    return await mutations.delete(walk_id)
