"""Walk Schemas — Pydantic models for walk request bodies and responses.

Invariants:
    - WalkCreate accepts every field as optional; required-field checks run in
      the mutation handler so they surface as RecordValidationError
    - WalkUpdate never carries id (identifier is immutable)
    - Only fields the caller actually sent are applied on update (exclude_unset)
    - WalkResponse is built from ORM objects (from_attributes)

Design Decisions:
    - geo_shape typed as Any: stored and returned untouched
    - Unknown body keys ignored (pydantic default) rather than rejected
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class WalkImage(BaseModel):
    """Image file metadata attached to a walk."""
    thumbnail: bool | None = None
    filename: str | None = None
    format: str | None = None
    width: int | float | None = None
    height: int | float | None = None
    mimetype: str | None = None
    etag: str | None = None
    id: str | None = None
    last_synchronized: str | None = None
    color_summary: list[str] | None = None


class GeoPoint(BaseModel):
    longitude: float
    latitude: float


class WalkFields(BaseModel):
    """Every writable walk field, all optional."""
    external_id: str | None = None
    name: str | None = None
    address: str | None = None
    postal_code: str | None = None
    city: str | None = None
    category: str | None = None
    entry_date: str | None = None
    intro_text: str | None = None
    description_text: str | None = None
    website_url: str | None = None
    image_url: str | None = None
    legend: str | None = None
    copyright_image: str | None = None
    route: list[str] | None = None
    keywords: list[str] | None = None
    image: WalkImage | None = None
    geo_shape: Any = None
    geo_point: GeoPoint | None = None

    def to_storage(self) -> dict[str, Any]:
        """Fields the caller set, with nested models as plain JSON dicts."""
        return self.model_dump(exclude_unset=True)


class WalkCreate(WalkFields):
    """Body of POST /add."""


class WalkUpdate(WalkFields):
    """Body of PUT /update-one/{id}. Partial: unset fields are untouched."""


class WalkResponse(WalkFields):
    """Stored walk as returned by every endpoint."""
    model_config = ConfigDict(from_attributes=True)

    id: str


class KeywordAppend(BaseModel):
    """Body of PUT /add-mot-cle/{id}."""
    keyword: str = Field(min_length=1)


class BulkRename(BaseModel):
    """Body of PUT /update-many/{search}."""
    name: str


class BulkUpdateSummary(BaseModel):
    acknowledged: bool = True
    matched_count: int
    modified_count: int


class AddressCount(BaseModel):
    address: str | None
    count: int


class WalkCount(BaseModel):
    count: int
