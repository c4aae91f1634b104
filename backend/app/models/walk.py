"""Walk ORM — persists one point of interest of the walks catalog.

Invariants:
    - id is a 32-char hex token assigned at insert (column default), never updated
    - Every other column is nullable: updates may leave name/address/category empty
    - route, keywords, image, geo_shape, geo_point are JSON stored as-is

Design Decisions:
    - JSON columns for nested values: the catalog is document-shaped and
      geo_shape is never interpreted (ADR: store what the source gives us)
    - keywords uniqueness is enforced by the append handler, not by a constraint
"""

from sqlalchemy import String, Text, JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.core.identifiers import WALK_ID_LENGTH, new_walk_id
from app.db.base import Base


class Walk(Base):
    """Walk entity: one geo-located point of interest."""
    __tablename__ = "walks"

    id: Mapped[str] = mapped_column(
        String(WALK_ID_LENGTH), primary_key=True, default=new_walk_id,
    )
    external_id: Mapped[str | None] = mapped_column(String(200), nullable=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True, index=True)
    postal_code: Mapped[str | None] = mapped_column(String(20), nullable=True)
    city: Mapped[str | None] = mapped_column(String(200), nullable=True)
    category: Mapped[str | None] = mapped_column(String(200), nullable=True, index=True)
    entry_date: Mapped[str | None] = mapped_column(String(50), nullable=True)

    # Text content
    intro_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    description_text: Mapped[str | None] = mapped_column(Text, nullable=True)
    website_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    legend: Mapped[str | None] = mapped_column(Text, nullable=True)
    copyright_image: Mapped[str | None] = mapped_column(Text, nullable=True)

    # Sequences and nested values
    route: Mapped[list | None] = mapped_column(
        JSON(none_as_null=True), nullable=True,
    )
    keywords: Mapped[list | None] = mapped_column(
        JSON(none_as_null=True), nullable=True,
    )
    image: Mapped[dict | None] = mapped_column(
        JSON(none_as_null=True), nullable=True,
    )
    geo_shape: Mapped[dict | None] = mapped_column(
        JSON(none_as_null=True), nullable=True,
    )
    geo_point: Mapped[dict | None] = mapped_column(
        JSON(none_as_null=True), nullable=True,
    )
