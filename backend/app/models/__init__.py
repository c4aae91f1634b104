"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Walk is the only persisted entity

Design Decisions:
    - One file per entity for locality (ADR: ExMA max 3-4 files to understand a feature)
    - Models imported here so Base.metadata is complete before create_all
"""

from app.models.walk import Walk  # noqa: F401
