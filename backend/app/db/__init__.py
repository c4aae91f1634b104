"""Database Layer — declarative Base plus statement builders for walk queries.

Invariants:
    - Builders return SQLAlchemy statements; they never execute them
    - All execution goes through an AsyncSession owned by the services layer

Design Decisions:
    - asyncpg driver for PostgreSQL (ADR: native async, no thread pool overhead)
    - Builders kept beside Base so services depend on one storage package
"""
