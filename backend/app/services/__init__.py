"""Services Layer — read and mutation handlers for walks.

Invariants:
    - Handlers are built per request around one AsyncSession
    - Path identifiers are validated before any storage access

Design Decisions:
    - Reads and mutations split into two classes (ADR: ExMA no god objects)
"""
