"""Infrastructure Layer — database lifecycle, locking, logging.

Invariants:
    - Infrastructure holds no walk business rules
    - Driver exceptions mapped to StorageError before leaving this layer

Design Decisions:
    - Handles built once in the lifespan and carried on app.state (no module globals)
"""
