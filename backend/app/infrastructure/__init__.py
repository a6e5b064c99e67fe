"""Infrastructure Layer — database session management and logging setup.

Invariants:
    - Store failures leave this layer only as core/errors.py exceptions

Design Decisions:
    - One module per cross-cutting concern (database, observability)
"""
