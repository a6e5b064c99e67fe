"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Importing this package registers every table on Base.metadata

Design Decisions:
    - One file per entity; imported here so create_all and Alembic see every table
"""

from app.models.contact import Contact  # noqa: F401
