"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ContactId wraps the integer primary key assigned by the store
    - Every repository call is labelled with a StoreOperation for logs and errors

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ContactId = NewType("ContactId", int)


# ─── Enums ───────────────────────────────────────────────────────

class StoreOperation(str, Enum):
    """Data-access operations exposed by the contact repository."""
    FIND_ALL = "find_all"
    FIND_BY_PRIMARY_KEY = "find_by_primary_key"
    CREATE = "create"
    UPDATE = "update"
    DESTROY = "destroy"


class LogFormat(str, Enum):
    """Log output formats accepted by setup_logging."""
    JSON = "json"
    TEXT = "text"


# ─── Bounds ──────────────────────────────────────────────────────

# Largest primary key a 64-bit INTEGER column can hold
MAX_CONTACT_ID = 2**63 - 1
