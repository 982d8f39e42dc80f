"""Domain Types - rich types that replace bare primitives across the codebase.

Invariants:
    - UserId wraps int - persistence assigns it, never the caller
    - Rule tags encoded as an Enum - no raw string matching in the validator

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: tags serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)

# Ids are stored in a 32-bit INTEGER column
USER_ID_MIN = -(2**31)
USER_ID_MAX = 2**31 - 1


# ─── Constants ───────────────────────────────────────────────────

DATE_FORMAT = "YYYY-MM-DD"
NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 255


# ─── Enums ───────────────────────────────────────────────────────

class RuleTag(str, Enum):
    """Field rule kinds, in the order they are evaluated within a field."""
    REQUIRED = "required"
    MIN_LENGTH = "min"
    MAX_LENGTH = "max"
    DATE_FORMAT = "dateformat"
    NOT_FUTURE = "notfuture"
