"""Domain Types — constants and enums shared across the codebase.

Invariants:
    - TOP_EARNERS_LIMIT bounds the top-N salary query
    - All outcome variants encoded as an Enum — no raw string matching

Design Decisions:
    - str Enums: serialize to JSON and log extras without custom encoders
"""

from enum import Enum


# ─── Constants ───────────────────────────────────────────────────

TOP_EARNERS_LIMIT = 10


# ─── Enums ───────────────────────────────────────────────────────

class OutcomeKind(str, Enum):
    """Classification of an upstream call result."""
    OK = "ok"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    UPSTREAM_FAILURE = "upstream_failure"
