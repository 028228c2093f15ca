"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ProductId wraps the engine-assigned integer key
    - Price is a whole number of the smallest currency unit; may be zero or negative
    - PRICE_THRESHOLD is the fixed lower bound (exclusive) used for totals

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ProductId = NewType("ProductId", int)


# ─── Value Types ─────────────────────────────────────────────────

Price = NewType("Price", int)


# ─── Constants ───────────────────────────────────────────────────

# Only products priced strictly above this count towards the total
PRICE_THRESHOLD: Price = Price(0)
