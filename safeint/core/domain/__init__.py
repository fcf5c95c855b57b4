"""
Domain models and value objects.

Contains the SafeInt value type, its folds and the SafeRange generator.
"""

from safeint.core.domain.folds import gcd, lcm, safe_product, safe_sum
from safeint.core.domain.safe_int import (
    MAX_BOUND,
    MIN_BOUND,
    IntLike,
    SafeInt,
    from_safe,
    to_safe,
)
from safeint.core.domain.safe_range import (
    SafeRange,
    range_from,
    range_from_then,
    range_from_then_to,
    range_from_to,
)

__all__ = [
    # SafeInt model
    "IntLike",
    "MAX_BOUND",
    "MIN_BOUND",
    "SafeInt",
    "from_safe",
    "to_safe",
    # Folds
    "gcd",
    "lcm",
    "safe_product",
    "safe_sum",
    # Ranges
    "SafeRange",
    "range_from",
    "range_from_then",
    "range_from_then_to",
    "range_from_to",
]
