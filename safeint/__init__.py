"""
safeint — платформенное знаковое целое с проверкой переполнения.

Арифметика SafeInt совпадает с машинной на корректных входах, а любой
результат вне [MIN, MAX] вызывает SafeIntOverflowError вместо wraparound.
Деление на ноль вызывает DivideByZeroError.

Отличия API от обычного int:
- `/` — машинное деление с усечением к нулю (как quot), а не true division
- builtin sum() проходит через SafeInt.__radd__ и потому проверяется,
  но math.prod/math.gcd/math.lcm — нет; используйте safe_product, gcd, lcm
"""

from safeint.core.domain import (
    MAX_BOUND,
    MIN_BOUND,
    IntLike,
    SafeInt,
    SafeRange,
    from_safe,
    gcd,
    lcm,
    range_from,
    range_from_then,
    range_from_then_to,
    range_from_to,
    safe_product,
    safe_sum,
    to_safe,
)
from safeint.core.math import (
    INT_MAX,
    INT_MIN,
    WORD_BITS,
    DivideByZeroError,
    SafeIntError,
    SafeIntOverflowError,
)

__all__ = [
    # Bounds
    "INT_MAX",
    "INT_MIN",
    "MAX_BOUND",
    "MIN_BOUND",
    "WORD_BITS",
    # Exceptions
    "DivideByZeroError",
    "SafeIntError",
    "SafeIntOverflowError",
    # Value type
    "IntLike",
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
