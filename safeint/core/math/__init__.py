"""
Core math modules для safeint

Модель платформенного слова и арифметические примитивы с флагами переполнения.
"""

from safeint.core.math.word_arithmetic import (
    # Word model
    INT_MAX,
    INT_MIN,
    PLATFORM_WORD,
    WORD_BITS,
    WordSpec,
    # Exceptions
    DivideByZeroError,
    SafeIntError,
    SafeIntOverflowError,
    # Range checks
    is_representable,
    validate_representable,
    wrap_to_word,
    # Carry primitives
    add_int_carry,
    mul_int_may_overflow,
    sub_int_borrow,
    # Division
    check_division,
    div_int,
    div_mod_int,
    mod_int,
    quot_int,
    quot_rem_int,
    rem_int,
)

__all__ = [
    # Word model
    "INT_MAX",
    "INT_MIN",
    "PLATFORM_WORD",
    "WORD_BITS",
    "WordSpec",
    # Exceptions
    "DivideByZeroError",
    "SafeIntError",
    "SafeIntOverflowError",
    # Range checks
    "is_representable",
    "validate_representable",
    "wrap_to_word",
    # Carry primitives
    "add_int_carry",
    "mul_int_may_overflow",
    "sub_int_borrow",
    # Division
    "check_division",
    "div_int",
    "div_mod_int",
    "mod_int",
    "quot_int",
    "quot_rem_int",
    "rem_int",
]
