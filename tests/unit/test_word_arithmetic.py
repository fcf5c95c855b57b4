"""
Тесты для модуля Word Arithmetic

Проверяет:
1. Модель слова (границы, ширина, валидация bits)
2. Проверку диапазона и усечение до слова
3. Примитивы с флагами переноса/заёма и проверку умножения
4. Деление с усечением к нулю и к минус бесконечности
5. Общий guard для семейства деления
"""

import sys
from dataclasses import FrozenInstanceError

import pytest
from hypothesis import given
from hypothesis import strategies as st

from safeint.core.math.word_arithmetic import (
    INT_MAX,
    INT_MIN,
    PLATFORM_WORD,
    WORD_BITS,
    DivideByZeroError,
    SafeIntError,
    SafeIntOverflowError,
    WordSpec,
    add_int_carry,
    check_division,
    div_int,
    div_mod_int,
    is_representable,
    mod_int,
    mul_int_may_overflow,
    quot_int,
    quot_rem_int,
    rem_int,
    sub_int_borrow,
    validate_representable,
    wrap_to_word,
)

words = st.integers(min_value=INT_MIN, max_value=INT_MAX)
nonzero_words = words.filter(lambda d: d != 0)

# =============================================================================
# ТЕСТЫ МОДЕЛИ СЛОВА
# =============================================================================


class TestWordSpec:
    """Тесты для WordSpec и платформенных констант"""

    def test_platform_bounds_match_sys_maxsize(self) -> None:
        """Платформенный MAX совпадает с sys.maxsize"""
        assert INT_MAX == sys.maxsize
        assert INT_MIN == -sys.maxsize - 1
        assert WORD_BITS == PLATFORM_WORD.bits

    def test_8_bit_word(self) -> None:
        """Границы 8-битного слова"""
        word = WordSpec(bits=8)
        assert word.min_value == -128
        assert word.max_value == 127
        assert word.modulus == 256

    def test_invalid_bits_raises(self) -> None:
        """Слишком узкое слово вызывает ошибку"""
        with pytest.raises(ValueError, match="bits must be >= 2"):
            WordSpec(bits=1)

    def test_frozen(self) -> None:
        """WordSpec неизменяем"""
        with pytest.raises(FrozenInstanceError):
            PLATFORM_WORD.bits = 32  # type: ignore[misc]


class TestExceptions:
    """Иерархия исключений совместима со встроенными"""

    def test_overflow_is_builtin_overflow(self) -> None:
        assert issubclass(SafeIntOverflowError, OverflowError)
        assert issubclass(SafeIntOverflowError, SafeIntError)
        assert issubclass(SafeIntError, ArithmeticError)

    def test_divide_by_zero_is_builtin_zero_division(self) -> None:
        assert issubclass(DivideByZeroError, ZeroDivisionError)
        assert issubclass(DivideByZeroError, SafeIntError)


# =============================================================================
# ТЕСТЫ ПРОВЕРКИ ДИАПАЗОНА
# =============================================================================


class TestRangeChecks:
    """Тесты для is_representable / validate_representable / wrap_to_word"""

    def test_bounds_representable(self) -> None:
        assert is_representable(INT_MAX)
        assert is_representable(INT_MIN)
        assert is_representable(0)

    def test_outside_bounds_not_representable(self) -> None:
        assert not is_representable(INT_MAX + 1)
        assert not is_representable(INT_MIN - 1)

    def test_custom_word(self) -> None:
        word = WordSpec(bits=8)
        assert is_representable(127, word)
        assert not is_representable(128, word)

    def test_validate_returns_value(self) -> None:
        assert validate_representable(42, "x") == 42

    def test_validate_raises_with_name(self) -> None:
        with pytest.raises(SafeIntOverflowError, match="amount="):
            validate_representable(2**100, "amount")

    def test_wrap_to_word(self) -> None:
        """Усечение в дополнительном коде"""
        assert wrap_to_word(INT_MAX + 1) == INT_MIN
        assert wrap_to_word(INT_MIN - 1) == INT_MAX
        assert wrap_to_word(-1) == -1
        assert wrap_to_word(200, WordSpec(bits=8)) == -56


# =============================================================================
# ТЕСТЫ ПРИМИТИВОВ С ФЛАГАМИ
# =============================================================================


class TestCarryPrimitives:
    """Тесты для add_int_carry / sub_int_borrow / mul_int_may_overflow"""

    def test_add_no_carry(self) -> None:
        assert add_int_carry(2, 3) == (5, False)
        assert add_int_carry(INT_MAX, INT_MIN) == (-1, False)

    def test_add_carry_wraps(self) -> None:
        """При переполнении результат усечён, флаг поднят"""
        assert add_int_carry(INT_MAX, 1) == (INT_MIN, True)
        assert add_int_carry(INT_MIN, -1) == (INT_MAX, True)

    def test_sub_borrow(self) -> None:
        assert sub_int_borrow(5, 7) == (-2, False)
        assert sub_int_borrow(INT_MIN, 1) == (INT_MAX, True)
        assert sub_int_borrow(0, INT_MIN) == (INT_MIN, True)

    def test_mul_may_overflow(self) -> None:
        assert not mul_int_may_overflow(INT_MAX, 1)
        assert not mul_int_may_overflow(INT_MIN, 1)
        assert mul_int_may_overflow(INT_MIN, -1)
        assert mul_int_may_overflow(INT_MAX, 2)
        assert not mul_int_may_overflow(0, INT_MIN)

    @given(words, words)
    def test_add_carry_matches_exact_sum(self, x: int, y: int) -> None:
        """Флаг поднят ровно тогда, когда точная сумма вне слова"""
        wrapped, carry = add_int_carry(x, y)
        assert carry == (not is_representable(x + y))
        if not carry:
            assert wrapped == x + y


# =============================================================================
# ТЕСТЫ ДЕЛЕНИЯ
# =============================================================================


class TestDivisionPrimitives:
    """Тесты для quot/rem/div/mod"""

    @pytest.mark.parametrize(
        "n,d,q,r",
        [
            (7, 2, 3, 1),
            (-7, 2, -3, -1),
            (7, -2, -3, 1),
            (-7, -2, 3, -1),
            (6, 3, 2, 0),
        ],
    )
    def test_quot_rem_truncates_toward_zero(self, n: int, d: int, q: int, r: int) -> None:
        assert quot_int(n, d) == q
        assert rem_int(n, d) == r
        assert quot_rem_int(n, d) == (q, r)

    @pytest.mark.parametrize(
        "n,d,q,m",
        [
            (7, 2, 3, 1),
            (-7, 2, -4, 1),
            (7, -2, -4, -1),
            (-7, -2, 3, -1),
        ],
    )
    def test_div_mod_floors(self, n: int, d: int, q: int, m: int) -> None:
        assert div_int(n, d) == q
        assert mod_int(n, d) == m
        assert div_mod_int(n, d) == (q, m)

    def test_quot_at_min_bound(self) -> None:
        """Точное деление MIN без потери точности"""
        assert quot_int(INT_MIN, 2) == INT_MIN // 2
        assert rem_int(INT_MIN, 3) == -((-INT_MIN) % 3)

    @given(words, nonzero_words)
    def test_quot_rem_identity(self, n: int, d: int) -> None:
        """quot * d + rem == n, знак rem совпадает со знаком n"""
        q, r = quot_rem_int(n, d)
        assert q * d + r == n
        assert r == 0 or (r < 0) == (n < 0)
        assert abs(r) < abs(d)


class TestCheckDivision:
    """Тесты для check_division"""

    def test_zero_divisor(self) -> None:
        with pytest.raises(DivideByZeroError, match="quot by zero"):
            check_division(5, 0, "quot")

    def test_min_by_minus_one(self) -> None:
        with pytest.raises(SafeIntOverflowError, match="div overflow"):
            check_division(INT_MIN, -1, "div")

    def test_valid_division_passes(self) -> None:
        check_division(INT_MIN, 1)
        check_division(INT_MAX, -1)
        check_division(0, -1)

    def test_custom_word_min(self) -> None:
        word = WordSpec(bits=8)
        with pytest.raises(SafeIntOverflowError):
            check_division(-128, -1, word=word)
