"""
Word Arithmetic — модель машинного слова и примитивы проверки переполнения

Python int имеет произвольную точность, поэтому "платформенное" знаковое
целое моделируется явно:
- Границы слова (WordSpec, INT_MIN, INT_MAX)
- Примитивы с флагом переноса/заёма (аналоги add/sub with carry)
- Проверка "может ли произведение переполниться"
- Деление с усечением к нулю (quot/rem) и к минус бесконечности (div/mod)
- Общий guard для семейства деления

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Результат примитива либо точный, либо помечен флагом переполнения
2. quot_int * d + rem_int == n, знак rem совпадает со знаком n (или 0)
3. div_int * d + mod_int == n, знак mod совпадает со знаком d (или 0)
4. Все функции чистые и детерминированные
"""

import sys
from dataclasses import dataclass
from typing import Final

# =============================================================================
# EXCEPTIONS
# =============================================================================


class SafeIntError(ArithmeticError):
    """Базовая ошибка checked-арифметики."""

    pass


class SafeIntOverflowError(SafeIntError, OverflowError):
    """
    Математически точный результат не помещается в [MIN, MAX].

    Наследует встроенный OverflowError, поэтому существующие обработчики
    `except OverflowError` продолжают работать.
    """

    pass


class DivideByZeroError(SafeIntError, ZeroDivisionError):
    """Операция семейства деления вызвана с делителем 0."""

    pass


# =============================================================================
# МОДЕЛЬ СЛОВА
# =============================================================================


@dataclass(frozen=True)
class WordSpec:
    """
    Знаковое слово в дополнительном коде.

    bits — ширина слова в битах (включая знаковый бит).
    """

    bits: int

    def __post_init__(self) -> None:
        if self.bits < 2:
            raise ValueError(f"bits must be >= 2, got {self.bits}")

    @property
    def min_value(self) -> int:
        return -(1 << (self.bits - 1))

    @property
    def max_value(self) -> int:
        return (1 << (self.bits - 1)) - 1

    @property
    def modulus(self) -> int:
        return 1 << self.bits


# Ширина платформенного int (sys.maxsize == 2**63 - 1 на 64-битных системах)
PLATFORM_WORD: Final[WordSpec] = WordSpec(bits=sys.maxsize.bit_length() + 1)

WORD_BITS: Final[int] = PLATFORM_WORD.bits
INT_MIN: Final[int] = PLATFORM_WORD.min_value
INT_MAX: Final[int] = PLATFORM_WORD.max_value


# =============================================================================
# ПРОВЕРКА ДИАПАЗОНА
# =============================================================================


def is_representable(value: int, word: WordSpec = PLATFORM_WORD) -> bool:
    """
    Проверка, помещается ли значение в слово.

    Examples:
        >>> is_representable(INT_MAX)
        True
        >>> is_representable(INT_MAX + 1)
        False
    """
    return word.min_value <= value <= word.max_value


def validate_representable(
    value: int,
    name: str,
    word: WordSpec = PLATFORM_WORD,
) -> int:
    """
    Валидация, что значение помещается в слово.

    Args:
        value: Проверяемое значение (произвольной точности)
        name: Имя параметра (для сообщения об ошибке)
        word: Модель слова (default: PLATFORM_WORD)

    Returns:
        value без изменений

    Raises:
        SafeIntOverflowError: Если value вне [word.min_value, word.max_value]
    """
    if not is_representable(value, word):
        raise SafeIntOverflowError(
            f"{name}={value} out of range [{word.min_value}, {word.max_value}] "
            f"for {word.bits}-bit word"
        )
    return value


def wrap_to_word(value: int, word: WordSpec = PLATFORM_WORD) -> int:
    """
    Усечение до слова в дополнительном коде (то, что сохранила бы машина).

    Examples:
        >>> wrap_to_word(INT_MAX + 1) == INT_MIN
        True
        >>> wrap_to_word(-1)
        -1
    """
    half = 1 << (word.bits - 1)
    return ((value + half) % word.modulus) - half


# =============================================================================
# ПРИМИТИВЫ С ФЛАГОМ ПЕРЕПОЛНЕНИЯ
# =============================================================================


def add_int_carry(x: int, y: int, word: WordSpec = PLATFORM_WORD) -> tuple[int, bool]:
    """
    Сложение с флагом переноса.

    Returns:
        (wrapped, carry):
            - wrapped: результат, усечённый до слова
            - carry: True если точная сумма не помещается в слово
    """
    exact = x + y
    wrapped = wrap_to_word(exact, word)
    return (wrapped, wrapped != exact)


def sub_int_borrow(x: int, y: int, word: WordSpec = PLATFORM_WORD) -> tuple[int, bool]:
    """Вычитание с флагом заёма; контракт как у add_int_carry."""
    exact = x - y
    wrapped = wrap_to_word(exact, word)
    return (wrapped, wrapped != exact)


def mul_int_may_overflow(x: int, y: int, word: WordSpec = PLATFORM_WORD) -> bool:
    """
    Может ли произведение переполнить слово.

    Проверка выполняется до того, как усечённому произведению можно доверять.
    """
    return not is_representable(x * y, word)


# =============================================================================
# ДЕЛЕНИЕ
# =============================================================================


def quot_int(n: int, d: int) -> int:
    """
    Частное с усечением к нулю.

    Examples:
        >>> quot_int(-7, 2)
        -3
        >>> quot_int(7, -2)
        -3
    """
    q = abs(n) // abs(d)
    if (n < 0) != (d < 0):
        return -q
    return q


def rem_int(n: int, d: int) -> int:
    """
    Остаток от quot_int; знак совпадает со знаком делимого.

    Examples:
        >>> rem_int(-7, 2)
        -1
        >>> rem_int(7, -2)
        1
    """
    return n - quot_int(n, d) * d


def div_int(n: int, d: int) -> int:
    """Частное с округлением к минус бесконечности (Python //)."""
    return n // d


def mod_int(n: int, d: int) -> int:
    """Остаток от div_int; знак совпадает со знаком делителя (Python %)."""
    return n % d


def quot_rem_int(n: int, d: int) -> tuple[int, int]:
    """Пара (quot, rem) из одного деления."""
    q = quot_int(n, d)
    return (q, n - q * d)


def div_mod_int(n: int, d: int) -> tuple[int, int]:
    """Пара (div, mod) из одного деления."""
    return divmod(n, d)


def check_division(
    dividend: int,
    divisor: int,
    operation: str = "division",
    word: WordSpec = PLATFORM_WORD,
) -> None:
    """
    Общий guard для quot/rem/div/mod и их пар.

    Raises:
        DivideByZeroError: Если divisor == 0
        SafeIntOverflowError: Если dividend == MIN и divisor == -1
            (точный результат -MIN не представим)
    """
    if divisor == 0:
        raise DivideByZeroError(f"{operation} by zero: {dividend} / 0")

    if dividend == word.min_value and divisor == -1:
        raise SafeIntOverflowError(
            f"{operation} overflow: {dividend} / -1 is not representable"
        )
