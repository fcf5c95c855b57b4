"""
Folds — суммы, произведения, НОД и НОК над SafeInt

Явные свёртки с checked-арифметикой: первое переполнение прерывает всю
свёртку через SafeIntOverflowError, частичный результат не возвращается.

ВАЖНО: math.prod, math.gcd и math.lcm работают с int произвольной точности
и проверку переполнения НЕ выполняют. Для SafeInt используйте функции этого
модуля.
"""

import math
from typing import Iterable

from safeint.core.domain.safe_int import IntLike, SafeInt

# =============================================================================
# СВЁРТКИ
# =============================================================================


def safe_sum(values: Iterable[IntLike]) -> SafeInt:
    """
    Сумма с проверкой переполнения (левая свёртка от 0).

    Args:
        values: SafeInt или int (int поднимаются с проверкой диапазона)

    Returns:
        Сумма как SafeInt; для пустой последовательности SafeInt(0)

    Raises:
        SafeIntOverflowError: При первом переполнении промежуточной суммы

    Examples:
        >>> safe_sum([SafeInt(1), SafeInt(2), 3])
        SafeInt(6)
        >>> safe_sum([])
        SafeInt(0)
    """
    acc = SafeInt(0)
    for x in values:
        acc = acc + x
    return acc


def safe_product(values: Iterable[IntLike]) -> SafeInt:
    """
    Произведение с проверкой переполнения (левая свёртка от 1).

    Raises:
        SafeIntOverflowError: При первом переполнении промежуточного произведения
    """
    acc = SafeInt(1)
    for x in values:
        acc = acc * x
    return acc


# =============================================================================
# НОД / НОК
# =============================================================================


def gcd(x: IntLike, y: IntLike) -> SafeInt:
    """
    Наибольший общий делитель.

    Определение сводится к abs(), поэтому MIN в любом операнде даёт
    то же переполнение, что и abs(MIN).

    Raises:
        SafeIntOverflowError: Если x или y равен MIN

    Examples:
        >>> gcd(SafeInt(12), SafeInt(-18))
        SafeInt(6)
        >>> gcd(0, SafeInt(-5))
        SafeInt(5)
    """
    a = abs(SafeInt.from_integral(x))
    b = abs(SafeInt.from_integral(y))
    return SafeInt(math.gcd(a.value, b.value))


def lcm(x: IntLike, y: IntLike) -> SafeInt:
    """
    Наименьшее общее кратное.

    lcm(x, 0) == lcm(0, y) == 0, иначе abs(quot(x, gcd(x, y)) * y).
    Деление точное, умножение проверяется как обычное умножение.

    Raises:
        SafeIntOverflowError: Если результат не представим или операнд равен MIN
    """
    a = SafeInt.from_integral(x)
    b = SafeInt.from_integral(y)

    if b == 0 or a == 0:
        return SafeInt(0)

    return abs(a.quot(gcd(a, b)) * b)

