"""
SafeRange — ленивые арифметические последовательности SafeInt

Последовательность "от x1 с шагом (x2 - x1) до границы y" строится без
промежуточного переполнения, даже если y близко к MAX/MIN.

Наивная рекурсия "прибавляй шаг, пока не прошли границу" здесь не
используется: при y рядом с MAX последнее прибавление вышло бы за слово,
хотя каждый выдаваемый элемент представим.

АЛГОРИТМ (возрастание, шаг >= 0; убывание — зеркально):
    1. y < x2  →  [] если y < x1, иначе [x1]
    2. delta = x2 - x1, y' = y - delta   (x1 <= y' <= y, значит y' представим)
    3. Выдать x1; для x начиная с x2: если x > y' — выдать x и остановиться,
       иначе выдать x и перейти к x + delta (x <= y' ⇒ x + delta <= y)

Единичный шаг — отдельный быстрый путь со сравнением на равенство с y.
Шаг 0 при достижимой границе даёт бесконечную последовательность —
это ошибка вызывающего кода, специально не обрабатывается.
"""

from dataclasses import dataclass
from typing import Iterator

from safeint.core.domain.safe_int import MAX_BOUND, MIN_BOUND, IntLike, SafeInt

# =============================================================================
# SAFERANGE
# =============================================================================


@dataclass(frozen=True)
class SafeRange:
    """
    Перезапускаемая ленивая последовательность.

    Каждый вызов iter() начинает генерацию заново; общего состояния между
    итераторами нет, брошенный итератор не требует очистки.

    then=None означает единичный шаг.
    """

    start: SafeInt
    then: SafeInt | None
    bound: SafeInt

    @property
    def step(self) -> int:
        if self.then is None:
            return 1
        return self.then.value - self.start.value

    def __iter__(self) -> Iterator[SafeInt]:
        x1 = self.start.value
        y = self.bound.value

        if self.then is None:
            return _enum_from_to(x1, y)

        x2 = self.then.value
        if x2 >= x1:
            return _enum_from_then_to_up(x1, x2, y)
        return _enum_from_then_to_down(x1, x2, y)

    def __bool__(self) -> bool:
        """Непустота без подсчёта длины: пусто, если граница уже позади start."""
        x1 = self.start.value
        y = self.bound.value

        if self.step >= 0:
            return y >= x1
        return y <= x1

    def __len__(self) -> int:
        """
        Число элементов в замкнутой форме: floor((y - x1) / step) + 1.

        Как и у builtin range, len() не работает для длины больше sys.maxsize
        (например, range_from(0) или range_from_to(MIN, MAX)): Python
        поднимает встроенный OverflowError. Для проверки пустоты используйте
        bool(r).

        Raises:
            ValueError: Для шага 0 с достижимой границей (бесконечная последовательность)
        """
        x1 = self.start.value
        y = self.bound.value
        step = self.step

        if step > 0:
            return 0 if y < x1 else (y - x1) // step + 1
        if step < 0:
            return 0 if y > x1 else (x1 - y) // -step + 1

        if y < x1:
            return 0
        raise ValueError(f"range from {x1} with step 0 up to {y} is infinite")


# =============================================================================
# ТОЧКИ ВХОДА
# =============================================================================


def range_from(start: IntLike) -> SafeRange:
    """[start ..] — единичный шаг до MAX."""
    return SafeRange(SafeInt.from_integral(start), None, MAX_BOUND)


def range_from_to(start: IntLike, bound: IntLike) -> SafeRange:
    """
    [start .. bound] — единичный шаг.

    Examples:
        >>> list(range_from_to(1, 3))
        [SafeInt(1), SafeInt(2), SafeInt(3)]
    """
    return SafeRange(SafeInt.from_integral(start), None, SafeInt.from_integral(bound))


def range_from_then(start: IntLike, then: IntLike) -> SafeRange:
    """[start, then ..] — до MAX при возрастании, до MIN при убывании."""
    x1 = SafeInt.from_integral(start)
    x2 = SafeInt.from_integral(then)
    bound = MAX_BOUND if x2 >= x1 else MIN_BOUND
    return SafeRange(x1, x2, bound)


def range_from_then_to(start: IntLike, then: IntLike, bound: IntLike) -> SafeRange:
    """
    [start, then .. bound] — шаг (then - start).

    Examples:
        >>> [int(x) for x in range_from_then_to(1, 3, 10)]
        [1, 3, 5, 7, 9]
        >>> [int(x) for x in range_from_then_to(10, 7, 0)]
        [10, 7, 4, 1]
    """
    return SafeRange(
        SafeInt.from_integral(start),
        SafeInt.from_integral(then),
        SafeInt.from_integral(bound),
    )


# =============================================================================
# ГЕНЕРАТОРЫ
# =============================================================================


def _emit(x: int) -> SafeInt:
    # Все выдаваемые значения лежат между x1 и y, валидация не нужна
    return SafeInt.model_construct(value=x)


def _enum_from_to(x0: int, y: int) -> Iterator[SafeInt]:
    if x0 > y:
        return

    x = x0
    while True:
        yield _emit(x)
        # y может быть MAX: сравнение на равенство, не >
        if x == y:
            return
        x += 1


def _enum_from_then_to_up(x1: int, x2: int, y: int) -> Iterator[SafeInt]:
    # Требует x2 >= x1
    if y < x2:
        if y >= x1:
            yield _emit(x1)
        return

    delta = x2 - x1
    y_last = y - delta

    yield _emit(x1)

    # Инвариант: x <= y; x <= y_last ⇒ x + delta не переполняется
    x = x2
    while x <= y_last:
        yield _emit(x)
        x += delta
    yield _emit(x)


def _enum_from_then_to_down(x1: int, x2: int, y: int) -> Iterator[SafeInt]:
    # Требует x2 <= x1
    if y > x2:
        if y <= x1:
            yield _emit(x1)
        return

    delta = x2 - x1
    y_last = y - delta

    yield _emit(x1)

    # Инвариант: x >= y; x >= y_last ⇒ x + delta не уходит ниже MIN
    x = x2
    while x >= y_last:
        yield _emit(x)
        x += delta
    yield _emit(x)
