"""
SafeInt — знаковое машинное целое с проверкой переполнения

Immutable Pydantic модель с одним полем `value`. Ведёт себя как платформенный
int: на корректных входах результаты побитово совпадают с машинной арифметикой,
а любой результат вне [MIN, MAX] вызывает исключение вместо тихого wraparound.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Хранимое значение всегда в [MIN, MAX] (проверка при создании)
2. +, -, * переполняются → SafeIntOverflowError
3. -MIN, abs(MIN) → SafeIntOverflowError
4. Делитель 0 → DivideByZeroError; (MIN, -1) → SafeIntOverflowError
5. Равенство, порядок и hash совпадают с базовым int

Int-операнды в бинарных операторах поднимаются с той же проверкой диапазона,
что и SafeInt(x), поэтому `SafeInt(x) + 1` работает как литерал.
"""

from fractions import Fraction
from typing import Any, Callable, ClassVar, Mapping

from pydantic import BaseModel, Field, field_validator

from safeint.core.math.word_arithmetic import (
    INT_MAX,
    INT_MIN,
    SafeIntOverflowError,
    add_int_carry,
    check_division,
    div_int,
    div_mod_int,
    mod_int,
    mul_int_may_overflow,
    quot_int,
    quot_rem_int,
    rem_int,
    sub_int_borrow,
    validate_representable,
)

# =============================================================================
# SAFEINT MODEL
# =============================================================================


class SafeInt(BaseModel):
    """
    Целое фиксированной ширины с checked-арифметикой.

    Immutable модель (frozen=True): каждая операция создаёт новый экземпляр.
    model_copy(update=...) проходит через SafeInt(...) и проверяет диапазон;
    model_construct проверку пропускает и предназначен только для значений,
    уже лежащих в [MIN, MAX].

    Examples:
        >>> SafeInt(2) + 3
        SafeInt(5)
        >>> SafeInt(-7).quot(2), SafeInt(-7) // 2
        (SafeInt(-3), SafeInt(-4))
    """

    value: int = Field(
        ..., strict=True, description="Платформенное знаковое целое в [MIN, MAX]"
    )

    model_config = {"frozen": True}  # Immutable

    MIN: ClassVar["SafeInt"]
    MAX: ClassVar["SafeInt"]

    def __init__(self, value: int) -> None:
        super().__init__(value=value)

    @field_validator("value", mode="before")
    @classmethod
    def validate_word_range(cls, v: Any) -> Any:
        """
        Подъём int произвольной точности: вне [MIN, MAX] → SafeIntOverflowError.

        Нецелые входы (включая bool) отклоняет strict-валидация поля.
        """
        if isinstance(v, int) and not isinstance(v, bool):
            validate_representable(v, "value")
        return v

    # -------------------------------------------------------------------------
    # Конструкторы и проекции
    # -------------------------------------------------------------------------

    @classmethod
    def from_integral(cls, x: "IntLike") -> "SafeInt":
        """Подъём int или SafeInt (для SafeInt — тождество)."""
        if isinstance(x, SafeInt):
            return x
        return cls(x)

    @classmethod
    def to_enum(cls, i: int) -> "SafeInt":
        return cls(i)

    @classmethod
    def parse(cls, text: str) -> "SafeInt":
        """
        Разбор текста через int(), затем подъём с проверкой диапазона.

        Raises:
            ValueError: Если text не является записью целого
            SafeIntOverflowError: Если число вне [MIN, MAX]
        """
        return cls(int(text))

    def model_copy(
        self, *, update: Mapping[str, Any] | None = None, deep: bool = False
    ) -> "SafeInt":
        """
        Копия с обновлением полей через SafeInt(...).

        Raises:
            SafeIntOverflowError: Если обновлённое value вне [MIN, MAX]
            TypeError: Если update содержит неизвестные поля
        """
        if not update:
            return super().model_copy(deep=deep)
        return SafeInt(**{"value": self.value, **update})

    def from_enum(self) -> int:
        return self.value

    def to_integer(self) -> int:
        return self.value

    def to_rational(self) -> Fraction:
        return Fraction(self.value, 1)

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value

    def __bool__(self) -> bool:
        return self.value != 0

    def __str__(self) -> str:
        return str(self.value)

    def __repr__(self) -> str:
        return f"SafeInt({self.value})"

    def __format__(self, format_spec: str) -> str:
        return format(self.value, format_spec)

    # -------------------------------------------------------------------------
    # Равенство и порядок
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        y = _comparable(other)
        if y is None:
            return NotImplemented
        return self.value == y

    def __ne__(self, other: object) -> bool:
        y = _comparable(other)
        if y is None:
            return NotImplemented
        return self.value != y

    def __lt__(self, other: object) -> bool:
        y = _comparable(other)
        if y is None:
            return NotImplemented
        return self.value < y

    def __le__(self, other: object) -> bool:
        y = _comparable(other)
        if y is None:
            return NotImplemented
        return self.value <= y

    def __gt__(self, other: object) -> bool:
        y = _comparable(other)
        if y is None:
            return NotImplemented
        return self.value > y

    def __ge__(self, other: object) -> bool:
        y = _comparable(other)
        if y is None:
            return NotImplemented
        return self.value >= y

    def __hash__(self) -> int:
        return hash(self.value)

    # -------------------------------------------------------------------------
    # Сложение, вычитание, умножение
    # -------------------------------------------------------------------------

    def __add__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _checked_add(self.value, y)

    def __radd__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _checked_add(y, self.value)

    def __sub__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _checked_sub(self.value, y)

    def __rsub__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _checked_sub(y, self.value)

    def __mul__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _checked_mul(self.value, y)

    def __rmul__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _checked_mul(y, self.value)

    # -------------------------------------------------------------------------
    # Унарные операции
    # -------------------------------------------------------------------------

    def __neg__(self) -> "SafeInt":
        """
        Смена знака.

        Raises:
            SafeIntOverflowError: Если значение равно MIN (-MIN не представим)
        """
        if self.value == INT_MIN:
            raise SafeIntOverflowError(f"negation overflow: -({INT_MIN})")
        return _from_trusted(-self.value)

    def __pos__(self) -> "SafeInt":
        return self

    def __abs__(self) -> "SafeInt":
        # Отрицательные значения идут через __neg__ и наследуют его отказ на MIN
        if self.value >= 0:
            return self
        return -self

    def signum(self) -> "SafeInt":
        """Знак: 1, 0 или -1. Никогда не переполняется."""
        if self.value > 0:
            return _from_trusted(1)
        if self.value == 0:
            return _from_trusted(0)
        return _from_trusted(-1)

    def succ(self) -> "SafeInt":
        if self.value == INT_MAX:
            raise SafeIntOverflowError(f"succ overflow: {INT_MAX} is maxBound")
        return _from_trusted(self.value + 1)

    def pred(self) -> "SafeInt":
        if self.value == INT_MIN:
            raise SafeIntOverflowError(f"pred overflow: {INT_MIN} is minBound")
        return _from_trusted(self.value - 1)

    # -------------------------------------------------------------------------
    # Семейство деления
    # -------------------------------------------------------------------------

    def quot(self, other: "IntLike") -> "SafeInt":
        """Частное с усечением к нулю."""
        return _divide(quot_int, "quot", self.value, _require_operand(other))

    def rem(self, other: "IntLike") -> "SafeInt":
        """Остаток от quot; знак совпадает со знаком делимого."""
        return _divide(rem_int, "rem", self.value, _require_operand(other))

    def div(self, other: "IntLike") -> "SafeInt":
        """Частное с округлением к минус бесконечности."""
        return _divide(div_int, "div", self.value, _require_operand(other))

    def mod(self, other: "IntLike") -> "SafeInt":
        """Остаток от div; знак совпадает со знаком делителя."""
        return _divide(mod_int, "mod", self.value, _require_operand(other))

    def quot_rem(self, other: "IntLike") -> tuple["SafeInt", "SafeInt"]:
        return _divide_pair(quot_rem_int, "quotRem", self.value, _require_operand(other))

    def div_mod(self, other: "IntLike") -> tuple["SafeInt", "SafeInt"]:
        return _divide_pair(div_mod_int, "divMod", self.value, _require_operand(other))

    # `/` — машинное деление (усечение к нулю), а не true division
    def __truediv__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _divide(quot_int, "quot", self.value, y)

    def __rtruediv__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _divide(quot_int, "quot", y, self.value)

    def __floordiv__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _divide(div_int, "div", self.value, y)

    def __rfloordiv__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _divide(div_int, "div", y, self.value)

    def __mod__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _divide(mod_int, "mod", self.value, y)

    def __rmod__(self, other: object) -> "SafeInt":
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _divide(mod_int, "mod", y, self.value)

    def __divmod__(self, other: object) -> tuple["SafeInt", "SafeInt"]:
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _divide_pair(div_mod_int, "divMod", self.value, y)

    def __rdivmod__(self, other: object) -> tuple["SafeInt", "SafeInt"]:
        y = _operand(other)
        if y is None:
            return NotImplemented
        return _divide_pair(div_mod_int, "divMod", y, self.value)


IntLike = SafeInt | int


# =============================================================================
# ВНУТРЕННИЕ ХЕЛПЕРЫ
# =============================================================================


def _from_trusted(value: int) -> SafeInt:
    # Значение уже проверено вызывающим кодом, валидация пропускается
    return SafeInt.model_construct(value=value)


def _comparable(other: object) -> int | None:
    if isinstance(other, SafeInt):
        return other.value
    if isinstance(other, int) and not isinstance(other, bool):
        return other
    return None


def _operand(other: object) -> int | None:
    """Значение операнда или None для неподдерживаемых типов (→ NotImplemented)."""
    if isinstance(other, SafeInt):
        return other.value
    if isinstance(other, int) and not isinstance(other, bool):
        return validate_representable(other, "operand")
    return None


def _require_operand(other: object) -> int:
    y = _operand(other)
    if y is None:
        raise TypeError(f"expected SafeInt or int operand, got {type(other).__name__}")
    return y


def _checked_add(x: int, y: int) -> SafeInt:
    result, carry = add_int_carry(x, y)
    if carry:
        raise SafeIntOverflowError(f"addition overflow: {x} + {y}")
    return _from_trusted(result)


def _checked_sub(x: int, y: int) -> SafeInt:
    result, borrow = sub_int_borrow(x, y)
    if borrow:
        raise SafeIntOverflowError(f"subtraction overflow: {x} - {y}")
    return _from_trusted(result)


def _checked_mul(x: int, y: int) -> SafeInt:
    if mul_int_may_overflow(x, y):
        raise SafeIntOverflowError(f"multiplication overflow: {x} * {y}")
    return _from_trusted(x * y)


def _divide(primitive: Callable[[int, int], int], operation: str, n: int, d: int) -> SafeInt:
    check_division(n, d, operation)
    return _from_trusted(primitive(n, d))


def _divide_pair(
    primitive: Callable[[int, int], tuple[int, int]],
    operation: str,
    n: int,
    d: int,
) -> tuple[SafeInt, SafeInt]:
    check_division(n, d, operation)
    first, second = primitive(n, d)
    return (_from_trusted(first), _from_trusted(second))


# =============================================================================
# ГРАНИЦЫ И ФУНКЦИИ ПОДЪЁМА
# =============================================================================

MIN_BOUND: SafeInt = _from_trusted(INT_MIN)
MAX_BOUND: SafeInt = _from_trusted(INT_MAX)

SafeInt.MIN = MIN_BOUND
SafeInt.MAX = MAX_BOUND


def to_safe(x: int) -> SafeInt:
    """
    Подъём int в SafeInt.

    Raises:
        SafeIntOverflowError: Если x вне [MIN, MAX]
    """
    return SafeInt(x)


def from_safe(x: SafeInt) -> int:
    """Проекция в int. Тотальна, никогда не падает."""
    return x.value
