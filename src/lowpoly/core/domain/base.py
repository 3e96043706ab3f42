"""
FixedPolynomial — базовая модель полиномов фиксированной степени

Immutable Pydantic модель: коэффициенты объявляются полями подклассов
от старшей степени к младшей (a, b, c, ...).

Решётка продвижения типов (promotion lattice):
    scalar(0) < Linear(1) < Quadratic(2) < Cubic(3) < Quartic(4)

Таблица операторов OPERATOR_TABLE: (операция, степень слева, степень справа)
→ степень результата.
- ADD/SUB: степень старшего операнда
- MUL:     сумма степеней, не выше MAX_FIXED_DEGREE

Комбинация вне таблицы возвращает NotImplemented (Python поднимает TypeError).

ИНВАРИАНТЫ:
1. Коэффициенты результата — точные суммы/разности/свёртки коэффициентов операндов
2. Старшие термы никогда не отбрасываются
3. Операции не изменяют операнды
"""

from enum import Enum
from typing import ClassVar, Final, Iterable, Optional, Sequence

from pydantic import BaseModel, ConfigDict, field_validator

from lowpoly.core.math.coefficients import coerce_coefficient, ints_to_coefficients, is_scalar
from lowpoly.core.math.formatting import FormatConfig, format_polynomial


# =============================================================================
# РЕШЁТКА ПРОДВИЖЕНИЯ
# =============================================================================

MAX_FIXED_DEGREE: Final[int] = 4

PROMOTION_LATTICE: Final[tuple[int, ...]] = (0, 1, 2, 3, 4)


class Operation(str, Enum):
    """Бинарная операция над полиномами"""

    ADD = "add"
    SUB = "sub"
    MUL = "mul"


OPERATOR_TABLE: Final[dict[tuple[Operation, int, int], int]] = {
    # Сложение и вычитание: тип старшего операнда (scalar ± scalar не в таблице)
    **{
        (op, left, right): max(left, right)
        for op in (Operation.ADD, Operation.SUB)
        for left in PROMOTION_LATTICE
        for right in PROMOTION_LATTICE
        if max(left, right) > 0
    },
    # Умножение на скаляр
    (Operation.MUL, 1, 0): 1,
    (Operation.MUL, 0, 1): 1,
    (Operation.MUL, 2, 0): 2,
    (Operation.MUL, 0, 2): 2,
    (Operation.MUL, 3, 0): 3,
    (Operation.MUL, 0, 3): 3,
    (Operation.MUL, 4, 0): 4,
    (Operation.MUL, 0, 4): 4,
    # Произведения полиномов до степени 4 включительно
    (Operation.MUL, 1, 1): 2,
    (Operation.MUL, 1, 2): 3,
    (Operation.MUL, 2, 1): 3,
    (Operation.MUL, 1, 3): 4,
    (Operation.MUL, 3, 1): 4,
    (Operation.MUL, 2, 2): 4,
}


def result_degree(op: Operation, left: int, right: int) -> Optional[int]:
    """Степень результата операции или None, если комбинация не определена."""
    return OPERATOR_TABLE.get((op, left, right))


_REGISTRY: dict[int, type["FixedPolynomial"]] = {}


def polynomial_type(degree: int) -> type["FixedPolynomial"]:
    """
    Тип полинома фиксированной степени.

    Raises:
        ValueError: Если для степени нет типа (0 — это скаляр float)
    """
    try:
        return _REGISTRY[degree]
    except KeyError:
        raise ValueError(f"No fixed-degree polynomial type for degree {degree}") from None


# =============================================================================
# КОЭФФИЦИЕНТНАЯ АРИФМЕТИКА (ascending: индекс = степень)
# =============================================================================


def pad(values: Sequence[float], length: int) -> tuple[float, ...]:
    """Дополнение нулями старших степеней до length."""
    return tuple(values) + (0.0,) * (length - len(values))


def convolve(left: Sequence[float], right: Sequence[float]) -> tuple[float, ...]:
    """Свёртка коэффициентов (умножение полиномов)."""
    result = [0.0] * (len(left) + len(right) - 1)
    for i, lv in enumerate(left):
        for j, rv in enumerate(right):
            result[i + j] += lv * rv
    return tuple(result)


def _operand(value: object) -> Optional[tuple[int, tuple[float, ...]]]:
    if isinstance(value, FixedPolynomial):
        return value.DEGREE, value.ascending()
    if is_scalar(value):
        return 0, (float(value),)
    return None


def _apply(
    op: Operation,
    left: tuple[int, tuple[float, ...]],
    right: tuple[int, tuple[float, ...]],
):
    target = result_degree(op, left[0], right[0])
    if target is None:
        return NotImplemented

    if op is Operation.MUL:
        values = convolve(left[1], right[1])
    else:
        size = target + 1
        lhs, rhs = pad(left[1], size), pad(right[1], size)
        if op is Operation.ADD:
            values = tuple(lv + rv for lv, rv in zip(lhs, rhs))
        else:
            values = tuple(lv - rv for lv, rv in zip(lhs, rhs))

    return polynomial_type(target).from_ascending(values)


# =============================================================================
# BASE MODEL
# =============================================================================


class FixedPolynomial(BaseModel):
    """
    Базовый класс полиномов фиксированной степени.

    Степень структурная: Linear(0, 0).degree() == 1.
    Подклассы объявляют DEGREE, KIND и поля коэффициентов (descending).
    """

    DEGREE: ClassVar[int]
    KIND: ClassVar[str]

    model_config = ConfigDict(frozen=True)  # Immutable

    @classmethod
    def __pydantic_init_subclass__(cls, **kwargs) -> None:
        super().__pydantic_init_subclass__(**kwargs)
        # Первый подкласс степени становится каноническим типом результата
        _REGISTRY.setdefault(cls.DEGREE, cls)

    @field_validator("*", mode="before")
    @classmethod
    def validate_coefficient(cls, v: object) -> float:
        return coerce_coefficient(v)

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def from_ints(cls, *values: int):
        """Конструктор из целых int32 (конверсия в float без потерь)."""
        return cls(*ints_to_coefficients(values))

    @classmethod
    def from_ascending(cls, values: Iterable[float]):
        """Конструктор из коэффициентов по возрастанию степени (недостающие = 0)."""
        values = tuple(values)
        if len(values) > cls.DEGREE + 1:
            raise ValueError(
                f"{cls.__name__} holds {cls.DEGREE + 1} coefficients, got {len(values)}"
            )
        return cls(*reversed(pad(values, cls.DEGREE + 1)))

    # -------------------------------------------------------------------------
    # Полиномиальный протокол
    # -------------------------------------------------------------------------

    def coefficients(self) -> tuple[float, ...]:
        """Коэффициенты от старшей степени к младшей."""
        return tuple(getattr(self, name) for name in type(self).model_fields)

    def ascending(self) -> tuple[float, ...]:
        """Коэффициенты от младшей степени к старшей."""
        return tuple(reversed(self.coefficients()))

    def evaluate(self, x: float) -> float:
        coefficients = self.coefficients()
        result = coefficients[0]
        for value in coefficients[1:]:
            result = result * x + value
        return result

    def is_zero(self) -> bool:
        return all(value == 0 for value in self.coefficients())

    def degree(self) -> int:
        return self.DEGREE

    # -------------------------------------------------------------------------
    # Рендеринг
    # -------------------------------------------------------------------------

    def render(self, config: Optional[FormatConfig] = None) -> str:
        return format_polynomial(self.coefficients(), config)

    def __str__(self) -> str:
        return self.render()

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __neg__(self):
        return type(self).from_ascending(-value for value in self.ascending())

    def __add__(self, other):
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return _apply(Operation.ADD, _operand(self), operand)

    def __radd__(self, other):
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return _apply(Operation.ADD, operand, _operand(self))

    def __sub__(self, other):
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return _apply(Operation.SUB, _operand(self), operand)

    def __rsub__(self, other):
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return _apply(Operation.SUB, operand, _operand(self))

    def __mul__(self, other):
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return _apply(Operation.MUL, _operand(self), operand)

    def __rmul__(self, other):
        operand = _operand(other)
        if operand is None:
            return NotImplemented
        return _apply(Operation.MUL, operand, _operand(self))
