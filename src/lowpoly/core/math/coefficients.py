"""
Coefficients — приведение и валидация коэффициентов

Единственный допустимый способ превращения пользовательского ввода в
коэффициенты полиномов:
- coerce_coefficient: любое вещественное число → float (IEEE значения проходят как есть)
- int_to_coefficient: целое из диапазона int32 → float (без потери точности)

ЗАПРЕЩЕНО использовать bool в качестве коэффициента.
"""

import numbers
from typing import Final, Iterable


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

# Диапазон целочисленного конструктора (signed 32-bit)
INT32_MIN: Final[int] = -(2**31)
INT32_MAX: Final[int] = 2**31 - 1


# =============================================================================
# ПРОВЕРКИ
# =============================================================================


def is_scalar(value: object) -> bool:
    """
    Проверка, является ли значение скаляром (полином степени 0).

    bool исключён: True/False не считаются числами в арифметике полиномов.
    """
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def validate_int32(value: object) -> int:
    """
    Проверка целочисленного коэффициента.

    Args:
        value: Значение для проверки

    Returns:
        Исходное значение (int)

    Raises:
        ValueError: Если значение не int или вне диапазона int32
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"Integer coefficient expected, got {type(value).__name__}: {value!r}")

    if value < INT32_MIN or value > INT32_MAX:
        raise ValueError(
            f"Integer coefficient {value} outside int32 range [{INT32_MIN}, {INT32_MAX}]"
        )

    return value


# =============================================================================
# КОНВЕРТЕРЫ
# =============================================================================


def coerce_coefficient(value: object) -> float:
    """
    Конверсия вещественного числа в коэффициент.

    NaN/Inf не санитизируются: арифметика полиномов тотальна на IEEE float.

    Raises:
        ValueError: Если значение не является вещественным числом
    """
    if not is_scalar(value):
        raise ValueError(f"Real coefficient expected, got {type(value).__name__}: {value!r}")
    return float(value)


def int_to_coefficient(value: object) -> float:
    """Конверсия int32 → float (точная)."""
    return float(validate_int32(value))


def ints_to_coefficients(values: Iterable[object]) -> tuple[float, ...]:
    """Конверсия последовательности int32 → tuple[float, ...]."""
    return tuple(int_to_coefficient(v) for v in values)
