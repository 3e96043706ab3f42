"""
Тесты для Coefficients — приведение и валидация коэффициентов

Проверяет:
1. Диапазон int32 для целочисленных конструкторов
2. Отказ от bool и нечисловых значений
3. Прохождение IEEE значений без санитизации
"""

import math

import pytest
from pydantic import ValidationError

from lowpoly import Cubic, Linear, Quadratic, Quartic
from lowpoly.core.math.coefficients import (
    INT32_MAX,
    INT32_MIN,
    coerce_coefficient,
    int_to_coefficient,
    ints_to_coefficients,
    is_scalar,
    validate_int32,
)


class TestIsScalar:
    """Тесты is_scalar"""

    def test_numbers_are_scalars(self) -> None:
        assert is_scalar(1)
        assert is_scalar(1.5)
        assert is_scalar(float("nan"))

    def test_bool_is_not_scalar(self) -> None:
        assert not is_scalar(True)
        assert not is_scalar(False)

    def test_other_types_are_not_scalars(self) -> None:
        assert not is_scalar("1")
        assert not is_scalar(None)
        assert not is_scalar(1j)


class TestValidateInt32:
    """Тесты validate_int32"""

    def test_bounds_accepted(self) -> None:
        assert validate_int32(INT32_MIN) == INT32_MIN
        assert validate_int32(INT32_MAX) == INT32_MAX
        assert validate_int32(0) == 0

    def test_out_of_range_raises(self) -> None:
        with pytest.raises(ValueError, match="outside int32 range"):
            validate_int32(INT32_MAX + 1)

        with pytest.raises(ValueError, match="outside int32 range"):
            validate_int32(INT32_MIN - 1)

    def test_non_int_raises(self) -> None:
        with pytest.raises(ValueError, match="Integer coefficient expected"):
            validate_int32(1.0)

        with pytest.raises(ValueError, match="Integer coefficient expected"):
            validate_int32(True)


class TestConverters:
    """Тесты конвертеров"""

    def test_int_to_coefficient_is_float(self) -> None:
        result = int_to_coefficient(-7)
        assert result == -7.0
        assert isinstance(result, float)

    def test_ints_to_coefficients(self) -> None:
        assert ints_to_coefficients([1, 2, 3]) == (1.0, 2.0, 3.0)

    def test_coerce_rejects_strings(self) -> None:
        with pytest.raises(ValueError, match="Real coefficient expected"):
            coerce_coefficient("2.5")

    def test_coerce_passes_ieee_values(self) -> None:
        assert math.isinf(coerce_coefficient(float("-inf")))
        assert math.isnan(coerce_coefficient(float("nan")))


class TestModelCoefficients:
    """Валидация коэффициентов в моделях"""

    def test_int_arguments_stored_as_float(self) -> None:
        linear = Linear(1, 2)
        assert isinstance(linear.a, float)
        assert isinstance(linear.b, float)

    def test_keyword_construction(self) -> None:
        assert Linear(a=1.0, b=2.0) == Linear(1.0, 2.0)

    def test_string_coefficient_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Linear("1", 2)

    def test_bool_coefficient_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Quadratic(True, 0, 0)

    def test_nan_coefficient_accepted(self) -> None:
        assert math.isnan(Linear(float("nan"), 1.0).a)

    def test_from_ints(self) -> None:
        assert Linear.from_ints(1, 2) == Linear(1.0, 2.0)
        assert Quartic.from_ints(4, 13, 28, 27, 18) == Quartic(4.0, 13.0, 28.0, 27.0, 18.0)

    def test_from_ints_rejects_floats(self) -> None:
        with pytest.raises(ValueError, match="Integer coefficient expected"):
            Cubic.from_ints(1, 2, 3.5, 4)

    def test_from_ints_rejects_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="outside int32 range"):
            Linear.from_ints(2**31, 0)

    def test_from_ints_wrong_arity(self) -> None:
        with pytest.raises(TypeError):
            Linear.from_ints(1, 2, 3)

    def test_from_ascending_pads_high_powers(self) -> None:
        assert Cubic.from_ascending([4.0, 3.0]) == Cubic(0.0, 0.0, 3.0, 4.0)

    def test_from_ascending_too_long_raises(self) -> None:
        with pytest.raises(ValueError, match="Linear holds 2 coefficients, got 3"):
            Linear.from_ascending([1.0, 2.0, 3.0])
