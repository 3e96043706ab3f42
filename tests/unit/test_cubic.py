"""Unit тесты для Cubic (a·x³ + b·x² + c·x + d)."""

import pytest

from lowpoly import Cubic, Linear, Quadratic, Quartic


@pytest.fixture
def base_cubic() -> Cubic:
    """x³ + 2x² + 3x + 4"""
    return Cubic(1.0, 2.0, 3.0, 4.0)


class TestCubicProtocol:
    """evaluate / is_zero / degree / derivative"""

    def test_evaluate(self, base_cubic) -> None:
        assert base_cubic.evaluate(5.0) == 125.0 + 50.0 + 15.0 + 4.0

    def test_degree(self, base_cubic) -> None:
        assert base_cubic.degree() == 3
        assert Cubic(0.0, 0.0, 0.0, 1.0).degree() == 3

    def test_is_zero(self, base_cubic) -> None:
        assert Cubic(0.0, 0.0, 0.0, 0.0).is_zero()
        assert not base_cubic.is_zero()

    def test_derivative(self, base_cubic) -> None:
        assert base_cubic.derivative() == Quadratic.from_ints(3, 4, 3)

    def test_no_root_finding(self, base_cubic) -> None:
        assert not hasattr(base_cubic, "roots")


class TestCubicArithmetic:
    """Операторы Cubic"""

    def test_add_cubic(self, base_cubic) -> None:
        assert base_cubic + Cubic(8.0, 7.0, 6.0, 5.0) == Cubic(9.0, 9.0, 9.0, 9.0)

    def test_add_quadratic(self, base_cubic) -> None:
        assert base_cubic + Quadratic(5.0, 6.0, 7.0) == Cubic(1.0, 7.0, 9.0, 11.0)

    def test_add_linear(self, base_cubic) -> None:
        assert base_cubic + Linear(4.0, 5.0) == Cubic(1.0, 2.0, 7.0, 9.0)

    def test_add_scalar(self, base_cubic) -> None:
        assert base_cubic + 5.0 == Cubic(1.0, 2.0, 3.0, 9.0)

    def test_sub_cubic(self, base_cubic) -> None:
        assert base_cubic - Cubic(1.0, 7.0, 5.5, -6.0) == Cubic(0.0, -5.0, -2.5, 10.0)

    def test_sub_quadratic(self, base_cubic) -> None:
        assert base_cubic - Quadratic(5.0, 6.0, 7.0) == Cubic(1.0, -3.0, -3.0, -3.0)

    def test_sub_linear(self, base_cubic) -> None:
        assert base_cubic - Linear(4.0, 5.0) == Cubic(1.0, 2.0, -1.0, -1.0)

    def test_sub_scalar(self, base_cubic) -> None:
        assert base_cubic - 5.0 == Cubic(1.0, 2.0, 3.0, -1.0)

    def test_mul_linear(self, base_cubic) -> None:
        assert base_cubic * Linear.from_ints(5, 6) == Quartic.from_ints(5, 16, 27, 38, 24)

    def test_mul_scalar(self, base_cubic) -> None:
        assert base_cubic * 5.0 == Cubic(5.0, 10.0, 15.0, 20.0)

    def test_mul_cubic_undefined(self, base_cubic) -> None:
        with pytest.raises(TypeError):
            base_cubic * base_cubic
