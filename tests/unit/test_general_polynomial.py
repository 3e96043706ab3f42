"""Unit тесты для GeneralPolynomial."""

import pytest
from pydantic import ValidationError

from lowpoly import GeneralPolynomial


class TestGeneralPolynomialConstruction:
    """Конструкторы"""

    def test_new_keeps_order_and_zeros(self) -> None:
        gp = GeneralPolynomial([0.0, 1.0, 0.0, 0.0])
        assert gp.coefficients == (0.0, 1.0, 0.0, 0.0)
        assert len(gp) == 4

    def test_ints_stored_as_float(self) -> None:
        gp = GeneralPolynomial([1, 2])
        assert all(isinstance(c, float) for c in gp.coefficients)

    def test_from_ints(self) -> None:
        assert GeneralPolynomial.from_ints([1, -2, 3]) == GeneralPolynomial([1.0, -2.0, 3.0])

    def test_from_ints_rejects_floats(self) -> None:
        with pytest.raises(ValueError, match="Integer coefficient expected"):
            GeneralPolynomial.from_ints([1, 2.5])

    def test_non_numeric_rejected(self) -> None:
        with pytest.raises(ValidationError):
            GeneralPolynomial(["a", 1.0])

    def test_empty(self) -> None:
        assert len(GeneralPolynomial([])) == 0

    def test_frozen(self) -> None:
        gp = GeneralPolynomial([1.0])
        with pytest.raises(ValidationError):
            gp.coefficients = (2.0,)


class TestGeneralPolynomialArithmetic:
    """Сложение и вычитание с дополнением нулями"""

    def test_add(self) -> None:
        gp1 = GeneralPolynomial([-2.0, -3.0, 0.0, 4.0, 6.0])
        gp2 = GeneralPolynomial([0.0, 4.0, -4.6, 16.0])
        assert gp1 + gp2 == GeneralPolynomial([-2.0, 1.0, -4.6, 20.0, 6.0])

    def test_add_shorter_left(self) -> None:
        result = GeneralPolynomial([1.0]) + GeneralPolynomial([1.0, 2.0, 3.0])
        assert result == GeneralPolynomial([2.0, 2.0, 3.0])

    def test_sub_pads_and_negates(self) -> None:
        """Коэффициент только у правого операнда вычитается из нуля"""
        result = GeneralPolynomial([1.0, 2.0]) - GeneralPolynomial([0.0, 0.0, 3.0])
        assert result == GeneralPolynomial([1.0, 2.0, -3.0])

    def test_sub_longer_left(self) -> None:
        result = GeneralPolynomial([5.0, 5.0, 5.0]) - GeneralPolynomial([1.0])
        assert result == GeneralPolynomial([4.0, 5.0, 5.0])

    def test_result_length_is_longer_length(self) -> None:
        result = GeneralPolynomial([0.0] * 6) + GeneralPolynomial([1.0, 0.0])
        assert len(result) == 6

    def test_scalar_operand_unsupported(self) -> None:
        with pytest.raises(TypeError):
            GeneralPolynomial([1.0]) + 1.0

    def test_no_multiplication(self) -> None:
        with pytest.raises(TypeError):
            GeneralPolynomial([1.0]) * GeneralPolynomial([1.0])
