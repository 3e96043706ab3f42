"""
Cubic — полином степени ≤ 3

a·x³ + b·x² + c·x + d. Поиск корней не поддерживается.
"""

from typing import ClassVar

from lowpoly.core.domain.base import FixedPolynomial
from lowpoly.core.domain.quadratic import Quadratic


class Cubic(FixedPolynomial):
    """Кубический полином. Cubic * Linear → Quartic."""

    DEGREE: ClassVar[int] = 3
    KIND: ClassVar[str] = "cubic"

    a: float
    b: float
    c: float
    d: float

    def __init__(self, a: float, b: float, c: float, d: float) -> None:
        super().__init__(a=a, b=b, c=c, d=d)

    def derivative(self) -> Quadratic:
        return Quadratic(3.0 * self.a, 2.0 * self.b, self.c)
