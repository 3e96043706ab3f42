"""
Quadratic — полином степени ≤ 2

a·x² + b·x + c.

Quadratic * Quadratic → Quartic (свёртка 5 коэффициентов),
Quadratic * Linear → Cubic.
"""

from typing import ClassVar

from lowpoly.core.domain.base import FixedPolynomial
from lowpoly.core.domain.linear import Linear
from lowpoly.core.math.roots import QuadraticRoots, discriminant, solve_quadratic


class Quadratic(FixedPolynomial):
    """Квадратный полином a·x² + b·x + c."""

    DEGREE: ClassVar[int] = 2
    KIND: ClassVar[str] = "quadratic"

    a: float
    b: float
    c: float

    def __init__(self, a: float, b: float, c: float) -> None:
        super().__init__(a=a, b=b, c=c)

    def derivative(self) -> Linear:
        return Linear(2.0 * self.a, self.b)

    def discriminant(self) -> float:
        """b² - 4ac"""
        return discriminant(self.a, self.b, self.c)

    def roots(self) -> QuadraticRoots:
        """
        Корни a·x² + b·x + c = 0.

        Пара корней возвращается всегда (равные при нулевом дискриминанте),
        больший корень первым.

        Returns:
            QuadraticRoots с outcome:
            - SOLVED
            - NO_SOLUTION при a == 0
            - NO_REAL_ROOTS при отрицательном дискриминанте
        """
        return solve_quadratic(self.a, self.b, self.c)
