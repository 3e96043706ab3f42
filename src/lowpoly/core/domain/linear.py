"""
Linear — полином степени ≤ 1

a·x + b. Производная — скаляр a, корень — -b/a (при a != 0).
"""

from typing import ClassVar

from lowpoly.core.domain.base import FixedPolynomial
from lowpoly.core.math.roots import LinearRoot, solve_linear


class Linear(FixedPolynomial):
    """
    Линейный полином a·x + b.

    Linear * Linear → Quadratic, Linear * Quadratic → Cubic,
    Linear * Cubic → Quartic, Linear ± scalar изменяет только b.
    """

    DEGREE: ClassVar[int] = 1
    KIND: ClassVar[str] = "linear"

    a: float
    b: float

    def __init__(self, a: float, b: float) -> None:
        super().__init__(a=a, b=b)

    def derivative(self) -> float:
        return self.a

    def root(self) -> LinearRoot:
        """
        Единственный корень a·x + b = 0.

        Returns:
            LinearRoot с outcome NO_SOLUTION, если a == 0
        """
        return solve_linear(self.a, self.b)
