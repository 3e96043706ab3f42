"""
Quartic — полином степени ≤ 4

a·x⁴ + b·x³ + c·x² + d·x + e.

Старший тип решётки: умножается только на скаляр, любое другое
произведение вышло бы за степень 4.
"""

from typing import ClassVar

from lowpoly.core.domain.base import FixedPolynomial
from lowpoly.core.domain.cubic import Cubic


class Quartic(FixedPolynomial):
    DEGREE: ClassVar[int] = 4
    KIND: ClassVar[str] = "quartic"

    a: float
    b: float
    c: float
    d: float
    e: float

    def __init__(self, a: float, b: float, c: float, d: float, e: float) -> None:
        super().__init__(a=a, b=b, c=c, d=d, e=e)

    def derivative(self) -> Cubic:
        return Cubic(4.0 * self.a, 3.0 * self.b, 2.0 * self.c, self.d)
