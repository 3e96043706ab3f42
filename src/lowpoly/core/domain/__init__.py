"""
Domain value types.

Fixed-degree polynomials (Linear, Quadratic, Cubic, Quartic), the degree-0
scalar rules, the generic Polynomial protocol, and GeneralPolynomial.

Importing this package registers every fixed-degree type in the promotion
lattice, so cross-type operators can resolve their result types.
"""

from lowpoly.core.domain.base import (
    MAX_FIXED_DEGREE,
    OPERATOR_TABLE,
    PROMOTION_LATTICE,
    FixedPolynomial,
    Operation,
    polynomial_type,
    result_degree,
)
from lowpoly.core.domain.linear import Linear
from lowpoly.core.domain.quadratic import Quadratic
from lowpoly.core.domain.cubic import Cubic
from lowpoly.core.domain.quartic import Quartic
from lowpoly.core.domain.general import GeneralPolynomial
from lowpoly.core.domain.scalar import (
    Polynomial,
    PolynomialLike,
    degree,
    derivative,
    evaluate,
    is_zero,
)

__all__ = [
    # Promotion lattice
    "MAX_FIXED_DEGREE",
    "PROMOTION_LATTICE",
    "OPERATOR_TABLE",
    "Operation",
    "result_degree",
    "polynomial_type",
    # Fixed-degree types
    "FixedPolynomial",
    "Linear",
    "Quadratic",
    "Cubic",
    "Quartic",
    # General
    "GeneralPolynomial",
    # Protocol & scalar helpers
    "Polynomial",
    "PolynomialLike",
    "evaluate",
    "is_zero",
    "degree",
    "derivative",
]
