"""
lowpoly — low-degree polynomial value types.

Linear, Quadratic, Cubic and Quartic are immutable values supporting
evaluation, cross-type arithmetic along the promotion lattice,
differentiation, root-finding (Linear, Quadratic) and canonical rendering.
GeneralPolynomial is a variable-length container for addition/subtraction.
"""

from lowpoly.core.contracts import (
    polynomial_from_payload,
    polynomial_to_payload,
    validate_polynomial_payload,
)
from lowpoly.core.domain import (
    Cubic,
    FixedPolynomial,
    GeneralPolynomial,
    Linear,
    Operation,
    Polynomial,
    Quadratic,
    Quartic,
    degree,
    derivative,
    evaluate,
    is_zero,
)
from lowpoly.core.math import (
    FormatConfig,
    LinearRoot,
    QuadraticRoots,
    RootNotFound,
    RootOutcome,
    format_polynomial,
    format_term,
)

__version__ = "0.2.1"

__all__ = [
    # Types
    "FixedPolynomial",
    "Linear",
    "Quadratic",
    "Cubic",
    "Quartic",
    "GeneralPolynomial",
    "Operation",
    # Protocol & helpers
    "Polynomial",
    "evaluate",
    "is_zero",
    "degree",
    "derivative",
    # Roots
    "RootOutcome",
    "RootNotFound",
    "LinearRoot",
    "QuadraticRoots",
    # Formatting
    "FormatConfig",
    "format_term",
    "format_polynomial",
    # Contracts
    "polynomial_to_payload",
    "polynomial_from_payload",
    "validate_polynomial_payload",
]
