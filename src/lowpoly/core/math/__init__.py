"""
Core math modules для lowpoly

Примитивы без зависимости от типов полиномов: коэффициенты, рендеринг, корни.
"""

# Coefficients
from lowpoly.core.math.coefficients import (
    INT32_MAX,
    INT32_MIN,
    coerce_coefficient,
    int_to_coefficient,
    ints_to_coefficients,
    is_scalar,
    validate_int32,
)

# Formatting
from lowpoly.core.math.formatting import (
    DEFAULT_FORMAT_CONFIG,
    FormatConfig,
    format_number,
    format_polynomial,
    format_term,
    term_suffix,
)

# Roots
from lowpoly.core.math.roots import (
    REASON_DEGENERATE_LINEAR,
    REASON_DEGENERATE_QUADRATIC,
    REASON_NEGATIVE_DISCRIMINANT,
    LinearRoot,
    QuadraticRoots,
    RootNotFound,
    RootOutcome,
    discriminant,
    solve_linear,
    solve_quadratic,
)

__all__ = [
    # Coefficients
    "INT32_MIN",
    "INT32_MAX",
    "is_scalar",
    "validate_int32",
    "coerce_coefficient",
    "int_to_coefficient",
    "ints_to_coefficients",
    # Formatting
    "FormatConfig",
    "DEFAULT_FORMAT_CONFIG",
    "format_number",
    "term_suffix",
    "format_term",
    "format_polynomial",
    # Roots
    "RootOutcome",
    "RootNotFound",
    "LinearRoot",
    "QuadraticRoots",
    "REASON_DEGENERATE_LINEAR",
    "REASON_DEGENERATE_QUADRATIC",
    "REASON_NEGATIVE_DISCRIMINANT",
    "discriminant",
    "solve_linear",
    "solve_quadratic",
]
