"""
Contract Validation Module

Валидация и сериализация полиномов в JSON payload.
"""

from .serialization import (
    PAYLOAD_SCHEMA_VERSION,
    polynomial_from_payload,
    polynomial_to_payload,
)
from .validators import (
    ContractValidator,
    PolynomialPayloadValidator,
    SchemaLoader,
    validate_polynomial_payload,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "PolynomialPayloadValidator",
    # Functions
    "validate_polynomial_payload",
    "polynomial_to_payload",
    "polynomial_from_payload",
    "PAYLOAD_SCHEMA_VERSION",
]
