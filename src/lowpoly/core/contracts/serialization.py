"""
Serialization — полиномы ↔ JSON payload

Формат payload (contracts/schema/polynomial.json):
    {"schema_version": "1", "kind": "quadratic", "coefficients": [a, b, c]}

Фиксированные степени: коэффициенты от старшей степени к младшей.
GeneralPolynomial: коэффициенты по возрастанию степени (как хранятся).
"""

from typing import Any, Dict, Final, Union

from lowpoly.core.contracts.validators import validate_polynomial_payload
from lowpoly.core.domain import (
    Cubic,
    FixedPolynomial,
    GeneralPolynomial,
    Linear,
    Quadratic,
    Quartic,
)

PAYLOAD_SCHEMA_VERSION: Final[str] = "1"

_KINDS: Final[dict[str, type]] = {
    cls.KIND: cls for cls in (Linear, Quadratic, Cubic, Quartic, GeneralPolynomial)
}

SerializablePolynomial = Union[FixedPolynomial, GeneralPolynomial]


def polynomial_to_payload(polynomial: SerializablePolynomial) -> Dict[str, Any]:
    """
    Сериализация полинома в JSON-совместимый dict.

    Raises:
        TypeError: Если объект не является полиномом lowpoly
    """
    if isinstance(polynomial, GeneralPolynomial):
        coefficients = list(polynomial.coefficients)
    elif isinstance(polynomial, FixedPolynomial):
        coefficients = list(polynomial.model_dump().values())
    else:
        raise TypeError(f"Cannot serialize {type(polynomial).__name__} as a polynomial")

    return {
        "schema_version": PAYLOAD_SCHEMA_VERSION,
        "kind": polynomial.KIND,
        "coefficients": coefficients,
    }


def polynomial_from_payload(data: Dict[str, Any]) -> SerializablePolynomial:
    """
    Десериализация полинома с валидацией по JSON Schema.

    Raises:
        jsonschema.ValidationError: Если payload не соответствует контракту
        pydantic.ValidationError: Если коэффициенты не проходят валидацию модели
    """
    validate_polynomial_payload(data)

    cls = _KINDS[data["kind"]]
    coefficients = data["coefficients"]
    if cls is GeneralPolynomial:
        return GeneralPolynomial.model_validate({"coefficients": coefficients})
    return cls.model_validate(dict(zip(cls.model_fields, coefficients)))
