"""
GeneralPolynomial — полином произвольной длины

Коэффициенты по возрастанию степени: coefficients[i] — коэффициент при x^i.
Нули не нормализуются (длина сохраняется).

Поддерживаются только сложение и вычитание с дополнением нулями
более короткого операнда; длина результата = длина большего операнда.
С полиномами фиксированной степени не взаимодействует.
"""

from typing import ClassVar, Iterable, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from lowpoly.core.math.coefficients import coerce_coefficient, ints_to_coefficients
from lowpoly.core.math.formatting import FormatConfig, format_polynomial


class GeneralPolynomial(BaseModel):
    """Полином произвольной длины (ascending)."""

    KIND: ClassVar[str] = "general"

    coefficients: tuple[float, ...]

    model_config = ConfigDict(frozen=True)  # Immutable

    def __init__(self, coefficients: Iterable[float]) -> None:
        super().__init__(coefficients=tuple(coefficients))

    @field_validator("coefficients", mode="before")
    @classmethod
    def validate_coefficients(cls, v: object) -> tuple[float, ...]:
        if isinstance(v, (str, bytes)) or not isinstance(v, Iterable):
            raise ValueError(f"Coefficient sequence expected, got {type(v).__name__}")
        return tuple(coerce_coefficient(value) for value in v)

    @classmethod
    def from_ints(cls, coefficients: Iterable[int]) -> "GeneralPolynomial":
        """Конструктор из целых int32."""
        return cls(ints_to_coefficients(coefficients))

    def __len__(self) -> int:
        return len(self.coefficients)

    def _padded(self, size: int) -> tuple[float, ...]:
        return self.coefficients + (0.0,) * (size - len(self.coefficients))

    def __add__(self, other: object):
        if not isinstance(other, GeneralPolynomial):
            return NotImplemented
        size = max(len(self), len(other))
        return GeneralPolynomial(
            lv + rv for lv, rv in zip(self._padded(size), other._padded(size))
        )

    def __sub__(self, other: object):
        if not isinstance(other, GeneralPolynomial):
            return NotImplemented
        size = max(len(self), len(other))
        return GeneralPolynomial(
            lv - rv for lv, rv in zip(self._padded(size), other._padded(size))
        )

    def render(self, config: Optional[FormatConfig] = None) -> str:
        return format_polynomial(tuple(reversed(self.coefficients)), config)

    def __str__(self) -> str:
        return self.render()
