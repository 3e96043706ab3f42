"""
Scalar & Polynomial protocol — полиномиальный контракт для всех степеней

Polynomial[D] — протокол с ассоциированным типом производной D,
который сам удовлетворяет протоколу:

    Quartic → Cubic → Quadratic → Linear → float → float

Скаляры (int/float и прочие numbers.Real, кроме bool) — полиномы степени 0:
- evaluate(x) = само значение
- degree = 0
- derivative = 0.0

Функции evaluate/is_zero/degree/derivative принимают как скаляры, так и
полиномы фиксированной степени, позволяя писать обобщённый код.
"""

from typing import Protocol, TypeVar, Union, runtime_checkable

from lowpoly.core.math.coefficients import is_scalar

D = TypeVar("D", covariant=True)


@runtime_checkable
class Polynomial(Protocol[D]):
    """Контракт полинома фиксированной степени."""

    def evaluate(self, x: float) -> float:
        ...

    def is_zero(self) -> bool:
        ...

    def degree(self) -> int:
        ...

    def derivative(self) -> D:
        ...


PolynomialLike = Union[float, Polynomial]


def _require_polynomial(p: object) -> None:
    if not isinstance(p, Polynomial):
        raise TypeError(f"Expected a polynomial or real scalar, got {type(p).__name__}")


def evaluate(p: PolynomialLike, x: float) -> float:
    if is_scalar(p):
        return float(p)
    _require_polynomial(p)
    return p.evaluate(x)


def is_zero(p: PolynomialLike) -> bool:
    if is_scalar(p):
        return p == 0
    _require_polynomial(p)
    return p.is_zero()


def degree(p: PolynomialLike) -> int:
    if is_scalar(p):
        return 0
    _require_polynomial(p)
    return p.degree()


def derivative(p: PolynomialLike) -> PolynomialLike:
    """Производная: для скаляра — 0.0, иначе p.derivative()."""
    if is_scalar(p):
        return 0.0
    _require_polynomial(p)
    return p.derivative()
