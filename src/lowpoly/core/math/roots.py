"""
Roots — поиск корней полиномов степени 1 и 2

Решения возвращаются как значения-результаты, а не исключения:
- LinearRoot:     a·x + b = 0        → -b/a
- QuadraticRoots: a·x² + b·x + c = 0 → формула дискриминанта

Вырожденные случаи (outcome != SOLVED):
1. a == 0 в линейном уравнении          → NO_SOLUTION   (degenerate_linear)
2. a == 0 в квадратном уравнении        → NO_SOLUTION   (degenerate_quadratic)
3. b² - 4ac < 0                         → NO_REAL_ROOTS (negative_discriminant)

Деление на ноль никогда не выполняется, sentinel-значения (0.0, NaN)
для обозначения "нет корня" не используются.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional

logger = logging.getLogger(__name__)


# =============================================================================
# REASON CODES
# =============================================================================

REASON_DEGENERATE_LINEAR: Final[str] = "degenerate_linear"
REASON_DEGENERATE_QUADRATIC: Final[str] = "degenerate_quadratic"
REASON_NEGATIVE_DISCRIMINANT: Final[str] = "negative_discriminant"


# =============================================================================
# ТИПЫ
# =============================================================================


class RootOutcome(str, Enum):
    """Исход поиска корней"""

    SOLVED = "SOLVED"
    NO_SOLUTION = "NO_SOLUTION"
    NO_REAL_ROOTS = "NO_REAL_ROOTS"


class RootNotFound(Exception):
    """
    Явный запрос корня у результата без решения.

    Возникает только в unwrap(): штатная обработка вырожденных случаев
    выполняется через проверку outcome.
    """

    pass


@dataclass(frozen=True)
class LinearRoot:
    """Результат решения a·x + b = 0."""

    outcome: RootOutcome
    root: Optional[float]
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is RootOutcome.SOLVED

    def unwrap(self) -> float:
        """
        Корень уравнения.

        Raises:
            RootNotFound: Если outcome != SOLVED
        """
        if self.root is None:
            raise RootNotFound(f"Linear equation has no single root ({self.reason})")
        return self.root


@dataclass(frozen=True)
class QuadraticRoots:
    """Результат решения a·x² + b·x + c = 0 (больший корень первым)."""

    outcome: RootOutcome
    roots: Optional[tuple[float, float]]
    discriminant: Optional[float] = None
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome is RootOutcome.SOLVED

    def unwrap(self) -> tuple[float, float]:
        """
        Пара корней (равных при нулевом дискриминанте).

        Raises:
            RootNotFound: Если outcome != SOLVED
        """
        if self.roots is None:
            raise RootNotFound(f"Quadratic equation has no real roots ({self.reason})")
        return self.roots


# =============================================================================
# РЕШАТЕЛИ
# =============================================================================


def solve_linear(a: float, b: float) -> LinearRoot:
    """
    Корень a·x + b = 0.

    Args:
        a: Коэффициент при x
        b: Свободный член

    Returns:
        LinearRoot(SOLVED, -b/a) или LinearRoot(NO_SOLUTION) при a == 0
    """
    if a == 0:
        logger.debug("Linear root requested for constant polynomial (b=%s)", b)
        return LinearRoot(
            outcome=RootOutcome.NO_SOLUTION,
            root=None,
            reason=REASON_DEGENERATE_LINEAR,
        )

    return LinearRoot(outcome=RootOutcome.SOLVED, root=-b / a)


def discriminant(a: float, b: float, c: float) -> float:
    """Дискриминант b² - 4ac."""
    return b * b - 4.0 * a * c


def solve_quadratic(a: float, b: float, c: float) -> QuadraticRoots:
    """
    Корни a·x² + b·x + c = 0 по формуле дискриминанта.

    Всегда возвращает пару корней (при нулевом дискриминанте корни равны),
    упорядоченную по убыванию. Для a > 0 это ровно
    [(-b + √D) / 2a, (-b - √D) / 2a].

    Args:
        a: Коэффициент при x²
        b: Коэффициент при x
        c: Свободный член

    Returns:
        QuadraticRoots с outcome SOLVED, NO_SOLUTION (a == 0) или NO_REAL_ROOTS (D < 0)
    """
    if a == 0:
        logger.debug("Quadratic roots requested with zero leading coefficient (b=%s, c=%s)", b, c)
        return QuadraticRoots(
            outcome=RootOutcome.NO_SOLUTION,
            roots=None,
            reason=REASON_DEGENERATE_QUADRATIC,
        )

    disc = discriminant(a, b, c)
    if disc < 0:
        logger.debug("Quadratic has negative discriminant %s", disc)
        return QuadraticRoots(
            outcome=RootOutcome.NO_REAL_ROOTS,
            roots=None,
            discriminant=disc,
            reason=REASON_NEGATIVE_DISCRIMINANT,
        )

    sqrt_disc = math.sqrt(disc)
    first = (-b + sqrt_disc) / (2.0 * a)
    second = (-b - sqrt_disc) / (2.0 * a)
    if second > first:
        first, second = second, first

    return QuadraticRoots(
        outcome=RootOutcome.SOLVED,
        roots=(first, second),
        discriminant=disc,
    )
