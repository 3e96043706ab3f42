"""
Formatting — каноническое текстовое представление полиномов

Общий алгоритм для всех типов полиномов:
- термы выводятся от старшей степени к младшей
- нулевые коэффициенты опускаются (включая старший)
- первый выведенный терм не получает " + "/" - ", только унарный минус
- |коэффициент| == 1 выводится без числа ("x^2", "-x"), кроме свободного члена
- полином из одних нулей выводится как "0"

Примеры:
    2.3x + 1
    -2.5x^2 - x + 1
    x^4 + 2x^3 + 3x^2 + 4x + 5
"""

from dataclasses import dataclass
from typing import Final, Optional, Sequence


# =============================================================================
# ПАРАМЕТРЫ
# =============================================================================

DEFAULT_VARIABLE: Final[str] = "x"
DEFAULT_POWER_OPERATOR: Final[str] = "^"
ZERO_POLYNOMIAL_TEXT: Final[str] = "0"


@dataclass(frozen=True)
class FormatConfig:
    """Конфигурация рендеринга (символ переменной и оператор степени)."""

    variable: str = DEFAULT_VARIABLE
    power_operator: str = DEFAULT_POWER_OPERATOR

    def __post_init__(self) -> None:
        if not self.variable or self.variable.strip() != self.variable:
            raise ValueError(f"variable must be a non-empty symbol, got {self.variable!r}")
        if not self.power_operator:
            raise ValueError("power_operator cannot be empty")


DEFAULT_FORMAT_CONFIG: Final[FormatConfig] = FormatConfig()


# =============================================================================
# ТЕРМЫ
# =============================================================================


def format_number(value: float) -> str:
    """
    Число без лишней дробной части: 1.0 → "1", 2.5 → "2.5".

    Нецелые и не конечные значения выводятся стандартным str(float).
    """
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return str(value)


def term_suffix(power: int, config: FormatConfig = DEFAULT_FORMAT_CONFIG) -> str:
    """Суффикс терма: "" для степени 0, "x" для 1, "x^n" для остальных."""
    if power < 0:
        raise ValueError(f"power cannot be negative: {power}")
    if power == 0:
        return ""
    if power == 1:
        return config.variable
    return f"{config.variable}{config.power_operator}{power}"


def format_term(value: float, suffix: str, leading: bool = False) -> str:
    """
    Вклад одного терма в строку полинома.

    Args:
        value: Коэффициент
        suffix: Суффикс степени ("x^3", "x" или "" для свободного члена)
        leading: Терм выводится первым (без " + "/" - ")

    Returns:
        Текст терма или "" для нулевого коэффициента
    """
    if value == 0:
        return ""

    magnitude = abs(value)
    if magnitude == 1 and suffix:
        body = suffix
    else:
        body = f"{format_number(magnitude)}{suffix}"

    negative = value < 0
    if leading:
        return f"-{body}" if negative else body
    return f" - {body}" if negative else f" + {body}"


def format_polynomial(
    coefficients: Sequence[float],
    config: Optional[FormatConfig] = None,
) -> str:
    """
    Рендеринг полинома по коэффициентам от старшей степени к младшей.

    Args:
        coefficients: Коэффициенты (descending), последний — свободный член
        config: Конфигурация рендеринга (default: x и ^)

    Returns:
        Каноническая строка, "0" если все коэффициенты нулевые
    """
    config = config or DEFAULT_FORMAT_CONFIG
    top_power = len(coefficients) - 1

    parts: list[str] = []
    for offset, value in enumerate(coefficients):
        term = format_term(value, term_suffix(top_power - offset, config), leading=not parts)
        if term:
            parts.append(term)

    return "".join(parts) or ZERO_POLYNOMIAL_TEXT
