"""
Verification — Точная проверка усечённого квадратного корня

Модуль проверяет результат извлечения в рациональной арифметике
(fractions.Fraction), без float и без округлений:

    R² ≤ v < (R + 10⁻ᵖ)²

где v: значение подкоренного числа, R: корень, p: число цифр после точки
в корне.

ИНВАРИАНТЫ:
1. Все вычисления точные (Fraction / int)
2. Отрицательные значения не принимаются
3. Длина входа не ограничена лимитом int(str) интерпретатора
"""

from fractions import Fraction
from typing import Final

from src.core.math.digit_strings import digits_to_int

Q = Fraction  # rational type alias

DECIMAL_BASE: Final[int] = 10


def decimal_to_q(s: str) -> Q:
    """
    Точное рациональное значение десятичной строки.

    Допускает висячую точку ("4." == 4).

    Examples:
        >>> decimal_to_q("2.25")
        Fraction(9, 4)
        >>> decimal_to_q("4.")
        Fraction(4, 1)

    Raises:
        ValueError: для отрицательного значения или не-десятичной строки
    """
    if s.startswith("-"):
        raise ValueError(f"decimal_to_q: negative value {s[:40]!r}")
    integer, _, fraction = s.partition(".")
    return Q(digits_to_int(integer + fraction), DECIMAL_BASE ** len(fraction))


def fractional_digit_count(s: str) -> int:
    """Число цифр после точки (0, если точки нет)."""
    _, point, fraction = s.partition(".")
    return len(fraction) if point else 0


def truncated_root_bounds(root: str) -> tuple[Q, Q]:
    """
    Интервал [R, R + 10⁻ᵖ), которому должен принадлежать √v.

    Returns:
        (lower, upper)
    """
    lower = decimal_to_q(root)
    ulp = Q(1, DECIMAL_BASE ** fractional_digit_count(root))
    return lower, lower + ulp


def is_truncated_root(number: str, root: str) -> bool:
    """
    Проверка R² ≤ v < (R + 10⁻ᵖ)².

    Args:
        number: подкоренное число (десятичная строка)
        root: предполагаемый усечённый корень

    Returns:
        True если root является корнем number, усечённый до своей точности

    Examples:
        >>> is_truncated_root("2", "1")
        True
        >>> is_truncated_root("2.00", "1.4")
        True
        >>> is_truncated_root("2.00", "1.5")
        False
    """
    v = decimal_to_q(number)
    lower, upper = truncated_root_bounds(root)
    return lower * lower <= v < upper * upper
