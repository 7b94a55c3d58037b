"""
Digit Strings — Преобразование строка цифр ↔ int без лимита длины

CPython (3.11+, 3.10.7+) запрещает int(str) и str(int) для чисел длиннее
sys.get_int_max_str_digits() цифр (по умолчанию 4300). Остатки и множители
при извлечении корня растут вместе со входом, поэтому преобразование
выполняется рекурсивным делением пополам на куски ниже этого порога.

ИНВАРИАНТЫ:
1. digits_to_int(int_to_digits(n)) == n для любого n >= 0
2. Отдельный вызов int()/str() никогда не получает больше CHUNK_DIGITS цифр
"""

from typing import Final

CHUNK_DIGITS: Final[int] = 1000

_CHUNK_LIMIT: Final[int] = 10**CHUNK_DIGITS

# log10(2) ≈ 0.30103
_LOG10_2_NUM: Final[int] = 30103
_LOG10_2_DEN: Final[int] = 100000


def digits_to_int(digits: str) -> int:
    """
    Целое из строки десятичных цифр любой длины.

    Пустая строка даёт 0.

    Raises:
        ValueError: если строка содержит не только цифры

    Examples:
        >>> digits_to_int("0042")
        42
        >>> digits_to_int("")
        0
    """
    if not digits:
        return 0
    if not digits.isdigit() or not digits.isascii():
        raise ValueError(f"digits_to_int: not a digit string {digits[:40]!r}")
    return _digits_to_int(digits)


def _digits_to_int(digits: str) -> int:
    if len(digits) <= CHUNK_DIGITS:
        return int(digits)
    low_len = len(digits) // 2
    high = _digits_to_int(digits[:-low_len])
    low = _digits_to_int(digits[-low_len:])
    return high * 10**low_len + low


def int_to_digits(n: int) -> str:
    """
    Десятичная запись неотрицательного целого любой длины.

    Raises:
        ValueError: если n < 0

    Examples:
        >>> int_to_digits(125)
        '125'
    """
    if n < 0:
        raise ValueError(f"int_to_digits: negative value (bit length {n.bit_length()})")
    return _int_to_digits(n, 0)


def _int_to_digits(n: int, width: int) -> str:
    if n < _CHUNK_LIMIT:
        return str(n).zfill(width)
    # нижняя половина: примерно половина десятичных цифр n
    low_len = n.bit_length() * _LOG10_2_NUM // _LOG10_2_DEN // 2
    high, low = divmod(n, 10**low_len)
    return _int_to_digits(high, max(width - low_len, 0)) + _int_to_digits(low, low_len)
