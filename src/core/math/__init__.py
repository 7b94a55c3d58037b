"""
Core math modules

Точная (рациональная) проверка результатов извлечения корня и
преобразование длинных целых в строки цифр и обратно.
"""

from src.core.math.digit_strings import digits_to_int, int_to_digits
from src.core.math.verification import (
    Q,
    decimal_to_q,
    fractional_digit_count,
    is_truncated_root,
    truncated_root_bounds,
)

__all__ = [
    "Q",
    "decimal_to_q",
    "digits_to_int",
    "fractional_digit_count",
    "int_to_digits",
    "is_truncated_root",
    "truncated_root_bounds",
]
