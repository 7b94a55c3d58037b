"""
Domain models and value objects.

Contains the value objects of the longhand square root: DecimalInput,
DigitGroup, TokenizedInput, StepRecord.
"""

from src.core.domain.decimal_input import (
    DECIMAL_POINT,
    DecimalInput,
    MalformedInput,
)
from src.core.domain.digit_group import DigitGroup, TokenizedInput
from src.core.domain.step_record import StepRecord

__all__ = [
    # Decimal input
    "DECIMAL_POINT",
    "DecimalInput",
    "MalformedInput",
    # Digit groups
    "DigitGroup",
    "TokenizedInput",
    # Step trace
    "StepRecord",
]
