"""Longhand square root — извлечение квадратного корня "столбиком".

Tokenizer → Extraction Engine → Step Trace Recorder:
- tokenize: разбиение десятичной строки на пары цифр
- ExtractionEngine: выбор цифр корня на целых произвольной точности
- StepTraceRecorder: пошаговая трасса для вывода решения
"""

from .api import SquareRootResult, iter_root_digits, square_root
from .engine import (
    EngineConfig,
    ExtractionEngine,
    ExtractionInvariantViolation,
    ExtractionState,
    select_digit,
)
from .tokenizer import tokenize
from .trace import StepTraceRecorder
from src.core.domain.decimal_input import MalformedInput

__all__ = [
    "square_root",
    "iter_root_digits",
    "SquareRootResult",
    "tokenize",
    "ExtractionEngine",
    "ExtractionState",
    "EngineConfig",
    "ExtractionInvariantViolation",
    "select_digit",
    "StepTraceRecorder",
    "MalformedInput",
]
