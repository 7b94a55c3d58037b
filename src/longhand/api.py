"""Public API — square root by the longhand method.

    raw string → tokenize → ExtractionEngine (+ StepTraceRecorder) → SquareRootResult
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Final, Iterator, Optional
import logging

from src.core.domain.digit_group import TokenizedInput
from src.core.domain.step_record import StepRecord
from src.longhand.engine import EngineConfig, ExtractionEngine
from src.longhand.tokenizer import tokenize
from src.longhand.trace import StepTraceRecorder

logger = logging.getLogger(__name__)

# Версия JSON контракта sqrt_result
SCHEMA_VERSION: Final[str] = "1"


@dataclass(frozen=True)
class SquareRootResult:
    """Результат извлечения корня."""

    number: TokenizedInput
    root: str
    digits: str  # корень без точки
    point_index: Optional[int]
    # вне repr: str(int) ограничен sys.get_int_max_str_digits()
    remainder: int = field(repr=False)  # финальный остаток
    trace: Optional[tuple[StepRecord, ...]] = field(repr=False)

    @property
    def fractional_digits(self) -> int:
        if self.point_index is None:
            return 0
        return len(self.digits) - self.point_index

    def to_contract(self) -> Dict[str, Any]:
        """Словарь по схеме src/core/contracts/schema/sqrt_result.json."""
        steps = None
        if self.trace is not None:
            steps = [record.model_dump() for record in self.trace]
        return {
            "schema_version": SCHEMA_VERSION,
            "input": self.number.source.raw,
            "padded_input": self.number.padded,
            "root": self.root,
            "point_index": self.point_index,
            "final_remainder": self.remainder,
            "steps": steps,
        }


def square_root(
    number: str,
    record_trace: bool = False,
    config: Optional[EngineConfig] = None,
) -> SquareRootResult:
    """Квадратный корень десятичной строки методом "столбиком".

    Точность определяется длиной входа: по одной цифре корня на пару цифр.

    Args:
        number: строка вида digits ['.' digits]
        record_trace: строить ли пошаговую трассу (StepRecord)
        config: конфигурация движка; record_trace из config учитывается
            вместе с аргументом

    Returns:
        SquareRootResult

    Raises:
        MalformedInput: если строка невалидна (до начала вычислений)

    Examples:
        >>> square_root("2.25").root
        '1.5'
        >>> square_root("0.0001").root
        '0.01'
    """
    config = config or EngineConfig()
    tokenized = tokenize(number)

    recorder = StepTraceRecorder() if (record_trace or config.record_trace) else None
    engine = ExtractionEngine(tokenized, recorder=recorder, config=config)
    state = engine.run()

    logger.info(
        "sqrt(%s) computed: %d digit(s)%s",
        _abbreviate(number), len(state.root_digits),
        ", trace recorded" if recorder is not None else "",
    )

    return SquareRootResult(
        number=tokenized,
        root=state.root,
        digits=state.digits,
        point_index=state.point_index,
        remainder=state.remainder,
        trace=recorder.records if recorder is not None else None,
    )


def iter_root_digits(number: str) -> Iterator[str]:
    """Потоковая выдача символов корня (цифры и точка) по мере вычисления.

    Raises:
        MalformedInput: при первом next(), если строка невалидна
    """
    engine = ExtractionEngine(tokenize(number))
    yield from engine.iter_digits()


def _abbreviate(s: str, limit: int = 40) -> str:
    if len(s) <= limit:
        return s
    return f"{s[:limit]}...({len(s)} chars)"
