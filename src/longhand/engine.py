"""Extraction Engine — извлечение квадратного корня "столбиком".

Итерация (одна группа цифр за шаг):
1. k = 20 * P, где P: целое значение корня без точки (пустой корень → 0)
2. Снос: remainder = remainder * 100 + value(group); на первой итерации
   remainder = value(group)
3. d = max{d ∈ 0..9 : (k + d) * d <= remainder}, линейный перебор
4. d добавляется к корню; после группы, закрывающей целую часть, ставится точка
5. remainder = remainder - (k + d) * d
6. Если подключён recorder, StepRecord

Вся арифметика на Python int (произвольная точность). Новых цифр сверх
пар входа движок не генерирует.
"""

from dataclasses import dataclass, field
from typing import Final, Iterator, List, Optional
import logging

from src.core.domain.decimal_input import DECIMAL_POINT
from src.core.domain.digit_group import DigitGroup, TokenizedInput
from src.core.domain.step_record import StepRecord
from src.longhand.trace import StepTraceRecorder

logger = logging.getLogger(__name__)


# =============================================================================
# CONSTANTS
# =============================================================================

# Удвоенный корень, сдвинутый на разряд
MULTIPLIER_FACTOR: Final[int] = 20

# Снос пары цифр = сдвиг остатка на два десятичных разряда
BRING_DOWN_BASE: Final[int] = 100

# Верхняя граница перебора цифры
MAX_DIGIT: Final[int] = 9


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ExtractionInvariantViolation(AssertionError):
    """
    Нарушен внутренний инвариант движка (отрицательный остаток или
    неверно выбранная цифра).

    Это дефект выбора цифры, а не ошибка входных данных.
    """
    pass


# =============================================================================
# CONFIG / STATE
# =============================================================================


@dataclass(frozen=True)
class EngineConfig:
    """Конфигурация извлечения.

    record_trace: формировать ли StepRecord на каждой итерации.
    check_invariants: проверять ли остаток после каждого шага.
    """

    record_trace: bool = False
    check_invariants: bool = True


@dataclass
class ExtractionState:
    """Изменяемое состояние, принадлежащее только движку."""

    remainder: int = 0
    partial_root: int = 0
    root_digits: List[str] = field(default_factory=list)
    point_index: Optional[int] = None
    groups_consumed: int = 0

    @property
    def root(self) -> str:
        """Корень с точкой на позиции point_index."""
        digits = "".join(self.root_digits)
        if self.point_index is None:
            return digits
        return digits[: self.point_index] + DECIMAL_POINT + digits[self.point_index :]

    @property
    def digits(self) -> str:
        return "".join(self.root_digits)


# =============================================================================
# DIGIT SELECTION
# =============================================================================


def select_digit(k: int, remainder: int) -> int:
    """Наибольшая цифра d ∈ 0..9 с (k + d) * d <= remainder.

    Args:
        k: база множителя (20 * P)
        remainder: остаток после сноса

    Returns:
        d

    Examples:
        >>> select_digit(0, 2)
        1
        >>> select_digit(20, 125)
        5
        >>> select_digit(0, 99)
        9
    """
    d = 0
    while d < MAX_DIGIT and (k + d + 1) * (d + 1) <= remainder:
        d += 1
    return d


# =============================================================================
# ENGINE
# =============================================================================


class ExtractionEngine:
    """Конечный автомат извлечения корня по группам цифр.

    Один экземпляр на одно вычисление. Состояние доступно наблюдателям только
    на чтение через свойство state.
    """

    def __init__(
        self,
        tokenized: TokenizedInput,
        recorder: Optional[StepTraceRecorder] = None,
        config: Optional[EngineConfig] = None,
    ):
        """
        Args:
            tokenized: результат токенизации
            recorder: наблюдатель для StepRecord (None: трасса не строится)
            config: конфигурация движка
        """
        self.tokenized = tokenized
        self.recorder = recorder
        self.config = config or EngineConfig()
        self._state = ExtractionState()
        self._groups = tokenized.groups
        self._has_point = tokenized.source.has_point

    @property
    def state(self) -> ExtractionState:
        return self._state

    @property
    def done(self) -> bool:
        return self._state.groups_consumed >= len(self._groups)

    def step(self) -> int:
        """Одна итерация: снос группы, выбор цифры, вычитание.

        Returns:
            выбранная цифра d

        Raises:
            RuntimeError: если группы исчерпаны
            ExtractionInvariantViolation: если нарушен инвариант остатка
        """
        if self.done:
            raise RuntimeError("no digit groups left")

        state = self._state
        group = self._groups[state.groups_consumed]

        k = MULTIPLIER_FACTOR * state.partial_root
        if state.groups_consumed == 0:
            remainder_before = group.value
        else:
            remainder_before = state.remainder * BRING_DOWN_BASE + group.value

        d = select_digit(k, remainder_before)
        multiplier = k + d
        product = multiplier * d
        remainder_after = remainder_before - product

        if self.config.check_invariants:
            self._check_invariants(group, k, d, remainder_before, remainder_after)

        state.root_digits.append(str(d))
        state.partial_root = state.partial_root * 10 + d
        if group.closes_integer_part and self._has_point:
            state.point_index = len(state.root_digits)
        state.remainder = remainder_after
        state.groups_consumed += 1

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "step %d: group=%s k=%d d=%d product=%d remainder=%d",
                group.index, group.digits, k, d, product, remainder_after,
            )

        if self.recorder is not None:
            self.recorder.record(
                StepRecord(
                    index=group.index,
                    group=group.digits,
                    k=k,
                    d=d,
                    multiplier=multiplier,
                    product=product,
                    remainder_before=remainder_before,
                    remainder_after=remainder_after,
                )
            )

        return d

    def iter_digits(self) -> Iterator[str]:
        """Генератор символов корня: цифры и точка (сразу после её цифры)."""
        while not self.done:
            d = self.step()
            yield str(d)
            if self._state.point_index == len(self._state.root_digits):
                yield DECIMAL_POINT
        if self.recorder is not None:
            self.recorder.close()

    def run(self) -> ExtractionState:
        """Выполнить все итерации до исчерпания групп.

        Returns:
            финальное ExtractionState
        """
        logger.debug("Extracting root from %d digit group(s)", len(self._groups))
        for _ in self.iter_digits():
            pass
        logger.debug(
            "Extraction finished: %d digit(s), point_index=%s",
            len(self._state.root_digits), self._state.point_index,
        )
        return self._state

    @staticmethod
    def _check_invariants(
        group: DigitGroup,
        k: int,
        d: int,
        remainder_before: int,
        remainder_after: int,
    ) -> None:
        if remainder_after < 0:
            raise ExtractionInvariantViolation(
                f"Negative remainder {remainder_after} at group {group.index} "
                f"(k={k}, d={d}, remainder_before={remainder_before})"
            )
        if d < MAX_DIGIT and (k + d + 1) * (d + 1) <= remainder_before:
            raise ExtractionInvariantViolation(
                f"Digit {d} at group {group.index} is not maximal "
                f"(k={k}, remainder_before={remainder_before})"
            )
