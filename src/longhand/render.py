"""Renderer — текстовая раскладка "столбиком" по трассе шагов.

Строится только из SquareRootResult (корень + StepRecord); координаты
терминала не используются. Корень известен до начала вывода, поэтому строка
ответа печатается сразу над чертой.

Пример для "2.25":

          1. 5
         -----
       \\/ 2.25
      1   1
          ---
          125
     25   125
            -
            0
"""

from dataclasses import dataclass
from typing import List, Optional

from src.core.domain.decimal_input import DECIMAL_POINT
from src.core.math.digit_strings import int_to_digits
from src.longhand.api import SquareRootResult

ROOT_SIGN = "\\/"


@dataclass(frozen=True)
class RenderConfig:
    """Конфигурация раскладки.

    answer_on_top: строка ответа над чертой.
    show_equals_footer: в конце "=" и корень отдельной строкой.
    """

    answer_on_top: bool = True
    show_equals_footer: bool = False


def answer_margin(result: SquareRootResult) -> int:
    """Ширина левой колонки (под множители) в символах."""
    source = result.number.source
    if source.has_point:
        integer_len = len(source.integer_digits)
        return (integer_len + 1) // 2 + 1 + len(source.padded_fraction_digits) // 2
    return (len(source.integer_digits) + 1) // 2


def render_work(
    result: SquareRootResult, config: Optional[RenderConfig] = None
) -> List[str]:
    """Раскладка вычисления по строкам.

    Args:
        result: результат с трассой (record_trace=True)
        config: конфигурация раскладки

    Returns:
        список строк без завершающих переводов строки

    Raises:
        ValueError: если трасса не записана
    """
    if result.trace is None:
        raise ValueError("render_work requires a result computed with record_trace=True")

    config = config or RenderConfig()
    padded = result.number.padded
    pad = 2 - result.number.first_group_length
    left_side = answer_margin(result)

    lines: List[str] = []
    if config.answer_on_top:
        spaced = "".join(c if c == DECIMAL_POINT else f" {c}" for c in result.root)
        lines.append(" " * (left_side + 2) + spaced)

    lines.append(("-" * (len(padded) + pad)).rjust(len(padded) + left_side + 2 + pad))
    lines.append(ROOT_SIGN.rjust(left_side + 2) + " " * pad + padded)

    trace = result.trace
    for i, step in enumerate(trace):
        last = i == len(trace) - 1
        # остаток после сноса следующей пары, на последнем шаге финальный
        shown = step.remainder_after if last else trace[i + 1].remainder_before
        shown_s = int_to_digits(shown)
        width = 6 + 2 * i - (2 if last else 0)

        lines.append(
            int_to_digits(step.multiplier).rjust(left_side)
            + int_to_digits(step.product).rjust(4 + 2 * i)
        )
        lines.append(" " * left_side + ("-" * len(shown_s)).rjust(width))
        lines.append(" " * left_side + shown_s.rjust(width))

    if config.show_equals_footer:
        lines.append("=")
        lines.append(result.root)

    return lines


def render_text(result: SquareRootResult, config: Optional[RenderConfig] = None) -> str:
    return "\n".join(render_work(result, config))
