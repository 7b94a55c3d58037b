"""Тесты для Renderer — раскладка "столбиком".

Coverage:
- Точная раскладка для 2.25 и 2
- Структура: 3 строки шапки + 3 строки на шаг
- Footer "=" и корень
- Ошибка без трассы
"""

import pytest

from src.longhand import square_root
from src.longhand.render import RenderConfig, answer_margin, render_text, render_work


class TestRenderWork:
    """Тесты render_work."""

    def test_layout_two_point_two_five(self):
        lines = render_work(square_root("2.25", record_trace=True))
        assert lines == [
            "      1. 5",
            "     -----",
            "   \\/ 2.25",
            "  1   1",
            "      ---",
            "      125",
            " 25   125",
            "        -",
            "        0",
        ]

    def test_layout_two(self):
        lines = render_work(square_root("2", record_trace=True))
        assert lines == [
            "    1",
            "   --",
            " \\/ 2",
            "1   1",
            "    -",
            "    1",
        ]

    @pytest.mark.parametrize("number", ["144", "12345.6", "0.0001", "1234567890.1234"])
    def test_line_count(self, number):
        result = square_root(number, record_trace=True)
        lines = render_work(result)
        assert len(lines) == 3 + 3 * len(result.trace)
        assert lines[2].endswith(result.number.padded)

    def test_products_shown(self):
        result = square_root("12345.6", record_trace=True)
        lines = render_work(result)
        for i, step in enumerate(result.trace):
            assert lines[3 + 3 * i].rstrip().endswith(str(step.product))

    def test_without_answer_line(self):
        lines = render_work(square_root("4", record_trace=True), RenderConfig(answer_on_top=False))
        assert lines[0].strip() == "--"
        assert len(lines) == 5

    def test_equals_footer(self):
        lines = render_work(
            square_root("2.25", record_trace=True), RenderConfig(show_equals_footer=True)
        )
        assert lines[-2:] == ["=", "1.5"]

    def test_requires_trace(self):
        with pytest.raises(ValueError, match="record_trace=True"):
            render_work(square_root("2.25"))

    def test_render_text_joins_lines(self):
        result = square_root("2", record_trace=True)
        assert render_text(result) == "\n".join(render_work(result))


class TestAnswerMargin:
    """Тесты ширины левой колонки."""

    def test_with_point(self):
        assert answer_margin(square_root("2.25")) == 3
        assert answer_margin(square_root("12345.6")) == 5

    def test_without_point(self):
        assert answer_margin(square_root("2")) == 1
        assert answer_margin(square_root("1234")) == 2
