"""Общие фикстуры тестов."""

import sys

import pytest

# Лимит int(str)/str(int) CPython по умолчанию
DEFAULT_INT_MAX_STR_DIGITS = 4300


@pytest.fixture
def default_int_limit():
    """Стандартный лимит int(str) на время теста (окружение могло его снять)."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str conversion limit")
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(DEFAULT_INT_MAX_STR_DIGITS)
    yield
    sys.set_int_max_str_digits(previous)
