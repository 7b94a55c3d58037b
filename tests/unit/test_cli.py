"""Тесты для CLI (typer).

Coverage:
- One-shot вычисление, --show-work, --verify, --json
- Невалидный вход → exit code 2
- Интерактивный режим: цикл до пустой строки / EOF
- Входы длиннее лимита int(str) интерпретатора
- Запуск без каталога схем (установленный пакет)
"""

import importlib
import json
import logging
import sys

import pytest
from typer.testing import CliRunner

import src.core
import src.longhand
import src.longhand.cli as cli_module
from src.core.contracts import validators
from src.core.math import is_truncated_root
from src.longhand.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """CLI перенастраивает root logger, возвращаем исходное состояние."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture(autouse=True)
def restore_int_limit():
    """CLI снимает лимит int(str), возвращаем исходный."""
    if not hasattr(sys, "get_int_max_str_digits"):
        yield
        return
    previous = sys.get_int_max_str_digits()
    yield
    sys.set_int_max_str_digits(previous)


def _json_from(output: str) -> dict:
    return json.loads(output[output.index("{") : output.rindex("}") + 1])


class TestOneShot:
    """Вычисление по аргументу командной строки."""

    def test_prints_root(self):
        result = runner.invoke(app, ["2.25"])
        assert result.exit_code == 0
        assert "1.5" in result.stdout.splitlines()

    def test_show_work(self):
        result = runner.invoke(app, ["16", "--show-work"])
        assert result.exit_code == 0
        lines = result.stdout.splitlines()
        assert "=" in lines
        assert lines[lines.index("=") + 1] == "4"
        assert any(line.strip().startswith("\\/") for line in lines)

    def test_verify(self):
        result = runner.invoke(app, ["2.00", "--verify"])
        assert result.exit_code == 0
        assert "1.4" in result.stdout

    def test_json(self):
        result = runner.invoke(app, ["2.25", "--json", "--show-work"])
        assert result.exit_code == 0
        contract = _json_from(result.stdout)
        assert contract["root"] == "1.5"
        assert [step["d"] for step in contract["steps"]] == [1, 5]

    def test_json_without_steps(self):
        result = runner.invoke(app, ["144", "--json"])
        assert result.exit_code == 0
        contract = _json_from(result.stdout)
        assert contract["root"] == "12"
        assert contract["steps"] is None

    def test_surrounding_whitespace_ignored(self):
        result = runner.invoke(app, [" 4 "])
        assert result.exit_code == 0
        assert "2" in result.stdout.splitlines()

    @pytest.mark.parametrize("number", [".5", "1.2.3", "-4", "abc"])
    def test_malformed_input(self, number):
        result = runner.invoke(app, [number])
        assert result.exit_code == 2

    def test_log_level_option(self):
        result = runner.invoke(app, ["4", "--log-level", "DEBUG"])
        assert result.exit_code == 0


class TestInteractive:
    """Интерактивный режим без аргумента."""

    def test_single_number_then_empty_line(self):
        result = runner.invoke(app, [], input="2.25\nn\n\n")
        assert result.exit_code == 0
        assert "Interactive mode" in result.stdout
        assert "1.5" in result.stdout.splitlines()

    def test_show_work_default_yes(self):
        result = runner.invoke(app, [], input="2\n\n\n")
        assert result.exit_code == 0
        assert "=" in result.stdout.splitlines()

    def test_eof_ends_session(self):
        result = runner.invoke(app, [], input="4\nn\n")
        assert result.exit_code == 0
        assert "2" in result.stdout.splitlines()

    def test_malformed_then_valid(self):
        result = runner.invoke(app, [], input="1.2.3\nn\n144\nn\n\n")
        assert result.exit_code == 0
        assert "12" in result.stdout.splitlines()


class TestLongInput:
    """Вход из 10000+ цифр: остатки длиннее 4300 цифр."""

    LONG_NUMBER = "2." + "0" * 10000

    def test_verify(self, default_int_limit):
        result = runner.invoke(app, [self.LONG_NUMBER, "--verify"])
        assert result.exit_code == 0, result.exception
        root = result.stdout.splitlines()[0]
        assert root.startswith("1.41421356237309504880")
        assert is_truncated_root(self.LONG_NUMBER, root)

    def test_json(self, default_int_limit):
        result = runner.invoke(app, [self.LONG_NUMBER, "--json", "--show-work"])
        assert result.exit_code == 0, result.exception
        contract = _json_from(result.stdout)
        assert len(contract["steps"]) == 5001
        assert contract["final_remainder"] > 10**4300

    def test_show_work(self, default_int_limit):
        result = runner.invoke(app, [self.LONG_NUMBER, "--show-work"])
        assert result.exit_code == 0, result.exception
        lines = result.stdout.splitlines()
        assert "=" in lines
        assert lines[lines.index("=") + 1].startswith("1.41421356")

    def test_interactive_session_survives(self, default_int_limit):
        result = runner.invoke(app, ["--verify"], input=f"{self.LONG_NUMBER}\ny\n4\nn\n\n")
        assert result.exit_code == 0, result.exception
        assert "2" in result.stdout.splitlines()


class TestSchemaAvailability:
    """Схемы нужны только для --json."""

    @pytest.fixture
    def missing_schema_dir(self, monkeypatch, tmp_path):
        monkeypatch.setattr(validators, "SCHEMA_DIR", tmp_path / "missing")
        monkeypatch.setattr(validators, "_SCHEMA_LOADER", None)

    def test_import_does_not_load_schemas(self, monkeypatch):
        # свежий импорт; атрибуты родительских пакетов восстанавливаются после теста
        monkeypatch.setattr(src.core, "contracts", src.core.contracts)
        monkeypatch.setattr(src.longhand, "cli", cli_module)
        for name in ["src.core.contracts", "src.core.contracts.validators", "src.longhand.cli"]:
            monkeypatch.delitem(sys.modules, name)

        importlib.import_module("src.longhand.cli")
        assert sys.modules["src.core.contracts.validators"]._SCHEMA_LOADER is None

    def test_plain_output_without_schema_dir(self, missing_schema_dir):
        result = runner.invoke(app, ["4", "--verify", "--show-work"])
        assert result.exit_code == 0, result.exception
        assert "2" in result.stdout.splitlines()

    def test_json_requires_schema_dir(self, missing_schema_dir):
        result = runner.invoke(app, ["4", "--json"])
        assert result.exit_code != 0
        assert isinstance(result.exception, RuntimeError)
        assert "Schema directory not found" in str(result.exception)


class TestElapsedTime:
    """Время печатается после проверки --verify."""

    @pytest.mark.parametrize("args,stdin", [(["2.25", "--verify"], None), (["--verify"], "2.25\nn\n\n")])
    def test_elapsed_after_verify(self, monkeypatch, args, stdin):
        calls = []
        check = cli_module._check
        monkeypatch.setattr(cli_module, "_check", lambda n, r: calls.append("check") or check(n, r))
        monkeypatch.setattr(cli_module, "_print_elapsed", lambda start: calls.append("elapsed"))

        result = runner.invoke(app, args, input=stdin)
        assert result.exit_code == 0, result.exception
        assert calls == ["check", "elapsed"]
