"""
Command-line interface for the longhand square root.

One-shot:
    sqrt-longhand 1234567890.12345678901234567890 --show-work

Interactive (no NUMBER): prompts for numbers until an empty line or EOF.
Include about twice as many decimal digits/zeros as the digits you want back.
"""

import json
import sys
import time
from datetime import timedelta
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from src.core.contracts import validate_sqrt_result
from src.core.domain.decimal_input import MalformedInput
from src.core.math.verification import is_truncated_root
from src.longhand.api import SquareRootResult, square_root
from src.longhand.render import RenderConfig, render_work
from src.utils.logging import setup_logging

app = typer.Typer(
    name="sqrt-longhand",
    help="Compute a square root digit by digit with the longhand method",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)

BANNER = """\
sqrt-longhand - Compute Square Root by Longhand method

Command line usage example
   sqrt-longhand 1234567890.12345678901234567890 --show-work

Interactive mode
Enter decimal number (any accuracy, hint include about twice as many decimal digits/zeros as you want returned)
Empty line ends the session."""


def _allow_long_integers() -> None:
    # json.dumps и DEBUG-лог печатают остатки целиком, без лимита 4300 цифр
    if hasattr(sys, "set_int_max_str_digits"):
        sys.set_int_max_str_digits(0)


def _print_plain(text: str) -> None:
    console.print(text, markup=False, highlight=False, emoji=False, soft_wrap=True)


def _print_elapsed(start: float) -> None:
    elapsed = timedelta(seconds=time.perf_counter() - start)
    err_console.print(f"[{elapsed} elapsed]", markup=False, highlight=False, emoji=False)


def _emit(result: SquareRootResult, show_work: bool, json_output: bool) -> None:
    if json_output:
        contract = result.to_contract()
        validate_sqrt_result(contract)
        _print_plain(json.dumps(contract, indent=2))
    elif show_work:
        for line in render_work(result, RenderConfig(show_equals_footer=True)):
            _print_plain(line)
    else:
        _print_plain(result.root)


def _check(number: str, result: SquareRootResult) -> bool:
    if is_truncated_root(number, result.root):
        return True
    err_console.print(
        f"[red]Verification failed:[/red] {escape(result.root)} is not the truncated root of {escape(number)}"
    )
    return False


def _interactive(verify: bool, json_output: bool) -> None:
    _print_plain(BANNER)
    while True:
        try:
            raw = typer.prompt("", prompt_suffix=": ", default="", show_default=False)
            raw = raw.strip()
            if not raw:
                break
            show_work = typer.confirm("Show work?", default=True)
        except typer.Abort:
            break

        start = time.perf_counter()
        try:
            result = square_root(raw, record_trace=show_work)
        except MalformedInput as e:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            continue
        _emit(result, show_work, json_output)
        if verify:
            _check(raw, result)
        _print_elapsed(start)


@app.command()
def main(
    number: Optional[str] = typer.Argument(
        None,
        help="Decimal number, digits with at most one decimal point (omit for interactive mode)",
    ),
    show_work: bool = typer.Option(
        False,
        "--show-work/--no-show-work",
        "-w",
        help="Print the long division layout",
    ),
    verify: bool = typer.Option(
        False,
        "--verify",
        help="Check R^2 <= v < (R + ulp)^2 exactly",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON (with steps when --show-work is given)",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Logging level",
    ),
):
    """Compute the square root of NUMBER by the longhand method."""
    setup_logging(log_level)
    _allow_long_integers()

    if number is None:
        _interactive(verify, json_output)
        return

    number = number.strip()
    start = time.perf_counter()
    try:
        result = square_root(number, record_trace=show_work)
    except MalformedInput as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    _emit(result, show_work, json_output)
    verified = _check(number, result) if verify else True
    _print_elapsed(start)

    if not verified:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
