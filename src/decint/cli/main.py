"""CLI entry point for decint.

Invoked as::

    decint [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m decint.cli.main

Commands
--------
calc        Apply a binary operator to two integers
compare     Compare two integers
fact        Compute a factorial
gcd         Compute a greatest common divisor
pow         Raise an integer to a non-negative power
digits      List the digits of an integer by position
dump        Serialize an integer to JSON or YAML
storage     List registered digit storage backends
version     Show version information

Negative numbers can be passed directly (``decint calc -7 + 3``).
"""
from __future__ import annotations

import logging
import operator
import sys
from collections.abc import Callable
from typing import Any

import click
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from decint.core.errors import IntegerError, InvalidFormatError
from decint.core.integer import Integer

console = Console()
err_console = Console(stderr=True)

# Negative numbers look like options to click; let them through as arguments.
_NUMBER_ARGS: dict[str, Any] = {"ignore_unknown_options": True}

_OPERATORS: dict[str, Callable[[Integer, Integer], Integer]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "//": operator.floordiv,
    "%": operator.mod,
}


class IntegerParamType(click.ParamType):
    """Click parameter type converting decimal text to ``Integer``."""

    name = "integer"

    def convert(self, value: Any, param: click.Parameter | None, ctx: click.Context | None) -> Integer:
        if isinstance(value, Integer):
            return value
        try:
            return Integer(str(value))
        except InvalidFormatError as exc:
            self.fail(str(exc), param, ctx)


INTEGER = IntegerParamType()


def _run_or_exit(func: Callable[[], Integer]) -> Integer:
    """Evaluate ``func``, printing library errors and exiting on failure."""
    try:
        return func()
    except IntegerError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="decint")
@click.option("--storage", default=None, help="Digit storage backend for parsed numbers")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def cli(storage: str | None, verbose: bool) -> None:
    """Arbitrary-precision decimal integer calculator."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    if storage is not None:
        from decint.storage import StorageNotFoundError, set_default_storage

        try:
            set_default_storage(storage)
        except StorageNotFoundError as exc:
            raise click.BadParameter(str(exc), param_hint="--storage") from None


# ---------------------------------------------------------------------------
# version command
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from decint import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]decint[/bold]", f"v{__version__}")
    table.add_row("Python", f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}")
    table.add_row("Platform", sys.platform)
    console.print(table)


# ---------------------------------------------------------------------------
# storage command
# ---------------------------------------------------------------------------


@cli.command(name="storage")
@click.option("--entrypoints", is_flag=True, default=False, help="Load backends from installed packages first")
def storage_command(entrypoints: bool) -> None:
    """List all registered digit storage backends."""
    from decint.storage import storage_registry

    if entrypoints:
        storage_registry.load_entrypoints()

    table = Table(title="Storage backends")
    table.add_column("Name", style="bold")
    table.add_column("Class")
    table.add_column("Default")
    for name in storage_registry.list_backends():
        cls = storage_registry.get(name)
        marker = "[green]yes[/green]" if name == storage_registry.default else ""
        table.add_row(name, f"{cls.__module__}.{cls.__qualname__}", marker)
    console.print(table)


# ---------------------------------------------------------------------------
# arithmetic commands
# ---------------------------------------------------------------------------


@cli.command(name="calc", context_settings=_NUMBER_ARGS)
@click.argument("left", type=INTEGER)
@click.argument("op", type=click.Choice(list(_OPERATORS)))
@click.argument("right", type=INTEGER)
def calc_command(left: Integer, op: str, right: Integer) -> None:
    """Apply OP to LEFT and RIGHT.

    OP is one of + - * // %.  Division truncates toward zero; % requires
    LEFT >= 0 and RIGHT > 0.

    \b
        decint calc 123456789123456789 '*' 987654321
        decint calc -- -100 // 7
    """
    func = _OPERATORS[op]
    console.print(str(_run_or_exit(lambda: func(left, right))), highlight=False, soft_wrap=True)


@cli.command(name="compare", context_settings=_NUMBER_ARGS)
@click.argument("left", type=INTEGER)
@click.argument("right", type=INTEGER)
def compare_command(left: Integer, right: Integer) -> None:
    """Print <, = or > for LEFT compared with RIGHT."""
    if left < right:
        symbol = "<"
    elif left == right:
        symbol = "="
    else:
        symbol = ">"
    console.print(f"{left} {symbol} {right}", highlight=False, soft_wrap=True)


@cli.command(name="fact", context_settings=_NUMBER_ARGS)
@click.argument("value", type=INTEGER)
def fact_command(value: Integer) -> None:
    """Compute VALUE! for a non-negative VALUE."""
    from decint.derived import factorial

    console.print(str(_run_or_exit(lambda: factorial(value))), highlight=False, soft_wrap=True)


@cli.command(name="gcd", context_settings=_NUMBER_ARGS)
@click.argument("left", type=INTEGER)
@click.argument("right", type=INTEGER)
def gcd_command(left: Integer, right: Integer) -> None:
    """Compute the greatest common divisor of two non-negative integers."""
    from decint.derived import gcd

    console.print(str(_run_or_exit(lambda: gcd(left, right))), highlight=False, soft_wrap=True)


@cli.command(name="pow", context_settings=_NUMBER_ARGS)
@click.argument("base", type=INTEGER)
@click.argument("exponent", type=INTEGER)
def pow_command(base: Integer, exponent: Integer) -> None:
    """Raise BASE to a non-negative EXPONENT."""
    from decint.derived import power

    console.print(str(_run_or_exit(lambda: power(base, exponent))), highlight=False, soft_wrap=True)


# ---------------------------------------------------------------------------
# inspection commands
# ---------------------------------------------------------------------------


@cli.command(name="digits", context_settings=_NUMBER_ARGS)
@click.argument("value", type=INTEGER)
def digits_command(value: Integer) -> None:
    """List the digits of VALUE, position 0 being the units digit."""
    from decint.formatter import format_digits_table

    sign = "negative" if value.negative else "non-negative"
    console.print(f"{sign}, {value.size()} digit(s)", highlight=False)
    table = Table()
    table.add_column("Position", justify="right")
    table.add_column("Digit", justify="right", style="bold")
    for position, digit in format_digits_table(value):
        table.add_row(str(position), str(digit))
    console.print(table)


@cli.command(name="dump", context_settings=_NUMBER_ARGS)
@click.argument("value", type=INTEGER)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"], case_sensitive=False),
    default="json",
    help="Serialization format",
)
def dump_command(value: Integer, output_format: str) -> None:
    """Serialize VALUE to JSON or YAML."""
    from decint.serializer import IntegerSerializer

    serializer = IntegerSerializer()
    if output_format.lower() == "json":
        text = serializer.to_json(value)
    else:
        text = serializer.to_yaml(value)
    console.print(Syntax(text, output_format.lower()))


if __name__ == "__main__":
    cli()
