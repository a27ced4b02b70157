# demo_math/cli.py
from __future__ import annotations

import logging
from typing import Optional

import click
from rich.console import Console
from rich.table import Table
from rich.theme import Theme

from . import SUPPORTED_INT_BITS, __version__
from .config import INT_BITS_ENV, resolve_int_bits, resolve_log_level
from .math_functions import ArithmeticInputError, IntegerWidthError, MathFunctions
from .math_tests_data import MathTestsData
from .oracle import check_cases, failures

logger = logging.getLogger(__name__)

# --- Initialize Rich Console ---
custom_theme = Theme({
    "info": "cyan",
    "warning": "yellow",
    "error": "bold red",
    "success": "green",
})
console = Console(theme=custom_theme)


def handle_error(e: Exception, command_name: str, quiet: bool):
    """Prints the error with the Rich console and re-raises it as a ClickException."""
    if not quiet:
        console.print(f"[error]Error during '{command_name}' command:[/error]", style="error")
        if isinstance(e, ArithmeticInputError):
            console.print(f"  [error]Invalid operand:[/error] {e}", style="error")
        elif isinstance(e, IntegerWidthError):
            console.print(f"  [error]Integer width error:[/error] {e}", style="error")
        else:
            console.print(f"  [error]An unexpected error occurred:[/error] {e}", style="error")
    raise click.ClickException(str(e)) from e


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = resolve_log_level(verbose=verbose, quiet=quiet)
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger("demo_math").setLevel(level)


# --- Main CLI Group ---
@click.group(help="Integer addition checked by fact, inline-data and class-data cases.")
@click.option(
    "--int-bits",
    type=click.Choice([str(bits) for bits in SUPPORTED_INT_BITS]),
    default=None,
    help=f"Use fixed-width wrapping arithmetic. Defaults to ${INT_BITS_ENV} or arbitrary precision.",
)
@click.option(
    "--verbose",
    is_flag=True,
    default=False,
    help="Increase output verbosity for more detailed information.",
)
@click.option(
    "--quiet",
    is_flag=True,
    default=False,
    help="Decrease output verbosity for minimal information.",
)
@click.version_option(version=__version__, package_name="demo-math")
@click.pass_context
def cli(ctx: click.Context, int_bits: Optional[str], verbose: bool, quiet: bool):
    """Main entry point. Resolves global options into the context object."""
    ctx.ensure_object(dict)
    if quiet:
        verbose = False
    ctx.obj["verbose"] = verbose
    ctx.obj["quiet"] = quiet
    _configure_logging(verbose, quiet)

    try:
        ctx.obj["int_bits"] = resolve_int_bits(int(int_bits) if int_bits else None)
    except IntegerWidthError as e:
        raise click.BadParameter(str(e), param_hint=f"'--int-bits' / ${INT_BITS_ENV}") from e
    ctx.obj["unit"] = MathFunctions(ctx.obj["int_bits"])
    logger.debug(f"Using {ctx.obj['unit']!r}")


@cli.command("add", context_settings={"ignore_unknown_options": True})
@click.argument("a", type=int)
@click.argument("b", type=int)
@click.pass_context
def add_command(ctx: click.Context, a: int, b: int):
    """Print the sum of A and B."""
    try:
        result = ctx.obj["unit"].add(a, b)
    except (ArithmeticInputError, IntegerWidthError) as e:
        handle_error(e, "add", ctx.obj["quiet"])
    click.echo(result)


@cli.command("cases")
@click.pass_context
def cases_command(ctx: click.Context):
    """List the shared (a, b, expected) cases."""
    data = MathTestsData()
    table = Table(title="Addition Cases", show_header=True, header_style="bold magenta")
    table.add_column("#", style="dim", no_wrap=True)
    table.add_column("First", justify="right")
    table.add_column("Second", justify="right")
    table.add_column("Expected", justify="right", style="cyan")
    for index, case in enumerate(data, start=1):
        table.add_row(
            str(index),
            str(case.first_number),
            str(case.second_number),
            str(case.expected_result),
        )
    console.print(table)


@cli.command("check")
@click.pass_context
def check_command(ctx: click.Context):
    """Check the shared cases against the adder; exit 1 on any mismatch."""
    quiet = ctx.obj["quiet"]
    try:
        results = check_cases(MathTestsData(), ctx.obj["unit"])
    except (ArithmeticInputError, IntegerWidthError) as e:
        handle_error(e, "check", quiet)

    failed = failures(results)
    if not quiet:
        table = Table(title="Case Results", show_header=True, header_style="bold magenta")
        table.add_column("Case", no_wrap=True)
        table.add_column("Expected", justify="right")
        table.add_column("Actual", justify="right")
        table.add_column("Result")
        for result in results:
            outcome = "[success]PASS[/success]" if result.passed else "[error]FAIL[/error]"
            table.add_row(result.name, str(result.expected), str(result.actual), outcome)
        console.print(table)

    if failed:
        console.print(f"[error]{len(failed)} of {len(results)} cases failed[/error]")
        ctx.exit(1)
    if not quiet:
        console.print(f"[success]All {len(results)} cases passed[/success]")


def main():
    cli(obj={})


if __name__ == "__main__":
    main()
