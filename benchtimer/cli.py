#!/usr/bin/env python3
"""Benchtimer CLI - Command-line interface for benchtimer."""

import click

from benchtimer.config import ENV_LOG_LEVEL
from benchtimer.units import DurationUnit
from benchtimer.utils.env import get_env
from benchtimer.utils.logger import Logger


@click.group()
def benchtimer():
    """Benchtimer command-line tool for micro-benchmarks."""
    # Subcommands can raise the level via set_level()
    if not Logger.is_configured():
        Logger.configure(level=get_env(ENV_LOG_LEVEL, default="INFO"), timestamps=True)


@benchtimer.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed version information")
def version(verbose):
    """Display benchtimer version information."""
    from benchtimer.commands.version_cmd import run_version

    if verbose:
        Logger.set_level("DEBUG")

    run_version(verbose=verbose)


@benchtimer.command()
def units():
    """List supported duration units."""
    from benchtimer.commands.units_cmd import run_units

    run_units()


@benchtimer.command()
@click.option(
    "--loops",
    "-l",
    type=click.IntRange(min=0),
    default=5,
    help="Number of string sizes to time (default: 5)",
)
@click.option(
    "--base-length",
    "-b",
    type=click.IntRange(min=0),
    default=20,
    help="String length multiplier per loop (default: 20)",
)
@click.option(
    "--iterations",
    "-n",
    type=click.IntRange(min=0),
    default=100_000,
    help="Strings generated per loop (default: 100000)",
)
@click.option(
    "--unit",
    "-u",
    type=click.Choice([unit.symbol for unit in DurationUnit], case_sensitive=False),
    default=None,
    help="Sample unit (default: BENCHTIMER_UNIT or ms)",
)
@click.option(
    "--mode",
    "-m",
    type=click.Choice(["sequential", "concurrent"], case_sensitive=False),
    default=None,
    help="Bulk stop mode (default: BENCHTIMER_MODE or concurrent)",
)
@click.option("--seed", type=int, default=None, help="Seed for the string generator")
@click.option(
    "--output",
    "-o",
    "outputs",
    multiple=True,
    help="Output file(s) - format auto-detected (.json/.yaml). Repeatable.",
)
@click.option(
    "--format",
    "-f",
    "fmt",
    type=click.Choice(["json", "yaml", "text"], case_sensitive=False),
    default=None,
    help="Stdout format when no --output specified",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
def demo(loops, base_length, iterations, unit, mode, seed, outputs, fmt, verbose):
    r"""Time random string generation at increasing sizes.

    \b
    Examples:
      benchtimer demo                      # Default run, milliseconds
      benchtimer demo -n 1000 -u us        # Small run in microseconds
      benchtimer demo -o timings.json      # Save to JSON
    """
    from benchtimer.commands.demo_cmd import run_demo

    if verbose:
        Logger.set_level("DEBUG")

    run_demo(
        loops=loops,
        base_length=base_length,
        iterations=iterations,
        unit=unit,
        mode=mode,
        seed=seed,
        outputs=outputs,
        fmt=fmt,
    )


if __name__ == "__main__":
    benchtimer()
