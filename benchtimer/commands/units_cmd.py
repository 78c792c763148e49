"""Units command - lists the duration units samples can be rendered in."""

import click

from benchtimer.units import DurationUnit


def run_units() -> None:
    click.echo(f"{'Unit':<14}{'Symbol':<8}Nanoseconds per tick")
    click.echo("-" * 50)
    for unit in DurationUnit:
        click.echo(f"{unit.name.lower():<14}{unit.symbol:<8}{unit.nanoseconds:,}")
