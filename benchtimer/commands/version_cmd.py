"""
Version command - displays benchtimer version information
"""

import click

from benchtimer.version import BENCHTIMER_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display benchtimer version information.

    Args:
        verbose: If True, show additional details like full hash and date
    """
    if verbose:
        click.echo(f"benchtimer version {BENCHTIMER_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {BENCHTIMER_VERSION}")
        click.echo(f"  Build Date:       {BENCHTIMER_VERSION.date_string()}")
        click.echo(f"  Package Hash:     {BENCHTIMER_VERSION.hash}")
    else:
        click.echo(f"benchtimer {BENCHTIMER_VERSION}")
