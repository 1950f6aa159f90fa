"""
Version command - displays performer version information
"""

import click

from performer.version import PERFORMER_VERSION


def run_version(verbose: bool = False) -> None:
    """
    Display performer version information.

    Args:
        verbose: If True, show the full package hash and release date
    """
    if verbose:
        click.echo(f"performer version {PERFORMER_VERSION.full_version()}")
        click.echo("\nDetailed version information:")
        click.echo(f"  Semantic Version: {PERFORMER_VERSION}")
        click.echo(f"  Build Date:       {PERFORMER_VERSION.date_string()}")
        click.echo(f"  Package Hash:     {PERFORMER_VERSION.hash}")
    else:
        click.echo(f"performer {PERFORMER_VERSION}")
