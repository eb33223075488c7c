"""Version command - show meshview version."""

import click
from ... import __version__


@click.command()
def version():
    """Show meshview version."""
    click.echo(f"meshview version {__version__}")
