"""Main CLI entry point for meshview."""

import click
from .commands.metric import metric
from .commands.latency import latency
from .commands.resource import resource
from .commands.address import address
from .commands.classify import classify
from .commands.version import version
from .. import __version__


@click.group()
@click.version_option(version=__version__, prog_name="meshview", message="%(prog)s version %(version)s")
def cli():
    """meshview - Dashboard formatting utilities."""
    pass


cli.add_command(metric)
cli.add_command(latency)
cli.add_command(resource)
cli.add_command(address)
cli.add_command(classify)
cli.add_command(version)
