"""Address command - decode an integer IPv4 address."""

import click
from ...formatting.address import public_address_to_string


@click.command()
@click.argument('ipv4')
@click.argument('port')
def address(ipv4, port):
    """Print IPV4 (a 32-bit integer) and PORT as host:port."""
    click.echo(public_address_to_string(ipv4, port))
