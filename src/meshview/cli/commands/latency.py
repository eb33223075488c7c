"""Latency command - format a duration."""

import sys
import click
from ...config import load_display_config
from ...formatting.numbers import format_latency_ms, format_latency_sec
from ...utils.errors import MeshViewError
from ...utils.logging import get_logger
from ..utils import format_error, parse_value

logger = get_logger("cli.latency")


@click.command()
@click.argument('value')
@click.option('--unit', type=click.Choice(['s', 'ms']), default='ms', show_default=True, help='Unit of VALUE')
@click.option('--ascii', 'ascii_mode', is_flag=True, help="Use 'us' instead of 'µs'")
@click.option('--config', 'config_path', type=click.Path(), help='Display config YAML')
def latency(value, unit, ascii_mode, config_path):
    """Format a latency VALUE given in seconds or milliseconds."""
    try:
        ascii_mode = ascii_mode or load_display_config(config_path).latency.ascii
        formatter = format_latency_sec if unit == 's' else format_latency_ms
        # None leaves the decision to MESHVIEW_ASCII
        click.echo(formatter(parse_value(value), ascii_mode=ascii_mode or None))
    except MeshViewError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Formatting failed: {e}"), err=True)
        sys.exit(1)
