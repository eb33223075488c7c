"""Classify command - band a success ratio."""

import sys
import click
from ...config import load_display_config
from ...formatting.classify import get_sr_classification, sr_status_class
from ...utils.errors import MeshViewError
from ...utils.logging import get_logger
from ..utils import format_error

logger = get_logger("cli.classify")


@click.command()
@click.argument('ratio', type=float)
@click.option('--config', 'config_path', type=click.Path(), help='Display config YAML with success_rate thresholds')
@click.option('--css', is_flag=True, help='Print the CSS status class instead of the band')
def classify(ratio, config_path, css):
    """Classify success RATIO (0-1) as poor, ok or good."""
    try:
        thresholds = load_display_config(config_path).success_rate
        if css:
            click.echo(sr_status_class(ratio, thresholds))
        else:
            click.echo(get_sr_classification(ratio, thresholds))
    except MeshViewError as e:
        click.echo(format_error(str(e)), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Classification failed: {e}"), err=True)
        sys.exit(1)
