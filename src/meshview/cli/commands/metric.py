"""Metric command - render a value the way a dashboard column would."""

import sys
import click
from ...contracts.metric_kinds import MetricKind
from ...formatting.numbers import format_metric
from ...utils.errors import MeshViewError
from ...utils.logging import get_logger
from ..utils import format_error, parse_value

logger = get_logger("cli.metric")


@click.command()
@click.argument('kind')
@click.argument('value')
def metric(kind, value):
    """
    Format VALUE as a metric of the given KIND.
    
    KIND is one of REQUEST_RATE, SUCCESS_RATE, LATENCY, UNTRUNCATED, NO_UNIT
    (case-insensitive). Pass "none" for a missing value and "nan" for NaN.
    """
    try:
        click.echo(format_metric(kind.upper(), parse_value(value)))
    except MeshViewError as e:
        kinds = ", ".join(k.value for k in MetricKind)
        click.echo(format_error(str(e), f"Valid kinds: {kinds}"), err=True)
        sys.exit(1)
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Formatting failed: {e}"), err=True)
        sys.exit(1)
