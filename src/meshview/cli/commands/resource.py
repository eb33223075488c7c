"""Resource command - show every name variant of a resource type."""

import json
import sys
import click
from ...formatting.resources import (
    friendly_title,
    is_pod_owner,
    is_resource,
    resource_type_to_camel_case,
    singular_resource,
    to_short_resource_name,
)
from ...utils.logging import get_logger
from ..utils import format_error

logger = get_logger("cli.resource")


def describe_resource(name: str) -> dict:
    """Collect the normalized variants of a resource type name."""
    singular = singular_resource(name)
    titles = friendly_title(name)
    return {
        "name": name,
        "singular": singular,
        "short_name": to_short_resource_name(singular),
        "camel_case": resource_type_to_camel_case(singular),
        "title": titles.singular,
        "title_plural": titles.plural,
        "is_resource": is_resource(name),
        "is_pod_owner": is_pod_owner(name),
    }


@click.command()
@click.argument('name')
@click.option('--json', 'as_json', is_flag=True, help='Output structured JSON')
def resource(name, as_json):
    """Show singular, short, camelCase and title forms of resource type NAME."""
    try:
        info = describe_resource(name)
        if as_json:
            click.echo(json.dumps(info, indent=2))
            return
        
        click.echo(f"Resource:     {info['name']}")
        click.echo(f"Singular:     {info['singular']}")
        click.echo(f"Short name:   {info['short_name']}")
        click.echo(f"camelCase:    {info['camel_case']}")
        click.echo(f"Title:        {info['title']} / {info['title_plural']}")
        click.echo(f"Known type:   {'yes' if info['is_resource'] else 'no'}")
        click.echo(f"Owns pods:    {'yes' if info['is_pod_owner'] else 'no'}")
    except Exception as e:
        logger.error(f"Unexpected error: {e}", exc_info=True)
        click.echo(format_error(f"Resource lookup failed: {e}"), err=True)
        sys.exit(1)
