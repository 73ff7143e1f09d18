"""Configuration management commands"""

import click

from ..decorators import config_required
from ..utils.output import console, format_json, format_yaml, print_error
from ...api.exceptions import ConfigParseError
from ...constants import CONFIG_LATEST_VERSION, EMOJI_ERROR, EMOJI_SUCCESS
from ...services.config_service import ConfigService, ConfigUpdateStatus


@click.group()
def config():
    """Manage dk.config.json"""
    pass


@config.command()
@click.pass_context
def update(ctx):
    """Migrate dk.config.json to the latest schema version

    All existing settings are kept; only the version is rewritten.
    """
    service = ConfigService(ctx.obj.project_root)

    try:
        status = service.update()
    except ConfigParseError as e:
        print_error(str(e))
        ctx.exit(1)

    if status is ConfigUpdateStatus.MISSING:
        console.print(f"{EMOJI_ERROR} No dk.config.json found. Run dk init first.")
        ctx.exit(1)
    elif status is ConfigUpdateStatus.UP_TO_DATE:
        console.print(f"{EMOJI_SUCCESS} Your dk.config.json is already up to date!")
    else:
        console.print(
            f"{EMOJI_SUCCESS} dk.config.json updated to latest version "
            f"({CONFIG_LATEST_VERSION})!"
        )


@config.command()
@click.option('--format', '-f', 'output_format', type=click.Choice(['json', 'yaml']),
              default='json', help='Output format')
@click.pass_context
@config_required
def show(ctx, output_format):
    """Show the current configuration"""
    data = ctx.obj.config.to_dict()

    if output_format == 'yaml':
        format_yaml(data)
    else:
        format_json(data)
