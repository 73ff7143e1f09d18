"""Version management commands"""

import click

from ..utils.output import ConsoleReporter, console, print_error
from ...api.exceptions import DevKitError
from ...constants import EMOJI_PARTY
from ...services.deploy_service import DeployService


@click.group()
def version():
    """Manage the package.json version"""
    pass


@version.command()
@click.pass_context
def bump(ctx):
    """Increment the patch version on main and push it"""
    service = DeployService(ctx.obj.project_root, reporter=ConsoleReporter())

    try:
        new_version = service.bump_version()
    except DevKitError as e:
        print_error(str(e))
        ctx.exit(1)

    console.print(f"{EMOJI_PARTY} Version increment to {new_version} completed successfully!")
