"""Deploy command implementation"""

import click

from ..utils.interactive import select_from_list
from ..utils.output import ConsoleReporter, console, format_deploy_result, print_error
from ...api.exceptions import DevKitError
from ...constants import EMOJI_ROCKET
from ...services.deploy_service import DeployService


@click.group(invoke_without_command=True)
@click.pass_context
def deploy(ctx):
    """Deploy the current branch through git

    Without a subcommand you are asked which environment to deploy to.

    \b
    Environments:
        dev   force-push main to the dev branch
        prod  pull stable, bump the version if needed, push main
              and open a pull request into stable

    \b
    Examples:
        dk deploy
        dk deploy dev
        dk deploy prod
    """
    if ctx.invoked_subcommand is not None:
        return

    console.print(f"\n{EMOJI_ROCKET} [bold]Deployment Center[/bold]")
    environment = select_from_list(
        console,
        "Select environment:",
        ["dev", "prod"],
        ["Development (quick deploy)", "Production (full pipeline)"]
    )

    ctx.invoke(dev if environment == "dev" else prod)


@deploy.command()
@click.pass_context
def dev(ctx):
    """Force-push main to the dev branch"""
    service = DeployService(ctx.obj.project_root, reporter=ConsoleReporter())

    try:
        result = service.deploy_dev()
    except DevKitError as e:
        print_error("Deployment to dev failed", e)
        ctx.exit(1)

    format_deploy_result(result)


@deploy.command()
@click.pass_context
def prod(ctx):
    """Run the production deployment pipeline

    \b
    Steps:
        1. git pull origin stable (local changes win)
        2. abort on uncommitted changes
        3. abort unless on main
        4. bump the patch version if it matches the last deploy
        5. record deploy.json, commit and push main
        6. open a pull request from main into stable (optional)
    """
    service = DeployService(ctx.obj.project_root, reporter=ConsoleReporter())

    try:
        result = service.deploy_prod()
    except DevKitError as e:
        print_error(str(e))
        ctx.exit(1)

    format_deploy_result(result)
