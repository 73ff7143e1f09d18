# dev_kit/cli/main.py
"""Main CLI entry point for dk"""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
from rich.logging import RichHandler

from ..__version__ import __version__
from ..constants import APP_NAME, ENV_LOG_LEVEL, LOG_FORMAT
from ..models.config import DKConfig
from .utils.output import console

# Import all commands
from .commands import (
    init,
    config,
    deploy,
    version,
    clean,
    git,
    doctor,
)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = os.environ.get(ENV_LOG_LEVEL, "WARNING").upper()
        if not isinstance(logging.getLevelName(level), int):
            level = logging.WARNING

    # Configure rich handler
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True
    )


class Context:
    """CLI context object shared by all commands"""

    def __init__(self, project_root: Optional[Path] = None):
        self.project_root: Path = (project_root or Path.cwd()).resolve()
        self.config: Optional[DKConfig] = None
        self.verbose: bool = False
        self.debug: bool = False


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option(
    '--project-root',
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help='Project directory (defaults to the current directory)'
)
@click.version_option(__version__, prog_name=APP_NAME)
@click.pass_context
def cli(ctx, verbose, debug, quiet, project_root):
    """dk - developer kit for Node, React Native and Spring Boot projects

    Detects your project type, keeps dk.config.json up to date, cleans
    build artifacts and drives the git-based dev and production
    deployment workflow.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        logging.disable(logging.NOTSET)
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(project_root)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(init.init)
cli.add_command(config.config)
cli.add_command(deploy.deploy)
cli.add_command(version.version)
cli.add_command(clean.clean)
cli.add_command(git.git)
cli.add_command(doctor.doctor)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        # Without standalone mode click returns the ctx.exit() status
        exit_code = cli(prog_name=APP_NAME, standalone_mode=False)

    except click.Abort:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)

    sys.exit(exit_code if isinstance(exit_code, int) else 0)


if __name__ == "__main__":
    main()
