"""Project context decorator for CLI commands"""

from functools import wraps
from typing import Callable

import click

from ..utils.output import console, print_warning
from ...api.exceptions import ConfigParseError
from ...constants import EMOJI_ERROR, EMOJI_WARNING
from ...services.config_service import ConfigService, is_outdated


def config_required(func: Callable) -> Callable:
    """Decorator that ensures the command runs with a loaded dk.config.json

    This decorator:
    1. Loads dk.config.json from the project root
    2. Exits with status 1 if it is missing or malformed
    3. Warns when the config schema is outdated
    4. Stores the config on the click context object

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()
        service = ConfigService(ctx.obj.project_root)

        try:
            config = service.read()
        except ConfigParseError as e:
            console.print(f"{EMOJI_ERROR} {e}")
            ctx.exit(1)

        if config is None:
            console.print(
                f"{EMOJI_ERROR} No dk.config.json found.\n"
                f"Run 'dk init' to initialize this project."
            )
            ctx.exit(1)

        if is_outdated(config):
            console.print(
                f"{EMOJI_WARNING} dk.config.json is outdated. "
                f"Run 'dk config update' to migrate it."
            )

        ctx.obj.config = config
        return func(*args, **kwargs)

    return wrapper


def config_optional(func: Callable) -> Callable:
    """Decorator for commands that use dk.config.json when it is available

    A malformed config is reported as a warning and treated as absent.
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()

        try:
            ctx.obj.config = ConfigService(ctx.obj.project_root).read()
        except ConfigParseError as e:
            print_warning(str(e))
            ctx.obj.config = None

        return func(*args, **kwargs)

    return wrapper
