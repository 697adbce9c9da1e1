"""Configuration context decorator for CLI commands"""

from functools import wraps
from typing import Callable

import click

from ..utils.output import console
from ...api.exceptions import ConfigError
from ...constants import EMOJI_ERROR


def require_config(func: Callable) -> Callable:
    """Decorator that ensures the command runs with a loaded configuration

    The configuration file is located and parsed before the command
    runs; a missing or invalid file ends the command with exit code 1.

    Args:
        func: Command function to decorate

    Returns:
        Decorated function
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        ctx = click.get_current_context()

        try:
            config_service = ctx.obj.config_service
            # Parse now so errors surface before the command starts
            config_service.settings
        except ConfigError as e:
            console.print(f"{EMOJI_ERROR} {e}")
            ctx.exit(1)

        if ctx.obj.debug:
            console.print(f"[dim]Configuration: {config_service.config_path}[/dim]")

        return func(*args, **kwargs)

    return wrapper
