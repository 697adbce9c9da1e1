# git_deploy_tool/cli/main.py
"""Main CLI entry point for git-deploy-tool"""

import os
import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..constants import APP_NAME, LOG_FORMAT, ENV_LOG_LEVEL
from ..api.exceptions import ConfigError
from ..services import ConfigService, DeployService, find_config_file

# Import all commands
from .commands import (
    deploy,
    test,
    repos
)

console = Console()


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
        level = logging.getLevelName(os.environ.get(ENV_LOG_LEVEL, "WARNING").upper())
        if not isinstance(level, int):
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
    """CLI context object with lazy configuration loading

    The configuration file is only located and parsed when a command
    accesses it, so ``--help`` works outside a configured directory.
    """

    def __init__(self, config_path: Optional[Path] = None):
        """Initialize CLI context

        Args:
            config_path: Explicit configuration file, searched for when None
        """
        self._config_path = config_path
        self._config_service: Optional[ConfigService] = None
        self._deploy_service: Optional[DeployService] = None
        self.verbose: bool = False
        self.debug: bool = False

    @property
    def config_path(self) -> Optional[Path]:
        """Get configuration file path"""
        if self._config_path is None:
            self._config_path = find_config_file()
        return self._config_path

    @property
    def config_service(self) -> ConfigService:
        """Get configuration service (lazy loading)

        Raises:
            ConfigError: If no configuration file can be found
        """
        if self._config_service is None:
            if self.config_path is None or not self.config_path.is_file():
                raise ConfigError(
                    "No configuration file found. Create .git-deploy.yaml "
                    "or pass --config"
                )

            self._config_service = ConfigService(self.config_path)
            self._apply_logging_settings()

        return self._config_service

    @property
    def deploy_service(self) -> DeployService:
        """Get deploy service (lazy loading)"""
        if self._deploy_service is None:
            self._deploy_service = DeployService(self.config_service)
        return self._deploy_service

    def _apply_logging_settings(self) -> None:
        # Command line flags win over the configuration file
        if self.verbose or self.debug:
            return

        level = self._config_service.settings.logging.get("level")
        if level:
            logging.getLogger(__package__.split('.')[0]).setLevel(str(level).upper())


@click.group(name=APP_NAME)
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress all output except errors')
@click.option('-c', '--config', 'config_path',
              type=click.Path(dir_okay=False, path_type=Path),
              help='Configuration file (default: .git-deploy.yaml)')
@click.pass_context
def cli(ctx, verbose, debug, quiet, config_path):
    """Git Deploy Tool - Deploy cached pages to git repositories

    Cached pages of each site are written into the working copy of the
    site's repository, committed and pushed to its remote.
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        setup_logging(verbose=verbose, debug=debug)

    ctx.obj = Context(config_path)
    ctx.obj.verbose = verbose
    ctx.obj.debug = debug


# Register commands
cli.add_command(deploy.deploy)
cli.add_command(test.test)
cli.add_command(repos.repos)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        console.print(f"[red]Unexpected error: {e}[/red]")
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
