"""Connectivity test command"""

import sys

import click
from rich.console import Console

from ..decorators import require_config
from ..utils.output import format_errors, print_error
from ...api.exceptions import ConfigError
from ...constants import MSG_TEST_SUCCESS

console = Console()


@click.command()
@click.pass_context
@require_config
def test(ctx):
    """Test settings and repository connectivity

    Validates the deployer settings, then checks that every configured
    repository is a writable directory whose remote can be fetched with
    the configured credentials.

    Examples:

        git-deploy-tool test
    """
    console.print("[bold]Git Deploy Tool Diagnostics[/bold]\n")

    try:
        deployer = ctx.obj.deploy_service.test()
    except ConfigError as e:
        print_error("Invalid configuration", e)
        sys.exit(1)

    if deployer.has_errors():
        console.print(format_errors(deployer.errors.errors, title="Test Results"))
        console.print(f"\n[red]{len(deployer.errors.errors)} problem(s) found[/red]")
        sys.exit(1)

    console.print(f"[green]{MSG_TEST_SUCCESS}[/green]")
