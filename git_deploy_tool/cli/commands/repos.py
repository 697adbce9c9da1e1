"""Repository management commands"""

import click
from rich.console import Console

from ..decorators import require_config
from ..utils.output import format_repository_list, print_success, print_warning

console = Console()


@click.group(invoke_without_command=True)
@click.pass_context
@require_config
def repos(ctx):
    """Manage site repositories

    Without a subcommand, lists the configured repositories with their
    placeholders resolved.

    Examples:

        # List repositories
        git-deploy-tool repos

        # Deploy the blog site to a working copy
        git-deploy-tool repos set blog '$HOME/sites/blog' --branch gh-pages

        # Stop deploying the blog site
        git-deploy-tool repos remove blog
    """
    if ctx.invoked_subcommand is None:
        format_repository_list(ctx.obj.config_service.list_repositories())


@repos.command(name='set')
@click.argument('site_uid')
@click.argument('repository_path')
@click.option('--branch', default='', help='Target branch (default from settings)')
@click.option('--remote', default='', help='Remote name (default from settings)')
@click.pass_context
def set_repository(ctx, site_uid, repository_path, branch, remote):
    """Set the repository of a site"""
    ctx.obj.config_service.set_repository(site_uid, repository_path, branch=branch, remote=remote)
    print_success(f"Repository of {site_uid} set to {repository_path}")


@repos.command(name='remove')
@click.argument('site_uid')
@click.pass_context
def remove_repository(ctx, site_uid):
    """Remove the repository of a site"""
    if ctx.obj.config_service.remove_repository(site_uid):
        print_success(f"Repository of {site_uid} removed")
    else:
        print_warning(f"No repository configured for {site_uid}")
