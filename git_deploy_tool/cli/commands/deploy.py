"""Deploy command implementation"""

import sys
from collections import Counter

import click
from rich.console import Console
from rich.prompt import Confirm
from rich.table import Table

from ..decorators import require_config
from ..utils import ProgressManager, progress_handler
from ..utils.output import format_deploy_result, print_error
from ...api.exceptions import ConfigError, GitDeployToolError

console = Console()


@click.command()
@click.argument('uris', nargs=-1)
@click.option('--site', 'site_handles', multiple=True,
              help='Site handle or UID to deploy (default: all sites)')
@click.option('--no-confirm', is_flag=True, help='Skip confirmation prompt')
@click.pass_context
@require_config
def deploy(ctx, uris, site_handles, no_confirm):
    """Deploy cached pages to git repositories

    Every cached page of the selected sites is written into the working
    copy of the site's repository, then committed and pushed. Pass URIs
    to deploy only those pages; URIs missing from the cache are removed
    from the repository.

    Examples:

        # Deploy all cached pages of every site
        git-deploy-tool deploy

        # Deploy a single site
        git-deploy-tool deploy --site blog

        # Deploy two pages without prompting
        git-deploy-tool deploy --site blog about news/latest --no-confirm
    """
    try:
        service = ctx.obj.deploy_service
        sites = [service.get_site(handle) for handle in site_handles] or None
        site_uris = service.collect_site_uris(sites, uris)
    except ConfigError as e:
        print_error("Invalid configuration", e)
        sys.exit(1)

    if not site_uris:
        console.print("[yellow]Nothing to deploy[/yellow]")
        return

    # Show confirmation
    if not no_confirm:
        counts = Counter(site_uri.site_id for site_uri in site_uris)

        table = Table(title="Pending Deployment")
        table.add_column("Site", style="cyan")
        table.add_column("Pages", justify="right")

        for site_id, count in counts.items():
            uid = service.site_registry.get_uid_by_id(site_id) or str(site_id)
            table.add_row(uid, str(count))

        console.print(table)

        if not Confirm.ask("\n[cyan]Proceed with deployment?[/cyan]"):
            console.print("[yellow]Deployment cancelled[/yellow]")
            return

    try:
        progress_manager = ProgressManager(console)

        with progress_manager.create_deploy_progress() as progress:
            task_id = progress.add_task("Preparing deployment", total=None)
            result = service.deploy(site_uris, progress_handler(progress, task_id))

    except GitDeployToolError as e:
        print_error("Deployment failed", e)
        sys.exit(1)

    format_deploy_result(result)
