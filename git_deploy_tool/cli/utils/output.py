# git_deploy_tool/cli/utils/output.py
"""Output formatting utilities"""

from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich import box

from ...constants import MSG_DEPLOY_SUCCESS, MSG_SITE_CANCELED
from ...models import DeployResult, ErrorDetail, OperationStatus, SyncOutcome

console = Console()


def format_deploy_result(result: DeployResult) -> None:
    """Format and display deploy operation result"""
    deployed = result.sites_with_status(OperationStatus.SUCCESS)
    canceled = result.sites_with_status(OperationStatus.CANCELED)

    table = Table(title="Deploy Result", box=box.ROUNDED)
    table.add_column("Site", style="cyan")
    table.add_column("Repository")
    table.add_column("Status", justify="center")
    table.add_column("Written", justify="right")
    table.add_column("Deleted", justify="right")
    table.add_column("Failed", justify="right")

    for site in result.sites:
        if site.status == OperationStatus.SUCCESS:
            status = "[green]✓ deployed[/green]"
        elif site.status == OperationStatus.CANCELED:
            status = "[yellow]canceled[/yellow]"
        else:
            status = f"[red]{site.status.value}[/red]"

        table.add_row(
            site.site_uid,
            site.repository_path,
            status,
            str(site.files[SyncOutcome.WRITTEN]),
            str(site.files[SyncOutcome.DELETED]),
            str(site.files[SyncOutcome.FAILED]),
        )

    if result.sites:
        console.print(table)

    lines = [
        MSG_DEPLOY_SUCCESS.format(
            files=result.count(SyncOutcome.WRITTEN) + result.count(SyncOutcome.DELETED),
            sites=len(deployed)
        )
    ]

    for site in canceled:
        lines.append(f"[yellow]{MSG_SITE_CANCELED.format(site=site.site_uid)}[/yellow]")

    if result.skipped_site_ids:
        skipped = ', '.join(str(site_id) for site_id in result.skipped_site_ids)
        lines.append(f"[dim]Skipped sites without a repository: {skipped}[/dim]")

    if result.count(SyncOutcome.FAILED):
        lines.append(f"[red]{result.count(SyncOutcome.FAILED)} file(s) could not be written[/red]")

    if result.duration is not None:
        lines.append(f"[dim]Finished in {result.duration:.2f}s[/dim]")

    console.print(Panel("\n".join(lines), border_style="green" if not canceled else "yellow"))


def format_errors(errors: List[ErrorDetail], title: str = "Errors") -> Table:
    """Create a table of recorded errors

    Args:
        errors: Recorded errors
        title: Table title

    Returns:
        Rich Table object
    """
    table = Table(title=title, box=box.ROUNDED)
    table.add_column("Setting", style="cyan")
    table.add_column("Repository", style="yellow")
    table.add_column("Details")

    for error in errors:
        table.add_row(error.attribute, error.repository or "", error.message)

    return table


def format_repository_list(repositories: List[Dict[str, Any]]) -> None:
    """Format and display configured repositories"""
    if not repositories:
        console.print("[yellow]No repositories configured[/yellow]")
        return

    table = Table(title="Git Repositories", box=box.SIMPLE)
    table.add_column("Site", style="cyan")
    table.add_column("Configured Path", style="dim")
    table.add_column("Resolved Path", style="green")
    table.add_column("Branch")
    table.add_column("Remote")

    for entry in repositories:
        config = entry["resolved"]
        if config is None:
            table.add_row(entry["site_uid"], entry["configured_path"], "[red]unresolved[/red]", "", "")
        else:
            table.add_row(
                entry["site_uid"],
                entry["configured_path"],
                config.repository_path,
                config.branch,
                config.remote
            )

    console.print(table)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {message}: {str(error)}")
    else:
        console.print(f"[red]Error:[/red] {message}")


def print_warning(message: str) -> None:
    """Print warning message"""
    console.print(f"[yellow]Warning:[/yellow] {message}")


def print_success(message: str) -> None:
    """Print success message"""
    console.print(f"[green]✓[/green] {message}")
