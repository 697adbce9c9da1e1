# git_deploy_tool/cli/utils/progress.py
"""Progress display utilities"""

from typing import Optional

from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    MofNCompleteColumn,
    TimeElapsedColumn,
    TaskID,
)

from ...models.run import ProgressHandler


class ProgressManager:
    """Centralized progress management"""

    def __init__(self, console: Console = None):
        self.console = console or Console()

    def create_deploy_progress(self) -> Progress:
        """Create progress display for deployments"""
        return Progress(
            SpinnerColumn(),
            TextColumn("[bold]{task.description}"),
            BarColumn(),
            MofNCompleteColumn(),
            TimeElapsedColumn(),
            console=self.console,
        )


def progress_handler(progress: Progress, task_id: Optional[TaskID]) -> ProgressHandler:
    """Create a deployment progress handler

    Returns a function that can be passed to the deployer, with
    signature (count, total, label).
    """

    def handler(count: int, total: int, label: str) -> None:
        if progress and task_id is not None:
            progress.update(task_id, completed=count, total=total, description=label)

    return handler
