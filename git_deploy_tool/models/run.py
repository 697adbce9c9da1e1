"""Per-invocation deployment state"""

from dataclasses import dataclass
from typing import Callable, Optional

from ..constants import LABEL_DEPLOYING_FILES

ProgressHandler = Callable[[int, int, str], None]


@dataclass
class DeploymentRun:
    """Running count and progress reporting for one deployment"""

    total: int = 0
    count: int = 0
    progress_handler: Optional[ProgressHandler] = None

    def notify(self, label: Optional[str] = None) -> None:
        """Report progress, using the file count label by default"""
        if self.progress_handler is None:
            return

        if label is None:
            label = LABEL_DEPLOYING_FILES.format(count=self.count, total=self.total)

        self.progress_handler(self.count, self.total, label)

    def advance(self) -> None:
        """Count a processed URI and report it"""
        self.count += 1
        self.notify()
