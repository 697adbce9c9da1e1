"""Synchronize cached artifacts onto disk"""

import logging
import os
from pathlib import Path
from typing import Union

from ..models.result import SyncOutcome

logger = logging.getLogger(__name__)


class FileSynchronizer:
    """Writes or deletes a single artifact file based on its cached content"""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def sync(self, content: str, file_path: Union[str, Path]) -> SyncOutcome:
        """
        Synchronize a file with its cached content

        Empty content deletes the file; a missing file is not an error.
        Write failures are logged and reported, never raised.

        Args:
            content: Cached content, empty when no longer cached
            file_path: Destination file

        Returns:
            SyncOutcome describing what happened
        """
        file_path = Path(file_path)

        if not content:
            return self._delete(file_path)

        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(content, encoding=self.encoding)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to write {file_path}: {e}")
            return SyncOutcome.FAILED

        return SyncOutcome.WRITTEN

    def _delete(self, file_path: Path) -> SyncOutcome:
        """Delete a file if it exists"""
        if not file_path.is_file():
            return SyncOutcome.UNCHANGED

        try:
            os.unlink(file_path)
        except FileNotFoundError:
            return SyncOutcome.UNCHANGED
        except OSError as e:
            logger.error(f"Failed to delete {file_path}: {e}")
            return SyncOutcome.FAILED

        logger.debug(f"Deleted {file_path}")
        return SyncOutcome.DELETED
