"""CLI utility functions"""

from .progress import (
    ProgressManager,
    progress_handler,
)

__all__ = [

    # Progress utilities
    'ProgressManager',
    'progress_handler',
]
