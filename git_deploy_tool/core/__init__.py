"""Core functionality for git-deploy-tool"""

from .repository_resolver import RepositoryResolver, normalize_path
from .remote_url import SecretRedactor, build_authenticated_url
from .file_sync import FileSynchronizer
from .command_runner import CommandRunner, split_commands
from .git_adapter import (
    GitAdapter,
    GitWorkingCopy,
    LegacyGitAdapter,
    ModernGitAdapter,
    create_git_adapter,
    find_git_executable,
)
from .git_engine import GitReconciliationEngine
from .validation_engine import ValidationEngine
from .connectivity import ConnectivityTester

__all__ = [
    "RepositoryResolver",
    "normalize_path",
    "SecretRedactor",
    "build_authenticated_url",
    "FileSynchronizer",
    "CommandRunner",
    "split_commands",
    "GitAdapter",
    "GitWorkingCopy",
    "LegacyGitAdapter",
    "ModernGitAdapter",
    "create_git_adapter",
    "find_git_executable",
    "GitReconciliationEngine",
    "ValidationEngine",
    "ConnectivityTester",
]
