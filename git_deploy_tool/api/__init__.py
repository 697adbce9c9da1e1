"""Public API for git-deploy-tool"""

from .deployer import GitDeployer
from .exceptions import (
    GitDeployToolError,
    ConfigError,
    DeployError,
    GitError,
    GitNotFoundError,
    CommandError,
)

__all__ = [
    "GitDeployer",
    "GitDeployToolError",
    "ConfigError",
    "DeployError",
    "GitError",
    "GitNotFoundError",
    "CommandError",
]
