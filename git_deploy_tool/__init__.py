"""Git Deploy Tool - Deploy cached static pages to git repositories.

Cached pages of each site are synchronized into the working copy of the
site's git repository, committed and pushed with the configured
credentials.
"""

# The API package must be imported before the core modules it depends on
from .api import (
    GitDeployer,
    GitDeployToolError,
    ConfigError,
    DeployError,
    GitError,
    GitNotFoundError,
    CommandError,
)

from .__version__ import __version__, __version_info__, __author__, __email__, __license__

# Data models
from .models import (
    RepositoryConfig,
    DeployerIdentity,
    DeployerSettings,
    Site,
    SiteUri,
    DeployResult,
    ValidationResult,
)

# Collaborators
from .storage import CacheStorage, SiteRegistry, FilesystemCacheStorage, StaticSiteRegistry
from .plugins import Plugin, PluginManager, HookPoint
from .services import ConfigService, DeployService

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__author__",
    "__email__",
    "__license__",

    # Main classes
    "GitDeployer",
    "ConfigService",
    "DeployService",

    # Data models
    "RepositoryConfig",
    "DeployerIdentity",
    "DeployerSettings",
    "Site",
    "SiteUri",
    "DeployResult",
    "ValidationResult",

    # Collaborators
    "CacheStorage",
    "SiteRegistry",
    "FilesystemCacheStorage",
    "StaticSiteRegistry",
    "Plugin",
    "PluginManager",
    "HookPoint",

    # Exceptions
    "GitDeployToolError",
    "ConfigError",
    "DeployError",
    "GitError",
    "GitNotFoundError",
    "CommandError",
]
