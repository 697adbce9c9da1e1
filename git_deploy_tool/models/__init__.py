"""Data models for git-deploy-tool"""

from .config import RepositoryConfig, DeployerIdentity, DeployerSettings, CacheConfig
from .site import Site, SiteUri, group_by_site
from .result import (
    OperationStatus,
    SyncOutcome,
    ErrorDetail,
    ValidationResult,
    SiteDeployResult,
    DeployResult,
)
from .run import DeploymentRun

__all__ = [
    # Config models
    "RepositoryConfig",
    "DeployerIdentity",
    "DeployerSettings",
    "CacheConfig",

    # Site models
    "Site",
    "SiteUri",
    "group_by_site",

    # Result models
    "OperationStatus",
    "SyncOutcome",
    "ErrorDetail",
    "ValidationResult",
    "SiteDeployResult",
    "DeployResult",

    # Run state
    "DeploymentRun",
]
