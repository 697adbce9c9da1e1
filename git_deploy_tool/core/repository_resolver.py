"""Resolve sites to their repository configuration"""

import os
from typing import List, Optional

from ..models.config import RepositoryConfig, DeployerSettings
from ..storage.base import SiteRegistry
from ..utils.env_utils import parse_env


def normalize_path(path: str) -> str:
    """
    Normalize a filesystem path

    Collapses ``.``/``..`` segments and duplicate separators and converts
    backslashes to the platform separator.

    Args:
        path: Path to normalize

    Returns:
        Normalized path without a trailing separator
    """
    path = path.replace("\\", "/")
    path = os.path.expanduser(path)
    return os.path.normpath(path)


class RepositoryResolver:
    """Maps sites to repository configurations"""

    def __init__(self, settings: DeployerSettings, site_registry: Optional[SiteRegistry] = None):
        """
        Args:
            settings: Deployer settings
            site_registry: Resolves site IDs to UIDs
        """
        self.settings = settings
        self.site_registry = site_registry

    def configured_site_uids(self) -> List[str]:
        """Get the UIDs of every site with repository settings"""
        return list(self.settings.git_repositories.keys())

    def resolve(self, site_uid: str) -> Optional[RepositoryConfig]:
        """
        Resolve the repository of a site

        Args:
            site_uid: Stable site identifier

        Returns:
            RepositoryConfig, or None when the site has no usable repository
        """
        repository = self.settings.git_repositories.get(site_uid)

        if not repository:
            return None

        raw_path = repository.get("repository_path")
        if not raw_path:
            return None

        repository_path = parse_env(raw_path)
        if not isinstance(repository_path, str) or not repository_path:
            return None

        return RepositoryConfig(
            site_uid=site_uid,
            repository_path=normalize_path(repository_path),
            branch=repository.get("branch") or self.settings.default_branch,
            remote=repository.get("remote") or self.settings.default_remote,
        )

    def resolve_by_site_id(self, site_id: int) -> Optional[RepositoryConfig]:
        """
        Resolve the repository of a site by its numeric ID

        Args:
            site_id: Site ID

        Returns:
            RepositoryConfig, or None when the site is unknown or has no
            usable repository
        """
        if self.site_registry is None:
            return None

        site_uid = self.site_registry.get_uid_by_id(site_id)
        if site_uid is None:
            return None

        return self.resolve(site_uid)

    def has_repository(self, site_id: int) -> bool:
        """Check if a site has a usable repository"""
        return self.resolve_by_site_id(site_id) is not None
