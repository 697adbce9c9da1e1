"""Configuration management service"""

import logging
import os
import shutil
from pathlib import Path
from typing import Dict, List, Optional, Any, Union

import yaml

from ..api.exceptions import ConfigError
from ..constants import ENV_CONFIG_PATH, PROJECT_CONFIG_FILE
from ..models.config import CacheConfig, DeployerSettings, RepositoryConfig
from ..core.repository_resolver import RepositoryResolver
from ..storage import CacheStorage, CacheStorageFactory, StaticSiteRegistry

logger = logging.getLogger(__name__)


def find_config_file(start: Optional[Path] = None) -> Optional[Path]:
    """Find the configuration file

    Uses ``GIT_DEPLOY_CONFIG`` when set, otherwise searches the start
    directory and its parents for ``.git-deploy.yaml``.

    Args:
        start: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the configuration file or None
    """
    env_path = os.environ.get(ENV_CONFIG_PATH)
    if env_path:
        return Path(env_path).expanduser()

    current = (start or Path.cwd()).resolve()

    for directory in [current] + list(current.parents):
        candidate = directory / PROJECT_CONFIG_FILE
        if candidate.is_file():
            return candidate

    return None


class ConfigService:
    """Service for managing deployer configuration"""

    def __init__(self, config_path: Union[str, Path]):
        """Initialize config service

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        self._settings: Optional[DeployerSettings] = None

    @property
    def settings(self) -> DeployerSettings:
        """Get current settings (lazy load)"""
        if self._settings is None:
            self.load_config()
        return self._settings

    def load_config(self) -> DeployerSettings:
        """Load settings from file

        Placeholders such as ``$GIT_TOKEN`` are kept as configured and
        expanded per value when used.

        Returns:
            Loaded settings

        Raises:
            ConfigError: If the file is missing or not valid YAML
        """
        if not self.config_path.exists():
            raise ConfigError(f"Configuration file not found: {self.config_path}")

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid configuration file {self.config_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file {self.config_path} must contain a mapping")

        try:
            self._settings = DeployerSettings.from_dict(data)
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid configuration: {e}")

        logger.debug(f"Loaded configuration from {self.config_path}")
        return self._settings

    def save_config(self, settings: Optional[DeployerSettings] = None) -> None:
        """Save settings to file

        Args:
            settings: Settings to save (uses current if not provided)
        """
        if settings:
            self._settings = settings

        if not self._settings:
            raise ConfigError("No configuration to save")

        # Create backup
        if self.config_path.exists():
            backup_path = self.config_path.with_suffix('.yaml.bak')
            shutil.copy2(self.config_path, backup_path)

        data = self._settings.to_dict()

        with open(self.config_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Configuration saved to {self.config_path}")

    def set_repository(self,
                       site_uid: str,
                       repository_path: str,
                       branch: str = "",
                       remote: str = "") -> None:
        """Add or update the repository of a site

        Args:
            site_uid: Site UID
            repository_path: Repository path, may contain placeholders
            branch: Target branch, the default branch when empty
            remote: Remote name, the default remote when empty
        """
        self.settings.git_repositories[site_uid] = {
            "repository_path": repository_path,
            "branch": branch,
            "remote": remote,
        }
        self.save_config()

    def remove_repository(self, site_uid: str) -> bool:
        """Remove the repository of a site

        Returns:
            True if a repository was removed
        """
        if site_uid not in self.settings.git_repositories:
            return False

        del self.settings.git_repositories[site_uid]
        self.save_config()
        return True

    def create_site_registry(self) -> StaticSiteRegistry:
        """Create the site registry described by the settings"""
        try:
            return StaticSiteRegistry.from_config(self.settings.sites)
        except (KeyError, TypeError, ValueError) as e:
            raise ConfigError(f"Invalid site configuration: {e}")

    def create_cache_storage(self, site_registry: Optional[StaticSiteRegistry] = None) -> CacheStorage:
        """Create the artifact cache described by the settings"""
        cache_config = self.settings.cache

        # Relative cache directories are relative to the configuration file
        directory = Path(cache_config.directory).expanduser()
        if not directory.is_absolute():
            directory = self.config_path.parent / directory
        cache_config = CacheConfig(type=cache_config.type, directory=str(directory))

        try:
            return CacheStorageFactory.create_from_config(cache_config, site_registry)
        except ValueError as e:
            raise ConfigError(str(e))

    def list_repositories(self) -> List[Dict[str, Any]]:
        """List configured repositories with their resolved values

        Returns:
            One entry per configured site
        """
        resolver = RepositoryResolver(self.settings)
        repositories = []

        for site_uid, raw in self.settings.git_repositories.items():
            config: Optional[RepositoryConfig] = resolver.resolve(site_uid)
            repositories.append({
                "site_uid": site_uid,
                "configured_path": raw.get("repository_path") or "",
                "resolved": config,
            })

        return repositories
