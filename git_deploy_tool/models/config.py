"""Configuration data models"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Union

from ..constants import (
    CONFIG_VERSION,
    DEFAULT_BRANCH,
    DEFAULT_REMOTE,
    DEFAULT_COMMIT_MESSAGE,
)
from ..utils.env_utils import parse_env_string


@dataclass(frozen=True)
class RepositoryConfig:
    """Resolved repository configuration for a single site"""

    site_uid: str
    repository_path: str
    branch: str = DEFAULT_BRANCH
    remote: str = DEFAULT_REMOTE

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "site_uid": self.site_uid,
            "repository_path": self.repository_path,
            "branch": self.branch,
            "remote": self.remote,
        }


@dataclass
class DeployerIdentity:
    """Credentials and commit author used to publish a repository"""

    username: Optional[str] = None
    # Raw configured value, typically a placeholder such as `$GIT_TOKEN`
    personal_access_token: Optional[str] = field(default=None, repr=False)
    name: Optional[str] = None
    email: Optional[str] = None

    @property
    def secret(self) -> str:
        """Get the expanded personal access token"""
        return parse_env_string(self.personal_access_token)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "username": self.username,
            "personal_access_token": self.personal_access_token,
            "name": self.name,
            "email": self.email,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployerIdentity':
        """Create from dictionary"""
        return cls(
            username=data.get("username"),
            personal_access_token=data.get("personal_access_token"),
            name=data.get("name"),
            email=data.get("email"),
        )


@dataclass
class CacheConfig:
    """Artifact cache configuration"""

    type: str = "filesystem"
    directory: str = ".blitz-cache"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            "type": self.type,
            "directory": self.directory,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CacheConfig':
        """Create from dictionary, ignoring unknown keys"""
        return cls(
            type=data.get("type") or "filesystem",
            directory=data.get("directory") or ".blitz-cache",
        )


@dataclass
class DeployerSettings:
    """Complete deployer configuration"""

    version: str = CONFIG_VERSION

    # Raw repository settings keyed by site UID
    git_repositories: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    identity: DeployerIdentity = field(default_factory=DeployerIdentity)
    commit_message: str = DEFAULT_COMMIT_MESSAGE

    # Hook commands, either newline separated text or a list
    commands_before: Union[str, List[str]] = ""
    commands_after: Union[str, List[str]] = ""

    default_branch: str = DEFAULT_BRANCH
    default_remote: str = DEFAULT_REMOTE

    # Explicit git executable, discovered when unset
    git_command: Optional[str] = None

    # Site registry entries
    sites: List[Dict[str, Any]] = field(default_factory=list)

    cache: CacheConfig = field(default_factory=CacheConfig)

    # Modules providing lifecycle plugins
    plugins: List[str] = field(default_factory=list)

    # Logging
    logging: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployerSettings':
        """Create from dictionary"""
        data = data or {}
        settings = cls(
            version=str(data.get("version", CONFIG_VERSION))
        )

        settings.git_repositories = {
            str(uid): dict(repository or {})
            for uid, repository in (data.get("git_repositories") or {}).items()
        }

        settings.identity = DeployerIdentity.from_dict(data.get("identity") or {})
        settings.commit_message = data.get("commit_message", DEFAULT_COMMIT_MESSAGE)

        # Hooks
        commands = data.get("commands") or {}
        settings.commands_before = commands.get("before") or ""
        settings.commands_after = commands.get("after") or ""

        # Defaults
        settings.default_branch = data.get("default_branch") or DEFAULT_BRANCH
        settings.default_remote = data.get("default_remote") or DEFAULT_REMOTE
        settings.git_command = data.get("git_command")

        settings.sites = list(data.get("sites") or [])
        settings.cache = CacheConfig.from_dict(data.get("cache") or {})
        settings.plugins = list(data.get("plugins") or [])
        settings.logging = data.get("logging") or {}

        return settings

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {
            "version": self.version,
            "git_repositories": self.git_repositories,
            "identity": self.identity.to_dict(),
            "commit_message": self.commit_message,
            "commands": {
                "before": self.commands_before,
                "after": self.commands_after,
            },
            "default_branch": self.default_branch,
            "default_remote": self.default_remote,
            "sites": self.sites,
            "cache": self.cache.to_dict(),
            "plugins": self.plugins,
            "logging": self.logging,
        }

        if self.git_command:
            data["git_command"] = self.git_command

        return data
