import shutil
import subprocess
from pathlib import Path

import pytest

from git_deploy_tool.models import DeployerIdentity, DeployerSettings, Site
from git_deploy_tool.storage import MemoryCacheStorage, StaticSiteRegistry

TOKEN = "s3cr3t-token-value"

requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")


def git(cwd, *args):
    """Run git in a directory and return its stripped output."""
    result = subprocess.run(
        ["git", *args],
        cwd=str(cwd),
        capture_output=True,
        text=True,
        check=True,
    )
    return result.stdout.strip()


@pytest.fixture
def token_env(monkeypatch):
    """Expose the personal access token through GIT_TOKEN."""
    monkeypatch.setenv("GIT_TOKEN", TOKEN)
    return TOKEN


@pytest.fixture
def identity(token_env):
    return DeployerIdentity(
        username="deployer",
        personal_access_token="$GIT_TOKEN",
        name="Deploy Bot",
        email="deploy@example.com",
    )


@pytest.fixture
def site_registry():
    return StaticSiteRegistry([
        Site(id=1, uid="site-one", handle="one", name="Site One"),
        Site(id=2, uid="site-two", handle="two", name="Site Two"),
        Site(id=3, uid="site-three", handle="three"),
    ])


@pytest.fixture
def cache():
    return MemoryCacheStorage()


@pytest.fixture
def settings_factory(identity):
    """Build settings with repositories keyed by site UID."""

    def factory(repositories=None, **kwargs):
        settings = DeployerSettings(identity=identity, **kwargs)
        for site_uid, path in (repositories or {}).items():
            settings.git_repositories[site_uid] = {"repository_path": str(path)}
        return settings

    return factory


@pytest.fixture
def remote_repo(tmp_path) -> Path:
    """A bare repository acting as the remote."""
    path = tmp_path / "remote.git"
    path.mkdir()
    git(path, "init", "--bare", "--quiet")
    return path


@pytest.fixture
def working_copy(tmp_path, remote_repo) -> Path:
    """An empty working copy whose origin is the bare remote."""
    path = tmp_path / "working"
    path.mkdir()
    git(path, "init", "--quiet")
    git(path, "remote", "add", "origin", str(remote_repo))
    return path
