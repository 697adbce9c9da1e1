"""Git process adapters and working copy

All git invocations go through a :class:`GitAdapter`. The adapter is chosen
once, from the installed git version, by :func:`create_git_adapter`.
"""

import logging
import os
import re
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from packaging.version import Version, InvalidVersion

from ..api.exceptions import GitError, GitNotFoundError
from ..constants import (
    DEFAULT_GIT_TIMEOUT,
    GIT_DISCOVERY_COMMANDS,
    GIT_REMOTE_GET_URL_VERSION,
)

logger = logging.getLogger(__name__)

Redact = Callable[[str], str]

_VERSION_PATTERN = re.compile(r"(\d+)\.(\d+)(?:\.(\d+))?")


def _no_redaction(text: str) -> str:
    return text


def find_git_executable(commands: Sequence[str] = tuple(GIT_DISCOVERY_COMMANDS)) -> str:
    """
    Locate the git binary by trying discovery commands in order

    Args:
        commands: Shell commands printing the path of git

    Returns:
        Path to the git executable

    Raises:
        GitNotFoundError: If no command produced a path
    """
    for command in commands:
        try:
            result = subprocess.run(
                command,
                shell=True,
                capture_output=True,
                text=True
            )
        except OSError:
            continue

        if result.returncode != 0:
            continue

        output = result.stdout.strip()
        if output:
            # `type -p` may print several matches
            return output.splitlines()[0].strip()

    raise GitNotFoundError()


def parse_git_version(output: str) -> Optional[Version]:
    """
    Parse the output of ``git --version``

    Args:
        output: e.g. ``git version 2.39.2.windows.1``

    Returns:
        Parsed version or None
    """
    match = _VERSION_PATTERN.search(output or "")
    if not match:
        return None

    major, minor, patch = match.group(1), match.group(2), match.group(3) or "0"
    try:
        return Version(f"{major}.{minor}.{patch}")
    except InvalidVersion:
        return None


class GitAdapter(ABC):
    """Runs git commands for a specific git version"""

    def __init__(self,
                 git_binary: str,
                 version: Optional[Version] = None,
                 timeout: Optional[float] = DEFAULT_GIT_TIMEOUT):
        """
        Args:
            git_binary: Path to the git executable
            version: Installed git version
            timeout: Per-command timeout in seconds
        """
        self.git_binary = git_binary
        self.version = version
        self.timeout = timeout

    def run(self,
            cwd: Union[str, Path],
            args: Sequence[str],
            redact: Redact = _no_redaction,
            check: bool = True) -> subprocess.CompletedProcess:
        """
        Run a git command

        Args:
            cwd: Working copy path
            args: Arguments after the git binary
            redact: Applied to every string placed in errors and logs
            check: Raise GitError on a non-zero exit

        Returns:
            Completed process

        Raises:
            GitError: If the command fails to start or exits non-zero
        """
        cmd = [self.git_binary] + list(args)
        display = redact("git " + " ".join(args))

        env = os.environ.copy()
        # Fail instead of waiting for credentials on a terminal
        env["GIT_TERMINAL_PROMPT"] = "0"

        logger.debug(f"Running: {display}")

        try:
            result = subprocess.run(
                cmd,
                cwd=str(cwd),
                env=env,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            raise GitError(
                f"`{display}` timed out after {self.timeout}s",
                command=display
            )
        except OSError as e:
            raise GitError(
                redact(f"Unable to run `{display}`: {e}"),
                command=display
            )

        if check and result.returncode != 0:
            output = redact((result.stderr or result.stdout or "").strip())
            message = f"`{display}` failed with exit code {result.returncode}"
            if output:
                message = f"{message}: {output}"
            raise GitError(message, command=display, exit_code=result.returncode, output=output)

        return result

    @abstractmethod
    def get_push_url(self, cwd: Union[str, Path], remote: str, redact: Redact = _no_redaction) -> str:
        """Get the push URL of a remote"""
        pass


class ModernGitAdapter(GitAdapter):
    """git 2.7 and later"""

    def get_push_url(self, cwd, remote, redact=_no_redaction):
        result = self.run(cwd, ["remote", "get-url", "--push", remote], redact=redact)
        return result.stdout.strip()


class LegacyGitAdapter(GitAdapter):
    """git before 2.7, without `git remote get-url`"""

    def get_push_url(self, cwd, remote, redact=_no_redaction):
        for key in (f"remote.{remote}.pushurl", f"remote.{remote}.url"):
            result = self.run(cwd, ["config", "--get", key], redact=redact, check=False)
            url = result.stdout.strip()
            if result.returncode == 0 and url:
                return url

        raise GitError(f"No such remote '{remote}'", command=f"git config --get remote.{remote}.url")


def create_git_adapter(git_command: Optional[str] = None,
                       timeout: Optional[float] = DEFAULT_GIT_TIMEOUT) -> GitAdapter:
    """
    Create the adapter matching the installed git

    Args:
        git_command: Explicit git executable, discovered when None
        timeout: Per-command timeout in seconds

    Returns:
        GitAdapter implementation

    Raises:
        GitNotFoundError: If git cannot be located or executed
    """
    git_binary = git_command or find_git_executable()

    try:
        result = subprocess.run(
            [git_binary, "--version"],
            capture_output=True,
            text=True,
            timeout=timeout
        )
    except (OSError, subprocess.TimeoutExpired) as e:
        raise GitNotFoundError(f"Unable to run git executable {git_binary}: {e}")

    version = parse_git_version(result.stdout)

    if version is not None and version < Version(GIT_REMOTE_GET_URL_VERSION):
        logger.debug(f"Using legacy git adapter for git {version}")
        return LegacyGitAdapter(git_binary, version, timeout)

    return ModernGitAdapter(git_binary, version, timeout)


class GitWorkingCopy:
    """A git working copy operated through an adapter"""

    def __init__(self,
                 adapter: GitAdapter,
                 path: Union[str, Path],
                 redact: Optional[Redact] = None):
        self.adapter = adapter
        self.path = Path(path)
        self.redact = redact or _no_redaction

    def run(self, *args: str, check: bool = True) -> subprocess.CompletedProcess:
        """Run a git command inside the working copy"""
        return self.adapter.run(self.path, list(args), redact=self.redact, check=check)

    def config(self, key: str, value: str) -> None:
        """Set a configuration value local to this working copy"""
        self.run("config", "--local", key, value)

    def get_push_url(self, remote: str) -> str:
        """Get the push URL of a remote"""
        return self.adapter.get_push_url(self.path, remote, redact=self.redact)

    def set_remote_url(self, remote: str, url: str) -> None:
        """Replace the URL of a remote"""
        self.run("remote", "set-url", remote, url)

    def fetch(self, remote: Optional[str] = None) -> None:
        """Fetch from a remote"""
        args: List[str] = ["fetch"]
        if remote:
            args.append(remote)
        self.run(*args)

    def remote_branch_exists(self, remote: str, branch: str) -> bool:
        """Check for a remote-tracking branch"""
        result = self.run(
            "rev-parse", "--verify", "--quiet", f"refs/remotes/{remote}/{branch}",
            check=False
        )
        return result.returncode == 0

    def local_branch_exists(self, branch: str) -> bool:
        """Check for a local branch"""
        result = self.run(
            "rev-parse", "--verify", "--quiet", f"refs/heads/{branch}",
            check=False
        )
        return result.returncode == 0

    def current_branch(self) -> Optional[str]:
        """Get the checked out branch, None when HEAD is detached"""
        result = self.run("symbolic-ref", "--quiet", "--short", "HEAD", check=False)
        if result.returncode != 0:
            return None
        return result.stdout.strip() or None

    def pull(self, remote: str, branch: str) -> None:
        """Merge a remote branch into the current branch"""
        self.run("pull", "--no-rebase", "--no-edit", remote, branch)

    def fast_forward(self, remote: str, branch: str) -> None:
        """Fast-forward a local branch that is not checked out to its remote branch"""
        self.run("fetch", remote, f"{branch}:{branch}")

    def add_all(self) -> None:
        """Stage all working tree changes, including deletions"""
        self.run("add", "--all", ".")

    def checkout(self, branch: str, create: bool = False) -> None:
        """Check out a branch, optionally creating it"""
        if create:
            self.run("checkout", "-b", branch)
        else:
            self.run("checkout", branch)

    def has_changes(self) -> bool:
        """Check for staged, unstaged or untracked changes"""
        result = self.run("status", "--porcelain")
        return bool(result.stdout.strip())

    def commit(self, message: str) -> None:
        """Commit staged changes"""
        self.run("commit", "-m", message)

    def push(self, remote: str, branch: str) -> None:
        """Push a branch to a remote"""
        self.run("push", remote, branch)
