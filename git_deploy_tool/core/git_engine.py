"""Reconcile a working copy with its remote and publish changes"""

import logging
from typing import Callable, Optional

from ..api.exceptions import GitError
from ..models.config import RepositoryConfig, DeployerIdentity
from ..utils.template_utils import render_commit_message
from .git_adapter import GitAdapter, GitWorkingCopy, create_git_adapter
from .remote_url import SecretRedactor, build_authenticated_url

logger = logging.getLogger(__name__)

AdapterFactory = Callable[[], GitAdapter]


class GitReconciliationEngine:
    """Owns the working copy lifecycle of a deployment

    For each repository: configure the commit identity, rewrite the remote
    with credentials, fetch and pull, stage everything, check out the target
    branch, commit if anything changed, then push.
    """

    def __init__(self,
                 identity: DeployerIdentity,
                 commit_message: str,
                 git_command: Optional[str] = None,
                 adapter_factory: Optional[AdapterFactory] = None):
        """
        Args:
            identity: Credentials and commit author
            commit_message: Commit message template
            git_command: Explicit git executable, discovered when None
            adapter_factory: Creates the git adapter (selected from the
                installed git version by default)
        """
        self.identity = identity
        self.commit_message = commit_message
        self.git_command = git_command
        self.redactor = SecretRedactor(identity.secret, identity.personal_access_token)
        self._adapter_factory = adapter_factory or (lambda: create_git_adapter(self.git_command))
        self._adapter: Optional[GitAdapter] = None

    @property
    def adapter(self) -> GitAdapter:
        """Get the git adapter (created on first use)"""
        if self._adapter is None:
            self._adapter = self._adapter_factory()
        return self._adapter

    def open_working_copy(self, config: RepositoryConfig) -> GitWorkingCopy:
        """
        Open a working copy configured for authenticated access

        Sets the local commit author and rewrites the push URL of the
        configured remote to embed the credentials.

        Args:
            config: Repository configuration

        Returns:
            Prepared working copy

        Raises:
            GitError: If any git command fails
        """
        git = GitWorkingCopy(self.adapter, config.repository_path, redact=self.redactor.redact)

        git.config("user.name", self.identity.name or "")
        git.config("user.email", self.identity.email or "")

        remote_url = git.get_push_url(config.remote)
        authenticated_url = build_authenticated_url(
            remote_url,
            self.identity.username,
            self.identity.secret
        )
        git.set_remote_url(config.remote, authenticated_url)

        return git

    def deploy_repository(self,
                          config: RepositoryConfig,
                          site_name: Optional[str] = None,
                          count: Optional[int] = None) -> bool:
        """
        Publish the working tree of a repository to its remote

        Args:
            config: Repository configuration
            site_name: Site name available to the commit message
            count: Number of files synchronized, available to the commit message

        Returns:
            True if a commit was created, False if there was nothing to commit

        Raises:
            GitError: If any git command fails (messages are redacted)
        """
        try:
            git = self.open_working_copy(config)

            # Bring the target branch up to date before staging local changes
            git.fetch(config.remote)
            self._update_target_branch(git, config)

            # Stage first so the changes follow the target branch
            git.add_all()
            self._checkout(git, config)

            committed = False
            if git.has_changes():
                message = render_commit_message(
                    self.commit_message,
                    site_uid=config.site_uid,
                    site_name=site_name,
                    branch=config.branch,
                    count=count
                )
                git.commit(message)
                committed = True
            else:
                logger.info(f"No changes to commit in {config.repository_path}")

            # Push even without a new commit so the remote matches the checkout
            git.push(config.remote, config.branch)

        except GitError as e:
            message = self.redactor.redact(str(e))
            logger.error(f"Remote deploy failed: {message}")
            if message != str(e):
                raise GitError(
                    message,
                    command=self.redactor.redact(e.command or ""),
                    exit_code=e.exit_code,
                    output=self.redactor.redact(e.output)
                ) from None
            raise

        return committed

    def _checkout(self, git: GitWorkingCopy, config: RepositoryConfig) -> None:
        if git.current_branch() == config.branch:
            return

        if git.local_branch_exists(config.branch):
            git.checkout(config.branch)
        elif git.remote_branch_exists(config.remote, config.branch):
            # Creates a local branch tracking the remote one
            git.checkout(config.branch)
        else:
            git.checkout(config.branch, create=True)

    def _update_target_branch(self, git: GitWorkingCopy, config: RepositoryConfig) -> None:
        if not git.remote_branch_exists(config.remote, config.branch):
            return

        if git.current_branch() == config.branch:
            git.pull(config.remote, config.branch)
        elif git.local_branch_exists(config.branch):
            # Never merge the target branch into another checked out branch
            git.fast_forward(config.remote, config.branch)
