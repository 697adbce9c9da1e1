"""Deployer API for git deployments"""

import logging
import os
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..constants import LABEL_DEPLOYING_REMOTE, DEPLOYED_FILE_NAME
from ..core import (
    CommandRunner,
    ConnectivityTester,
    FileSynchronizer,
    GitReconciliationEngine,
    RepositoryResolver,
    SecretRedactor,
    ValidationEngine,
    normalize_path,
)
from ..models import (
    DeployerSettings,
    DeploymentRun,
    DeployResult,
    OperationStatus,
    RepositoryConfig,
    Site,
    SiteDeployResult,
    SiteUri,
    SyncOutcome,
    ValidationResult,
    group_by_site,
)
from ..models.run import ProgressHandler
from ..storage import CacheStorage, SiteRegistry

BeforeCommit = Callable[[Site, RepositoryConfig], bool]
AfterCommit = Callable[[Site, RepositoryConfig], None]
EngineFactory = Callable[[DeployerSettings], GitReconciliationEngine]


def _default_engine_factory(settings: DeployerSettings) -> GitReconciliationEngine:
    return GitReconciliationEngine(
        identity=settings.identity,
        commit_message=settings.commit_message,
        git_command=settings.git_command,
    )


class GitDeployer:
    """Deploys cached pages to git repositories, one repository per site

    Collaborators are injected: the artifact cache supplies page content,
    the site registry maps site IDs to UIDs, and the optional
    ``before_commit``/``after_commit`` callbacks receive the lifecycle
    notifications. ``before_commit`` returning False skips the remote
    deployment of that site.
    """

    def __init__(self,
                 settings: DeployerSettings,
                 cache: CacheStorage,
                 site_registry: SiteRegistry,
                 before_commit: Optional[BeforeCommit] = None,
                 after_commit: Optional[AfterCommit] = None,
                 engine_factory: Optional[EngineFactory] = None,
                 command_runner: Optional[CommandRunner] = None,
                 file_synchronizer: Optional[FileSynchronizer] = None,
                 validation_engine: Optional[ValidationEngine] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize deployer

        Args:
            settings: Deployer settings
            cache: Artifact cache
            site_registry: Site registry
            before_commit: Cancelable notification raised per site
            after_commit: Notification raised per successfully deployed site
            engine_factory: Creates the git engine for a run
            command_runner: Runs the hook commands
            file_synchronizer: Writes and deletes deployed files
            validation_engine: Validates settings
            logger: Logger to report to
        """
        self.settings = settings
        self.cache = cache
        self.site_registry = site_registry
        self.before_commit = before_commit
        self.after_commit = after_commit
        self.engine_factory = engine_factory or _default_engine_factory
        self.file_synchronizer = file_synchronizer or FileSynchronizer()
        self.validation_engine = validation_engine or ValidationEngine()
        self.logger = logger or logging.getLogger(__name__)

        self.resolver = RepositoryResolver(settings, site_registry)
        self.redactor = SecretRedactor(
            settings.identity.secret,
            settings.identity.personal_access_token
        )
        self.command_runner = command_runner or CommandRunner(redact=self.redactor.redact)
        self.errors = ValidationResult()

    # Errors

    def add_error(self, attribute: str, message: str, repository: Optional[str] = None) -> None:
        """Record an error with the personal access token removed"""
        self.errors.add_error(attribute, self.redactor.redact(message), repository=repository)

    def has_errors(self) -> bool:
        """Check if errors were recorded"""
        return self.errors.has_errors()

    # Deployment

    def deploy_uris(self, site_uris: Iterable[SiteUri]) -> DeployResult:
        """Deploy site URIs without progress reporting"""
        return self.deploy_with_progress(site_uris)

    def deploy_with_progress(self,
                             site_uris: Iterable[SiteUri],
                             progress_handler: Optional[ProgressHandler] = None) -> DeployResult:
        """
        Deploy site URIs to their repositories

        Args:
            site_uris: Pages to deploy
            progress_handler: Called with ``(count, total, label)``

        Returns:
            DeployResult summary

        Raises:
            GitError: If publishing a site fails; sites already deployed
                keep their results
            CommandError: If a hook command fails
        """
        result = DeployResult()
        deployable: List[Tuple[RepositoryConfig, List[SiteUri]]] = []

        for site_id, site_uri_group in group_by_site(site_uris).items():
            repository = self.resolver.resolve_by_site_id(site_id)

            if repository is None:
                self.logger.debug(f"Site {site_id} has no repository, skipping")
                result.skipped_site_ids.append(site_id)
                continue

            deployable.append((repository, site_uri_group))

        run = DeploymentRun(
            total=sum(len(group) for _, group in deployable),
            progress_handler=progress_handler,
        )
        run.notify()

        # A fresh engine per run, nothing survives between runs
        engine = None

        for repository, site_uri_group in deployable:
            site_result = SiteDeployResult(
                site_uid=repository.site_uid,
                repository_path=repository.repository_path,
            )
            result.sites.append(site_result)

            for site_uri in site_uri_group:
                outcome = self._sync_site_uri(repository, site_uri)
                site_result.record(outcome)
                run.advance()

            run.notify(LABEL_DEPLOYING_REMOTE)

            if engine is None:
                engine = self.engine_factory(self.settings)

            site_result.status = self._deploy_site(engine, repository, len(site_uri_group))

        result.complete()
        return result

    def get_file_path(self, repository: RepositoryConfig, uri: str) -> str:
        """Get the deployed file path of a URI"""
        return normalize_path(
            os.path.join(repository.repository_path, uri.strip('/'), DEPLOYED_FILE_NAME)
        )

    def _sync_site_uri(self, repository: RepositoryConfig, site_uri: SiteUri) -> SyncOutcome:
        file_path = self.get_file_path(repository, site_uri.uri)

        root = os.path.join(repository.repository_path, '')
        if not file_path.startswith(root):
            self.logger.error(f"URI `{site_uri.uri}` resolves outside of {repository.repository_path}")
            return SyncOutcome.FAILED

        content = self.cache.get(site_uri)
        return self.file_synchronizer.sync(content, file_path)

    def _get_site(self, repository: RepositoryConfig) -> Site:
        site = self.site_registry.get_site_by_uid(repository.site_uid)
        if site is not None:
            return site

        site_id = self.site_registry.get_id_by_uid(repository.site_uid)
        return Site(id=site_id if site_id is not None else 0, uid=repository.site_uid)

    def _deploy_site(self,
                     engine: GitReconciliationEngine,
                     repository: RepositoryConfig,
                     count: int) -> OperationStatus:
        """Run hooks and publish a single site"""
        site = self._get_site(repository)

        if self.before_commit is not None and not self.before_commit(site, repository):
            self.logger.info(f"Remote deployment canceled for site {site.display_name}")
            return OperationStatus.CANCELED

        self.command_runner.run(self.settings.commands_before)

        # The engine logs and redacts git failures
        engine.deploy_repository(repository, site_name=site.display_name, count=count)

        if self.after_commit is not None:
            self.after_commit(site, repository)

        self.command_runner.run(self.settings.commands_after)

        return OperationStatus.SUCCESS

    # Testing

    def test_all(self) -> bool:
        """
        Test connectivity of every configured repository

        Returns:
            True if every repository is a writable directory with a
            reachable remote
        """
        tester = ConnectivityTester(
            self.resolver,
            self.engine_factory(self.settings),
            self.validation_engine
        )
        success = tester.test_all()

        for error in tester.result.errors:
            self.add_error(error.attribute, error.message, repository=error.repository)

        return success

    def test(self) -> bool:
        """
        Validate settings, then test every repository

        Returns:
            True if no errors were recorded
        """
        self.errors.clear()

        for error in self.validation_engine.validate_settings(self.settings).errors:
            self.add_error(error.attribute, error.message, repository=error.repository)

        self.test_all()

        return not self.has_errors()

    def get_errors(self) -> Dict[str, List[str]]:
        """Get recorded errors grouped by attribute"""
        return self.errors.get_errors()
