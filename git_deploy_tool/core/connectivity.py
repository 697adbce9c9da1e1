"""Validate that configured repositories are usable"""

import logging
from typing import Optional

from ..api.exceptions import GitError
from ..constants import ATTR_GIT_REPOSITORIES
from ..models.result import ValidationResult
from .git_engine import GitReconciliationEngine
from .repository_resolver import RepositoryResolver
from .validation_engine import ValidationEngine

logger = logging.getLogger(__name__)


class ConnectivityTester:
    """Checks every configured repository without changing remote state"""

    def __init__(self,
                 resolver: RepositoryResolver,
                 engine: GitReconciliationEngine,
                 validation_engine: Optional[ValidationEngine] = None):
        self.resolver = resolver
        self.engine = engine
        self.validation_engine = validation_engine or ValidationEngine()
        self.result = ValidationResult()

    def test_all(self) -> bool:
        """
        Test every configured repository

        Errors are accumulated per repository; a failing repository never
        stops the remaining ones from being tested.

        Returns:
            True if no errors were recorded
        """
        self.result = ValidationResult()

        for site_uid in self.resolver.configured_site_uids():
            config = self.resolver.resolve(site_uid)

            if config is None:
                continue

            path_result = self.validation_engine.validate_repository_path(config)
            if path_result.has_errors():
                self.result.merge(path_result)
                continue

            try:
                git = self.engine.open_working_copy(config)
                git.fetch(config.remote)
            except GitError as e:
                message = self.engine.redactor.redact(str(e))
                logger.warning(f"Connectivity test failed for {config.repository_path}: {message}")
                self.result.add_error(
                    ATTR_GIT_REPOSITORIES,
                    f"Error connecting to repository: {message}",
                    repository=site_uid
                )
            else:
                logger.info(f"Repository {config.repository_path} is reachable")

        return not self.result.has_errors()
