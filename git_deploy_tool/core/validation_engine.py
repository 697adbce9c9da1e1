"""Validation of deployer settings"""

import os
from typing import Optional

from ..constants import (
    ATTR_COMMIT_MESSAGE,
    ATTR_EMAIL,
    ATTR_GIT_REPOSITORIES,
    ATTR_NAME,
    ATTR_PERSONAL_ACCESS_TOKEN,
    ATTR_USERNAME,
    EMAIL_PATTERN,
)
from ..models.config import DeployerSettings, RepositoryConfig
from ..models.result import ValidationResult

_REQUIRED_LABELS = {
    ATTR_USERNAME: "Username",
    ATTR_PERSONAL_ACCESS_TOKEN: "Personal access token",
    ATTR_NAME: "Name",
    ATTR_EMAIL: "Email",
    ATTR_COMMIT_MESSAGE: "Commit message",
}


class ValidationEngine:
    """Execute settings validation"""

    def validate_settings(self, settings: DeployerSettings) -> ValidationResult:
        """
        Validate the identity and commit settings

        Args:
            settings: Deployer settings

        Returns:
            ValidationResult with attribute-scoped errors
        """
        result = ValidationResult()
        identity = settings.identity

        values = {
            ATTR_USERNAME: identity.username,
            ATTR_PERSONAL_ACCESS_TOKEN: identity.personal_access_token,
            ATTR_NAME: identity.name,
            ATTR_EMAIL: identity.email,
            ATTR_COMMIT_MESSAGE: settings.commit_message,
        }

        for attribute, value in values.items():
            if not value or not str(value).strip():
                result.add_error(attribute, f"{_REQUIRED_LABELS[attribute]} cannot be blank.")

        # A placeholder that does not resolve leaves no usable token
        if identity.personal_access_token and not identity.secret:
            result.add_error(
                ATTR_PERSONAL_ACCESS_TOKEN,
                f"Personal access token `{identity.personal_access_token}` does not resolve to a value."
            )

        if identity.email and not EMAIL_PATTERN.match(identity.email):
            result.add_error(ATTR_EMAIL, "Email is not a valid email address.")

        return result

    def validate_repository_path(self,
                                 config: RepositoryConfig,
                                 result: Optional[ValidationResult] = None) -> ValidationResult:
        """
        Check that a repository path is a writable directory

        Args:
            config: Repository configuration
            result: Result to record errors into

        Returns:
            ValidationResult
        """
        if result is None:
            result = ValidationResult()

        path = config.repository_path

        if not os.path.isdir(path):
            result.add_error(
                ATTR_GIT_REPOSITORIES,
                f"Repository path `{path}` is not a directory.",
                repository=config.site_uid
            )
        elif not os.access(path, os.W_OK):
            result.add_error(
                ATTR_GIT_REPOSITORIES,
                f"Repository path `{path}` is not writeable.",
                repository=config.site_uid
            )

        return result
