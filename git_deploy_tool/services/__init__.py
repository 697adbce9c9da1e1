# git_deploy_tool/services/__init__.py
"""Business logic services for git-deploy-tool"""

from .config_service import ConfigService, find_config_file
from .deploy_service import DeployService

__all__ = [
    "ConfigService",
    "find_config_file",
    "DeployService",
]
