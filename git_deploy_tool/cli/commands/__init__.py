# git_deploy_tool/cli/commands/__init__.py
"""CLI commands"""

from . import deploy
from . import test
from . import repos

__all__ = [
    "deploy",
    "test",
    "repos",
]
