"""Utility functions for git-deploy-tool"""

from .env_utils import parse_env, parse_env_string
from .template_utils import render_template, render_commit_message

__all__ = [
    "parse_env",
    "parse_env_string",
    "render_template",
    "render_commit_message",
]
