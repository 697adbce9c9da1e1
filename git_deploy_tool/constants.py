"""Global constants for git-deploy-tool"""

import re

APP_NAME = "git-deploy-tool"
LOG_FORMAT = "%(message)s"

# Configuration
CONFIG_VERSION = "1.0"
PROJECT_CONFIG_FILE = ".git-deploy.yaml"

# Deployer defaults
DEFAULT_BRANCH = "master"
DEFAULT_REMOTE = "origin"
DEFAULT_COMMIT_MESSAGE = "Auto commit"
DEFAULT_URL_SCHEME = "https"
DEPLOYED_FILE_NAME = "index.html"

# Git executable discovery, tried in order when no explicit command is configured
GIT_DISCOVERY_COMMANDS = [
    "command -v git",
    "type -p git",
    "which git",
]

# First git release supporting `git remote get-url --push`
GIT_REMOTE_GET_URL_VERSION = "2.7.0"

# Command execution
DEFAULT_COMMAND_TIMEOUT = None  # seconds, None waits forever
DEFAULT_GIT_TIMEOUT = 600

# Progress labels
LABEL_DEPLOYING_FILES = "Deploying {count} of {total} files."
LABEL_DEPLOYING_REMOTE = "Deploying to remote."

# Validation attributes
ATTR_GIT_REPOSITORIES = "git_repositories"
ATTR_USERNAME = "username"
ATTR_PERSONAL_ACCESS_TOKEN = "personal_access_token"
ATTR_NAME = "name"
ATTR_EMAIL = "email"
ATTR_COMMIT_MESSAGE = "commit_message"

# Environment variables
ENV_CONFIG_PATH = "GIT_DEPLOY_CONFIG"
ENV_LOG_LEVEL = "GIT_DEPLOY_LOG_LEVEL"

# Validation patterns
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
ENV_PLACEHOLDER_PATTERN = re.compile(r"\$(\w+)|\$\{(\w+)\}")
LINE_BREAK_PATTERN = re.compile(r"\r\n|\r|\n")

# Display constants
EMOJI_SUCCESS = "✓"
EMOJI_ERROR = "✗"
EMOJI_WARNING = "⚠"

# Messages templates
MSG_DEPLOY_SUCCESS = f"{EMOJI_SUCCESS} Deployed {{files}} file(s) to {{sites}} site(s)"
MSG_SITE_CANCELED = f"{EMOJI_WARNING} Remote deployment canceled for site {{site}}"
MSG_TEST_SUCCESS = f"{EMOJI_SUCCESS} All repositories are reachable"
