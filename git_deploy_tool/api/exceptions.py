"""Exception definitions for git-deploy-tool API"""

from typing import Optional


class GitDeployToolError(Exception):
    """Base exception for git-deploy-tool"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ConfigError(GitDeployToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, "DT001")


class DeployError(GitDeployToolError):
    """Deployment operation error"""

    def __init__(self, message: str):
        super().__init__(message, "DT008")


class GitError(DeployError):
    """A git command failed

    The message, command and output are expected to be redacted by the
    caller before the exception leaves the working copy.
    """

    def __init__(self,
                 message: str,
                 command: Optional[str] = None,
                 exit_code: Optional[int] = None,
                 output: str = ""):
        super().__init__(message)
        self.error_code = "DT004"
        self.command = command
        self.exit_code = exit_code
        self.output = output


class GitNotFoundError(GitError):
    """Git executable could not be located"""

    def __init__(self, message: str = "Unable to locate the git executable"):
        super().__init__(message)


class CommandError(GitDeployToolError):
    """A hook command exited with a non-zero status"""

    def __init__(self, command: str, exit_code: int, output: str = ""):
        message = f"Command `{command}` failed with exit code {exit_code}"
        if output:
            message = f"{message}: {output}"
        super().__init__(message, "DT022")
        self.command = command
        self.exit_code = exit_code
        self.output = output

