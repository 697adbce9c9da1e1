"""Run hook commands through a shell"""

import logging
import subprocess
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from ..api.exceptions import CommandError
from ..constants import DEFAULT_COMMAND_TIMEOUT, LINE_BREAK_PATTERN

logger = logging.getLogger(__name__)

Commands = Union[str, Sequence[str], None]
Redact = Callable[[str], str]


def _no_redaction(text: str) -> str:
    return text


def split_commands(commands: Commands) -> List[str]:
    """
    Normalize hook commands into a list

    Args:
        commands: Newline separated text (any line ending) or a sequence

    Returns:
        Non-blank commands in their original order
    """
    if not commands:
        return []

    if isinstance(commands, str):
        commands = LINE_BREAK_PATTERN.split(commands)

    return [command.strip() for command in commands if command and command.strip()]


class CommandRunner:
    """Executes commands sequentially, stopping at the first failure"""

    def __init__(self,
                 cwd: Optional[Union[str, Path]] = None,
                 timeout: Optional[float] = DEFAULT_COMMAND_TIMEOUT,
                 redact: Optional[Redact] = None):
        """
        Args:
            cwd: Working directory for the commands
            timeout: Per-command timeout in seconds
            redact: Applied to every string placed in errors and logs
        """
        self.cwd = cwd
        self.timeout = timeout
        self.redact = redact or _no_redaction

    def run(self, commands: Commands) -> None:
        """
        Run commands in order

        Args:
            commands: Newline separated text or a sequence of commands

        Raises:
            CommandError: If a command exits with a non-zero status; the
                remaining commands are not run
        """
        for command in split_commands(commands):
            self._run_one(command)

    def _run_one(self, command: str) -> None:
        display = self.redact(command)
        logger.info(f"Running command: {display}")

        try:
            result = subprocess.run(
                command,
                shell=True,
                cwd=self.cwd,
                capture_output=True,
                text=True,
                timeout=self.timeout
            )
        except subprocess.TimeoutExpired:
            raise CommandError(display, -1, f"timed out after {self.timeout}s")
        except OSError as e:
            raise CommandError(display, -1, self.redact(str(e)))

        stdout = self.redact((result.stdout or "").strip())
        stderr = self.redact((result.stderr or "").strip())

        if stdout:
            logger.info(f"Command output: {stdout}")

        if result.returncode != 0:
            logger.error(f"Command failed with exit code {result.returncode}: {display}")
            raise CommandError(display, result.returncode, stderr or stdout)

        if stderr:
            logger.warning(f"Command error output: {stderr}")
