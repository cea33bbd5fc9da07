"""Commands run on travis-ci.

``before-hook`` runs the configured ``before`` commands and ``run-checks``
the configured ``checks`` commands. Both stop at the first command that
fails and report its exit status.
"""

import logging
import subprocess
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from travis_kit.config.messages import INFO_MESSAGES
from travis_kit.utils import print_info

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CommandResult:
    """Outcome of running a command list.

    Attributes:
        returncode: Exit status of the last command run
        failed_command: The command that failed, if any
    """

    returncode: int = 0
    failed_command: str | None = None

    @property
    def success(self) -> bool:
        return self.returncode == 0


class CheckService:
    """Runs command lists in the project root."""

    def __init__(self, project_root: Path | None = None):
        """Initialize check service.

        Args:
            project_root: Project root directory (defaults to current directory)
        """
        self.project_root = project_root or Path.cwd()

    def run_commands(self, commands: Sequence[str]) -> CommandResult:
        """Run ``commands`` through the shell, in order.

        Returns:
            CommandResult of the first failure, or a successful result
        """
        for command in commands:
            print_info(INFO_MESSAGES["running_command"].format(command=command))
            logger.debug(f"Running {command!r} in {self.project_root}")
            result = subprocess.run(command, shell=True, cwd=self.project_root, check=False)
            if result.returncode != 0:
                return CommandResult(returncode=result.returncode, failed_command=command)
        return CommandResult()
