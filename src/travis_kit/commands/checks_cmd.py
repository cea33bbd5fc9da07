"""Commands run on travis-ci: before-hook and run-checks."""

import logging
from pathlib import Path

import typer

from travis_kit.config.messages import ERROR_MESSAGES, SUCCESS_MESSAGES
from travis_kit.services.check_service import CheckService, CommandResult
from travis_kit.services.config_service import get_config_resolver
from travis_kit.utils import print_error, print_success
from travis_kit.utils.command_decorators import project_command

logger = logging.getLogger(__name__)


def _finish(result: CommandResult) -> None:
    if not result.success:
        print_error(
            ERROR_MESSAGES["command_failed"].format(
                code=result.returncode, command=result.failed_command
            )
        )
        raise typer.Exit(code=result.returncode)
    print_success(SUCCESS_MESSAGES["commands_passed"])


@project_command
def before_hook_command(project_root: Path | None = None) -> None:
    """Run the configured ``before`` commands."""
    assert project_root is not None
    commands = get_config_resolver(project_root).resolve_command_list("before")
    _finish(CheckService(project_root).run_commands(commands))


@project_command
def run_checks_command(project_root: Path | None = None) -> None:
    """Run the configured ``checks`` commands."""
    assert project_root is not None
    commands = get_config_resolver(project_root).resolve_command_list("checks")
    _finish(CheckService(project_root).run_commands(commands))
