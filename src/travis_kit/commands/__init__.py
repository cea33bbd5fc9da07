"""CLI commands for travis-kit."""

from travis_kit.commands.checks_cmd import before_hook_command, run_checks_command
from travis_kit.commands.config_cmd import (
    check_config_command,
    edit_config_command,
    generate_config_command,
)
from travis_kit.commands.hook_cmd import (
    disable_hook_command,
    enable_hook_command,
    trigger_hook_command,
)

__all__ = [
    "before_hook_command",
    "check_config_command",
    "disable_hook_command",
    "edit_config_command",
    "enable_hook_command",
    "generate_config_command",
    "run_checks_command",
    "trigger_hook_command",
]
