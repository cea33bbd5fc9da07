"""GitHub hook commands: enable-hook, disable-hook and trigger-hook."""

import logging
from pathlib import Path

from travis_kit.config.messages import INFO_MESSAGES, SUCCESS_MESSAGES
from travis_kit.services.config_service import get_config_resolver
from travis_kit.services.hook_service import (
    GitHubClient,
    HookService,
    RepositoryIdentity,
    resolve_identity,
)
from travis_kit.utils import print_info, print_success
from travis_kit.utils.command_decorators import project_command

logger = logging.getLogger(__name__)


def _identity(project_root: Path) -> RepositoryIdentity:
    token = get_config_resolver(project_root).resolve_token()
    return resolve_identity(token, cwd=project_root)


@project_command
def enable_hook_command(project_root: Path | None = None) -> None:
    """Enable the travis hook, creating it when missing."""
    assert project_root is not None
    identity = _identity(project_root)

    with GitHubClient.from_git_config(cwd=project_root) as client:
        changed = HookService(client, identity.repo).ensure_enabled(identity.user, identity.token)

    if changed:
        print_success(SUCCESS_MESSAGES["hook_enabled"].format(repo=identity.repo))
    else:
        print_info(INFO_MESSAGES["hook_already_enabled"].format(repo=identity.repo))


@project_command
def disable_hook_command(project_root: Path | None = None) -> None:
    """Disable the travis hook if it is active."""
    assert project_root is not None
    identity = _identity(project_root)

    with GitHubClient.from_git_config(cwd=project_root) as client:
        changed = HookService(client, identity.repo).ensure_disabled()

    if changed:
        print_success(SUCCESS_MESSAGES["hook_disabled"].format(repo=identity.repo))
    else:
        print_info(INFO_MESSAGES["hook_already_disabled"].format(repo=identity.repo))


@project_command
def trigger_hook_command(project_root: Path | None = None) -> None:
    """Trigger a travis-ci run through the hook's test endpoint."""
    assert project_root is not None
    identity = _identity(project_root)

    with GitHubClient.from_git_config(cwd=project_root) as client:
        HookService(client, identity.repo).trigger(identity.user, identity.token)

    print_success(SUCCESS_MESSAGES["hook_triggered"].format(repo=identity.repo))
