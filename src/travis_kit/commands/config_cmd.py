"""CI Document commands: generate-config, edit-config and check-config."""

import logging
from pathlib import Path

import typer

from travis_kit.config.messages import ERROR_MESSAGES, INFO_MESSAGES, SUCCESS_MESSAGES
from travis_kit.config.paths import TRAVIS_YML
from travis_kit.exceptions import ConfigurationError
from travis_kit.services.config_service import get_config_resolver
from travis_kit.services.document_service import DocumentService
from travis_kit.services.edit_service import EditService
from travis_kit.services.lint_service import TravisLinter
from travis_kit.utils import file_exists, print_error, print_info, print_success
from travis_kit.utils.command_decorators import project_command

logger = logging.getLogger(__name__)


def _require_travis_yml(project_root: Path) -> Path:
    path = project_root / TRAVIS_YML
    if not file_exists(path):
        raise ConfigurationError(ERROR_MESSAGES["travis_yml_missing"].format(path=TRAVIS_YML))
    return path


def _report_edit(saved: bool, path: Path) -> None:
    if saved:
        print_success(SUCCESS_MESSAGES["config_written"].format(path=path))
    else:
        print_info(INFO_MESSAGES["edit_aborted"].format(path=path))


@project_command
def check_config_command(project_root: Path | None = None) -> None:
    """Lint .travis.yml, exiting with status 1 if it has issues."""
    assert project_root is not None
    path = _require_travis_yml(project_root)

    if not TravisLinter().check(path):
        print_error(ERROR_MESSAGES["config_invalid"].format(path=TRAVIS_YML))
        raise typer.Exit(code=1)

    print_success(SUCCESS_MESSAGES["config_valid"].format(path=TRAVIS_YML))


@project_command
def edit_config_command(project_root: Path | None = None) -> None:
    """Edit .travis.yml in the user's editor, checking it on save."""
    assert project_root is not None
    path = _require_travis_yml(project_root)

    saved = EditService(project_root).edit_config()
    _report_edit(saved, path)


@project_command
def generate_config_command(
    project_root: Path | None = None,
    edit: bool = True,
) -> None:
    """Generate a new .travis.yml.

    Args:
        project_root: Project root (injected)
        edit: Open the generated document in the editor before writing it.
            Without editing, the document is printed instead of written.
    """
    assert project_root is not None
    resolved = get_config_resolver(project_root).resolve()
    content = DocumentService(project_root).generate(resolved)

    if not edit:
        typer.echo(content, nl=False)
        return

    saved = EditService(project_root).generate_config(content)
    _report_edit(saved, project_root / TRAVIS_YML)
