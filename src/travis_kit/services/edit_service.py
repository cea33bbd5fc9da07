"""Interactive editing of the CI Document.

The edit loop moves through EDITING -> VALIDATING -> DONE or RETRY_PROMPT:
the document is opened in the user's editor, checked when the editor exits,
and either accepted or offered for another round. A bad document is never
written to .travis.yml.
"""

import logging
import os
import shlex
import subprocess
import sys
import tempfile
from collections.abc import Callable
from enum import Enum
from pathlib import Path

import typer
from rich.markup import escape

from travis_kit.config.messages import PROMPTS
from travis_kit.config.paths import TRAVIS_YML_TEMP_SUFFIX
from travis_kit.config.settings import EditorSettings
from travis_kit.services.document_service import DocumentService
from travis_kit.services.lint_service import TravisLinter
from travis_kit.utils import console, read_file

logger = logging.getLogger(__name__)


class EditState(str, Enum):
    """States of the edit loop."""

    EDITING = "editing"
    VALIDATING = "validating"
    RETRY_PROMPT = "retry_prompt"
    DONE = "done"


def _stdin_is_interactive() -> bool:
    return sys.stdin is not None and sys.stdin.isatty()


def _prompt(message: str) -> str:
    return console.input(escape(message))


class EditService:
    """Service for editing CI Documents with validation on save."""

    def __init__(
        self,
        project_root: Path | None = None,
        linter: TravisLinter | None = None,
        editor: str | None = None,
        is_interactive: Callable[[], bool] = _stdin_is_interactive,
        prompt: Callable[[str], str] = _prompt,
    ):
        """Initialize edit service.

        Args:
            project_root: Project root directory (defaults to current directory)
            linter: Linter used on save
            editor: Editor command (defaults to editor settings, $EDITOR, then vi)
            is_interactive: Reports whether a user can answer the retry prompt
            prompt: Asks the retry question and returns the answer
        """
        self.project_root = project_root or Path.cwd()
        self.linter = linter or TravisLinter()
        self.editor = editor
        self.is_interactive = is_interactive
        self.prompt = prompt
        self.documents = DocumentService(self.project_root)

    def _editor_command(self, path: Path) -> str:
        editor = self.editor or EditorSettings().resolve_editor()
        # The editor setting may carry arguments or shell syntax
        return f"{editor} {shlex.quote(str(path))}"

    def run_editor(self, path: Path) -> int:
        """Open ``path`` in the editor and wait for it to exit.

        Returns:
            The editor's exit status
        """
        command = self._editor_command(path)
        logger.debug(f"Running editor: {command}")
        result = subprocess.run(command, shell=True, check=False)
        return result.returncode

    def edit(self, path: Path) -> bool:
        """Run the edit loop on ``path``.

        Returns:
            True once the edited document is valid, False if the user declined
            to retry

        Raises:
            typer.Exit: With code 1 when the document is invalid and nobody
                can be asked to retry
        """
        state = EditState.EDITING
        while True:
            logger.debug(f"Edit loop state: {state.value}")
            if state is EditState.EDITING:
                self.run_editor(path)
                state = EditState.VALIDATING
            elif state is EditState.VALIDATING:
                if self.linter.check(path):
                    state = EditState.DONE
                elif not self.is_interactive():
                    raise typer.Exit(code=1)
                else:
                    state = EditState.RETRY_PROMPT
            elif state is EditState.RETRY_PROMPT:
                answer = self.prompt(PROMPTS["retry_edit"])
                if answer.strip().lower().startswith("n"):
                    return False
                state = EditState.EDITING
            else:
                return True

    def edit_content(self, content: str) -> bool:
        """Edit ``content`` in a temporary file and write it to .travis.yml on success.

        Returns:
            True if .travis.yml was written
        """
        fd, temp_name = tempfile.mkstemp(suffix=TRAVIS_YML_TEMP_SUFFIX)
        temp_path = Path(temp_name)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(content)

            if not self.edit(temp_path):
                return False

            self.documents.write(temp_path)
            return True
        finally:
            temp_path.unlink(missing_ok=True)

    def edit_config(self) -> bool:
        """Edit the existing .travis.yml.

        Raises:
            FileNotFoundError: If there is no .travis.yml yet
        """
        return self.edit_content(read_file(self.documents.travis_yml_path))

    def generate_config(self, content: str) -> bool:
        """Edit a freshly generated document, replacing .travis.yml on success."""
        return self.edit_content(content)
