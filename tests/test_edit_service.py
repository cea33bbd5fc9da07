"""Tests for the edit loop."""

import shlex
from pathlib import Path

import pytest
import typer

from travis_kit.services.edit_service import EditService

VALID_DOCUMENT = "---\nlanguage: ruby\nrvm:\n- 1.8.7\n"
INVALID_DOCUMENT = "---\nlanguage: ruby\n"


def _copy_editor(source: Path) -> str:
    """Editor command that replaces the edited file with ``source``."""
    return f"cp {shlex.quote(str(source))}"


class ScriptedPrompt:
    """Answers the retry prompt from a list, recording each question."""

    def __init__(self, *answers: str):
        self.answers = list(answers)
        self.asked: list[str] = []

    def __call__(self, message: str) -> str:
        self.asked.append(message)
        return self.answers.pop(0)


@pytest.fixture
def valid_source(tmp_path: Path) -> Path:
    path = tmp_path / "valid.yml"
    path.write_text(VALID_DOCUMENT, encoding="utf-8")
    return path


@pytest.fixture
def invalid_source(tmp_path: Path) -> Path:
    path = tmp_path / "invalid.yml"
    path.write_text(INVALID_DOCUMENT, encoding="utf-8")
    return path


def test_valid_edit_writes_destination(tmp_path: Path, valid_source: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    service = EditService(project, editor=_copy_editor(valid_source))

    assert service.generate_config("---\nlanguage: ruby\n") is True
    assert (project / ".travis.yml").read_text(encoding="utf-8") == VALID_DOCUMENT


def test_unchanged_valid_content_is_written(tmp_path: Path) -> None:
    service = EditService(tmp_path, editor="true")

    assert service.generate_config(VALID_DOCUMENT) is True
    assert (tmp_path / ".travis.yml").read_text(encoding="utf-8") == VALID_DOCUMENT


def test_non_interactive_invalid_edit_exits(tmp_path: Path, invalid_source: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    service = EditService(
        project,
        editor=_copy_editor(invalid_source),
        is_interactive=lambda: False,
    )

    with pytest.raises(typer.Exit) as exc_info:
        service.generate_config(VALID_DOCUMENT)

    assert exc_info.value.exit_code == 1
    assert not (project / ".travis.yml").exists()


def test_declining_retry_returns_false(tmp_path: Path, invalid_source: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    prompt = ScriptedPrompt("No")
    service = EditService(
        project,
        editor=_copy_editor(invalid_source),
        is_interactive=lambda: True,
        prompt=prompt,
    )

    assert service.generate_config(VALID_DOCUMENT) is False
    assert len(prompt.asked) == 1
    assert not (project / ".travis.yml").exists()


def test_other_answers_retry(tmp_path: Path) -> None:
    project = tmp_path / "project"
    project.mkdir()
    # The editor appends the missing rvm key on its second run
    counter = tmp_path / "runs"
    editor = (
        f"sh -c 'if [ -e {counter} ]; then printf \"rvm:\\n- 1.8.7\\n\" >> \"$0\"; "
        f"else touch {counter}; fi'"
    )
    prompt = ScriptedPrompt("")
    service = EditService(project, editor=editor, is_interactive=lambda: True, prompt=prompt)

    assert service.generate_config(INVALID_DOCUMENT) is True
    assert len(prompt.asked) == 1
    assert (project / ".travis.yml").read_text(encoding="utf-8") == (
        INVALID_DOCUMENT + "rvm:\n- 1.8.7\n"
    )


def test_edit_config_requires_existing_document(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        EditService(tmp_path, editor="true").edit_config()


def test_editor_falls_back_to_environment(
    tmp_path: Path, valid_source: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("EDITOR", _copy_editor(valid_source))
    (tmp_path / ".travis.yml").write_text(INVALID_DOCUMENT, encoding="utf-8")

    assert EditService(tmp_path, is_interactive=lambda: False).edit_config() is True
    assert (tmp_path / ".travis.yml").read_text(encoding="utf-8") == VALID_DOCUMENT


def test_temporary_file_is_removed(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    temp_dir = tmp_path / "tmp"
    temp_dir.mkdir()
    monkeypatch.setenv("TMPDIR", str(temp_dir))
    monkeypatch.setattr("tempfile.tempdir", None)

    EditService(tmp_path, editor="true").generate_config(VALID_DOCUMENT)

    assert list(temp_dir.iterdir()) == []
