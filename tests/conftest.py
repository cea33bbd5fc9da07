"""Pytest configuration and fixtures for travis-kit tests."""

import os
import shutil
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest

from travis_kit.models.project import Developer, ProjectMetadata

SAMPLE_PYPROJECT = """\
[project]
name = "sample"
version = "0.1.0"
readme = "README.rst"
authors = [
    { name = "author", email = "email@example" },
    { name = "silent", email = "" },
]
"""


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point HOME at an empty directory so user config and probe markers are not read.

    Returns:
        Path to the fake home directory
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.delenv("EDITOR", raising=False)
    monkeypatch.delenv("TRAVIS_KIT_EDITOR", raising=False)
    return home


@pytest.fixture
def temp_project_dir() -> Iterator[Path]:
    """Create a temporary project directory for testing.

    Yields:
        Path to temporary directory
    """
    temp_dir = Path(tempfile.mkdtemp(prefix="travis-kit-test-"))
    original_cwd = Path.cwd()
    try:
        os.chdir(temp_dir)
        yield temp_dir
    finally:
        os.chdir(original_cwd)
        shutil.rmtree(temp_dir, ignore_errors=True)


@pytest.fixture
def sample_project(temp_project_dir: Path) -> Path:
    """Create a project with a pyproject.toml declaring two authors.

    Args:
        temp_project_dir: Temporary project directory

    Returns:
        Path to the project
    """
    (temp_project_dir / "pyproject.toml").write_text(SAMPLE_PYPROJECT, encoding="utf-8")
    return temp_project_dir


@pytest.fixture
def project_metadata(tmp_path: Path) -> ProjectMetadata:
    """Project metadata matching SAMPLE_PYPROJECT."""
    return ProjectMetadata(
        name="sample",
        root=tmp_path,
        developers=(
            Developer(name="author", email="email@example"),
            Developer(name="silent", email=""),
        ),
    )
