"""Project metadata service.

Loads the read-only project view (name, developers, readme) that the config
resolver needs from the ``[project]`` table of pyproject.toml. Authors come
first, then maintainers, each in declaration order.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from travis_kit.config.paths import DEFAULT_README_FILE, PYPROJECT_FILE
from travis_kit.models.project import Developer, ProjectMetadata

logger = logging.getLogger(__name__)


def _developers(entries: Any) -> list[Developer]:
    if not isinstance(entries, list):
        return []
    developers = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        developers.append(
            Developer(name=str(entry.get("name", "")), email=str(entry.get("email", "")))
        )
    return developers


def _readme(value: Any) -> str:
    # PEP 621 allows either a path or a table with a "file" key
    if isinstance(value, str):
        return value
    if isinstance(value, dict) and isinstance(value.get("file"), str):
        return str(value["file"])
    return DEFAULT_README_FILE


class ProjectService:
    """Service for reading project metadata."""

    def __init__(self, project_root: Path | None = None):
        """Initialize project service.

        Args:
            project_root: Project root directory (defaults to current directory)
        """
        self.project_root = project_root or Path.cwd()
        self.pyproject_path = self.project_root / PYPROJECT_FILE

    def load_metadata(self) -> ProjectMetadata:
        """Load project metadata.

        A missing or unreadable pyproject.toml yields metadata named after the
        project directory with no developers.

        Returns:
            ProjectMetadata for the project
        """
        project: dict[str, Any] = {}
        if self.pyproject_path.exists():
            try:
                with open(self.pyproject_path, "rb") as f:
                    project = tomllib.load(f).get("project", {})
            except (OSError, tomllib.TOMLDecodeError) as e:
                logger.warning(f"Failed to read {self.pyproject_path}: {e}")

        developers = _developers(project.get("authors")) + _developers(project.get("maintainers"))

        return ProjectMetadata(
            name=str(project.get("name") or self.project_root.name),
            root=self.project_root,
            developers=tuple(developers),
            readme_file=_readme(project.get("readme")),
        )
