"""CI Document generation and writing.

The generated document is deterministic: keys are sorted and any key whose
resolved value is empty or false is left out entirely.
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from travis_kit.config.paths import TRAVIS_YML
from travis_kit.constants import LANGUAGE_VERSION_KEYS
from travis_kit.models.config import ResolvedConfig
from travis_kit.utils import copy_file

logger = logging.getLogger(__name__)


def version_key(language: str) -> str:
    """Return the CI Document key listing versions for ``language``.

    Languages without a dedicated key fall back to ``versions``.
    """
    return LANGUAGE_VERSION_KEYS.get(language, "versions")


def build_document(resolved: ResolvedConfig) -> dict[str, Any]:
    """Build the CI Document mapping with falsy values removed."""
    document: dict[str, Any] = {
        "before_script": resolved.before_script,
        "after_script": resolved.after_script,
        "language": resolved.language,
        "notifications": resolved.notifications,
        version_key(resolved.language): resolved.versions,
        "script": resolved.script,
    }
    return {key: value for key, value in document.items() if value}


def dump_document(document: dict[str, Any]) -> str:
    """Serialize a CI Document mapping to YAML text."""
    return yaml.safe_dump(
        document,
        default_flow_style=False,
        explicit_start=True,
        sort_keys=True,
        allow_unicode=True,
    )


class DocumentService:
    """Service for generating and writing the project's .travis.yml."""

    def __init__(self, project_root: Path | None = None):
        """Initialize document service.

        Args:
            project_root: Project root directory (defaults to current directory)
        """
        self.project_root = project_root or Path.cwd()
        self.travis_yml_path = self.project_root / TRAVIS_YML

    def generate(self, resolved: ResolvedConfig) -> str:
        """Generate CI Document text from resolved configuration.

        Args:
            resolved: Resolved configuration

        Returns:
            YAML text starting with a document marker
        """
        document = build_document(resolved)
        logger.debug(f"Generated document keys: {sorted(document)}")
        return dump_document(document)

    def write(self, source_path: Path) -> Path:
        """Overwrite .travis.yml with the contents of ``source_path``.

        Args:
            source_path: File holding the new document

        Returns:
            Path to the written .travis.yml
        """
        copy_file(source_path, self.travis_yml_path)
        logger.info(f"Wrote {self.travis_yml_path}")
        return self.travis_yml_path
