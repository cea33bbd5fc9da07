"""Configuration service for travis-kit.

This module loads the layered travis-kit configuration and resolves it into
the values used to build a CI Document.

Key Classes:
    ConfigService: Loads the ``travis`` section of the user and project
        config files
    ConfigResolver: Applies defaults, configuration and detected versions

Configuration Hierarchy:
    1. Built-in defaults (DEFAULT_TRAVIS_CONFIG in constants.py)
    2. User config (~/.travis-kit.yaml)
    3. Project config (.travis-kit.yaml)
    4. Detected interpreter versions (``versions`` only, highest priority)

Layering is per key within the ``travis`` section: a project config that
sets only ``script`` keeps the user's ``versions``.

Typical Usage:
    >>> service = ConfigService(project_root=Path.cwd())
    >>> resolver = ConfigResolver(project, service.load_config())
    >>> resolver.resolve().versions
    ['3.10', '3.11', '3.12']
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from travis_kit.config.paths import CONFIG_NAMESPACE, PROJECT_CONFIG_FILE, USER_CONFIG_FILE
from travis_kit.constants import DEFAULT_LANGUAGE, DEFAULT_TRAVIS_CONFIG
from travis_kit.models.config import ResolvedConfig, TravisConfig
from travis_kit.models.project import ProjectMetadata
from travis_kit.utils.probe import NullProbe, VersionProbe

logger = logging.getLogger(__name__)


class ConfigService:
    """Service for loading travis-kit configuration files."""

    def __init__(self, project_root: Path | None = None, user_config_path: Path | None = None):
        """Initialize config service.

        Args:
            project_root: Project root directory (defaults to current directory)
            user_config_path: User config file (defaults to ~/.travis-kit.yaml)
        """
        self.project_root = project_root or Path.cwd()
        self.project_config_path = self.project_root / PROJECT_CONFIG_FILE
        self.user_config_path = user_config_path or Path(USER_CONFIG_FILE).expanduser()

    def _load_layer(self, path: Path) -> TravisConfig:
        try:
            return TravisConfig.load(path, namespace=CONFIG_NAMESPACE)
        except (OSError, yaml.YAMLError, ValidationError) as e:
            logger.warning(f"Ignoring unreadable config file {path}: {e}")
            return TravisConfig()

    def load_config(self) -> TravisConfig:
        """Load the user and project layers.

        Returns:
            TravisConfig holding only configured keys, project over user.
            Missing or unreadable files contribute nothing.
        """
        user = self._load_layer(self.user_config_path)
        project = self._load_layer(self.project_config_path)
        logger.debug(
            f"Loaded config: user={sorted(user.configured())} project={sorted(project.configured())}"
        )
        return user.layered(project)

    def config_paths(self) -> list[Path]:
        """Return the config files consulted, lowest priority first."""
        return [self.user_config_path, self.project_config_path]


class ConfigResolver:
    """Resolves configuration into the values of a CI Document.

    The defaults are an explicit, immutable value; nothing here mutates
    shared state.
    """

    def __init__(
        self,
        project: ProjectMetadata,
        config: TravisConfig | None = None,
        defaults: TravisConfig = DEFAULT_TRAVIS_CONFIG,
        probe: VersionProbe | None = None,
    ):
        """Initialize the resolver.

        Args:
            project: Read-only project metadata
            config: Configured values (user and project layers)
            defaults: Built-in defaults
            probe: Detector for locally installed interpreter versions
        """
        self.project = project
        self.config = config or TravisConfig()
        self.defaults = defaults
        self.probe: VersionProbe = probe or NullProbe()

    def _configured(self, key: str) -> Any:
        value = getattr(self.config, key, None)
        if value is not None:
            return value
        return getattr(self.defaults, key, None)

    def resolve_versions(self) -> list[str]:
        """Determine the interpreter versions to test against.

        Detected versions win over configuration. Qualifiers after the first
        hyphen are dropped (``1.8.0-p1`` becomes ``1.8.0``).
        """
        detected = self.probe.detect_available_versions()
        if detected is not None:
            logger.debug(f"Using detected versions: {detected}")
            return sorted({release.split("-", 1)[0] for release in detected})

        return sorted(self._configured("versions") or [])

    def resolve_before_script(self) -> list[str]:
        """Commands run before the test script."""
        return list(self._configured("before_script") or [])

    def resolve_after_script(self) -> list[str]:
        """Commands run after the test script."""
        return list(self._configured("after_script") or [])

    def resolve_script(self) -> str | None:
        """The test script."""
        value = self._configured("script")
        return str(value) if value is not None else None

    def resolve_language(self) -> str:
        """The travis-ci language tag."""
        return str(self._configured("language") or DEFAULT_LANGUAGE)

    def resolve_token(self) -> str | None:
        """The travis-ci token, possibly still the unset default."""
        return self._configured("token")

    def resolve_notifications(self) -> dict[str, Any]:
        """Build notifications from the project developers and configuration.

        Configured notifications are merged over ``{"email": [...]}``;
        a configured key replaces the default of the same name.
        """
        notifications: dict[str, Any] = {"email": self.project.emails}
        configured = self._configured("notifications") or {}
        notifications.update(configured)
        return notifications

    def resolve_command_list(self, key: str) -> list[str]:
        """Commands configured under ``key`` (``before`` or ``checks``)."""
        return list(self._configured(key) or [])

    def resolve(self) -> ResolvedConfig:
        """Resolve every CI Document value.

        Returns:
            ResolvedConfig with defaults applied
        """
        return ResolvedConfig(
            before_script=self.resolve_before_script(),
            after_script=self.resolve_after_script(),
            script=self.resolve_script(),
            language=self.resolve_language(),
            notifications=self.resolve_notifications(),
            versions=self.resolve_versions(),
            token=self.resolve_token(),
        )


def get_config_resolver(
    project_root: Path | None = None,
    probe: VersionProbe | None = None,
) -> ConfigResolver:
    """Build a ConfigResolver for a project from its files.

    Args:
        project_root: Project root directory (defaults to current directory)
        probe: Version probe (defaults to the configured multi-interpreter runner)

    Returns:
        ConfigResolver over the project's metadata and config files
    """
    from travis_kit.services.project_service import ProjectService
    from travis_kit.utils.probe import MultiInterpreterProbe

    root = project_root or Path.cwd()
    return ConfigResolver(
        project=ProjectService(root).load_metadata(),
        config=ConfigService(root).load_config(),
        probe=probe or MultiInterpreterProbe(),
    )
