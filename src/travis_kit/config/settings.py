"""Runtime configuration settings for travis-kit.

This module uses Pydantic Settings for configuration that can be
overridden via environment variables with the TRAVIS_KIT_ prefix.
"""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class GitHubSettings(BaseSettings):
    """GitHub API settings.

    Can be overridden via environment variables with TRAVIS_KIT_GITHUB_ prefix.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVIS_KIT_GITHUB_")

    api_url: str = Field(
        default="https://api.github.com",
        description="Base URL of the GitHub REST API",
    )
    timeout_seconds: float = Field(
        default=30.0,
        description="HTTP request timeout in seconds",
    )


class GitSettings(BaseSettings):
    """Git command settings."""

    model_config = SettingsConfigDict(env_prefix="TRAVIS_KIT_GIT_")

    command_timeout_seconds: float = Field(
        default=30.0,
        description="Git command timeout in seconds",
    )


class ProbeSettings(BaseSettings):
    """Multi-interpreter runner used to detect installed versions.

    The runner is only consulted when the marker path exists.
    """

    model_config = SettingsConfigDict(env_prefix="TRAVIS_KIT_PROBE_")

    command: str = Field(
        default="multiruby -v",
        description="Command whose output carries a 'Passed: ...' summary line",
    )
    marker: str = Field(
        default="~/.multiruby",
        description="Path that must exist before the runner is consulted",
    )


class EditorSettings(BaseSettings):
    """Editor used by edit-config and generate-config."""

    model_config = SettingsConfigDict(env_prefix="TRAVIS_KIT_")

    editor: str | None = Field(
        default=None,
        description="Editor command (falls back to $EDITOR, then vi)",
    )

    def resolve_editor(self) -> str:
        """Return the editor command to run."""
        return self.editor or os.environ.get("EDITOR") or "vi"


# Singleton instances for easy import
github_settings = GitHubSettings()
git_settings = GitSettings()
probe_settings = ProbeSettings()
