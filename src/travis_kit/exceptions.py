"""Custom exceptions for travis-kit.

All exceptions inherit from TravisKitError so commands can report any
travis-kit failure with a single except clause.

Exception hierarchy:
    TravisKitError (base)
    ├── ConfigurationError
    │   └── IdentityError
    └── GitHubAPIError
"""

from pathlib import Path
from typing import Any


class TravisKitError(Exception):
    """Base exception for all travis-kit errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        """Initialize travis-kit error.

        Args:
            message: Error description.
            details: Optional dictionary with additional context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation."""
        if self.details:
            detail_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class ConfigurationError(TravisKitError):
    """Raised when required configuration is missing or unusable.

    Examples:
        - Unreadable travis-kit config file
        - Missing .travis.yml when editing
    """

    def __init__(
        self,
        message: str,
        config_file: Path | None = None,
        key: str | None = None,
    ):
        """Initialize configuration error.

        Args:
            message: Error description.
            config_file: Path to the problematic config file.
            key: The configuration key that caused the error.
        """
        details = {}
        if config_file:
            details["config_file"] = str(config_file)
        if key:
            details["key"] = key
        super().__init__(message, details)
        self.config_file = config_file
        self.key = key


class IdentityError(ConfigurationError):
    """Raised when the GitHub repository identity cannot be determined.

    The message carries the remediation; these errors are never retried.
    """


class GitHubAPIError(TravisKitError):
    """Raised when the GitHub API answers with a non-2xx status."""

    def __init__(self, status_code: int, api_message: str | None = None):
        """Initialize API error.

        Args:
            status_code: HTTP status code of the response.
            api_message: The ``message`` field of a JSON error body, if any.
        """
        suffix = f": {api_message}" if api_message else ""
        super().__init__(f"github API error {status_code}{suffix}")
        self.status_code = status_code
        self.api_message = api_message
