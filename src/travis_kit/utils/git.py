"""Git configuration helpers.

travis-kit reads its GitHub credentials and the repository name from git
configuration rather than from its own config files.
"""

import logging
import re
import subprocess
from pathlib import Path

from travis_kit.config.settings import git_settings
from travis_kit.constants import GITHUB_SSH_REMOTE_PATTERN

logger = logging.getLogger(__name__)


def git_config(key: str, cwd: Path | None = None) -> str | None:
    """Read a value from git configuration.

    Args:
        key: Configuration key (e.g. ``github.user``)
        cwd: Directory to run git in (defaults to current directory)

    Returns:
        The stripped value, or None if the key is unset, blank or git is
        unavailable.
    """
    try:
        result = subprocess.run(
            ["git", "config", key],
            capture_output=True,
            text=True,
            check=True,
            cwd=cwd,
            timeout=git_settings.command_timeout_seconds,
        )
    except FileNotFoundError:
        logger.debug("git executable not found")
        return None
    except subprocess.CalledProcessError:
        # git exits 1 for unset keys
        logger.debug(f"git config {key} is not set")
        return None
    except subprocess.TimeoutExpired:
        logger.warning(f"git config {key} timed out")
        return None

    value = result.stdout.strip()
    return value or None


def github_repo_from_remote(url: str | None) -> str | None:
    """Extract ``owner/name`` from a GitHub SSH remote URL.

    Only ``git@github.com:owner/name.git`` remotes are recognized.

    Examples:
        >>> github_repo_from_remote("git@github.com:octo/widgets.git")
        'octo/widgets'
        >>> github_repo_from_remote("https://github.com/octo/widgets.git") is None
        True
    """
    if not url:
        return None
    match = re.match(GITHUB_SSH_REMOTE_PATTERN, url)
    if not match or not match.group(1):
        return None
    return match.group(1)
