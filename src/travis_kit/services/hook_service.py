"""GitHub travis hook management.

This module provides the minimal GitHub REST client travis-kit needs and the
idempotent operations built on it: enabling, disabling and triggering the
``travis`` hook of the project's repository.

Key Classes:
    GitHubClient: Authenticated JSON requests against the GitHub API
    HookService: Hook lookup, creation and toggling for one repository

Credentials:
    Requests authenticate with ``git config github.user`` and
    ``git config github.password``. The travis token sent to GitHub when
    creating the hook comes from the travis-kit config.
"""

import logging
import ssl
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import httpx

from travis_kit.config.messages import ERROR_MESSAGES
from travis_kit.config.settings import github_settings
from travis_kit.constants import HOOK_NAME, TOKEN_UNSET_MARKER
from travis_kit.exceptions import GitHubAPIError, IdentityError
from travis_kit.models.hook import Hook
from travis_kit.utils.git import git_config, github_repo_from_remote

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RepositoryIdentity:
    """Who is acting on which repository.

    Attributes:
        user: GitHub user name
        repo: Repository as ``owner/name``
        token: travis-ci token
    """

    user: str
    repo: str
    token: str


def resolve_identity(token: str | None, cwd: Path | None = None) -> RepositoryIdentity:
    """Determine the repository identity required by every hook operation.

    Args:
        token: travis-ci token from the resolved configuration
        cwd: Directory whose git configuration is read

    Returns:
        RepositoryIdentity

    Raises:
        IdentityError: If the GitHub user is not configured, the origin remote
            is not a GitHub SSH URL, or the token is still unset
    """
    user = git_config("github.user", cwd=cwd)
    if not user:
        raise IdentityError(ERROR_MESSAGES["no_github_user"])

    repo = github_repo_from_remote(git_config("remote.origin.url", cwd=cwd))
    if not repo:
        raise IdentityError(ERROR_MESSAGES["no_github_repo"])

    if not token or TOKEN_UNSET_MARKER in token:
        raise IdentityError(ERROR_MESSAGES["token_unset"], key="token")

    return RepositoryIdentity(user=user, repo=repo, token=token)


def _error_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return None


class GitHubClient:
    """Authenticated JSON client for the GitHub REST API.

    Use as a context manager so the underlying connection pool is closed.
    """

    def __init__(
        self,
        username: str | None,
        password: str | None,
        base_url: str | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the client.

        Args:
            username: Basic auth user
            password: Basic auth password
            base_url: API root (defaults to GitHub settings)
            transport: Optional httpx transport, used by tests
        """
        self._client = httpx.Client(
            base_url=base_url or github_settings.api_url,
            auth=(username or "", password or ""),
            headers={"Accept": "application/vnd.github+json"},
            timeout=github_settings.timeout_seconds,
            # System trust store rather than a bundled CA list
            verify=ssl.create_default_context(),
            transport=transport,
        )

    @classmethod
    def from_git_config(cls, cwd: Path | None = None) -> "GitHubClient":
        """Create a client authenticated with the credentials in git config."""
        return cls(git_config("github.user", cwd=cwd), git_config("github.password", cwd=cwd))

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP client."""
        self._client.close()

    def request(self, method: str, path: str, body: dict[str, Any] | None = None) -> Any:
        """Send a request and decode the JSON response.

        Args:
            method: HTTP method
            path: Path below the API root
            body: Optional JSON body

        Returns:
            Decoded JSON, or None for an empty response

        Raises:
            GitHubAPIError: If the response status is not 2xx
        """
        logger.debug(f"{method} {path}")
        response = self._client.request(method, path, json=body)

        if not response.is_success:
            raise GitHubAPIError(response.status_code, _error_message(response))

        if not response.content:
            return None
        return response.json()

    def get(self, path: str) -> Any:
        return self.request("GET", path)

    def post(self, path: str, body: dict[str, Any]) -> Any:
        return self.request("POST", path, body)

    def patch(self, path: str, body: dict[str, Any]) -> Any:
        return self.request("PATCH", path, body)


class HookService:
    """Manages the travis hook of one repository."""

    def __init__(self, client: GitHubClient, repo: str):
        """Initialize hook service.

        Args:
            client: GitHub API client
            repo: Repository as ``owner/name``
        """
        self.client = client
        self.repo = repo

    @property
    def hooks_path(self) -> str:
        return f"/repos/{self.repo}/hooks"

    def list_hooks(self) -> list[Hook]:
        """Return every hook of the repository."""
        body = self.client.get(self.hooks_path) or []
        return [Hook.model_validate(item) for item in body]

    def find_hook(self) -> Hook | None:
        """Return the travis hook, or None if the repository has none."""
        return next((hook for hook in self.list_hooks() if hook.name == HOOK_NAME), None)

    def create_hook(self, user: str, token: str) -> Hook:
        """Create an active travis hook for ``user`` with ``token``."""
        body = {
            "name": HOOK_NAME,
            "active": True,
            "config": {
                "domain": "",
                "token": token,
                "user": user,
            },
        }
        logger.info(f"Creating travis hook on {self.repo}")
        return Hook.model_validate(self.client.post(self.hooks_path, body))

    def edit_hook(self, hook: Hook, enable: bool = True) -> Hook:
        """Set ``hook`` active or inactive, keeping its name and config."""
        body = {
            "name": hook.name,
            "active": enable,
            "config": hook.config,
        }
        logger.info(f"{'Enabling' if enable else 'Disabling'} travis hook {hook.id} on {self.repo}")
        return Hook.model_validate(self.client.patch(f"{self.hooks_path}/{hook.id}", body))

    def ensure_enabled(self, user: str, token: str) -> bool:
        """Make sure an active travis hook exists.

        Returns:
            True if a request changed anything, False if already enabled
        """
        hook = self.find_hook()
        if hook is None:
            self.create_hook(user, token)
            return True
        if not hook.active:
            self.edit_hook(hook, enable=True)
            return True
        return False

    def ensure_disabled(self) -> bool:
        """Make sure no active travis hook exists.

        Returns:
            True if a hook was disabled, False if there was nothing to do
        """
        hook = self.find_hook()
        if hook is None or not hook.active:
            return False
        self.edit_hook(hook, enable=False)
        return True

    def trigger(self, user: str, token: str) -> Hook:
        """Trigger the travis hook, creating it first if necessary.

        Returns:
            The triggered hook
        """
        hook = self.find_hook()
        if hook is None:
            hook = self.create_hook(user, token)
        self.client.post(f"{self.hooks_path}/{hook.id}/test", {})
        return hook
