"""Services for travis-kit business logic."""

from travis_kit.services.check_service import CheckService, CommandResult
from travis_kit.services.config_service import (
    ConfigResolver,
    ConfigService,
    get_config_resolver,
)
from travis_kit.services.document_service import DocumentService
from travis_kit.services.edit_service import EditService, EditState
from travis_kit.services.hook_service import (
    GitHubClient,
    HookService,
    RepositoryIdentity,
    resolve_identity,
)
from travis_kit.services.lint_service import DEFAULT_RULES, TravisLinter
from travis_kit.services.project_service import ProjectService

__all__ = [
    "CheckService",
    "CommandResult",
    "ConfigResolver",
    "ConfigService",
    "DEFAULT_RULES",
    "DocumentService",
    "EditService",
    "EditState",
    "GitHubClient",
    "HookService",
    "ProjectService",
    "RepositoryIdentity",
    "TravisLinter",
    "get_config_resolver",
    "resolve_identity",
]
