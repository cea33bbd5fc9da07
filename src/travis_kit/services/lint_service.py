"""Lint rules and checker for CI Documents.

A rule is any callable taking the parsed document (a mapping) and yielding
ValidationIssue objects. TravisLinter runs a sequence of rules; the default
sequence covers document shape, the language key and interpreter versions.

Typical Usage:
    >>> linter = TravisLinter()
    >>> linter.validate({"language": "python", "python": ["3.12"]})
    []
"""

import logging
from collections.abc import Callable, Iterable, Iterator, Sequence
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from travis_kit.config.messages import ERROR_MESSAGES, LINT_MESSAGES
from travis_kit.constants import (
    LANGUAGE_LABELS,
    LANGUAGE_VERSION_KEYS,
    PREFERRED_ALIASES,
    SUPPORTED_LANGUAGES,
    UNSUPPORTED_VERSIONS,
)
from travis_kit.models.validation import ValidationIssue
from travis_kit.utils import print_warning, read_yaml

logger = logging.getLogger(__name__)

LintRule = Callable[[dict[str, Any]], Iterable[ValidationIssue]]

StrOrList = str | list[str]
Version = str | int | float


class TravisDocumentShape(BaseModel):
    """Allowed value shapes for the keys travis-kit knows about.

    Unknown keys are accepted as-is.
    """

    model_config = ConfigDict(extra="allow", strict=True)

    language: str | None = None
    before_install: StrOrList | None = None
    install: StrOrList | None = None
    before_script: StrOrList | None = None
    script: StrOrList | None = None
    after_script: StrOrList | None = None
    after_success: StrOrList | None = None
    after_failure: StrOrList | None = None
    notifications: dict[str, Any] | bool | None = None
    rvm: Version | list[Version] | None = None
    python: Version | list[Version] | None = None
    node_js: Version | list[Version] | None = None
    env: StrOrList | dict[str, Any] | None = None


def _as_versions(value: Any) -> list[str]:
    if value is None:
        return []
    if isinstance(value, list):
        return [str(item) for item in value]
    return [str(value)]


def check_shape(document: dict[str, Any]) -> Iterator[ValidationIssue]:
    """Report values whose type travis-ci does not accept."""
    try:
        TravisDocumentShape.model_validate(document)
    except ValidationError as e:
        reported: set[str | None] = set()
        for error in e.errors():
            key = str(error["loc"][0]) if error["loc"] else None
            # Unions report once per member; one issue per key is enough
            if key in reported:
                continue
            reported.add(key)
            yield ValidationIssue(key=key, message=f"Invalid value: {error['msg']}")


def check_language(document: dict[str, Any]) -> Iterator[ValidationIssue]:
    """The language key is mandatory and must name a supported language."""
    language = document.get("language")
    if language is None:
        yield ValidationIssue(key="language", message=LINT_MESSAGES["language_missing"])
    elif isinstance(language, str) and language not in SUPPORTED_LANGUAGES:
        yield ValidationIssue(
            key="language",
            message=LINT_MESSAGES["language_unsupported"].format(language=language),
        )


def check_versions(document: dict[str, Any]) -> Iterator[ValidationIssue]:
    """Languages with a version key must list versions, all of them supported."""
    language = document.get("language")
    if not isinstance(language, str) or language not in LANGUAGE_VERSION_KEYS:
        return

    key = LANGUAGE_VERSION_KEYS[language]
    label = LANGUAGE_LABELS.get(language, language)

    if key not in document:
        yield ValidationIssue(
            key=key, message=LINT_MESSAGES["versions_missing"].format(label=label, key=key)
        )
        return

    versions = _as_versions(document[key])

    unsupported = [v for v in versions if v in UNSUPPORTED_VERSIONS.get(language, ())]
    if unsupported:
        yield ValidationIssue(
            key=key,
            message=LINT_MESSAGES["versions_unsupported"].format(
                label=label, versions=", ".join(unsupported)
            ),
        )

    aliases = PREFERRED_ALIASES.get(language, {})
    for version in versions:
        if version in aliases:
            yield ValidationIssue(
                key=key,
                message=LINT_MESSAGES["prefer_alias"].format(
                    preferred=aliases[version], version=version
                ),
            )


DEFAULT_RULES: tuple[LintRule, ...] = (check_shape, check_language, check_versions)


class TravisLinter:
    """Validates CI Documents against a rule set."""

    def __init__(self, rules: Sequence[LintRule] = DEFAULT_RULES):
        """Initialize the linter.

        Args:
            rules: Rules to apply, in reporting order
        """
        self.rules = tuple(rules)

    def validate(self, document: Any) -> list[ValidationIssue]:
        """Validate a parsed document.

        Args:
            document: Result of parsing the YAML text

        Returns:
            Issues found, empty when the document is valid
        """
        if not isinstance(document, dict):
            return [ValidationIssue(key=None, message=LINT_MESSAGES["not_a_mapping"])]

        issues: list[ValidationIssue] = []
        for rule in self.rules:
            issues.extend(rule(document))
        return issues

    def validate_file(self, path: Path) -> list[ValidationIssue]:
        """Parse and validate the document at ``path``.

        A document that fails to parse yields exactly one issue naming the
        file and the parser error.
        """
        try:
            document = read_yaml(path)
        except yaml.YAMLError as e:
            return [
                ValidationIssue(
                    key=None, message=ERROR_MESSAGES["invalid_yaml"].format(path=path, error=e)
                )
            ]
        return self.validate(document)

    def check(self, path: Path) -> bool:
        """Check the document at ``path``, reporting issues on stderr.

        Returns:
            True if the document is valid, False otherwise
        """
        issues = self.validate_file(path)
        if not issues:
            return True

        logger.debug(f"{len(issues)} issue(s) in {path}")
        for issue in issues:
            if issue.key is None:
                print_warning(issue.message)
                continue
            print_warning(LINT_MESSAGES["issue_header"].format(key=repr(issue.key)))
            print_warning(LINT_MESSAGES["issue_detail"].format(message=issue.message))
        return False
