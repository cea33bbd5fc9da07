"""Tests for the CI Document linter."""

from pathlib import Path

import pytest

from travis_kit.models.validation import ValidationIssue
from travis_kit.services.lint_service import (
    TravisLinter,
    check_language,
    check_shape,
    check_versions,
)


def _document(tmp_path: Path, content: str) -> Path:
    path = tmp_path / ".travis.yml"
    path.write_text(content, encoding="utf-8")
    return path


class TestCheck:
    """File checking with issues reported on stderr."""

    def test_valid_ruby_document(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = _document(tmp_path, "language: ruby\nrvm:\n  - 1.8.7\n")

        assert TravisLinter().check(path) is True
        assert capsys.readouterr().err == ""

    def test_missing_versions_is_reported(
        self, tmp_path: Path, capsys: pytest.CaptureFixture
    ) -> None:
        path = _document(tmp_path, "language: ruby\n")

        assert TravisLinter().check(path) is False

        err = capsys.readouterr().err
        assert "There is an issue with the key 'rvm':" in err
        assert "using the :rvm key" in err

    def test_malformed_yaml_is_one_issue(self, tmp_path: Path) -> None:
        path = _document(tmp_path, "language: ruby\nrvm: [1.8.7\n")

        issues = TravisLinter().validate_file(path)

        assert len(issues) == 1
        assert issues[0].key is None
        assert str(path) in issues[0].message
        assert issues[0].message.startswith("invalid YAML in travis.yml file at")

    def test_non_mapping_document(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        path = _document(tmp_path, "travis\n")

        assert TravisLinter().check(path) is False
        assert "must be a mapping" in capsys.readouterr().err

    def test_empty_document_is_invalid(self, tmp_path: Path) -> None:
        path = _document(tmp_path, "")

        assert TravisLinter().check(path) is False


class TestRules:
    """Individual lint rules."""

    def test_language_is_mandatory(self) -> None:
        issues = list(check_language({"script": "make"}))

        assert [issue.key for issue in issues] == ["language"]

    def test_unknown_language(self) -> None:
        issues = list(check_language({"language": "cobol"}))

        assert "cobol" in issues[0].message

    def test_unsupported_versions(self) -> None:
        issues = list(check_versions({"language": "ruby", "rvm": ["1.8.6", "1.8.7"]}))

        assert len(issues) == 1
        assert "1.8.6" in issues[0].message
        assert "1.8.7" not in issues[0].message

    def test_preferred_alias(self) -> None:
        issues = list(check_versions({"language": "ruby", "rvm": ["jruby"]}))

        assert issues == [ValidationIssue(key="rvm", message="Prefer jruby-18mode alias to jruby")]

    def test_single_version_scalar(self) -> None:
        assert list(check_versions({"language": "python", "python": 3.12})) == []

    def test_languages_without_version_key(self) -> None:
        assert list(check_versions({"language": "java"})) == []

    def test_bad_shape_reports_key_once(self) -> None:
        issues = list(check_shape({"language": "ruby", "script": {"run": "make"}}))

        assert [issue.key for issue in issues] == ["script"]
        assert issues[0].message.startswith("Invalid value:")

    def test_unknown_keys_are_accepted(self) -> None:
        assert list(check_shape({"language": "ruby", "matrix": {"fast_finish": True}})) == []


def test_custom_rule_set() -> None:
    def no_sudo(document: dict) -> list[ValidationIssue]:
        if document.get("sudo"):
            return [ValidationIssue(key="sudo", message="sudo is not allowed")]
        return []

    linter = TravisLinter(rules=[no_sudo])

    assert linter.validate({"sudo": True}) == [
        ValidationIssue(key="sudo", message="sudo is not allowed")
    ]
    assert linter.validate({"language": "cobol"}) == []
