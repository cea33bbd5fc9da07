"""Tests for configuration loading and resolution."""

from pathlib import Path

import pytest

from travis_kit.constants import DEFAULT_TRAVIS_CONFIG
from travis_kit.models.config import TravisConfig
from travis_kit.models.project import Developer, ProjectMetadata
from travis_kit.services.config_service import (
    ConfigResolver,
    ConfigService,
    get_config_resolver,
)


class StubProbe:
    """Version probe returning a fixed answer."""

    def __init__(self, versions: list[str] | None):
        self.versions = versions

    def detect_available_versions(self) -> list[str] | None:
        return self.versions


def _write_config(path: Path, content: str) -> Path:
    path.write_text(content, encoding="utf-8")
    return path


class TestResolveVersions:
    """Interpreter version resolution."""

    def test_defaults_are_sorted(self, project_metadata: ProjectMetadata) -> None:
        defaults = DEFAULT_TRAVIS_CONFIG.layered(TravisConfig(versions=["3.12", "3.10", "3.11"]))
        resolver = ConfigResolver(project_metadata, defaults=defaults)

        assert resolver.resolve_versions() == ["3.10", "3.11", "3.12"]

    def test_configured_versions_override_defaults(
        self, project_metadata: ProjectMetadata
    ) -> None:
        resolver = ConfigResolver(project_metadata, TravisConfig(versions=["1.9.3", "1.8.7"]))

        assert resolver.resolve_versions() == ["1.8.7", "1.9.3"]

    def test_detected_versions_win_and_drop_qualifiers(
        self, project_metadata: ProjectMetadata
    ) -> None:
        resolver = ConfigResolver(
            project_metadata,
            TravisConfig(versions=["3.12"]),
            probe=StubProbe(["1.8.0-p1", "1.6.8"]),
        )

        assert resolver.resolve_versions() == ["1.6.8", "1.8.0"]

    def test_detected_duplicates_collapse(self, project_metadata: ProjectMetadata) -> None:
        resolver = ConfigResolver(project_metadata, probe=StubProbe(["1.8.7-p370", "1.8.7-p72"]))

        assert resolver.resolve_versions() == ["1.8.7"]

    def test_no_detection_falls_back(self, project_metadata: ProjectMetadata) -> None:
        resolver = ConfigResolver(project_metadata, probe=StubProbe(None))

        assert resolver.resolve_versions() == ["3.10", "3.11", "3.12"]


class TestResolveNotifications:
    """Email notifications built from the developers."""

    def test_default_uses_non_blank_emails(self, project_metadata: ProjectMetadata) -> None:
        resolver = ConfigResolver(project_metadata)

        assert resolver.resolve_notifications() == {"email": ["email@example"]}

    def test_configured_keys_are_merged(self, project_metadata: ProjectMetadata) -> None:
        resolver = ConfigResolver(
            project_metadata, TravisConfig(notifications={"irc": "irc.example.net#ci"})
        )

        assert resolver.resolve_notifications() == {
            "email": ["email@example"],
            "irc": "irc.example.net#ci",
        }

    def test_configured_email_replaces_default(self, project_metadata: ProjectMetadata) -> None:
        resolver = ConfigResolver(project_metadata, TravisConfig(notifications={"email": False}))

        assert resolver.resolve_notifications() == {"email": False}

    @pytest.mark.parametrize(
        ("configured", "expected"),
        [
            ({"irc": ["chan"]}, {"email": ["a@x", "b@x"], "irc": ["chan"]}),
            ({"email": ["c@x"]}, {"email": ["c@x"]}),
        ],
    )
    def test_merge_with_two_developers(
        self, tmp_path: Path, configured: dict, expected: dict
    ) -> None:
        project = ProjectMetadata(
            name="pair",
            root=tmp_path,
            developers=(Developer("a", "a@x"), Developer("b", "b@x")),
        )
        resolver = ConfigResolver(project, TravisConfig(notifications=configured))

        assert resolver.resolve_notifications() == expected


class TestResolve:
    """Whole-config resolution."""

    def test_before_script_is_verbatim(self, project_metadata: ProjectMetadata) -> None:
        commands = ["gem install bundler", "bundle install --without development"]
        resolver = ConfigResolver(project_metadata, TravisConfig(before_script=commands))

        assert resolver.resolve().before_script == commands

    def test_defaults(self, project_metadata: ProjectMetadata) -> None:
        resolved = ConfigResolver(project_metadata).resolve()

        assert resolved.language == "python"
        assert resolved.script == "travis-kit run-checks"
        assert resolved.after_script == []
        assert resolved.before_script == ["pip install travis-kit", "travis-kit before-hook"]
        assert resolved.token is not None and "FIX" in resolved.token

    def test_defaults_are_not_mutated(self, project_metadata: ProjectMetadata) -> None:
        resolver = ConfigResolver(project_metadata)
        resolver.resolve().before_script.append("echo extra")

        assert DEFAULT_TRAVIS_CONFIG.before_script == [
            "pip install travis-kit",
            "travis-kit before-hook",
        ]

    def test_command_lists(self, project_metadata: ProjectMetadata) -> None:
        resolver = ConfigResolver(project_metadata, TravisConfig(checks=["make test"]))

        assert resolver.resolve_command_list("checks") == ["make test"]
        assert resolver.resolve_command_list("before") == ["pip install -e .[test]"]


class TestConfigService:
    """Layered config file loading."""

    def test_missing_files_give_empty_config(self, tmp_path: Path) -> None:
        service = ConfigService(tmp_path, user_config_path=tmp_path / "missing.yaml")

        assert service.load_config().configured() == {}

    def test_project_layer_wins_per_key(self, tmp_path: Path) -> None:
        user = _write_config(
            tmp_path / "user.yaml",
            "travis:\n  script: rake\n  versions:\n    - 1.8.7\n",
        )
        _write_config(tmp_path / ".travis-kit.yaml", "travis:\n  script: make test\n")

        config = ConfigService(tmp_path, user_config_path=user).load_config()

        assert config.script == "make test"
        assert config.versions == ["1.8.7"]

    def test_integer_versions_become_strings(self, tmp_path: Path) -> None:
        _write_config(tmp_path / ".travis-kit.yaml", "travis:\n  versions: [8, 10, '12']\n")

        config = ConfigService(tmp_path, user_config_path=tmp_path / "none.yaml").load_config()

        assert config.versions == ["8", "10", "12"]

    def test_unquoted_decimal_versions_are_rejected(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        _write_config(tmp_path / ".travis-kit.yaml", "travis:\n  versions: [3.10, 3.12]\n")

        config = ConfigService(tmp_path, user_config_path=tmp_path / "none.yaml").load_config()

        assert config.versions is None
        assert "quote them, for example '3.10'" in caplog.text

    def test_quoted_decimal_versions_are_kept(self, tmp_path: Path) -> None:
        _write_config(
            tmp_path / ".travis-kit.yaml", "travis:\n  versions: ['3.10', '3.12']\n"
        )

        config = ConfigService(tmp_path, user_config_path=tmp_path / "none.yaml").load_config()

        assert config.versions == ["3.10", "3.12"]

    def test_other_namespaces_are_ignored(self, tmp_path: Path) -> None:
        _write_config(tmp_path / ".travis-kit.yaml", "exclude: \\.git\nother:\n  script: x\n")

        config = ConfigService(tmp_path, user_config_path=tmp_path / "none.yaml").load_config()

        assert config.configured() == {}

    def test_invalid_yaml_is_skipped(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        _write_config(tmp_path / ".travis-kit.yaml", "travis: [unclosed\n")

        config = ConfigService(tmp_path, user_config_path=tmp_path / "none.yaml").load_config()

        assert config.configured() == {}
        assert "Ignoring unreadable config file" in caplog.text

    def test_user_config_defaults_to_home(self, tmp_path: Path, isolated_home: Path) -> None:
        service = ConfigService(tmp_path)

        assert service.config_paths() == [
            isolated_home / ".travis-kit.yaml",
            tmp_path / ".travis-kit.yaml",
        ]


def test_get_config_resolver_reads_project_files(sample_project: Path) -> None:
    _write_config(sample_project / ".travis-kit.yaml", "travis:\n  language: ruby\n")

    resolved = get_config_resolver(sample_project).resolve()

    assert resolved.language == "ruby"
    assert resolved.notifications == {"email": ["email@example"]}
