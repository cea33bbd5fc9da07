"""Constants for travis-kit.

This module contains:
- VERSION: Package version
- DEFAULT_TRAVIS_CONFIG: built-in defaults for the CI Document
- Language tables used by generation and linting
- GitHub hook constants

For paths, messages, and runtime settings, import from:
- travis_kit.config.paths
- travis_kit.config.messages
- travis_kit.config.settings
"""

from types import MappingProxyType

from travis_kit import __version__
from travis_kit.models.config import TravisConfig

# =============================================================================
# Version
# =============================================================================

VERSION = __version__

# =============================================================================
# Built-in Defaults
# =============================================================================

# Marks a token that has not been set yet
TOKEN_UNSET_MARKER = "FIX"
DEFAULT_TOKEN = f"{TOKEN_UNSET_MARKER} - See: travis-kit --help"

DEFAULT_LANGUAGE = "python"

DEFAULT_TRAVIS_CONFIG = TravisConfig(
    before_script=[
        "pip install travis-kit",
        "travis-kit before-hook",
    ],
    script="travis-kit run-checks",
    token=DEFAULT_TOKEN,
    versions=["3.10", "3.11", "3.12"],
    language=DEFAULT_LANGUAGE,
    before=["pip install -e .[test]"],
    checks=["python -m pytest"],
)

# =============================================================================
# CI Document
# =============================================================================

# travis-ci key listing the interpreter versions, per language
LANGUAGE_VERSION_KEYS = MappingProxyType(
    {
        "ruby": "rvm",
        "python": "python",
        "node_js": "node_js",
        "php": "php",
        "perl": "perl",
        "erlang": "otp_release",
        "haskell": "ghc",
        "go": "go",
    }
)

LANGUAGE_LABELS = MappingProxyType(
    {
        "ruby": "Ruby",
        "python": "Python",
        "node_js": "Node.js",
        "php": "PHP",
        "perl": "Perl",
        "erlang": "Erlang/OTP",
        "haskell": "GHC",
        "go": "Go",
    }
)

SUPPORTED_LANGUAGES = frozenset(
    {
        "c",
        "clojure",
        "cpp",
        "erlang",
        "go",
        "groovy",
        "haskell",
        "java",
        "node_js",
        "objective-c",
        "perl",
        "php",
        "python",
        "ruby",
        "scala",
    }
)

UNSUPPORTED_VERSIONS = MappingProxyType(
    {
        "ruby": frozenset({"1.8.6", "1.9.1"}),
        "python": frozenset({"2.4", "2.5", "3.0", "3.1"}),
        "node_js": frozenset({"0.4"}),
    }
)

# Bare interpreter names travis-ci wants spelled with an explicit mode
PREFERRED_ALIASES = MappingProxyType(
    {
        "ruby": MappingProxyType({"jruby": "jruby-18mode", "rbx": "rbx-18mode"}),
    }
)

# =============================================================================
# GitHub
# =============================================================================

HOOK_NAME = "travis"
GITHUB_SSH_REMOTE_PATTERN = r"^git@github\.com:(.*)\.git$"
