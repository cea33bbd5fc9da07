"""Path constants for travis-kit.

This module defines the files travis-kit reads and writes. Paths without a
leading ``~`` are relative to the project root.
"""

# =============================================================================
# CI Document
# =============================================================================

TRAVIS_YML = ".travis.yml"
TRAVIS_YML_TEMP_SUFFIX = "travis.yml"

# =============================================================================
# travis-kit Configuration Files
# =============================================================================

CONFIG_FILENAME = ".travis-kit.yaml"
USER_CONFIG_FILE = f"~/{CONFIG_FILENAME}"
PROJECT_CONFIG_FILE = CONFIG_FILENAME

# Namespace holding travis-kit settings inside a config file
CONFIG_NAMESPACE = "travis"

# =============================================================================
# Project Metadata
# =============================================================================

PYPROJECT_FILE = "pyproject.toml"
DEFAULT_README_FILE = "README.md"
