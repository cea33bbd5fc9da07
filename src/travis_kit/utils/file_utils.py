"""File system utilities for travis-kit."""

import shutil
from pathlib import Path
from typing import Any

import yaml


def ensure_dir(path: Path) -> None:
    """Ensure directory exists, creating it if necessary.

    Args:
        path: Directory path to ensure exists
    """
    path.mkdir(parents=True, exist_ok=True)


def read_file(path: Path) -> str:
    """Read text file contents.

    Args:
        path: Path to file to read

    Returns:
        File contents as string

    Raises:
        FileNotFoundError: If file doesn't exist
    """
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    return path.read_text(encoding="utf-8")


def copy_file(src: Path, dst: Path) -> None:
    """Copy a file's contents over the destination.

    Args:
        src: Source file path
        dst: Destination file path

    Raises:
        FileNotFoundError: If source file doesn't exist
    """
    if not src.exists():
        raise FileNotFoundError(f"Source file not found: {src}")

    ensure_dir(dst.parent)
    shutil.copyfile(src, dst)


def file_exists(path: Path) -> bool:
    """Check if file exists.

    Args:
        path: Path to check

    Returns:
        True if file exists, False otherwise
    """
    return path.exists() and path.is_file()


def read_yaml(path: Path) -> Any:
    """Read YAML file.

    Unlike config loading this returns whatever the document holds, which
    may not be a mapping.

    Args:
        path: Path to YAML file

    Returns:
        Parsed YAML data

    Raises:
        FileNotFoundError: If file doesn't exist
        yaml.YAMLError: If YAML is invalid
    """
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")

    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f)


def get_project_root(start_path: Path | None = None) -> Path:
    """Find the project root.

    The nearest directory holding a pyproject.toml, .travis.yml or .git
    wins; falls back to the start path.

    Args:
        start_path: Path to start searching from (defaults to current directory)

    Returns:
        Project root path
    """
    if start_path is None:
        start_path = Path.cwd()

    current = start_path.resolve()

    for parent in [current] + list(current.parents):
        for marker in ("pyproject.toml", ".travis.yml", ".git"):
            if (parent / marker).exists():
                return parent

    return current
