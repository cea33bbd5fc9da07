"""Utility helpers for travis-kit."""

from travis_kit.utils.console import (
    console,
    error_console,
    print_error,
    print_info,
    print_panel,
    print_success,
    print_warning,
)
from travis_kit.utils.file_utils import (
    copy_file,
    ensure_dir,
    file_exists,
    get_project_root,
    read_file,
    read_yaml,
)

__all__ = [
    "console",
    "copy_file",
    "ensure_dir",
    "error_console",
    "file_exists",
    "get_project_root",
    "print_error",
    "print_info",
    "print_panel",
    "print_success",
    "print_warning",
    "read_file",
    "read_yaml",
]
