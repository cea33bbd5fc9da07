"""Data models for travis-kit"""

from .config import ResolvedConfig, TravisConfig
from .hook import Hook
from .project import Developer, ProjectMetadata
from .validation import ValidationIssue

__all__ = [
    "Developer",
    "Hook",
    "ProjectMetadata",
    "ResolvedConfig",
    "TravisConfig",
    "ValidationIssue",
]
