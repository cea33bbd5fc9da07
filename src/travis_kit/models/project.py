"""Project metadata models"""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class Developer:
    """A project developer as declared in the project metadata"""

    name: str
    email: str = ""


@dataclass(frozen=True)
class ProjectMetadata:
    """Read-only view of the project that travis-kit manages.

    Developers keep their declaration order; the CI Document's default email
    notifications follow it.
    """

    name: str
    root: Path
    developers: tuple[Developer, ...] = field(default_factory=tuple)
    readme_file: str = "README.md"

    @property
    def emails(self) -> list[str]:
        """Non-blank developer emails in declaration order."""
        return [dev.email.strip() for dev in self.developers if dev.email and dev.email.strip()]
