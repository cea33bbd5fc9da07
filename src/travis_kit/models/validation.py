"""Validation data models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ValidationIssue:
    """Single issue found in a CI Document.

    ``key`` is the top-level document key the issue is about, or ``None``
    when it concerns the document as a whole.
    """

    key: str | None
    message: str

    def __str__(self) -> str:
        """String representation of issue."""
        if self.key is None:
            return self.message
        return f"{self.key}: {self.message}"
