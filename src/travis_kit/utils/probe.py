"""Detection of locally installed interpreter versions.

A multi-interpreter runner runs the test suite against every interpreter it
manages and ends with a summary line such as::

    Passed: 1.8.7-p370, 1.9.3-p194

The versions it reports take precedence over configured versions, but only
when the runner's marker path exists.
"""

import logging
import re
import shlex
import shutil
import subprocess
from pathlib import Path
from typing import Protocol

from travis_kit.config.settings import probe_settings

logger = logging.getLogger(__name__)

PASSED_LINE_PATTERN = re.compile(r"^Passed: (.*)$", re.MULTILINE)


class VersionProbe(Protocol):
    """Anything able to report the interpreter versions available locally."""

    def detect_available_versions(self) -> list[str] | None:
        """Return the reported versions in reported order, or None if unavailable."""
        ...


def parse_passed_versions(output: str) -> list[str] | None:
    """Parse the ``Passed:`` summary line of a runner's output.

    Entries are returned as reported, qualifiers included.

    Examples:
        >>> parse_passed_versions("Passed: 1.6.8, 1.8.0-p1")
        ['1.6.8', '1.8.0-p1']
        >>> parse_passed_versions("Failed: 1.9.3") is None
        True
        >>> parse_passed_versions("Passed: ") is None
        True
    """
    match = PASSED_LINE_PATTERN.search(output)
    if not match:
        return None
    versions = [entry.strip() for entry in match.group(1).split(",") if entry.strip()]
    # An empty list would hide the configured versions
    return versions or None


class NullProbe:
    """Probe that never detects anything."""

    def detect_available_versions(self) -> list[str] | None:
        return None


class MultiInterpreterProbe:
    """Probe backed by an external multi-interpreter runner."""

    def __init__(self, command: str | None = None, marker: str | None = None):
        """Initialize the probe.

        Args:
            command: Runner command line (defaults to probe settings)
            marker: Path that must exist for the runner to be consulted
        """
        self.command = shlex.split(command or probe_settings.command)
        self.marker = Path(marker or probe_settings.marker).expanduser()

    def is_available(self) -> bool:
        """Check that the marker exists and the runner is installed."""
        if not self.command or not self.marker.exists():
            return False
        return shutil.which(self.command[0]) is not None

    def detect_available_versions(self) -> list[str] | None:
        if not self.is_available():
            return None

        try:
            result = subprocess.run(
                self.command,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            logger.warning(f"Failed to run {self.command[0]}: {e}")
            return None

        versions = parse_passed_versions(result.stdout)
        if versions is None:
            logger.debug(f"No 'Passed:' line in {self.command[0]} output")
        return versions
