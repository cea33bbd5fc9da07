"""travis-kit: manage .travis.yml and the GitHub travis hook for a project."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("travis-kit")
except PackageNotFoundError:
    # Running from a source tree that was never installed
    __version__ = "0.0.0-dev"
