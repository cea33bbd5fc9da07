"""Command decorators for DRY pattern enforcement.

Decorators handle the patterns every command shares: locating the project
root and turning travis-kit errors into an error message and exit status 1.
"""

from collections.abc import Callable
from functools import wraps
from typing import Any

import typer

from travis_kit.exceptions import TravisKitError
from travis_kit.utils.console import print_error
from travis_kit.utils.file_utils import get_project_root


def project_command[F: Callable[..., Any]](func: F) -> F:
    """Decorator injecting ``project_root`` and reporting travis-kit errors.

    The decorated function should accept project_root with a default value
    of None, which the decorator will override with the actual project root:
        def my_command(project_root: Path | None = None) -> None:
            ...

    Raises:
        typer.Exit: With code 1 if the command raises a TravisKitError
    """

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if kwargs.get("project_root") is None:
            kwargs["project_root"] = get_project_root()
        try:
            return func(*args, **kwargs)
        except TravisKitError as e:
            print_error(str(e))
            raise typer.Exit(code=1) from e

    return wrapper  # type: ignore[return-value]
