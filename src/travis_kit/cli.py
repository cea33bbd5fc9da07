"""Main CLI entry point for travis-kit."""

import logging
import sys
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.logging import RichHandler

from travis_kit.commands import (
    before_hook_command,
    check_config_command,
    disable_hook_command,
    edit_config_command,
    enable_hook_command,
    generate_config_command,
    run_checks_command,
    trigger_hook_command,
)
from travis_kit.config.messages import ERROR_MESSAGES, HELP_TEXT, PROJECT_TAGLINE
from travis_kit.constants import VERSION
from travis_kit.utils import print_error, print_panel
from travis_kit.utils.console import error_console

# Load .env file from current directory if it exists
load_dotenv(Path.cwd() / ".env", verbose=False)

app = typer.Typer(
    name="travis-kit",
    help=PROJECT_TAGLINE,
    no_args_is_help=True,
    add_completion=False,
    rich_markup_mode="rich",
)

console = Console()


def _configure_logging(debug: bool) -> None:
    """Send travis-kit log records to stderr through rich.

    Args:
        debug: Log at DEBUG instead of WARNING
    """
    level = logging.DEBUG if debug else logging.WARNING

    app_logger = logging.getLogger("travis_kit")
    app_logger.setLevel(level)
    # Repeated invocations in one process (tests) must not stack handlers
    app_logger.handlers.clear()
    app_logger.addHandler(
        RichHandler(console=error_console, show_path=debug, markup=False, rich_tracebacks=debug)
    )

    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


@app.command("run-checks")
def run_checks() -> None:
    """Run the configured [cyan]checks[/cyan] commands (on travis-ci).

    Stops at the first failing command and exits with its status.
    """
    run_checks_command()


@app.command("before-hook")
def before_hook() -> None:
    """Run the configured [cyan]before[/cyan] commands (on travis-ci)."""
    before_hook_command()


@app.command("check-config")
def check_config() -> None:
    """Lint your .travis.yml."""
    check_config_command()


@app.command("disable-hook")
def disable_hook() -> None:
    """Disable the travis-ci hook."""
    disable_hook_command()


@app.command("edit-config")
def edit_config() -> None:
    """Bring .travis.yml up in your EDITOR, then check it on save."""
    edit_config_command()


@app.command("enable-hook")
def enable_hook() -> None:
    """Enable the travis-ci hook, creating it if needed."""
    enable_hook_command()


@app.command("trigger-hook")
def trigger_hook() -> None:
    """Trigger the travis-ci hook."""
    trigger_hook_command()


@app.command("generate-config")
def generate_config(
    no_edit: bool = typer.Option(
        False,
        "--no-edit",
        help="Print the generated document instead of editing and writing it",
    ),
) -> None:
    """Generate a new .travis.yml and customize it in your EDITOR.

    The document is only written once it passes the checks of check-config.
    """
    generate_config_command(edit=not no_edit)


@app.command("version")
def version() -> None:
    """Show version information."""
    print_panel(
        f"[bold cyan]travis-kit[/bold cyan] version [green]{VERSION}[/green]\n\n"
        f"{PROJECT_TAGLINE}",
        title="Version",
        style="cyan",
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug logging and tracebacks",
    ),
    version_flag: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version information",
        is_eager=True,
    ),
    help_flag: bool | None = typer.Option(
        None,
        "--help",
        "-h",
        help="Show this help message",
        is_eager=True,
    ),
) -> None:
    """travis-kit - manage your .travis.yml and travis-ci hook.

    Get started:
        travis-kit generate-config   # Write a .travis.yml
        travis-kit enable-hook       # Turn on travis-ci for the repository
    """
    _configure_logging(debug)

    if version_flag:
        version()
        raise typer.Exit()

    if help_flag or ctx.invoked_subcommand is None:
        console.print(HELP_TEXT)
        raise typer.Exit()


def cli_main() -> None:
    """Main entry point for the CLI.

    This is the function that gets called when running 'travis-kit'.
    It handles exceptions and provides user-friendly error messages.
    """
    try:
        app()
    except KeyboardInterrupt:
        error_console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except typer.Exit as e:
        sys.exit(e.exit_code)
    except Exception as e:
        print_error(ERROR_MESSAGES["generic_error"].format(error=str(e)))

        if "--debug" in sys.argv:
            import traceback

            error_console.print("\n[dim]Traceback:[/dim]")
            traceback.print_exc()

        sys.exit(1)


if __name__ == "__main__":
    cli_main()
