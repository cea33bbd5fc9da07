"""UI messages and strings for travis-kit.

This module consolidates all user-facing messages including:
- Success/error/info/warning messages
- Help text
- Interactive prompts
"""

# =============================================================================
# Project Metadata
# =============================================================================

PROJECT_TAGLINE = "Manage your .travis.yml and travis-ci hook"

# =============================================================================
# Help
# =============================================================================

HELP_TEXT = f"""
[bold cyan]travis-kit[/bold cyan] - {PROJECT_TAGLINE}

[bold]CI Document:[/bold]
  [cyan]generate-config[/cyan]  Generate a new .travis.yml and customize it in your EDITOR
  [cyan]edit-config[/cyan]      Bring .travis.yml up in your EDITOR, then check it on save
  [cyan]check-config[/cyan]     Lint your .travis.yml

[bold]GitHub Hook:[/bold]
  [cyan]enable-hook[/cyan]      Enable the travis-ci hook
  [cyan]disable-hook[/cyan]     Disable the travis-ci hook
  [cyan]trigger-hook[/cyan]     Trigger the travis-ci hook

[bold]On travis-ci:[/bold]
  [cyan]before-hook[/cyan]      Run before the checks (installs the project)
  [cyan]run-checks[/cyan]       Run the project's checks

[bold]Setup:[/bold]
  [dim]$ git config --global github.user username[/dim]
  [dim]$ git config --global github.password password[/dim]
  Then set [cyan]travis.token[/cyan] in ~/.travis-kit.yaml

Run [cyan]travis-kit COMMAND --help[/cyan] for the options of a command.
"""

# =============================================================================
# Success Messages
# =============================================================================

SUCCESS_MESSAGES = {
    "config_valid": "{path} looks good",
    "config_written": "Wrote {path}",
    "hook_enabled": "travis-ci hook enabled for {repo}",
    "hook_disabled": "travis-ci hook disabled for {repo}",
    "hook_triggered": "travis-ci hook triggered for {repo}",
    "commands_passed": "All commands succeeded",
}

# =============================================================================
# Error Messages
# =============================================================================

ERROR_MESSAGES = {
    "generic_error": "An error occurred: {error}",
    "no_github_user": (
        "Set your github user and password in ~/.gitconfig\n\n"
        "\tgit config --global github.user username\n"
        "\tgit config --global github.password password"
    ),
    "no_github_repo": (
        "Unable to determine your github repository.\n\n"
        'Expected "git@github.com:[repo].git" as your remote origin'
    ),
    "token_unset": (
        "Please set your travis token in ~/.travis-kit.yaml under travis.token - "
        "See: travis-kit --help"
    ),
    "travis_yml_missing": "No {path} found. Run 'travis-kit generate-config' first.",
    "config_invalid": "{path} has issues",
    "command_failed": "Command failed with exit status {code}: {command}",
    "invalid_yaml": "invalid YAML in travis.yml file at {path}: {error}",
}

# =============================================================================
# Info Messages
# =============================================================================

INFO_MESSAGES = {
    "edit_aborted": "Edit aborted, {path} left unchanged",
    "hook_already_enabled": "travis-ci hook already enabled for {repo}",
    "hook_already_disabled": "No active travis-ci hook for {repo}",
    "running_command": "$ {command}",
}

# =============================================================================
# Lint Messages
# =============================================================================

LINT_MESSAGES = {
    "issue_header": "There is an issue with the key {key}:",
    "issue_detail": "\t{message}",
    "not_a_mapping": "The document must be a mapping of keys to values",
    "language_missing": 'The "language" key is mandatory',
    "language_unsupported": "Language is set to {language} but it is not supported",
    "versions_missing": (
        "Specify {label} versions you want to test against using the :{key} key"
    ),
    "versions_unsupported": "Detected unsupported {label} versions: {versions}",
    "prefer_alias": "Prefer {preferred} alias to {version}",
}

# =============================================================================
# Interactive Prompts
# =============================================================================

PROMPTS = {
    "retry_edit": "\nRetry edit? [Yn]\n> ",
}
