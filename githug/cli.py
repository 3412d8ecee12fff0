"""Click-based CLI for githug."""

from __future__ import annotations

import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import click
from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError
from git.exc import GitError
from pydantic import ValidationError

from githug import __version__
from githug.config import (
    ConfigError,
    GithugConfig,
    ensure_config_exists,
    get_config_path,
    get_settings,
    validate_config_file,
)
from githug.git import (
    GithugError,
    amend,
    branch_create,
    branch_delete,
    branch_list,
    branch_rename,
    commit,
    config_get,
    config_set,
    git_status,
    history,
    init_repo,
    revert,
    stage,
    switch,
    uncommit,
    unstage,
)
from githug.output.console import Console, get_console
from githug.prompt import create_prompter

repo_option = click.option(
    "--repo",
    "-C",
    default=".",
    type=click.Path(path_type=Path),
    help="Path inside the repository (default: current directory)",
)


def _load() -> tuple[GithugConfig, Console]:
    """Load settings and build a console from them."""
    try:
        settings = get_settings()
    except ConfigError as e:
        Console(colored=False).print_error(str(e))
        sys.exit(1)
    except ValidationError as e:
        Console(colored=False).print_error(f"Invalid configuration {get_config_path()}: {e}")
        sys.exit(1)
    return settings, get_console(settings)


def _describe(error: Exception) -> str:
    """Short, human-readable text for an error."""
    if isinstance(error, GitCommandError):
        return (error.stderr or "").strip().removeprefix("stderr: ").strip("'\n ") or str(error)
    if isinstance(error, InvalidGitRepositoryError):
        return f"Not a git repository: {error}"
    if isinstance(error, NoSuchPathError):
        return f"No such path: {error}"
    return str(error)


@contextmanager
def _exit_on_error(console: Console) -> Iterator[None]:
    """Print githug and git errors and exit with status 1."""
    try:
        yield
    except (GithugError, GitError) as e:
        console.print_error(_describe(e))
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="githug")
def cli() -> None:
    """githug - Git for humans.

    Stage, commit, undo and branch with prompts standing in for
    forgotten flags when the session is interactive.

    \b
    Workflow:
      githug init              Create a repository
      githug status            What changed?
      githug commit -m MSG     Stage (if needed) and commit
      githug uncommit          Undo the last commit, keep the changes
    """
    pass


@cli.command("init")
@click.argument("path", default=".", type=click.Path(path_type=Path))
def init_cmd(path: Path) -> None:
    """Initialize a Git repository at PATH."""
    _, console = _load()
    with _exit_on_error(console):
        init_repo(path, console=console)


@cli.command("status")
@click.option("--ls", is_flag=True, help="Also list tracked files without changes")
@repo_option
def status_cmd(ls: bool, repo: Path) -> None:
    """Show staged, unstaged and untracked paths."""
    _, console = _load()
    with _exit_on_error(console):
        console.print_status_table(git_status(repo, ls=ls))


@cli.command("stage")
@click.argument("paths", nargs=-1)
@click.option(
    "--all/--no-all",
    "all_",
    default=None,
    help="Stage all additions, modifications and deletions (default: ask when interactive)",
)
@click.option("--force", "-f", is_flag=True, help="Allow adding otherwise ignored files")
@repo_option
def stage_cmd(paths: tuple[str, ...], all_: Optional[bool], force: bool, repo: Path) -> None:
    """Stage PATHS for the next commit.

    \b
    Examples:
        githug stage notes.txt     # Stage one file
        githug stage --all         # Like git add -A
    """
    settings, console = _load()
    with _exit_on_error(console):
        stage(*paths, all=all_, force=force, repo=repo, prompter=create_prompter(settings), console=console)


@cli.command("unstage")
@click.argument("paths", nargs=-1)
@click.option("--all/--no-all", "all_", default=None, help="Unstage everything (default: ask when interactive)")
@repo_option
def unstage_cmd(paths: tuple[str, ...], all_: Optional[bool], repo: Path) -> None:
    """Remove PATHS from the index, keeping the working tree."""
    settings, console = _load()
    with _exit_on_error(console):
        unstage(*paths, all=all_, repo=repo, prompter=create_prompter(settings), console=console)


@cli.command("commit")
@click.argument("paths", nargs=-1)
@click.option("--message", "-m", default="", help="Commit message (prompted for when interactive)")
@click.option(
    "--all/--no-all",
    "all_",
    default=None,
    help="Stage all changes before committing (default: ask when nothing is staged)",
)
@click.option("--force", "-f", is_flag=True, help="Allow staging otherwise ignored files")
@repo_option
def commit_cmd(paths: tuple[str, ...], message: str, all_: Optional[bool], force: bool, repo: Path) -> None:
    """Commit staged changes, staging PATHS first.

    If nothing is staged and no PATHS are given, you are offered to stage
    everything (interactive sessions only).

    \b
    Examples:
        githug commit -m "Fix typo"            # Commit what is staged
        githug commit notes.txt -m "Add notes" # Stage notes.txt and commit
        githug commit --all -m "Snapshot"      # Like git add -A && git commit
    """
    settings, console = _load()
    with _exit_on_error(console):
        commit(
            *paths,
            all=all_,
            force=force,
            message=message,
            repo=repo,
            prompter=create_prompter(settings),
            console=console,
        )


@cli.command("uncommit")
@repo_option
def uncommit_cmd(repo: Path) -> None:
    """Undo the last commit, leaving its changes staged."""
    _, console = _load()
    with _exit_on_error(console):
        uncommit(repo, console=console)


@cli.command("amend")
@click.option("--message", "-m", default="", help="New message (default: keep the old one)")
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation")
@repo_option
def amend_cmd(message: str, yes: bool, repo: Path) -> None:
    """Fold staged changes into the last commit."""
    settings, console = _load()
    with _exit_on_error(console):
        amend(message, repo, ask=not yes, prompter=create_prompter(settings), console=console)


@cli.command("revert")
@click.argument("rev", default="HEAD")
@repo_option
def revert_cmd(rev: str, repo: Path) -> None:
    """Create a commit undoing REV (default: HEAD)."""
    _, console = _load()
    with _exit_on_error(console):
        revert(rev, repo, console=console)


@cli.command("log")
@click.option("--lines", "-n", default=20, help="Number of commits to show")
@click.option("--verbose", "-v", is_flag=True, help="Also show author emails")
@repo_option
def log_cmd(lines: int, verbose: bool, repo: Path) -> None:
    """Show recent commits, newest first."""
    settings, console = _load()
    console.verbose = console.verbose or verbose
    with _exit_on_error(console):
        console.print_history(history(repo, n=lines), short_sha_length=settings.commit.short_sha_length)


@cli.group()
def branch() -> None:
    """Branch management commands."""
    pass


@branch.command("list")
@click.option(
    "--which",
    "-w",
    type=click.Choice(["local", "remote", "all"]),
    default="local",
    help="Which branches to list",
)
@click.option("--verbose", "-v", is_flag=True, help="Show branch tips")
@repo_option
def branch_list_cmd(which: str, verbose: bool, repo: Path) -> None:
    """List branches; the current one is starred."""
    _, console = _load()
    console.verbose = console.verbose or verbose
    with _exit_on_error(console):
        console.print_branches(branch_list(repo, which=which))


@branch.command("create")
@click.argument("name")
@click.option("--rev", default="HEAD", help="Start point (default: HEAD)")
@repo_option
def branch_create_cmd(name: str, rev: str, repo: Path) -> None:
    """Create branch NAME without switching to it."""
    _, console = _load()
    with _exit_on_error(console):
        branch_create(name, rev=rev, repo=repo, console=console)


@branch.command("switch")
@click.argument("name")
@click.option("--create/--no-create", default=None, help="Create NAME if missing (default: ask when interactive)")
@click.option("--rev", default="HEAD", help="Start point when creating (default: HEAD)")
@repo_option
def branch_switch_cmd(name: str, create: Optional[bool], rev: str, repo: Path) -> None:
    """Switch to branch NAME."""
    settings, console = _load()
    with _exit_on_error(console):
        switch(name, create=create, rev=rev, repo=repo, prompter=create_prompter(settings), console=console)


@branch.command("rename")
@click.argument("old")
@click.argument("new")
@repo_option
def branch_rename_cmd(old: str, new: str, repo: Path) -> None:
    """Rename branch OLD to NEW."""
    _, console = _load()
    with _exit_on_error(console):
        branch_rename(old, new, repo=repo, console=console)


@branch.command("delete")
@click.argument("name")
@click.option("--force", "-f", is_flag=True, help="Delete even if not merged")
@repo_option
def branch_delete_cmd(name: str, force: bool, repo: Path) -> None:
    """Delete branch NAME."""
    _, console = _load()
    with _exit_on_error(console):
        branch_delete(name, force=force, repo=repo, console=console)


@cli.group("config")
def git_config() -> None:
    """Read and write git configuration values."""
    pass


@git_config.command("get")
@click.argument("key")
@click.option("--global", "global_", is_flag=True, help="Use the global config instead of the repository's")
@repo_option
def config_get_cmd(key: str, global_: bool, repo: Path) -> None:
    """Print the value of KEY."""
    _, console = _load()
    with _exit_on_error(console):
        value = config_get(key, repo=repo, where="global" if global_ else "local")
    if value is None:
        console.print_warning(f"'{key}' is not set")
        sys.exit(1)
    click.echo(value)


@git_config.command("set")
@click.argument("key")
@click.argument("value")
@click.option("--global", "global_", is_flag=True, help="Use the global config instead of the repository's")
@repo_option
def config_set_cmd(key: str, value: str, global_: bool, repo: Path) -> None:
    """Set KEY to VALUE."""
    _, console = _load()
    with _exit_on_error(console):
        previous = config_set(key, value, repo=repo, where="global" if global_ else "local")
    if previous is not None and previous != value:
        console.print_success(f"{key}: {previous} -> {value}")
    else:
        console.print_success(f"{key}: {value}")


@cli.group()
def settings() -> None:
    """githug's own configuration file."""
    pass


@settings.command("init")
def settings_init() -> None:
    """Write the default configuration file if missing."""
    console = get_console(GithugConfig())
    config_path, created = ensure_config_exists()
    if created:
        console.print_success(f"Created configuration: {config_path}")
    else:
        console.print_info(f"Configuration already exists: {config_path}")


@settings.command("show")
def settings_show() -> None:
    """Show the effective configuration."""
    settings_, console = _load()
    console.print(f"[bold]Config file:[/bold] {get_config_path()}")
    console.print(f"  interactive: {settings_.interactive.value}")
    console.print(f"  output.verbose: {settings_.output.verbose}")
    console.print(f"  output.colored: {settings_.output.colored}")
    console.print(f"  commit.short_sha_length: {settings_.commit.short_sha_length}")
    console.print(f"  commit.date_format: {settings_.commit.date_format}")


@settings.command("check")
@click.argument("file", required=False, type=click.Path(path_type=Path))
def settings_check(file: Optional[Path]) -> None:
    """Validate a configuration FILE (default: the active one)."""
    console = get_console(GithugConfig())
    valid, errors = validate_config_file(file)
    if valid:
        console.print_success("Configuration is valid")
        return
    for error in errors:
        console.print_error(error)
    sys.exit(1)


if __name__ == "__main__":
    cli()
