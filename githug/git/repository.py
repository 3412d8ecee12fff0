# githug Repository
# Resolve, open and initialize repositories through GitPython

from pathlib import Path
from typing import Optional, Union

from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from githug.output.console import Console, get_console

RepoLike = Union[Repo, str, Path]


def as_repository(repo: RepoLike = ".") -> Repo:
    """
    Resolve a repository handle.

    Args:
        repo: An open Repo, or a path inside a working tree.

    Returns:
        Repo for the enclosing repository.

    Raises:
        InvalidGitRepositoryError: If the path is not inside a repository.
        NoSuchPathError: If the path does not exist.
    """
    if isinstance(repo, Repo):
        return repo
    return Repo(Path(repo).expanduser(), search_parent_directories=True)


def repo_root(repo: RepoLike = ".") -> Path:
    """Get the working tree directory of a repository."""
    return Path(as_repository(repo).working_tree_dir)


def is_in_repo(path: Union[str, Path] = ".") -> bool:
    """
    Check if path is within a git repository.

    Args:
        path: Path to check (defaults to current directory).

    Returns:
        True if in a git repo.
    """
    try:
        as_repository(path)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return False
    return True


def has_commits(repo: Repo) -> bool:
    """True unless HEAD points at an unborn branch."""
    return repo.head.is_valid()


def init_repo(path: Union[str, Path] = ".", console: Optional[Console] = None) -> Path:
    """
    Initialize a new git repository.

    An existing repository at exactly this path is left untouched.

    Args:
        path: Directory to initialize; created if missing.
        console: Output console.

    Returns:
        Absolute path of the repository working tree.
    """
    console = console or get_console()
    target = Path(path).expanduser().resolve()

    if (target / ".git").exists():
        console.print_info(f"'{target}' is already a Git repository.")
        return target

    target.mkdir(parents=True, exist_ok=True)
    Repo.init(target)
    console.print_success(f"Initialized Git repository at {target}")
    return target
