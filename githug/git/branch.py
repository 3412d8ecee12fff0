# githug Branches
# List, create, switch, rename and delete branches

from dataclasses import dataclass
from typing import Optional

from git import Head, Repo

from githug.git.errors import BranchExists, BranchNotFound, GithugError
from githug.git.repository import RepoLike, as_repository, has_commits
from githug.output.console import Console, get_console
from githug.prompt import Prompter, create_prompter

BRANCH_TYPES = ("local", "remote", "all")


@dataclass
class BranchInfo:
    """A branch and where it points."""

    name: str
    type: str
    current: bool = False
    tip: Optional[str] = None


def _find_head(repo: Repo, name: str) -> Optional[Head]:
    for head in repo.heads:
        if head.name == name:
            return head
    return None


def branch_current(repo: RepoLike = ".") -> Optional[str]:
    """
    Get current branch name.

    Args:
        repo: Repository handle or path.

    Returns:
        Branch name (also for an unborn branch) or None if detached.
    """
    repo = as_repository(repo)
    if repo.head.is_detached:
        return None
    return repo.active_branch.name


def branch_list(repo: RepoLike = ".", which: str = "local") -> list[BranchInfo]:
    """
    List branches.

    Args:
        repo: Repository handle or path.
        which: "local", "remote" or "all".

    Returns:
        Local branches first, then remote-tracking branches, each sorted by name.
    """
    if which not in BRANCH_TYPES:
        raise ValueError(f"which must be one of {', '.join(BRANCH_TYPES)}, not '{which}'")

    repo = as_repository(repo)
    current = branch_current(repo)
    branches: list[BranchInfo] = []

    if which in ("local", "all"):
        for head in sorted(repo.heads, key=lambda h: h.name):
            branches.append(
                BranchInfo(name=head.name, type="local", current=head.name == current, tip=head.commit.hexsha[:7])
            )

    if which in ("remote", "all"):
        refs = [ref for remote in repo.remotes for ref in remote.refs if not ref.name.endswith("/HEAD")]
        for ref in sorted(refs, key=lambda r: r.name):
            branches.append(BranchInfo(name=ref.name, type="remote", tip=ref.commit.hexsha[:7]))

    return branches


def branch_create(
    name: str,
    rev: str = "HEAD",
    repo: RepoLike = ".",
    console: Optional[Console] = None,
) -> str:
    """
    Create a branch without switching to it.

    Args:
        name: New branch name.
        rev: Commit the branch starts at.
        repo: Repository handle or path.
        console: Output console.

    Returns:
        The branch name.

    Raises:
        BranchExists: If the name is taken.
        GithugError: If the repository has no commits yet.
    """
    repo = as_repository(repo)
    console = console or get_console()

    if _find_head(repo, name) is not None:
        raise BranchExists(name)
    if not has_commits(repo):
        raise GithugError("Cannot create a branch before the first commit.")

    head = repo.create_head(name, commit=repo.commit(rev))
    console.print_success(f"Created branch '{name}' at {head.commit.hexsha[:7]}")
    return name


def switch(
    name: str,
    create: Optional[bool] = None,
    rev: str = "HEAD",
    repo: RepoLike = ".",
    prompter: Optional[Prompter] = None,
    console: Optional[Console] = None,
) -> Optional[str]:
    """
    Switch to a branch, optionally creating it.

    When the branch does not exist and ``create`` is None, an interactive
    prompter is asked whether to create it.

    Args:
        name: Branch to check out.
        create: Create the branch if missing. None = unset.
        rev: Starting point for a newly created branch.
        repo: Repository handle or path.
        prompter: Prompter for the "create it?" question.
        console: Output console.

    Returns:
        The branch name, or None if the user declined to create it.

    Raises:
        BranchNotFound: If the branch is missing and will not be created.
    """
    repo = as_repository(repo)
    console = console or get_console()

    head = _find_head(repo, name)
    if head is None:
        if create is None:
            prompter = prompter or create_prompter()
            if not prompter.interactive:
                raise BranchNotFound(name)
            if not prompter.confirm(f"Branch '{name}' does not exist. Create it?"):
                return None
            create = True
        if not create:
            raise BranchNotFound(name)
        branch_create(name, rev=rev, repo=repo, console=console)
        head = _find_head(repo, name)

    head.checkout()
    console.print_success(f"Switched to branch '{name}'")
    return name


def branch_rename(old: str, new: str, repo: RepoLike = ".", console: Optional[Console] = None) -> str:
    """
    Rename a local branch.

    Returns:
        The new name.
    """
    repo = as_repository(repo)
    console = console or get_console()

    head = _find_head(repo, old)
    if head is None:
        raise BranchNotFound(old)
    if _find_head(repo, new) is not None:
        raise BranchExists(new)

    head.rename(new)
    console.print_success(f"Renamed branch '{old}' to '{new}'")
    return new


def branch_delete(
    name: str,
    force: bool = False,
    repo: RepoLike = ".",
    console: Optional[Console] = None,
) -> str:
    """
    Delete a local branch.

    Unmerged branches need ``force``; git's refusal propagates otherwise.

    Returns:
        The deleted branch name.
    """
    repo = as_repository(repo)
    console = console or get_console()

    head = _find_head(repo, name)
    if head is None:
        raise BranchNotFound(name)
    if name == branch_current(repo):
        raise GithugError(f"Cannot delete the current branch '{name}'.")

    tip = head.commit.hexsha[:7]
    repo.delete_head(head, force=force)
    console.print_success(f"Deleted branch '{name}' (was {tip})")
    return name
