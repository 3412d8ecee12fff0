# githug Commit
# Commit orchestration: auto-staging, message prompting, uncommit, amend, revert

from pathlib import Path
from typing import Optional, Union

from git import Repo

from githug.git.errors import GithugError, MissingMessage
from githug.git.history import CommitResult, sha_with_hint
from githug.git.repository import RepoLike, as_repository, has_commits
from githug.git.stage import stage
from githug.git.status import FileStatus, count_status, git_status
from githug.output.console import Console, get_console
from githug.prompt import Prompter, create_prompter


def commit(
    *paths: Union[str, Path],
    all: Optional[bool] = None,
    force: bool = False,
    message: str = "",
    repo: RepoLike = ".",
    prompter: Optional[Prompter] = None,
    console: Optional[Console] = None,
) -> Optional[CommitResult]:
    """
    Make a commit.

    If changes are already staged, ``commit(message="...")`` commits them.
    If nothing is staged, or paths are given, staging runs first; when
    ``all`` was not given it stays None so staging decides whether to ask
    "stage everything?". ``all=True`` emulates ``git add -A && git commit``.
    Interactive sessions get a chance to type a missing message.

    Args:
        *paths: Paths to stage before committing.
        all: Stage all changes first. None = unset.
        force: Allow staging otherwise ignored files.
        message: The commit message.
        repo: Repository handle or path.
        prompter: Prompter for "stage everything?" and a missing message.
        console: Output console.

    Returns:
        CommitResult, or None when nothing was staged or the user aborted.

    Raises:
        MissingMessage: No message and none could be obtained.
    """
    prompter = prompter or create_prompter()
    message = message or ""

    # Fail before touching the index
    if not message.strip() and not prompter.interactive:
        raise MissingMessage()

    repo = as_repository(repo)
    console = console or get_console()
    paths = tuple(str(p) for p in paths)

    n_staged = 0
    if not paths:
        n_staged = count_status(git_status(repo), FileStatus.STAGED)

    if paths or n_staged == 0:
        stage(*paths, all=all, force=force, repo=repo, prompter=prompter, console=console)

    n_staged = count_status(git_status(repo), FileStatus.STAGED)
    if n_staged == 0:
        console.print_warning("Nothing staged for commit.")
        return None

    if not message.strip() and prompter.interactive:
        response = prompter.request_text("You must provide a commit message. Enter it now (Ctrl-C to abort)")
        if response is None:
            return None
        message = response

    if not message.strip():
        raise MissingMessage("Commit message is required. Aborting.")

    result = commit_do(repo, message)
    console.print_bullets("Commit:", [result.hint])
    return result


def commit_do(repo: Repo, message: str) -> CommitResult:
    """Commit whatever is staged, with no checks."""
    repo.git.commit("--quiet", "--message", message)
    return sha_with_hint(repo.head.commit)


def uncommit(repo: RepoLike = ".", console: Optional[Console] = None) -> Optional[CommitResult]:
    """
    Undo the most recent commit, keeping its changes staged.

    HEAD moves to the parent commit; index and working tree are untouched,
    like ``git reset --soft HEAD^``. Undoing the root commit leaves the
    branch unborn with everything staged.

    Args:
        repo: Repository handle or path.
        console: Output console.

    Returns:
        The commit HEAD now points to, or None if there is none.
    """
    repo = as_repository(repo)
    console = console or get_console()

    if not has_commits(repo):
        console.print_warning("No commits to undo.")
        return None

    undone = repo.head.commit
    if undone.parents:
        repo.git.reset("--soft", "HEAD^")
        new_head = sha_with_hint(repo.head.commit)
    else:
        repo.git.update_ref("-d", "HEAD")
        new_head = None

    console.print_bullets("Uncommit:", [sha_with_hint(undone).hint])
    if new_head is not None:
        console.print_bullets("HEAD now points to:", [new_head.hint])
    else:
        console.print_info("HEAD now points to an unborn branch.")
    return new_head


def amend(
    message: str = "",
    repo: RepoLike = ".",
    *,
    ask: bool = True,
    prompter: Optional[Prompter] = None,
    console: Optional[Console] = None,
) -> Optional[CommitResult]:
    """
    Replace the most recent commit with one including the current index.

    Args:
        message: New commit message. Empty keeps the existing one.
        repo: Repository handle or path.
        ask: Confirm first in an interactive session.
        prompter: Prompter for the confirmation.
        console: Output console.

    Returns:
        The amended commit, or None if the user declined.

    Raises:
        GithugError: If there is no commit to amend.
    """
    repo = as_repository(repo)
    console = console or get_console()

    if not has_commits(repo):
        raise GithugError("No commit to amend.")

    old = sha_with_hint(repo.head.commit)
    prompter = prompter or create_prompter()
    if ask and prompter.interactive:
        if not prompter.confirm(f"Amend the most recent commit {old.hint}?"):
            console.print_info("Amend cancelled.")
            return None

    args = ["--amend", "--quiet"]
    if message and message.strip():
        args.extend(["--message", message])
    else:
        args.append("--no-edit")
    repo.git.commit(*args)

    result = sha_with_hint(repo.head.commit)
    console.print_bullets("Amended commit:", [old.hint])
    console.print_bullets("Commit:", [result.hint])
    return result


def revert(rev: str = "HEAD", repo: RepoLike = ".", console: Optional[Console] = None) -> CommitResult:
    """
    Create a new commit undoing the changes introduced by ``rev``.

    Args:
        rev: Revision to revert.
        repo: Repository handle or path.
        console: Output console.

    Returns:
        The newly created commit.
    """
    repo = as_repository(repo)
    console = console or get_console()

    target = repo.commit(rev)
    repo.git.revert("--no-edit", target.hexsha)

    result = sha_with_hint(repo.head.commit)
    console.print_bullets("Reverted:", [sha_with_hint(target).hint])
    console.print_bullets("Commit:", [result.hint])
    return result
