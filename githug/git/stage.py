# githug Staging
# Add paths to, and remove paths from, the index

from pathlib import Path
from typing import Optional, Union

from githug.git.repository import RepoLike, as_repository, has_commits
from githug.git.status import FileStatus, git_status, paths_with_status
from githug.output.console import Console, get_console
from githug.prompt import Prompter, create_prompter


def stage(
    *paths: Union[str, Path],
    all: Optional[bool] = None,
    force: bool = False,
    repo: RepoLike = ".",
    prompter: Optional[Prompter] = None,
    console: Optional[Console] = None,
) -> list[str]:
    """
    Stage changes for the next commit.

    With no paths and ``all`` left as None, an interactive prompter is asked
    whether to stage everything; a non-interactive one stages nothing.
    ``all=True`` emulates ``git add -A``.

    Args:
        *paths: Paths relative to the repository root.
        all: Stage all additions, modifications and deletions. None = unset.
        force: Allow adding otherwise ignored files.
        repo: Repository handle or path.
        prompter: Prompter consulted when ``all`` is unset.
        console: Output console.

    Returns:
        Paths whose changes are newly staged.
    """
    repo = as_repository(repo)
    console = console or get_console()
    paths = tuple(str(p) for p in paths)

    if not paths and all is None:
        prompter = prompter or create_prompter()
        if prompter.interactive:
            all = prompter.confirm("Stage all changes (additions, modifications, deletions)?")
        else:
            all = False

    if not paths and not all:
        console.print_info("Nothing staged.")
        return []

    before = git_status(repo)
    pending = set(paths_with_status(before, FileStatus.UNSTAGED, FileStatus.UNTRACKED))
    already_staged = set(paths_with_status(before, FileStatus.STAGED))

    flags = ["--force"] if force else []
    if all:
        repo.git.add("-A", *flags)
    else:
        repo.git.add(*flags, "--", *paths)

    staged = []
    for path in paths_with_status(git_status(repo), FileStatus.STAGED):
        if path in pending or path not in already_staged:
            staged.append(path)

    if staged:
        console.print_bullets("Staged these paths:", staged)
    return staged


def unstage(
    *paths: Union[str, Path],
    all: Optional[bool] = None,
    repo: RepoLike = ".",
    prompter: Optional[Prompter] = None,
    console: Optional[Console] = None,
) -> list[str]:
    """
    Remove changes from the index, leaving the working tree alone.

    Args:
        *paths: Paths relative to the repository root.
        all: Unstage everything. None = unset, which prompts interactively.
        repo: Repository handle or path.
        prompter: Prompter consulted when ``all`` is unset.
        console: Output console.

    Returns:
        Paths that are no longer staged.
    """
    repo = as_repository(repo)
    console = console or get_console()
    paths = tuple(str(p) for p in paths)

    if not paths and all is None:
        prompter = prompter or create_prompter()
        if prompter.interactive:
            all = prompter.confirm("Unstage all staged changes?")
        else:
            all = False

    if not paths and not all:
        console.print_info("Nothing unstaged.")
        return []

    staged_before = paths_with_status(git_status(repo), FileStatus.STAGED)
    if not staged_before:
        console.print_info("Nothing unstaged.")
        return []

    if has_commits(repo):
        if all:
            repo.git.reset("-q")
        else:
            repo.git.reset("-q", "HEAD", "--", *paths)
    else:
        # Unborn branch: there is no HEAD to reset to
        targets = ["."] if all else list(paths)
        repo.git.rm("--cached", "-r", "-q", "--ignore-unmatch", "--", *targets)

    staged_after = set(paths_with_status(git_status(repo), FileStatus.STAGED))
    unstaged = [path for path in staged_before if path not in staged_after]

    if unstaged:
        console.print_bullets("Unstaged these paths:", unstaged)
    return unstaged
