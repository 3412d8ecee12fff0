# githug Status
# Working tree and index status as a table of entries

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

from git import Repo

from githug.git.repository import RepoLike, as_repository, has_commits


class FileStatus(str, Enum):
    """Where a pending change lives."""

    STAGED = "staged"
    UNSTAGED = "unstaged"
    UNTRACKED = "untracked"
    TRACKED = "tracked"


class Change(str, Enum):
    """Nature of a pending change."""

    NEW = "new"
    MODIFIED = "modified"
    DELETED = "deleted"
    RENAMED = "renamed"
    NONE = "none"


# GitPython change_type letters, for diffs read from old to new
_CHANGE_MAP: dict[str, Change] = {
    "A": Change.NEW,
    "M": Change.MODIFIED,
    "T": Change.MODIFIED,
    "D": Change.DELETED,
    "R": Change.RENAMED,
    "C": Change.NEW,
}


@dataclass
class StatusEntry:
    """One row of the status table."""

    status: FileStatus
    path: str
    change: Change
    i: Optional[int] = None


def git_status(repo: RepoLike = ".", *, ls: bool = False) -> list[StatusEntry]:
    """
    Read the status of a repository.

    The table is rebuilt from the repository on every call.

    Args:
        repo: Repository handle or path.
        ls: Also list tracked files without pending changes.

    Returns:
        Entries ordered staged, unstaged, untracked (then tracked),
        sorted by path within each group and numbered from 1.
    """
    repo = as_repository(repo)

    entries: list[StatusEntry] = []
    entries.extend(_staged_entries(repo))
    entries.extend(_unstaged_entries(repo))
    entries.extend(
        StatusEntry(FileStatus.UNTRACKED, path, Change.NEW) for path in sorted(repo.untracked_files)
    )

    if ls:
        seen = {entry.path for entry in entries}
        tracked = sorted(set(repo.git.ls_files().splitlines()) - seen)
        entries.extend(StatusEntry(FileStatus.TRACKED, path, Change.NONE) for path in tracked)

    for i, entry in enumerate(entries, start=1):
        entry.i = i
    return entries


def _staged_entries(repo: Repo) -> list[StatusEntry]:
    """Changes recorded in the index relative to HEAD."""
    if not has_commits(repo):
        # Unborn branch: everything in the index is new
        paths = sorted({path for path, _stage in repo.index.entries})
        return [StatusEntry(FileStatus.STAGED, path, Change.NEW) for path in paths]

    return _from_diffs(FileStatus.STAGED, repo.head.commit.diff())


def _unstaged_entries(repo: Repo) -> list[StatusEntry]:
    """Changes in the working tree relative to the index."""
    return _from_diffs(FileStatus.UNSTAGED, repo.index.diff(None))


def _from_diffs(status: FileStatus, diffs: Iterable) -> list[StatusEntry]:
    entries = []
    for diff in diffs:
        change = _CHANGE_MAP.get(diff.change_type, Change.MODIFIED)
        path = diff.a_path if change == Change.DELETED else (diff.b_path or diff.a_path)
        entries.append(StatusEntry(status, path, change))
    return sorted(entries, key=lambda e: e.path)


def count_status(entries: Iterable[StatusEntry], status: FileStatus) -> int:
    """Count entries with the given status."""
    return sum(1 for entry in entries if entry.status == status)


def paths_with_status(entries: Iterable[StatusEntry], *statuses: FileStatus) -> list[str]:
    """Paths of entries having any of the given statuses, in table order."""
    return [entry.path for entry in entries if entry.status in statuses]
