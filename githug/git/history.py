# githug History
# Commit log, revision lookup and human-readable commit hints

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from git import Commit

from githug.config import GithugConfig, get_settings
from githug.git.repository import RepoLike, as_repository, has_commits


@dataclass
class CommitResult:
    """A commit SHA plus what a person needs to recognize it."""

    sha: str
    short_sha: str
    date: str
    message: str

    @property
    def hint(self) -> str:
        return f"[{self.short_sha}] {self.date}: {self.message}"

    def __str__(self) -> str:
        return self.sha


@dataclass
class HistoryEntry:
    """One commit in the log."""

    sha: str
    message: str
    when: datetime
    author: str
    email: str

    @property
    def summary(self) -> str:
        """First line of the message."""
        return self.message.split("\n", 1)[0]


def sha_with_hint(commit: Commit, settings: Optional[GithugConfig] = None) -> CommitResult:
    """
    Describe a commit for confirmation output.

    Args:
        commit: GitPython commit object.
        settings: Tool settings for SHA length and date format.

    Returns:
        CommitResult with short SHA, date and first message line.
    """
    settings = settings or get_settings()
    return CommitResult(
        sha=commit.hexsha,
        short_sha=commit.hexsha[: settings.commit.short_sha_length],
        date=commit.committed_datetime.strftime(settings.commit.date_format),
        message=commit.message.strip().split("\n", 1)[0],
    )


def history(repo: RepoLike = ".", n: Optional[int] = None) -> list[HistoryEntry]:
    """
    Get commit history of the current branch, newest first.

    Args:
        repo: Repository handle or path.
        n: Maximum number of commits.

    Returns:
        List of history entries; empty on an unborn branch.
    """
    repo = as_repository(repo)
    if not has_commits(repo):
        return []

    kwargs = {}
    if n is not None:
        kwargs["max_count"] = n

    return [
        HistoryEntry(
            sha=commit.hexsha,
            message=commit.message.strip(),
            when=commit.committed_datetime,
            author=commit.author.name or "",
            email=commit.author.email or "",
        )
        for commit in repo.iter_commits(**kwargs)
    ]


def revision(rev: str = "HEAD", repo: RepoLike = ".") -> str:
    """
    Resolve a revision to a full SHA.

    Args:
        rev: Any revision git understands ("HEAD~1", a branch, a short SHA).
        repo: Repository handle or path.

    Returns:
        The 40-character SHA of the commit.

    Raises:
        BadName: If the revision cannot be resolved.
    """
    repo = as_repository(repo)
    return repo.commit(rev).hexsha
