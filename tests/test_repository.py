# Tests for githug.git.repository
# Resolving and initializing repositories

from pathlib import Path

import pytest
from git import InvalidGitRepositoryError, NoSuchPathError, Repo

from githug.git.repository import as_repository, has_commits, init_repo, is_in_repo, repo_root

from conftest import output_of


class TestAsRepository:
    """Tests for as_repository."""

    def test_repo_object_passthrough(self, repo_path: Path):
        repo = Repo(repo_path)
        assert as_repository(repo) is repo

    def test_from_subdirectory(self, repo_path: Path):
        sub = repo_path / "a" / "b"
        sub.mkdir(parents=True)
        assert Path(as_repository(sub).working_tree_dir) == repo_path

    def test_not_a_repo(self, temp_dir: Path):
        plain = temp_dir / "plain"
        plain.mkdir()
        with pytest.raises(InvalidGitRepositoryError):
            as_repository(plain)

    def test_missing_path(self, temp_dir: Path):
        with pytest.raises(NoSuchPathError):
            as_repository(temp_dir / "missing")


class TestRepoHelpers:
    """Tests for is_in_repo, repo_root and has_commits."""

    def test_is_in_repo(self, repo_path: Path, temp_dir: Path):
        plain = temp_dir / "plain"
        plain.mkdir()
        assert is_in_repo(repo_path) is True
        assert is_in_repo(plain) is False
        assert is_in_repo(temp_dir / "missing") is False

    def test_repo_root(self, repo_path: Path):
        sub = repo_path / "docs"
        sub.mkdir()
        assert repo_root(sub) == repo_path

    def test_has_commits(self, repo_path: Path, committed_repo: Path):
        assert has_commits(Repo(committed_repo)) is True

    def test_has_no_commits(self, repo_path: Path):
        assert has_commits(Repo(repo_path)) is False


class TestInitRepo:
    """Tests for init_repo."""

    def test_creates_directory(self, temp_dir: Path, console):
        target = temp_dir / "new" / "repo"
        assert init_repo(target, console=console) == target
        assert (target / ".git").is_dir()
        assert "Initialized" in output_of(console)

    def test_existing_repo_untouched(self, repo_path: Path, console):
        assert init_repo(repo_path, console=console) == repo_path
        assert "already a Git repository" in output_of(console)
