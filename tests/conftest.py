# githug Test Fixtures
# Pytest fixtures for githug tests

import tempfile
from collections.abc import Generator
from io import StringIO
from pathlib import Path

import pytest
from git import Repo
from rich.console import Console as RichConsole

from githug.output.console import Console


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir).resolve()


@pytest.fixture(autouse=True)
def temp_home(temp_dir: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate HOME, git identity and githug settings for every test."""
    home = temp_dir / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "Test User")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "test@example.com")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "Test User")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "test@example.com")
    monkeypatch.delenv("GITHUG_CONFIG", raising=False)
    return home


@pytest.fixture
def repo_path(temp_dir: Path) -> Path:
    """Create an empty git repository."""
    path = temp_dir / "repo"
    repo = Repo.init(path)
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")
    repo.close()
    return path


@pytest.fixture
def committed_repo(repo_path: Path) -> Path:
    """Repository with max.txt and louise.txt in one commit."""
    write(repo_path, "max.txt", "Are these girls real smart or real real lucky?\n")
    write(repo_path, "louise.txt", "You get what you settle for.\n")
    repo = Repo(repo_path)
    repo.git.add("-A")
    repo.git.commit("-m", "m1")
    repo.close()
    return repo_path


@pytest.fixture
def console() -> Console:
    """Console with captured, uncolored output."""
    c = Console(colored=False)
    c._console = RichConsole(file=StringIO(), no_color=True, width=200)
    return c


def write(repo_path: Path, name: str, text: str) -> Path:
    """Write a file inside the repository."""
    path = repo_path / name
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


def output_of(console: Console) -> str:
    """Get captured output from console."""
    console._console.file.seek(0)
    return console._console.file.read()


def status_rows(repo_path: Path) -> list[tuple[str, str, str]]:
    """Status as plain tuples, for comparisons."""
    from githug.git.status import git_status

    return [(e.status.value, e.path, e.change.value) for e in git_status(repo_path)]
