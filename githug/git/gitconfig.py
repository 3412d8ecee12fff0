# githug Git Config
# Read and write git configuration values

from typing import Optional

from git import Git, GitCommandError

from githug.git.repository import RepoLike, as_repository

CONFIG_SCOPES = ("local", "global")


def _config_cmd(where: str, repo: RepoLike) -> Git:
    if where not in CONFIG_SCOPES:
        raise ValueError(f"where must be one of {', '.join(CONFIG_SCOPES)}, not '{where}'")
    if where == "global":
        return Git()
    return as_repository(repo).git


def config_get(key: str, repo: RepoLike = ".", where: str = "local") -> Optional[str]:
    """
    Get a git configuration value.

    Args:
        key: Dotted key, e.g. "user.name".
        repo: Repository handle or path (ignored for global).
        where: "local" or "global".

    Returns:
        The value, or None if the key is not set.
    """
    git = _config_cmd(where, repo)
    try:
        return git.config(f"--{where}", "--get", key)
    except GitCommandError as e:
        # git config exits 1 for a missing key
        if e.status == 1:
            return None
        raise


def config_set(key: str, value: str, repo: RepoLike = ".", where: str = "local") -> Optional[str]:
    """
    Set a git configuration value.

    Args:
        key: Dotted key, e.g. "user.email".
        value: New value.
        repo: Repository handle or path (ignored for global).
        where: "local" or "global".

    Returns:
        The previous value, or None if the key was not set.
    """
    previous = config_get(key, repo=repo, where=where)
    _config_cmd(where, repo).config(f"--{where}", key, value)
    return previous
