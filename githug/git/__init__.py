# githug Git Module
# Repository operations built on GitPython

from githug.git.branch import (
    BranchInfo,
    branch_create,
    branch_current,
    branch_delete,
    branch_list,
    branch_rename,
    switch,
)
from githug.git.commit import amend, commit, revert, uncommit
from githug.git.errors import BranchExists, BranchNotFound, GithugError, MissingMessage
from githug.git.gitconfig import config_get, config_set
from githug.git.history import CommitResult, HistoryEntry, history, revision, sha_with_hint
from githug.git.repository import as_repository, init_repo, is_in_repo, repo_root
from githug.git.stage import stage, unstage
from githug.git.status import Change, FileStatus, StatusEntry, git_status

__all__ = [
    # Repository
    "as_repository",
    "init_repo",
    "is_in_repo",
    "repo_root",
    # Status
    "git_status",
    "StatusEntry",
    "FileStatus",
    "Change",
    # Staging
    "stage",
    "unstage",
    # Commits
    "commit",
    "uncommit",
    "amend",
    "revert",
    "CommitResult",
    # History
    "history",
    "revision",
    "sha_with_hint",
    "HistoryEntry",
    # Branches
    "branch_list",
    "branch_current",
    "branch_create",
    "switch",
    "branch_rename",
    "branch_delete",
    "BranchInfo",
    # Config
    "config_get",
    "config_set",
    # Errors
    "GithugError",
    "MissingMessage",
    "BranchExists",
    "BranchNotFound",
]
