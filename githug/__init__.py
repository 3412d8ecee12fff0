"""githug - Git for humans, from scripts and the console.

A thin, interactive-aware layer over GitPython: initialize repositories,
read status, stage and commit, undo commits and manage branches. When a
session is interactive, prompts stand in for forgotten arguments.
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "init",
    "status",
    "stage",
    "unstage",
    "commit",
    "uncommit",
    "amend",
    "revert",
    "history",
    "revision",
    "branch_list",
    "branch_current",
    "branch_create",
    "switch",
    "branch_rename",
    "branch_delete",
    "config_get",
    "config_set",
    "GithugError",
    "MissingMessage",
    "BranchExists",
    "BranchNotFound",
    "ConsolePrompter",
    "NonInteractivePrompter",
    "ScriptedPrompter",
]

_ALIASES = {
    "init": "init_repo",
    "status": "git_status",
}


def __getattr__(name: str):
    """Lazy import to avoid loading GitPython during setup."""
    if name in ("ConsolePrompter", "NonInteractivePrompter", "ScriptedPrompter"):
        from githug import prompt

        return getattr(prompt, name)
    if name in __all__ and name != "__version__":
        from githug import git

        return getattr(git, _ALIASES.get(name, name))
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
