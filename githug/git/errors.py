# githug Errors
# Exceptions raised by githug itself; GitPython errors propagate unwrapped


class GithugError(Exception):
    """Base exception for githug operation errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MissingMessage(GithugError):
    """Raised when a commit needs a message and none could be obtained."""

    def __init__(self, message: str = "You must provide a commit message. Aborting."):
        super().__init__(message)


class BranchExists(GithugError):
    """Raised when creating a branch whose name is already taken."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Branch '{name}' already exists.")


class BranchNotFound(GithugError):
    """Raised when a named branch does not exist."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Branch '{name}' does not exist.")
