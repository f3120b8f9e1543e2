"""Error types raised by ac."""


class AcError(Exception):
    """Base class for every failure ac reports to the user."""
    pass


class IoFailure(AcError):
    """Raised when the filesystem or working directory can't be accessed."""
    pass


class RepositoryAccessFailure(AcError):
    """Raised when repository state can't be opened, read or written."""
    pass


class PromptCancelled(AcError):
    """Raised when the user aborts an interactive prompt."""

    def __init__(self, message: str = "Operation was canceled by the user"):
        super().__init__(message)


class NoParentCommit(AcError):
    """Raised when HEAD is unborn, i.e. the branch has no commits yet."""
    pass


class NothingToCommit(AcError):
    """Raised when empty commits are disallowed and the tree is unchanged."""
    pass


__all__ = [
    "AcError",
    "IoFailure",
    "RepositoryAccessFailure",
    "PromptCancelled",
    "NoParentCommit",
    "NothingToCommit",
]
