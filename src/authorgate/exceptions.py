"""AuthorGate exception hierarchy.

All AuthorGate-specific exceptions inherit from AuthorGateError.
"""


class AuthorGateError(Exception):
    """Base exception for all AuthorGate errors."""


class FetchUnavailableError(AuthorGateError):
    """Raised when no change-set view can be opened for a revision."""

    def __init__(self, source: str, revision: str) -> None:
        self.source = source
        self.revision = revision
        super().__init__(
            f"No change-set view available for {source} at {revision}"
        )


class ChangeSetFetchError(AuthorGateError):
    """Raised when the raw commit log between two revisions cannot be read.

    Covers shallow or pruned history, unknown revisions and transport
    failures. The underlying exception, if any, is chained as ``__cause__``.
    """

    def __init__(self, message: str, *, revision_range: str | None = None) -> None:
        self.revision_range = revision_range
        if revision_range:
            message = f"{message} ({revision_range})"
        super().__init__(message)


class ChangeLogParseError(AuthorGateError):
    """Raised when raw log input cannot be decoded into text."""


class StrategyNotFoundError(AuthorGateError):
    """Raised when a strategy name lookup fails."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Build strategy not found: {name}")


class StrategyConfigError(AuthorGateError):
    """Raised when strategy configuration is invalid."""
