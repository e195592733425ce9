"""Decision model returned by build strategies.

A Decision carries the boolean verdict plus the branch of the algorithm
that produced it, so callers can tell a fail-open result apart from a
genuine "build" verdict.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


class DecisionReason(str, enum.Enum):
    """Why a strategy reached its verdict."""

    IGNORED_AUTHOR = "ignored_author"
    NON_IGNORED_AUTHOR = "non_ignored_author"
    DEFAULT = "default"
    FETCH_UNAVAILABLE = "fetch_unavailable"
    FETCH_FAILED = "fetch_failed"
    ERROR = "error"

    def __str__(self) -> str:
        return self.value


_FAIL_OPEN = frozenset({
    DecisionReason.FETCH_UNAVAILABLE,
    DecisionReason.FETCH_FAILED,
    DecisionReason.ERROR,
})


@dataclass(frozen=True)
class Decision:
    """Result of evaluating one change set.

    ``commit_id`` and ``author_email`` identify the commit that decided the
    outcome, and are None for the default and failure paths. ``head`` and
    ``revision`` are filled in by the strategy that produced the decision.
    """

    build: bool
    reason: DecisionReason
    commit_id: str | None = None
    author_email: str | None = None
    commits_examined: int = 0
    error: str | None = None
    head: str | None = None
    revision: str | None = None

    @property
    def failed_open(self) -> bool:
        """True when the verdict came from a fetch or parse failure."""
        return self.reason in _FAIL_OPEN

    def __bool__(self) -> bool:
        return self.build
