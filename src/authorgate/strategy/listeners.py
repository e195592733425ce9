"""Built-in decision listeners.

Listeners are the observability seam of a strategy: plain callables
receiving each Decision. ``log_decision`` is installed by default.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from authorgate.models.decision import Decision

logger = logging.getLogger(__name__)


def log_decision(decision: Decision) -> None:
    """Log the verdict; fail-open verdicts are logged as warnings."""
    verdict = "build" if decision.build else "skip"
    if decision.failed_open:
        logger.warning(
            "Build decision for %s at %s: %s (failed open: %s: %s)",
            decision.head, decision.revision, verdict,
            decision.reason.value, decision.error,
        )
        return
    logger.info(
        "Build decision for %s at %s: %s (%s, %d commit(s) examined)",
        decision.head, decision.revision, verdict,
        decision.reason.value, decision.commits_examined,
    )


class DecisionRecorder:
    """Listener that keeps every decision it receives, in order."""

    def __init__(self) -> None:
        self.decisions: list[Decision] = []

    def __call__(self, decision: Decision) -> None:
        self.decisions.append(decision)

    @property
    def last(self) -> Decision | None:
        return self.decisions[-1] if self.decisions else None

    def clear(self) -> None:
        self.decisions.clear()
