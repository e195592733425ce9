"""IgnoreCommitterStrategy -- skip automatic builds for selected authors.

Fetches the commits between the previous and current revision, parses
them, and applies the author-filter policy. Any failure along the way
fails open: the build is allowed and the reason is recorded on the
Decision.
"""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING, Optional

from pydantic import ValidationError

from authorgate.changelog import iter_commits
from authorgate.exceptions import (
    ChangeSetFetchError,
    FetchUnavailableError,
    StrategyConfigError,
)
from authorgate.models.config import PolicyConfig
from authorgate.models.decision import Decision, DecisionReason
from authorgate.policy import evaluate_commits
from authorgate.scm.fetcher import ChangeSetFetcher
from authorgate.strategy.listeners import log_decision

if TYPE_CHECKING:
    from authorgate.models.scm import Head, Revision, Source
    from authorgate.scm.protocols import ViewOpener
    from authorgate.strategy.protocols import DecisionListener

logger = logging.getLogger(__name__)

NAME = "ignore-committer"
DISPLAY_NAME = "Ignore Committer Strategy"


class IgnoreCommitterStrategy:
    """Build strategy that ignores changes made by listed authors.

    Constructor Args:
        config: Ignored authors and the allow-if-not-excluded flag.
            Set once; never mutated.
        fetcher: Change-set fetcher. Defaults to one backed by
            ``opener`` (or a GitViewOpener when no opener is given).
        opener: ViewOpener used to build the default fetcher.
        listeners: Callables notified of every Decision. Defaults to
            ``[log_decision]``; pass ``[]`` to disable.

    Example::

        strategy = IgnoreCommitterStrategy(
            PolicyConfig(ignored_authors="ci@example.com, bot@example.com")
        )
        if strategy.is_automatic_build(source, head, current, previous):
            ...
    """

    name = NAME
    display_name = DISPLAY_NAME

    def __init__(
        self,
        config: PolicyConfig | None = None,
        *,
        fetcher: ChangeSetFetcher | None = None,
        opener: ViewOpener | None = None,
        listeners: Iterable[DecisionListener] | None = None,
    ) -> None:
        self._config = config if config is not None else PolicyConfig()
        if fetcher is None:
            if opener is None:
                from authorgate.scm.git import GitViewOpener

                opener = GitViewOpener()
            fetcher = ChangeSetFetcher(opener)
        self._fetcher = fetcher
        self._listeners: tuple[DecisionListener, ...] = (
            (log_decision,) if listeners is None else tuple(listeners)
        )

    @classmethod
    def from_config(cls, config: dict | PolicyConfig | None = None, **kwargs) -> IgnoreCommitterStrategy:
        """Create from a config dict (camelCase or snake_case keys).

        Raises:
            StrategyConfigError: If the config does not validate.
        """
        if not isinstance(config, PolicyConfig):
            try:
                config = PolicyConfig.from_dict(config)
            except ValidationError as exc:
                raise StrategyConfigError(
                    f"Invalid {NAME} configuration: {exc}"
                ) from exc
        return cls(config, **kwargs)

    @property
    def config(self) -> PolicyConfig:
        return self._config

    @property
    def ignored_authors(self) -> str:
        return self._config.ignored_authors

    @property
    def allow_build_if_not_excluded_author(self) -> bool:
        return self._config.allow_build_if_not_excluded_author

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def is_automatic_build(
        self,
        source: Source,
        head: Head,
        current: Revision,
        previous: Optional[Revision],
    ) -> bool:
        """Return True if the change set should build. Never raises."""
        return self.evaluate(source, head, current, previous).build

    def evaluate(
        self,
        source: Source,
        head: Head,
        current: Revision,
        previous: Optional[Revision],
    ) -> Decision:
        """Evaluate the change set and return the full Decision. Never raises."""
        decision = self._decide(source, head, current, previous)
        decision = dataclasses.replace(
            decision, head=str(head), revision=str(current)
        )
        self._notify(decision)
        return decision

    def _decide(
        self,
        source: Source,
        head: Head,
        current: Revision,
        previous: Optional[Revision],
    ) -> Decision:
        try:
            raw = self._fetcher.fetch(source, head, current, previous)
            return evaluate_commits(
                iter_commits(raw),
                self._config.ignore_list(),
                self._config.allow_build_if_not_excluded_author,
            )
        except FetchUnavailableError as exc:
            logger.error("Error retrieving change-set view: %s", exc)
            return Decision(
                build=True, reason=DecisionReason.FETCH_UNAVAILABLE, error=str(exc)
            )
        except ChangeSetFetchError as exc:
            logger.error("Error fetching change set: %s", exc, exc_info=True)
            return Decision(
                build=True, reason=DecisionReason.FETCH_FAILED, error=str(exc)
            )
        except Exception as exc:
            logger.error("Exception while evaluating change set", exc_info=True)
            return Decision(
                build=True,
                reason=DecisionReason.ERROR,
                error=f"{type(exc).__name__}: {exc}",
            )

    def _notify(self, decision: Decision) -> None:
        for listener in self._listeners:
            try:
                listener(decision)
            except Exception as exc:
                logger.debug("Decision listener error: %s", exc)

    def __repr__(self) -> str:
        return (
            f"IgnoreCommitterStrategy(ignored_authors={self.ignored_authors!r}, "
            f"allow_build_if_not_excluded_author={self.allow_build_if_not_excluded_author})"
        )
