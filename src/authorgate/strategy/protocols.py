"""BuildStrategy protocol -- the predicate the build host calls.

Any object with ``name``, ``display_name`` and ``is_automatic_build()``
works. The built-in IgnoreCommitterStrategy implements this protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from authorgate.models.decision import Decision
    from authorgate.models.scm import Head, Revision, Source


@runtime_checkable
class BuildStrategy(Protocol):
    """Decides whether a change on a branch should build automatically.

    Example::

        class NeverOnTags:
            name = "never-on-tags"
            display_name = "Never Build Tags"

            def is_automatic_build(self, source, head, current, previous) -> bool:
                return not head.name.startswith("refs/tags/")
    """

    @property
    def name(self) -> str:
        """Unique registry name (e.g., 'ignore-committer')."""
        ...

    @property
    def display_name(self) -> str:
        """Human-readable name shown by the host."""
        ...

    def is_automatic_build(
        self,
        source: Source,
        head: Head,
        current: Revision,
        previous: Optional[Revision],
    ) -> bool:
        """Return True to build. Must not raise."""
        ...


@runtime_checkable
class DecisionListener(Protocol):
    """Callable notified of every Decision a strategy reaches."""

    def __call__(self, decision: Decision) -> None: ...
