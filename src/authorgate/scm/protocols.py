"""Change-set view protocols.

Defines the pluggable interface between the decision logic and whatever
can enumerate the commits between two revisions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from authorgate.models.scm import Head, Revision, Source


@runtime_checkable
class SourceView(Protocol):
    """A read-only view of a source bound to one revision."""

    def changes_since(self, previous: Optional[Revision]) -> bytes:
        """Return the raw log of commits reachable from the view's revision
        but not from ``previous``.

        ``previous=None`` means the whole history of the view's revision.
        Raises on inaccessible history (shallow clone, unknown revision).
        """
        ...


@runtime_checkable
class ViewOpener(Protocol):
    """Protocol for anything that can open a SourceView.

    Any object with a matching ``open_view()`` works. The built-in
    GitViewOpener implements this protocol.
    """

    def open_view(
        self, source: Source, head: Head, revision: Revision
    ) -> Optional[SourceView]:
        """Open a view at ``revision``, or return None if the source
        cannot produce one (unsupported source, unreachable revision)."""
        ...
