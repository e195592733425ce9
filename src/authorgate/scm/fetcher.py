"""ChangeSetFetcher -- obtains the raw log between two revisions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from authorgate.exceptions import ChangeSetFetchError, FetchUnavailableError

if TYPE_CHECKING:
    from authorgate.models.scm import Head, Revision, Source
    from authorgate.scm.protocols import ViewOpener

logger = logging.getLogger(__name__)


def _range(current: Revision, previous: Optional[Revision]) -> str:
    if previous is None:
        return f"{current.short_hash} (full history)"
    return f"{previous.short_hash}..{current.short_hash}"


class ChangeSetFetcher:
    """Fetches raw change-set logs through a ViewOpener.

    Failures are raised, never swallowed: a missing view raises
    FetchUnavailableError and any other failure is wrapped in
    ChangeSetFetchError with the original exception chained.
    """

    def __init__(self, opener: ViewOpener) -> None:
        self._opener = opener

    @property
    def opener(self) -> ViewOpener:
        return self._opener

    def fetch(
        self,
        source: Source,
        head: Head,
        current: Revision,
        previous: Optional[Revision],
    ) -> bytes:
        """Return the raw log of commits in ``current`` but not ``previous``."""
        try:
            view = self._opener.open_view(source, head, current)
        except Exception as exc:
            raise ChangeSetFetchError(
                f"Failed to open view of {source}: {exc}",
                revision_range=_range(current, previous),
            ) from exc

        if view is None:
            raise FetchUnavailableError(str(source), str(current))

        try:
            raw = view.changes_since(previous)
        except ChangeSetFetchError:
            raise
        except Exception as exc:
            raise ChangeSetFetchError(
                f"Failed to read changes of {head}: {exc}",
                revision_range=_range(current, previous),
            ) from exc

        logger.debug(
            "Fetched %d bytes of change log for %s %s",
            len(raw), head, _range(current, previous),
        )
        return raw
