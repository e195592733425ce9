"""Source-control handles passed in by the build host.

Source, Head and Revision are opaque to the decision logic; only the
change-set fetcher looks inside them.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class Source(BaseModel):
    """A repository the host builds from.

    ``remote`` is a URL or a local path. The git adapter only opens views
    for local paths.
    """

    model_config = {"frozen": True}

    remote: str
    id: Optional[str] = None

    def __str__(self) -> str:
        if self.id:
            return f"{self.id} ({self.remote})"
        return self.remote


class Head(BaseModel):
    """A branch (or tag, or change request) head."""

    model_config = {"frozen": True}

    name: str

    def __str__(self) -> str:
        return self.name


class Revision(BaseModel):
    """A point in a head's history, typically a commit hash."""

    model_config = {"frozen": True}

    head: Head
    hash: str

    def __str__(self) -> str:
        return self.hash

    @property
    def short_hash(self) -> str:
        return self.hash[:8]
