"""Commit domain model for AuthorGate.

Commit is one entry of a change set, built by the change-log parser.
AffectedPath records a single file touched by the commit.
"""

from __future__ import annotations

import enum
from typing import Optional

from pydantic import BaseModel


class EditType(str, enum.Enum):
    """Kind of change recorded on a raw diff line."""

    ADD = "A"
    MODIFY = "M"
    DELETE = "D"
    RENAME = "R"
    COPY = "C"
    TYPE_CHANGE = "T"

    def __repr__(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class AffectedPath(BaseModel):
    """A file touched by a commit.

    ``src_path`` is only set for renames and copies.
    """

    model_config = {"frozen": True}

    edit_type: EditType
    path: str
    src_path: Optional[str] = None


class Commit(BaseModel):
    """One commit in a change set.

    ``author_email`` is kept verbatim as it appeared in the log. Trimming
    and lower-casing happen at comparison time.
    """

    model_config = {"frozen": True}

    commit_id: str
    author_email: str
    author_name: str = ""
    author_time: Optional[int] = None
    author_tz: Optional[str] = None
    committer_name: Optional[str] = None
    committer_email: Optional[str] = None
    committer_time: Optional[int] = None
    committer_tz: Optional[str] = None
    tree: Optional[str] = None
    parents: tuple[str, ...] = ()
    message: str = ""
    paths: tuple[AffectedPath, ...] = ()

    @property
    def title(self) -> str:
        """First line of the commit message."""
        return self.message.split("\n", 1)[0]

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1

    def __str__(self) -> str:
        short_id = self.commit_id[:8]
        title = self.title
        if len(title) > 60:
            title = title[:57] + "..."
        return f"{short_id} <{self.author_email}> {title}"

    def __repr__(self) -> str:
        return f"Commit({self.commit_id[:8]} {self.author_email!r})"
