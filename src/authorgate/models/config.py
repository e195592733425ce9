"""Configuration models for AuthorGate.

PolicyConfig holds the two settings of the ignore-committer strategy.
IgnoreList is the normalized, per-evaluation view of ``ignored_authors``.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, field_validator


def normalize_email(email: str) -> str:
    """Trim and lower-case an email for comparison."""
    return email.strip().lower()


@dataclass(frozen=True)
class IgnoreList:
    """Set of normalized author emails whose commits do not justify a build.

    Membership tests normalize the probe, so ``" Jenkins@Example.com"``
    matches an entry written as ``jenkins@example.com``.
    """

    entries: frozenset[str] = frozenset()

    @classmethod
    def from_string(cls, raw: str | None) -> IgnoreList:
        """Build from a comma-separated string. Empty entries are dropped."""
        if not raw:
            return cls()
        normalized = (normalize_email(part) for part in raw.split(","))
        return cls(frozenset(e for e in normalized if e))

    def __contains__(self, email: object) -> bool:
        if not isinstance(email, str):
            return False
        return normalize_email(email) in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self):
        return iter(sorted(self.entries))

    def __str__(self) -> str:
        return "[" + ", ".join(self) + "]"


class PolicyConfig(BaseModel):
    """Settings for the ignore-committer strategy.

    Accepts the build host's camelCase keys (``ignoredAuthors``,
    ``allowBuildIfNotExcludedAuthor``) as well as the snake_case names.
    """

    model_config = {"frozen": True, "populate_by_name": True}

    ignored_authors: str = Field(default="", alias="ignoredAuthors")
    allow_build_if_not_excluded_author: bool = Field(
        default=False, alias="allowBuildIfNotExcludedAuthor"
    )

    @field_validator("ignored_authors", mode="before")
    @classmethod
    def _coerce_ignored_authors(cls, v: object) -> object:
        """Accept None, or a list of emails joined with commas."""
        if v is None:
            return ""
        if isinstance(v, (list, tuple, set, frozenset)):
            return ",".join(str(item) for item in v)
        return v

    @field_validator("allow_build_if_not_excluded_author", mode="before")
    @classmethod
    def _coerce_allow(cls, v: object) -> object:
        if v is None:
            return False
        return v

    def ignore_list(self) -> IgnoreList:
        """Build a fresh IgnoreList from ``ignored_authors``."""
        return IgnoreList.from_string(self.ignored_authors)

    @classmethod
    def from_dict(cls, d: dict | None) -> PolicyConfig:
        """Create a PolicyConfig from a dict. None yields the defaults."""
        return cls.model_validate(d or {})

    def to_dict(self) -> dict:
        """Convert to a JSON-compatible dict using snake_case keys."""
        return self.model_dump()

    @classmethod
    def from_file(cls, path: str | Path) -> PolicyConfig:
        """Load a PolicyConfig from a JSON file."""
        with open(path, encoding="utf-8") as fh:
            return cls.from_dict(json.load(fh))
