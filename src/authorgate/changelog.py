"""Raw commit-log parser.

Turns the output of ``git log --raw --format=raw`` into Commit records::

    commit 1567861636cd854f4dd6fa40bf94c0c657681dd5
    tree 4b825dc642cb6eb9a060e54bf8d69288fbee4904
    parent 9a1d2c...
    author John Galt<john@example.com> 1363879004 +0100
    committer John Galt<john@example.com> 1363879004 +0100

        Commit message, indented by four spaces.

    :100644 100644 0123... 4567... M	src/app.py

A block is only kept when one of its unindented lines starts with the literal
``author`` tag. Blocks without one (for example ``Author`` or ``Authorzzz``)
are dropped rather than given a made-up author.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator

from authorgate.exceptions import ChangeLogParseError
from authorgate.models.commit import AffectedPath, Commit, EditType

logger = logging.getLogger(__name__)

COMMIT_PREFIX = "commit "
MESSAGE_INDENT = "    "

# "Name<email> 1363879004 +0100"; name, timestamp and tz may be absent
_IDENTITY_RE = re.compile(r"^([^<]*)<([^>]*)>\s*(.*)$")

_EDIT_TYPES = {e.value: e for e in EditType}


def _parse_identity(rest: str) -> tuple[str, str, int | None, str | None] | None:
    """Split an identity line body into (name, email, time, tz)."""
    match = _IDENTITY_RE.match(rest)
    if match is None:
        return None
    name, email, when = match.groups()
    timestamp: int | None = None
    tz: str | None = None
    parts = when.split()
    if parts and parts[0].isdigit():
        timestamp = int(parts[0])
        if len(parts) > 1:
            tz = parts[1]
    return name.strip(), email, timestamp, tz


def _parse_raw_diff(line: str) -> AffectedPath | None:
    """Parse a ``:<modes> <shas> <status>\\t<path>[\\t<path>]`` line."""
    meta, _, path_part = line[1:].partition("\t")
    fields = meta.split()
    if not fields or not path_part:
        return None
    edit_type = _EDIT_TYPES.get(fields[-1][:1])
    if edit_type is None:
        return None
    paths = path_part.split("\t")
    if edit_type in (EditType.RENAME, EditType.COPY) and len(paths) > 1:
        return AffectedPath(edit_type=edit_type, path=paths[1], src_path=paths[0])
    return AffectedPath(edit_type=edit_type, path=paths[0])


_IDENTITY_TAGS = ("author", "committer")


def _apply_identity(fields: dict, tag: str, rest: str) -> bool:
    """Store an identity header on ``fields``. Later headers overwrite earlier ones."""
    identity = _parse_identity(rest)
    if identity is None:
        return False
    name, email, timestamp, tz = identity
    fields[f"{tag}_name"] = name
    fields[f"{tag}_email"] = email
    fields[f"{tag}_time"] = timestamp
    fields[f"{tag}_tz"] = tz
    return True


def _parse_block(lines: list[str]) -> Commit | None:
    """Parse one ``commit <id>`` block. Returns None if it has no author.

    Unindented ``author``/``committer`` lines count wherever they appear in
    the block; the last one wins. Message lines are told apart by their
    indent.
    """
    commit_id = lines[0][len(COMMIT_PREFIX):].strip().split(" ", 1)[0]
    fields: dict = {"commit_id": commit_id}
    parents: list[str] = []
    message: list[str] = []
    paths: list[AffectedPath] = []
    has_author = False
    in_header = True

    for line in lines[1:]:
        tag, _, rest = line.partition(" ")
        if tag in _IDENTITY_TAGS:
            if _apply_identity(fields, tag, rest) and tag == "author":
                has_author = True
            continue

        if in_header:
            if not line.strip():
                in_header = False
                continue
            if line.startswith(" "):
                # continuation of a multi-line header such as gpgsig
                continue
            if tag == "tree":
                fields["tree"] = rest.strip()
            elif tag == "parent":
                parents.append(rest.strip())
            continue

        if line.startswith(":"):
            affected = _parse_raw_diff(line)
            if affected is not None:
                paths.append(affected)
        elif line.startswith(MESSAGE_INDENT):
            message.append(line[len(MESSAGE_INDENT):])
        elif not line.strip():
            message.append("")

    if not has_author:
        logger.debug("Dropping commit block %s: no author line", commit_id or "<empty>")
        return None

    while message and not message[-1].strip():
        message.pop()

    return Commit(
        **fields,
        parents=tuple(parents),
        message="\n".join(message),
        paths=tuple(paths),
    )


def _to_text(raw: str | bytes) -> str:
    if isinstance(raw, bytes):
        return raw.decode("utf-8", errors="replace")
    if isinstance(raw, str):
        return raw
    raise ChangeLogParseError(
        f"Expected str or bytes change log, got {type(raw).__name__}"
    )


def _split_blocks(lines: Iterable[str]) -> Iterator[list[str]]:
    block: list[str] | None = None
    for line in lines:
        if line.startswith(COMMIT_PREFIX):
            if block is not None:
                yield block
            block = [line]
        elif block is not None:
            block.append(line)
    if block is not None:
        yield block


def iter_commits(raw: str | bytes) -> Iterator[Commit]:
    """Lazily yield commits in the order they appear in ``raw``.

    Raises:
        ChangeLogParseError: If ``raw`` is neither text nor bytes.
    """
    text = _to_text(raw)
    for block in _split_blocks(text.splitlines()):
        commit = _parse_block(block)
        if commit is not None:
            yield commit


def parse_changelog(raw: str | bytes) -> list[Commit]:
    """Parse a raw log into a list of commits.

    Input with no recognizable commit block yields an empty list.
    """
    return list(iter_commits(raw))
