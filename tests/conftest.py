"""Shared test fixtures for AuthorGate.

Provides source/head/revision fixtures, raw-log builders, fake view
openers, and a throwaway git repository for integration tests.
"""

from __future__ import annotations

import os
import shutil
import subprocess

import pytest

from authorgate.models.scm import Head, Revision, Source

IGNORED_AUTHORS = ["jenkins@example.com", "jenkins-ci@example.com"]
NON_IGNORED_AUTHORS = ["hello@example.com", "john.galt@whois.com"]

COMMIT_ID = "1567861636cd854f4dd6fa40bf94c0c657681dd5"

_MESSAGE = [
    "    [task] Updated version.",
    "    ",
    "    Including earlier updates.",
    "    ",
    "    Changes in this version:",
    "    - Changed to take the gerrit url from gerrit query command.",
    "    - Aligned reason information with our new commit hooks",
    "    ",
    "    Change-Id: Ife96d2abed5b066d9620034bec5f04cf74b8c66d",
    "    Reviewed-on: https://gerrit.e.se/12345",
    "    Tested-by: Jenkins <jenkins@no-mail.com>",
    "    Reviewed-by: Mister Another <mister.another@ericsson.com>",
]


# ------------------------------------------------------------------
# Raw log builders
# ------------------------------------------------------------------

def make_commit_block(
    author_email: str,
    *,
    commit_id: str = COMMIT_ID,
    author_tag: str = "author",
    terminated: bool = True,
) -> str:
    """One ``commit`` block in raw log format.

    With ``terminated=False`` the block has no trailing newline, so blocks
    concatenated together run the next ``commit`` line onto the last
    message line.
    """
    lines = [
        f"commit {commit_id}",
        f"{author_tag} John Galt<{author_email}> 1363879004 +0100",
        "",
        *_MESSAGE,
    ]
    text = "\n".join(lines)
    return text + "\n" if terminated else text


def make_broken_commit_block(author_email: str, *, commit_id: str = COMMIT_ID) -> str:
    """A block whose author tag is misspelled, so it cannot be parsed."""
    return make_commit_block(author_email, commit_id=commit_id, author_tag="Authorzzz")


def make_log(*authors: str) -> str:
    """Raw log with one commit per author, numbered commit ids."""
    return "".join(
        make_commit_block(email, commit_id=f"{i:040x}")
        for i, email in enumerate(authors, start=1)
    )


def make_concatenated_log(*authors: str) -> str:
    """Unterminated blocks, all with the same commit id, glued end to end."""
    return "".join(make_commit_block(email, terminated=False) for email in authors)


# ------------------------------------------------------------------
# Fake change-set views
# ------------------------------------------------------------------

class FakeView:
    """SourceView returning canned bytes, or raising ``error``."""

    def __init__(self, raw: str | bytes = b"", error: Exception | None = None) -> None:
        self._raw = raw.encode("utf-8") if isinstance(raw, str) else raw
        self._error = error
        self.calls: list = []

    def changes_since(self, previous):
        self.calls.append(previous)
        if self._error is not None:
            raise self._error
        return self._raw


class FakeOpener:
    """ViewOpener returning a fixed view (None means unavailable)."""

    def __init__(self, view: FakeView | None = None, error: Exception | None = None) -> None:
        self.view = view
        self._error = error
        self.calls: list = []

    def open_view(self, source, head, revision):
        self.calls.append((source, head, revision))
        if self._error is not None:
            raise self._error
        return self.view


def opener_for(raw: str | bytes) -> FakeOpener:
    return FakeOpener(FakeView(raw))


# ------------------------------------------------------------------
# Fixtures
# ------------------------------------------------------------------

@pytest.fixture
def head() -> Head:
    return Head(name="test-branch")


@pytest.fixture
def source() -> Source:
    return Source(remote="origin")


@pytest.fixture
def current(head: Head) -> Revision:
    return Revision(head=head, hash="222")


@pytest.fixture
def previous(head: Head) -> Revision:
    return Revision(head=head, hash="111")


def _git(repo, *args: str, author_email: str | None = None) -> str:
    env = dict(os.environ)
    env.update({
        "GIT_CONFIG_NOSYSTEM": "1",
        "HOME": str(repo),
        "GIT_COMMITTER_NAME": "Committer",
        "GIT_COMMITTER_EMAIL": "committer@example.com",
    })
    if author_email is not None:
        env["GIT_AUTHOR_NAME"] = author_email.split("@")[0]
        env["GIT_AUTHOR_EMAIL"] = author_email
    return subprocess.run(
        ["git", "-C", str(repo), *args],
        check=True,
        capture_output=True,
        text=True,
        env=env,
    ).stdout.strip()


@pytest.fixture
def git_repo(tmp_path):
    """A git repository with three commits.

    Returns (path, [hash1, hash2, hash3]); authors are
    hello@example.com, Jenkins@Example.com, john.galt@whois.com.
    """
    if shutil.which("git") is None:
        pytest.skip("git executable not available")

    repo = tmp_path / "repo"
    repo.mkdir()
    _git(repo, "init", "-q")
    hashes = []
    for i, email in enumerate(
        ["hello@example.com", "Jenkins@Example.com", "john.galt@whois.com"]
    ):
        (repo / f"file{i}.txt").write_text(f"content {i}\n")
        _git(repo, "add", f"file{i}.txt")
        _git(repo, "commit", "-q", "-m", f"Commit {i}", author_email=email)
        hashes.append(_git(repo, "rev-parse", "HEAD"))
    return repo, hashes
