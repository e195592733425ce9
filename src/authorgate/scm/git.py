"""Git adapter for the change-set fetcher.

Shells out to the ``git`` executable against a local repository. All
commands are read-only.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from authorgate.exceptions import ChangeSetFetchError

if TYPE_CHECKING:
    from authorgate.models.scm import Head, Revision, Source

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0

LOG_ARGS = ("log", "--raw", "--no-abbrev", "-M", "--no-color", "--format=raw")


class GitView:
    """A local git repository bound to one revision."""

    def __init__(
        self,
        repo_path: Path,
        revision: Revision,
        *,
        git_executable: str = "git",
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self.repo_path = repo_path
        self.revision = revision
        self._git = git_executable
        self._timeout = timeout

    def changes_since(self, previous: Optional[Revision]) -> bytes:
        """Run ``git log --format=raw`` over ``previous..revision``."""
        if previous is None:
            rev_range = self.revision.hash
        else:
            rev_range = f"{previous.hash}..{self.revision.hash}"
        cmd = [self._git, "-C", str(self.repo_path), *LOG_ARGS, rev_range, "--"]

        try:
            proc = subprocess.run(cmd, capture_output=True, timeout=self._timeout)
        except subprocess.TimeoutExpired as exc:
            raise ChangeSetFetchError(
                f"git log timed out after {self._timeout}s",
                revision_range=rev_range,
            ) from exc

        if proc.returncode != 0:
            stderr = proc.stderr.decode("utf-8", errors="replace").strip()
            raise ChangeSetFetchError(
                f"git log failed with exit code {proc.returncode}: {stderr}",
                revision_range=rev_range,
            )
        return proc.stdout

    def __repr__(self) -> str:
        return f"GitView({str(self.repo_path)!r}, {self.revision.short_hash})"


class GitViewOpener:
    """Opens GitViews for sources that are local git repositories.

    Remote URLs, missing paths, non-repositories and revisions that do
    not resolve to a commit all yield None.
    """

    def __init__(
        self, *, git_executable: str = "git", timeout: float = DEFAULT_TIMEOUT
    ) -> None:
        self._git = git_executable
        self._timeout = timeout

    def _run(self, repo_path: Path, *args: str) -> subprocess.CompletedProcess:
        return subprocess.run(
            [self._git, "-C", str(repo_path), *args],
            capture_output=True,
            timeout=self._timeout,
        )

    def open_view(
        self, source: Source, head: Head, revision: Revision
    ) -> Optional[GitView]:
        repo_path = Path(source.remote).expanduser()
        if not repo_path.is_dir():
            logger.debug("Source %s is not a local directory", source)
            return None

        if self._run(repo_path, "rev-parse", "--git-dir").returncode != 0:
            logger.debug("Source %s is not a git repository", source)
            return None

        probe = self._run(repo_path, "cat-file", "-e", f"{revision.hash}^{{commit}}")
        if probe.returncode != 0:
            logger.debug("Revision %s of %s not found in %s", revision, head, source)
            return None

        return GitView(
            repo_path, revision, git_executable=self._git, timeout=self._timeout
        )
