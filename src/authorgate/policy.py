"""Author-filter policy -- the build/skip decision over a change set.

Single pass over the commits in log order; the first decisive commit wins:

- ignored author, ``allow_if_not_excluded=False``  -> skip the build
- non-ignored author, ``allow_if_not_excluded=True`` -> build
- anything else keeps scanning

If no commit decides (including an empty change set) the result is
``not allow_if_not_excluded``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from authorgate.models.commit import Commit
from authorgate.models.config import IgnoreList, normalize_email
from authorgate.models.decision import Decision, DecisionReason

logger = logging.getLogger(__name__)


def _as_ignore_list(ignore_list: IgnoreList | str | Iterable[str]) -> IgnoreList:
    if isinstance(ignore_list, IgnoreList):
        return ignore_list
    if isinstance(ignore_list, str):
        return IgnoreList.from_string(ignore_list)
    return IgnoreList.from_string(",".join(ignore_list))


def evaluate_commits(
    commits: Iterable[Commit],
    ignore_list: IgnoreList | str | Iterable[str],
    allow_if_not_excluded: bool,
) -> Decision:
    """Run the decision algorithm and report which branch fired.

    Args:
        commits: Commits in the order the log produced them.
        ignore_list: An IgnoreList, a comma-separated string, or an
            iterable of emails. Strings are normalized here.
        allow_if_not_excluded: When True, one non-ignored author is enough
            to build. When False, one ignored author is enough to skip.
    """
    ignored = _as_ignore_list(ignore_list)
    logger.info("Ignored authors: %s", ignored)

    examined = 0
    for commit in commits:
        examined += 1
        author_email = normalize_email(commit.author_email)

        if author_email in ignored:
            if not allow_if_not_excluded:
                logger.info(
                    "Changeset contains ignored author %s (%s), and "
                    "allow_if_not_excluded is %s, therefore build is not required",
                    author_email, commit.commit_id, allow_if_not_excluded,
                )
                return Decision(
                    build=False,
                    reason=DecisionReason.IGNORED_AUTHOR,
                    commit_id=commit.commit_id,
                    author_email=author_email,
                    commits_examined=examined,
                )
        elif allow_if_not_excluded:
            logger.info(
                "Changeset contains non ignored author %s (%s) and "
                "allow_if_not_excluded is %s, build is required",
                author_email, commit.commit_id, allow_if_not_excluded,
            )
            return Decision(
                build=True,
                reason=DecisionReason.NON_IGNORED_AUTHOR,
                commit_id=commit.commit_id,
                author_email=author_email,
                commits_examined=examined,
            )

    build = not allow_if_not_excluded
    logger.info(
        "All %d commit(s) in the changeset are made by %s authors, build is %s",
        examined,
        "excluded" if allow_if_not_excluded else "non excluded",
        "required" if build else "not required",
    )
    return Decision(build=build, reason=DecisionReason.DEFAULT, commits_examined=examined)


def decide(
    commits: Iterable[Commit],
    ignore_list: IgnoreList | str | Iterable[str],
    allow_if_not_excluded: bool,
) -> bool:
    """Return True if the change set should trigger an automatic build."""
    return evaluate_commits(commits, ignore_list, allow_if_not_excluded).build
