"""Tests for the author-filter decision algorithm.

Covers the five reference scenarios, first-decisive-commit-wins ordering,
the default path, and property-based checks via Hypothesis.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from authorgate.changelog import parse_changelog
from authorgate.models.commit import Commit
from authorgate.models.config import IgnoreList
from authorgate.models.decision import DecisionReason
from authorgate.policy import decide, evaluate_commits
from tests.conftest import (
    IGNORED_AUTHORS,
    NON_IGNORED_AUTHORS,
    make_broken_commit_block,
    make_log,
)
from tests.strategies import commits_by, ignored_emails, non_ignored_emails, scramble_email

IGNORE = ",".join(IGNORED_AUTHORS)


def commits(*emails: str) -> list[Commit]:
    return parse_changelog(make_log(*emails))


class TestScenarios:
    """Reference scenarios for both modes."""

    def test_all_authors_not_ignored(self):
        assert decide(commits(*NON_IGNORED_AUTHORS), IGNORE, False) is True

    def test_one_author_not_ignored_and_allow(self):
        change_set = commits(*IGNORED_AUTHORS, *NON_IGNORED_AUTHORS)
        assert decide(change_set, IGNORE, True) is True

    def test_all_authors_ignored_and_allow(self):
        assert decide(commits(*IGNORED_AUTHORS), IGNORE, True) is False

    def test_one_author_ignored(self):
        change_set = commits(*NON_IGNORED_AUTHORS, *IGNORED_AUTHORS)
        assert decide(change_set, IGNORE, False) is False

    @pytest.mark.parametrize("allow, expected", [(False, True), (True, False)])
    def test_unparseable_commits(self, allow, expected):
        raw = "".join(make_broken_commit_block(a) for a in NON_IGNORED_AUTHORS)
        assert decide(parse_changelog(raw), IGNORE, allow) is expected


class TestDecisionReasons:
    def test_ignored_author_short_circuits(self):
        change_set = commits(*NON_IGNORED_AUTHORS, *IGNORED_AUTHORS)
        decision = evaluate_commits(change_set, IGNORE, False)
        assert decision.reason == DecisionReason.IGNORED_AUTHOR
        assert decision.author_email == "jenkins@example.com"
        assert decision.commit_id == change_set[2].commit_id
        assert decision.commits_examined == 3

    def test_non_ignored_author_short_circuits(self):
        change_set = commits(*IGNORED_AUTHORS, *NON_IGNORED_AUTHORS)
        decision = evaluate_commits(change_set, IGNORE, True)
        assert decision.build is True
        assert decision.reason == DecisionReason.NON_IGNORED_AUTHOR
        assert decision.author_email == "hello@example.com"
        assert decision.commits_examined == 3

    def test_default_path(self):
        decision = evaluate_commits(commits(*IGNORED_AUTHORS), IGNORE, True)
        assert decision.build is False
        assert decision.reason == DecisionReason.DEFAULT
        assert decision.commit_id is None
        assert decision.commits_examined == 2

    @pytest.mark.parametrize("allow", [False, True])
    def test_empty_change_set(self, allow):
        decision = evaluate_commits([], IGNORE, allow)
        assert decision.build is (not allow)
        assert decision.reason == DecisionReason.DEFAULT
        assert decision.commits_examined == 0

    def test_stops_consuming_after_decision(self):
        consumed = []

        def lazy():
            for commit in commits(*IGNORED_AUTHORS, *NON_IGNORED_AUTHORS):
                consumed.append(commit)
                yield commit

        evaluate_commits(lazy(), IGNORE, False)
        assert len(consumed) == 1


class TestIgnoreListForms:
    @pytest.mark.parametrize("ignore", [
        IGNORE,
        IGNORED_AUTHORS,
        IgnoreList.from_string(IGNORE),
        " JENKINS@example.com ,Jenkins-CI@Example.com ",
    ])
    def test_accepted_forms(self, ignore):
        assert decide(commits(*IGNORED_AUTHORS), ignore, True) is False

    def test_author_email_normalized(self):
        change_set = [Commit(commit_id="1", author_email="Jenkins@Example.com ")]
        assert decide(change_set, "jenkins@example.com", False) is False


class TestProperties:
    """Property-based checks over generated change sets."""

    @given(
        st.lists(ignored_emails, min_size=1, max_size=5, unique=True),
        st.data(),
        st.booleans(),
    )
    def test_all_ignored_never_builds(self, ignore, data, allow):
        change_set = data.draw(st.lists(commits_by(st.sampled_from(ignore)), min_size=1, max_size=10))
        assert decide(change_set, ",".join(ignore), allow) is False

    @given(
        st.lists(ignored_emails, max_size=5),
        st.lists(commits_by(ignored_emails), max_size=5),
        st.lists(commits_by(non_ignored_emails), min_size=1, max_size=5),
        st.randoms(),
    )
    def test_any_non_ignored_builds_in_allow_mode(self, ignore, ignored, others, rnd):
        change_set = ignored + others
        rnd.shuffle(change_set)
        ignore_list = ignore + [c.author_email for c in ignored]
        assert decide(change_set, ",".join(ignore_list), True) is True

    @given(
        st.lists(commits_by(non_ignored_emails), max_size=5),
        st.lists(commits_by(ignored_emails), min_size=1, max_size=5),
        st.randoms(),
    )
    def test_any_ignored_skips_in_suppress_mode(self, others, ignored, rnd):
        change_set = others + ignored
        rnd.shuffle(change_set)
        ignore_list = [c.author_email for c in ignored]
        assert decide(change_set, ",".join(ignore_list), False) is False

    @given(st.lists(commits_by(non_ignored_emails), max_size=10), st.lists(ignored_emails, max_size=5))
    def test_no_ignored_authors_builds_in_suppress_mode(self, change_set, ignore):
        assert decide(change_set, ",".join(ignore), False) is True

    @given(ignored_emails.flatmap(lambda e: st.tuples(st.just(e), scramble_email(e))), st.booleans())
    def test_matching_is_case_and_trim_insensitive(self, pair, allow):
        email, scrambled = pair
        change_set = [Commit(commit_id="1", author_email=scrambled)]
        assert decide(change_set, email, allow) is False
