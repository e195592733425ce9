"""AuthorGate: decide whether a change set should build, by commit author.

A build host asks a strategy whether the commits between two revisions
of a branch justify an automatic build. The built-in
IgnoreCommitterStrategy skips builds caused by listed authors (CI bots,
release tooling) and fails open when the history cannot be read.
"""

from authorgate._version import __version__

# Models
from authorgate.models.commit import AffectedPath, Commit, EditType
from authorgate.models.config import IgnoreList, PolicyConfig, normalize_email
from authorgate.models.decision import Decision, DecisionReason
from authorgate.models.scm import Head, Revision, Source

# Parsing and policy
from authorgate.changelog import iter_commits, parse_changelog
from authorgate.policy import decide, evaluate_commits

# Change-set retrieval
from authorgate.scm import ChangeSetFetcher, GitView, GitViewOpener, SourceView, ViewOpener

# Strategies
from authorgate.strategy import (
    BuildStrategy,
    DecisionListener,
    DecisionRecorder,
    IgnoreCommitterStrategy,
    StrategyEntry,
    StrategyRegistry,
    default_registry,
    log_decision,
)

# Exceptions
from authorgate.exceptions import (
    AuthorGateError,
    ChangeLogParseError,
    ChangeSetFetchError,
    FetchUnavailableError,
    StrategyConfigError,
    StrategyNotFoundError,
)

__all__ = [
    "__version__",
    # Models
    "AffectedPath",
    "Commit",
    "EditType",
    "IgnoreList",
    "PolicyConfig",
    "normalize_email",
    "Decision",
    "DecisionReason",
    "Head",
    "Revision",
    "Source",
    # Parsing and policy
    "iter_commits",
    "parse_changelog",
    "decide",
    "evaluate_commits",
    # Change-set retrieval
    "ChangeSetFetcher",
    "GitView",
    "GitViewOpener",
    "SourceView",
    "ViewOpener",
    # Strategies
    "BuildStrategy",
    "DecisionListener",
    "DecisionRecorder",
    "IgnoreCommitterStrategy",
    "StrategyEntry",
    "StrategyRegistry",
    "default_registry",
    "log_decision",
    # Exceptions
    "AuthorGateError",
    "ChangeLogParseError",
    "ChangeSetFetchError",
    "FetchUnavailableError",
    "StrategyConfigError",
    "StrategyNotFoundError",
]
