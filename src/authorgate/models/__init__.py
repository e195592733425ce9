"""Domain models: source handles, commits, configuration and decisions."""

from authorgate.models.commit import AffectedPath, Commit, EditType
from authorgate.models.config import IgnoreList, PolicyConfig, normalize_email
from authorgate.models.decision import Decision, DecisionReason
from authorgate.models.scm import Head, Revision, Source

__all__ = [
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
]
