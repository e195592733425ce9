"""Change-set retrieval: view protocols, the fetcher and the git adapter."""

from authorgate.scm.fetcher import ChangeSetFetcher
from authorgate.scm.git import GitView, GitViewOpener
from authorgate.scm.protocols import SourceView, ViewOpener

__all__ = [
    "ChangeSetFetcher",
    "GitView",
    "GitViewOpener",
    "SourceView",
    "ViewOpener",
]
