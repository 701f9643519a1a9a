"""Git subprocess access, output parsing, and repository resolution."""

from __future__ import annotations

from .models import GitBranch, GitCommit, GitLog, GitRemote
from .resolver import RepositoryResolver
from .service import GitService

__all__ = [
    "GitBranch",
    "GitCommit",
    "GitLog",
    "GitRemote",
    "GitService",
    "RepositoryResolver",
]
