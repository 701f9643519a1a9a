"""Domain datatypes parsed from git output."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from ..remotes import RemoteProvider


@dataclass(frozen=True)
class GitRemote:
    """One named remote with its fetch URL and detected hosting provider."""

    name: str
    url: str
    provider: RemoteProvider | None = None

    @property
    def has_provider(self) -> bool:
        return self.provider is not None


@dataclass(frozen=True)
class GitBranch:
    """Local or remote-tracking branch.

    For remote branches ``name`` is the short ref (``origin/main``) and
    ``remote`` the remote name; local branches have ``remote=None``.
    """

    name: str
    sha: str
    current: bool = False
    remote: str | None = None
    upstream: str | None = None

    @property
    def is_remote(self) -> bool:
        return self.remote is not None


@dataclass(frozen=True)
class GitCommit:
    sha: str
    author: str
    email: str
    date: datetime
    subject: str
    repo_path: Path
    parents: tuple[str, ...] = ()

    @property
    def short_sha(self) -> str:
        return self.sha[:7]

    @property
    def is_merge(self) -> bool:
        return len(self.parents) > 1


@dataclass(frozen=True)
class GitLog:
    """Ordered commits returned by one log query.

    ``truncated`` is set when more commits exist past ``max_count``;
    ``max_count`` of ``None`` means the query was unbounded.
    """

    repo_path: Path
    commits: tuple[GitCommit, ...]
    ref: str | None = None
    max_count: int | None = None
    truncated: bool = False

    @property
    def count(self) -> int:
        return len(self.commits)


__all__ = ["GitRemote", "GitBranch", "GitCommit", "GitLog"]
