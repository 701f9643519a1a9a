"""Remote hosting provider detection and URL building."""

from __future__ import annotations

from .providers import (
    BitbucketProvider,
    BranchesResource,
    BranchResource,
    CommitResource,
    GitHubProvider,
    GitLabProvider,
    RemoteProvider,
    RemoteResource,
    RepoResource,
    detect_remote_provider,
    parse_remote_url,
)

__all__ = [
    "BranchesResource",
    "BranchResource",
    "CommitResource",
    "RepoResource",
    "RemoteResource",
    "RemoteProvider",
    "GitHubProvider",
    "GitLabProvider",
    "BitbucketProvider",
    "detect_remote_provider",
    "parse_remote_url",
]
