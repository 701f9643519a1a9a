"""Remote hosting providers and the web URLs they expose.

A remote's fetch URL (ssh, scp-like, git or http form) is reduced to a
``domain`` and ``owner/repo`` path, then matched against the known hosting
services plus any custom domains from config.

The bundled commands link branch listings and commits. ``BranchResource`` and
``RepoResource`` complete the provider URL set for ``OpenInRemoteRequest``
callers.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar, Union
from urllib.parse import quote, urlsplit

_SCP_LIKE_RE = re.compile(r"^(?:[^@/]+@)?(?P<host>[^:/]+):(?P<path>[^/].*)$")


@dataclass(frozen=True)
class BranchesResource:
    """The provider's branch listing page."""


@dataclass(frozen=True)
class BranchResource:
    branch: str


@dataclass(frozen=True)
class CommitResource:
    sha: str


@dataclass(frozen=True)
class RepoResource:
    """The repository landing page."""


RemoteResource = Union[BranchesResource, BranchResource, CommitResource, RepoResource]


@dataclass(frozen=True)
class RemoteProvider:
    """Hosting service for one remote, addressed by ``domain`` and ``owner/repo`` path."""

    name: ClassVar[str] = "Remote"

    domain: str
    path: str

    @property
    def base_url(self) -> str:
        return f"https://{self.domain}/{self.path}"

    def branches_url(self) -> str:
        return f"{self.base_url}/branches"

    def branch_url(self, branch: str) -> str:
        return f"{self.base_url}/commits/{quote(branch)}"

    def commit_url(self, sha: str) -> str:
        return f"{self.base_url}/commit/{sha}"

    def url_for(self, resource: RemoteResource) -> str:
        if isinstance(resource, BranchesResource):
            return self.branches_url()
        if isinstance(resource, BranchResource):
            return self.branch_url(resource.branch)
        if isinstance(resource, CommitResource):
            return self.commit_url(resource.sha)
        return self.base_url


class GitHubProvider(RemoteProvider):
    name = "GitHub"


class GitLabProvider(RemoteProvider):
    name = "GitLab"


class BitbucketProvider(RemoteProvider):
    name = "Bitbucket"

    def branch_url(self, branch: str) -> str:
        return f"{self.base_url}/commits/branch/{quote(branch)}"

    def commit_url(self, sha: str) -> str:
        return f"{self.base_url}/commits/{sha}"


PROVIDER_KINDS: dict[str, type[RemoteProvider]] = {
    "github": GitHubProvider,
    "gitlab": GitLabProvider,
    "bitbucket": BitbucketProvider,
}

KNOWN_DOMAINS: dict[str, str] = {
    "github.com": "github",
    "gitlab.com": "gitlab",
    "bitbucket.org": "bitbucket",
}


def parse_remote_url(url: str) -> tuple[str, str] | None:
    """Split a remote URL into ``(domain, owner/repo)``.

    >>> parse_remote_url("git@github.com:acme/widgets.git")
    ('github.com', 'acme/widgets')
    >>> parse_remote_url("ssh://git@gitlab.com:2222/group/sub/project.git")
    ('gitlab.com', 'group/sub/project')

    Returns ``None`` for local paths and anything without a host.
    """
    url = url.strip()
    if not url:
        return None

    if "://" in url:
        parts = urlsplit(url)
        if parts.scheme == "file":
            return None
        host = parts.hostname
        path = parts.path
    else:
        match = _SCP_LIKE_RE.match(url)
        if match is None:
            return None
        host = match.group("host")
        path = match.group("path")

    if not host:
        return None
    path = path.strip("/")
    if path.endswith(".git"):
        path = path[:-4]
    if not path:
        return None
    return host.lower(), path


def detect_remote_provider(url: str, custom_domains: dict[str, str] | None = None) -> RemoteProvider | None:
    """Return the provider hosting ``url`` or ``None`` when it is not recognised."""
    parsed = parse_remote_url(url)
    if parsed is None:
        return None
    domain, path = parsed

    kind = None
    if custom_domains:
        kind = custom_domains.get(domain)
    if kind is None:
        kind = KNOWN_DOMAINS.get(domain)
    provider_cls = PROVIDER_KINDS.get(kind) if kind else None
    if provider_cls is None:
        return None
    return provider_cls(domain=domain, path=path)


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
    "parse_remote_url",
    "detect_remote_provider",
]
