"""Parsers for the textual output of git plumbing commands.

Formats use NUL field separators and a record separator so subjects and
author names can contain any printable character.
"""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

from .models import GitBranch, GitCommit

FIELD_SEP = "\x00"
RECORD_SEP = "\x1e"

LOG_FORMAT = "%x1e" + "%x00".join(("%H", "%P", "%an", "%ae", "%at", "%s"))
BRANCH_FORMAT = "%00".join(
    (
        "%(HEAD)",
        "%(refname)",
        "%(refname:short)",
        "%(upstream:short)",
        "%(objectname)",
    )
)
REMOTE_REFS_PREFIX = "refs/remotes/"


def parse_remotes(output: str) -> dict[str, str]:
    """Map remote names to fetch URLs from ``git remote -v`` output.

    Insertion order follows git's output, which lists remotes by name.
    """
    remotes: dict[str, str] = {}
    for line in output.splitlines():
        parts = line.split()
        if len(parts) < 2:
            continue
        name, url = parts[0], parts[1]
        kind = parts[2] if len(parts) > 2 else "(fetch)"
        if kind != "(fetch)" or name in remotes:
            continue
        remotes[name] = url
    return remotes


def parse_branches(output: str) -> list[GitBranch]:
    """Parse ``git for-each-ref --format=BRANCH_FORMAT`` output.

    Symbolic ``<remote>/HEAD`` refs are dropped. The current branch sorts
    first, then local branches, then remote branches, each by name.
    """
    branches: list[GitBranch] = []
    for line in output.splitlines():
        if not line:
            continue
        fields = line.split(FIELD_SEP)
        if len(fields) < 5:
            continue
        head, refname, short_name, upstream, sha = fields[:5]
        remote = None
        if refname.startswith(REMOTE_REFS_PREFIX):
            remote_ref = refname[len(REMOTE_REFS_PREFIX):]
            remote, _, branch_part = remote_ref.partition("/")
            if branch_part == "HEAD" or not branch_part:
                continue
        branches.append(
            GitBranch(
                name=short_name,
                sha=sha,
                current=head.strip() == "*",
                remote=remote,
                upstream=upstream or None,
            )
        )
    branches.sort(key=lambda branch: (not branch.current, branch.is_remote, branch.name.casefold()))
    return branches


def parse_log(output: str, repo_path: Path) -> list[GitCommit]:
    """Parse ``git log --format=LOG_FORMAT`` output into commits, newest first."""
    commits: list[GitCommit] = []
    for record in output.split(RECORD_SEP):
        record = record.strip("\n")
        if not record:
            continue
        fields = record.split(FIELD_SEP)
        if len(fields) < 6:
            continue
        sha, parents, author, email, timestamp, subject = fields[:6]
        try:
            date = datetime.fromtimestamp(int(timestamp), tz=timezone.utc)
        except ValueError:
            date = datetime.fromtimestamp(0, tz=timezone.utc)
        commits.append(
            GitCommit(
                sha=sha,
                author=author,
                email=email,
                date=date,
                subject=subject,
                repo_path=repo_path,
                parents=tuple(parents.split()),
            )
        )
    return commits


__all__ = [
    "LOG_FORMAT",
    "BRANCH_FORMAT",
    "parse_remotes",
    "parse_branches",
    "parse_log",
]
