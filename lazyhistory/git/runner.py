"""Thin wrappers around the ``git`` executable.

``run_git`` raises ``GitCommandError`` on failure; repository probing returns
``(None, None)`` instead because "not a repository" is an expected answer.
Async variants push the blocking subprocess onto a worker thread.
"""

from __future__ import annotations

import asyncio
import subprocess
from collections.abc import Sequence
from pathlib import Path

from ..exceptions import GitCommandError
from ..logging_config import log_debug

DEFAULT_TIMEOUT_SECONDS = 10.0
PROBE_TIMEOUT_SECONDS = 2.0


def run_git(
    repo_root: Path,
    args: Sequence[str],
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> str:
    """Run ``git -C repo_root *args`` and return its stdout."""
    log_debug(f"git -C {repo_root} {' '.join(args)}")
    try:
        proc = subprocess.run(
            ["git", "-C", str(repo_root), *args],
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise GitCommandError(args, None, str(exc)) from exc
    if proc.returncode != 0:
        raise GitCommandError(args, proc.returncode, proc.stderr)
    return proc.stdout


async def run_git_async(
    repo_root: Path,
    args: Sequence[str],
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
) -> str:
    return await asyncio.to_thread(run_git, repo_root, args, timeout_seconds)


def resolve_git_paths(path: Path, timeout_seconds: float = PROBE_TIMEOUT_SECONDS) -> tuple[Path | None, Path | None]:
    """Resolve repository root and git-dir for ``path``.

    Uses ``git rev-parse --show-toplevel --git-dir`` and returns ``(None, None)``
    if git is unavailable, the directory is not in a repo, or probing fails.
    """
    try:
        proc = subprocess.run(
            ["git", "-C", str(path), "rev-parse", "--show-toplevel", "--git-dir"],
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.TimeoutExpired):
        return None, None

    if proc.returncode != 0:
        return None, None

    lines = [line.strip() for line in proc.stdout.splitlines() if line.strip()]
    if len(lines) < 2:
        return None, None

    repo_root = Path(lines[0]).resolve()
    git_dir_raw = Path(lines[1])
    git_dir = git_dir_raw if git_dir_raw.is_absolute() else (path / git_dir_raw)
    return repo_root, git_dir.resolve()


async def resolve_git_paths_async(
    path: Path,
    timeout_seconds: float = PROBE_TIMEOUT_SECONDS,
) -> tuple[Path | None, Path | None]:
    return await asyncio.to_thread(resolve_git_paths, path, timeout_seconds)


__all__ = [
    "DEFAULT_TIMEOUT_SECONDS",
    "run_git",
    "run_git_async",
    "resolve_git_paths",
    "resolve_git_paths_async",
]
