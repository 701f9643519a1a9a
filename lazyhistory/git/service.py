"""Read-only git queries used by commands and tree views.

Every query is a coroutine; the git subprocess itself runs on a worker
thread so the event loop stays responsive while pickers are open.
"""

from __future__ import annotations

from pathlib import Path

from ..config import HistorySettings
from ..exceptions import GitCommandError
from ..logging_config import log_debug
from ..remotes import detect_remote_provider
from .models import GitBranch, GitCommit, GitLog, GitRemote
from .parsing import BRANCH_FORMAT, LOG_FORMAT, parse_branches, parse_log, parse_remotes
from .runner import run_git_async


class GitService:
    """Query remotes, branches, and history of a repository."""

    def __init__(self, settings: HistorySettings | None = None) -> None:
        self.settings = settings if settings is not None else HistorySettings()

    async def _git(self, repo_path: Path, *args: str) -> str:
        return await run_git_async(repo_path, args, self.settings.git_timeout_seconds)

    async def get_remotes(self, repo_path: Path) -> list[GitRemote]:
        output = await self._git(repo_path, "remote", "-v")
        return [
            GitRemote(
                name=name,
                url=url,
                provider=detect_remote_provider(url, self.settings.remote_custom_domains),
            )
            for name, url in parse_remotes(output).items()
        ]

    async def get_branches(self, repo_path: Path) -> list[GitBranch]:
        output = await self._git(
            repo_path,
            "for-each-ref",
            f"--format={BRANCH_FORMAT}",
            "refs/heads",
            "refs/remotes",
        )
        return parse_branches(output)

    async def get_log_for_repo(
        self,
        repo_path: Path,
        ref: str | None = None,
        max_count: int | None = None,
    ) -> GitLog | None:
        """Return up to ``max_count`` commits reachable from ``ref`` (HEAD when unset).

        ``max_count`` of ``None`` uses the explorer page size and ``0`` means
        unbounded. One extra commit is requested to detect truncation. Returns
        ``None`` when ``ref`` does not resolve or the repository has no commits.
        """
        if max_count is None:
            max_count = self.settings.explorer_max_count

        args = ["log", f"--format={LOG_FORMAT}"]
        if max_count > 0:
            args.append(f"--max-count={max_count + 1}")
        args.append(ref or "HEAD")
        args.append("--")

        try:
            output = await self._git(repo_path, *args)
        except GitCommandError as exc:
            if exc.returncode == 128:
                log_debug(f"log for {ref or 'HEAD'} unavailable: {exc}")
                return None
            raise

        commits = parse_log(output, repo_path)
        truncated = max_count > 0 and len(commits) > max_count
        if truncated:
            commits = commits[:max_count]
        return GitLog(
            repo_path=repo_path,
            commits=tuple(commits),
            ref=ref,
            max_count=max_count or None,
            truncated=truncated,
        )

    async def get_commit(self, repo_path: Path, sha: str) -> GitCommit | None:
        log = await self.get_log_for_repo(repo_path, sha, max_count=1)
        if log is None or not log.commits:
            return None
        return log.commits[0]

    async def get_commit_patch(self, repo_path: Path, sha: str) -> str:
        return await self._git(repo_path, "show", "--no-color", "--format=medium", "--patch", sha, "--")


__all__ = ["GitService"]
