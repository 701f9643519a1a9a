"""Lazily fetched, cached, pageable commit list node.

The node fetches its log on first read, keeps the ``(label, log)`` pair until
``refresh()``, and appends a show-all row when the log was truncated.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from ..git.models import GitLog
from .nodes import CollapsibleState, CommitNode, ExplorerNode, ResourceType, ShowAllNode, TreeItem

if TYPE_CHECKING:
    from .explorer import HistoryExplorer

LabelFn = Callable[[GitLog | None], str]
LogFn = Callable[[int | None], Awaitable[GitLog | None]]

SHOW_ALL_MESSAGE = "Show All Results"


@dataclass(frozen=True)
class ResultsCache:
    label: str
    log: GitLog | None


def format_commits_label(log: GitLog | None, subject: str = "") -> str:
    """Label such as ``"3 commits"`` or ``"100+ commits on main"``."""
    suffix = f" {subject}" if subject else ""
    if log is None or not log.commits:
        return f"No commits found{suffix}"
    count = log.count
    plus = "+" if log.truncated else ""
    noun = "commit" if count == 1 and not log.truncated else "commits"
    return f"{count}{plus} {noun}{suffix}"


class CommitsResultsNode(ExplorerNode):
    """Paged commit results under one label.

    ``log_fn`` receives ``max_count`` (``None`` = its default page size) and
    may return ``None`` when there is nothing to show. Concurrent readers
    share one in-flight fetch per invalidation cycle. A failed fetch leaves
    the cache empty and propagates to every waiting reader.
    """

    supports_paging = True

    def __init__(
        self,
        repo_path: Path,
        label_fn: LabelFn,
        log_fn: LogFn,
        explorer: HistoryExplorer,
        max_count: int | None = None,
    ) -> None:
        super().__init__(repo_path)
        self.label_fn = label_fn
        self.log_fn = log_fn
        self.explorer = explorer
        self.max_count = max_count
        self._cache: ResultsCache | None = None
        self._pending: asyncio.Future[ResultsCache] | None = None
        self._generation = 0

    @property
    def is_cached(self) -> bool:
        return self._cache is not None

    async def get_children(self) -> list[ExplorerNode]:
        log = await self.get_log()
        if log is None:
            return []

        children: list[ExplorerNode] = [CommitNode(commit, self.explorer) for commit in log.commits]
        if log.truncated:
            children.append(ShowAllNode(SHOW_ALL_MESSAGE, self, self.explorer))
        return children

    async def get_tree_item(self) -> TreeItem:
        return TreeItem(
            label=await self.get_label(),
            collapsible_state=CollapsibleState.EXPANDED,
            context_value=ResourceType.RESULTS,
        )

    def refresh(self) -> None:
        self._cache = None
        self._pending = None
        self._generation += 1

    async def ensure_cache(self) -> ResultsCache:
        if self._cache is not None:
            return self._cache

        if self._pending is None:
            self._pending = asyncio.ensure_future(self._load(self._generation))
        pending = self._pending
        try:
            # Shielded so one cancelled reader does not abort the shared fetch.
            return await asyncio.shield(pending)
        finally:
            if self._pending is pending and pending.done():
                self._pending = None

    async def get_label(self) -> str:
        cache = await self.ensure_cache()
        return cache.label

    async def get_log(self) -> GitLog | None:
        cache = await self.ensure_cache()
        return cache.log

    async def _load(self, generation: int) -> ResultsCache:
        try:
            log = await self.log_fn(self.max_count)
        except BaseException:
            # Readers may all have gone; the next read must fetch again.
            if generation == self._generation:
                self._pending = None
            raise
        cache = ResultsCache(label=self.label_fn(log), log=log)
        # A refresh() while fetching makes this result stale for the node.
        if generation == self._generation:
            self._cache = cache
        return cache


__all__ = ["ResultsCache", "CommitsResultsNode", "format_commits_label", "SHOW_ALL_MESSAGE"]
