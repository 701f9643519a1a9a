"""Terminal host for explorer node trees.

Owns root nodes, renders them depth-first into display rows, and applies
invalidation: explicit refreshes, show-all activations, and repository
changes detected through git metadata signatures.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..config import HistorySettings
from ..git.watch import build_history_watch_signature
from ..logging_config import log_debug
from ..ui_theme import DEFAULT_THEME, UITheme
from .nodes import CollapsibleState, ExplorerNode, ShowAllNode
from .rendering import format_tree_row

ChangeListener = Callable[[ExplorerNode | None], None]


@dataclass(frozen=True)
class ExplorerRow:
    """One rendered line plus the node it came from."""

    node: ExplorerNode
    depth: int
    text: str


class HistoryExplorer:
    """Tree-view host for history result nodes."""

    def __init__(
        self,
        settings: HistorySettings | None = None,
        theme: UITheme = DEFAULT_THEME,
        git_dir: Path | None = None,
    ) -> None:
        self.settings = settings if settings is not None else HistorySettings()
        self.theme = theme
        self.git_dir = git_dir
        self.roots: list[ExplorerNode] = []
        self._listeners: list[ChangeListener] = []
        self._watch_signature = build_history_watch_signature(git_dir) if git_dir is not None else None

    def add_root(self, node: ExplorerNode) -> ExplorerNode:
        self.roots.append(node)
        self._fire(None)
        return node

    def on_did_change_tree_data(self, listener: ChangeListener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unregisters it."""
        self._listeners.append(listener)

        def dispose() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return dispose

    def _fire(self, node: ExplorerNode | None) -> None:
        for listener in list(self._listeners):
            listener(node)

    def refresh(self, node: ExplorerNode | None = None) -> None:
        """Invalidate ``node`` (or every root) and notify listeners."""
        targets = [node] if node is not None else list(self.roots)
        for target in targets:
            target.refresh()
        self._fire(node)

    async def show_all_results(self, node: ExplorerNode) -> None:
        """Re-fetch a paged node with the configured show-all page size."""
        if not node.supports_paging:
            return
        # A show_all_max_count of 0 asks for an unbounded log.
        node.max_count = self.settings.show_all_max_count
        log_debug(f"show all results for {node.repo_path} (max_count={node.max_count})")
        self.refresh(node)

    def refresh_if_repository_changed(self) -> bool:
        """Refresh every root when git refs moved since the last check."""
        if self.git_dir is None:
            return False
        signature = build_history_watch_signature(self.git_dir)
        if signature == self._watch_signature:
            return False
        self._watch_signature = signature
        self.refresh()
        return True

    async def collect_rows(self) -> list[ExplorerRow]:
        rows: list[ExplorerRow] = []
        for root in self.roots:
            await self._collect(root, 0, rows)
        return rows

    async def _collect(self, node: ExplorerNode, depth: int, rows: list[ExplorerRow]) -> None:
        item = await node.get_tree_item()
        rows.append(ExplorerRow(node=node, depth=depth, text=format_tree_row(item, depth, self.theme)))
        if item.collapsible_state is not CollapsibleState.EXPANDED:
            return
        for child in await node.get_children():
            await self._collect(child, depth + 1, rows)

    async def render(self) -> str:
        rows = await self.collect_rows()
        return "".join(f"{row.text}\n" for row in rows)

    async def find_show_all_nodes(self) -> list[ShowAllNode]:
        return [row.node for row in await self.collect_rows() if isinstance(row.node, ShowAllNode)]


__all__ = ["ExplorerRow", "HistoryExplorer"]
