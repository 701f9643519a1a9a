"""Explorer tree nodes and the display rows they produce."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING

from ..git.models import GitCommit

if TYPE_CHECKING:
    from .explorer import HistoryExplorer


class CollapsibleState(Enum):
    NONE = "none"
    COLLAPSED = "collapsed"
    EXPANDED = "expanded"


class ResourceType:
    """Context tags attached to tree items so hosts can offer per-kind actions."""

    RESULTS = "results"
    COMMIT = "commit"
    SHOW_ALL = "show-all"
    MESSAGE = "message"


@dataclass(frozen=True)
class TreeItem:
    """Renderable description of one node."""

    label: str
    collapsible_state: CollapsibleState = CollapsibleState.NONE
    context_value: str = ResourceType.MESSAGE
    description: str = ""
    command: str | None = None


class ExplorerNode:
    """Base node: leaf with no children unless a subclass says otherwise."""

    supports_paging = False

    def __init__(self, repo_path: Path) -> None:
        self.repo_path = repo_path

    async def get_children(self) -> list[ExplorerNode]:
        return []

    async def get_tree_item(self) -> TreeItem:
        raise NotImplementedError

    def refresh(self) -> None:
        """Drop cached state; the next read recomputes it."""


class CommitNode(ExplorerNode):
    def __init__(self, commit: GitCommit, explorer: HistoryExplorer) -> None:
        super().__init__(commit.repo_path)
        self.commit = commit
        self.explorer = explorer

    async def get_tree_item(self) -> TreeItem:
        commit = self.commit
        return TreeItem(
            label=commit.subject,
            collapsible_state=CollapsibleState.NONE,
            context_value=ResourceType.COMMIT,
            description=f"{commit.short_sha} {commit.author}, {commit.date:%Y-%m-%d}",
        )


class ShowAllNode(ExplorerNode):
    """Trailing "load more" row of a truncated paged node."""

    COMMAND = "show_all_results"

    def __init__(self, message: str, parent: ExplorerNode, explorer: HistoryExplorer) -> None:
        super().__init__(parent.repo_path)
        self.message = message
        self.parent = parent
        self.explorer = explorer

    async def get_tree_item(self) -> TreeItem:
        return TreeItem(
            label=self.message,
            collapsible_state=CollapsibleState.NONE,
            context_value=ResourceType.SHOW_ALL,
            command=self.COMMAND,
        )

    async def activate(self) -> None:
        await self.explorer.show_all_results(self.parent)


class MessageNode(ExplorerNode):
    def __init__(self, repo_path: Path, message: str) -> None:
        super().__init__(repo_path)
        self.message = message

    async def get_tree_item(self) -> TreeItem:
        return TreeItem(label=self.message)


__all__ = [
    "CollapsibleState",
    "ResourceType",
    "TreeItem",
    "ExplorerNode",
    "CommitNode",
    "ShowAllNode",
    "MessageNode",
]
