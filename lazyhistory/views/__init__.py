"""Explorer tree nodes, the paged commit results node, and the terminal tree host."""

from __future__ import annotations

from .commits_results_node import CommitsResultsNode, ResultsCache, format_commits_label
from .explorer import ExplorerRow, HistoryExplorer
from .nodes import (
    CollapsibleState,
    CommitNode,
    ExplorerNode,
    MessageNode,
    ResourceType,
    ShowAllNode,
    TreeItem,
)

__all__ = [
    "CollapsibleState",
    "CommitNode",
    "CommitsResultsNode",
    "ExplorerNode",
    "ExplorerRow",
    "HistoryExplorer",
    "MessageNode",
    "ResourceType",
    "ResultsCache",
    "ShowAllNode",
    "TreeItem",
    "format_commits_label",
]
