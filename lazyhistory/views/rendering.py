"""Tree row formatting for explorer output."""

from __future__ import annotations

from ..highlight import sanitize_terminal_text
from ..ui_theme import UITheme, paint
from .nodes import CollapsibleState, ResourceType, TreeItem

INDENT = "  "


def _marker(state: CollapsibleState) -> str:
    if state is CollapsibleState.EXPANDED:
        return "▾ "
    if state is CollapsibleState.COLLAPSED:
        return "▸ "
    return "  "


def format_tree_row(item: TreeItem, depth: int, theme: UITheme) -> str:
    """Render one tree item as an indented, themed terminal line."""
    label = sanitize_terminal_text(item.label)
    if item.context_value == ResourceType.RESULTS:
        label = paint(theme.results_label, label, theme)
    elif item.context_value == ResourceType.COMMIT:
        label = paint(theme.commit_subject, label, theme)
    elif item.context_value == ResourceType.SHOW_ALL:
        label = paint(theme.show_all, f"… {label}", theme)
    else:
        label = paint(theme.message, label, theme)

    row = f"{INDENT * depth}{paint(theme.tree_marker, _marker(item.collapsible_state), theme)}{label}"
    if item.description:
        row = f"{row}  {paint(theme.commit_meta, sanitize_terminal_text(item.description), theme)}"
    return row


__all__ = ["format_tree_row"]
