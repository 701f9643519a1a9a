"""Quick-pick items and the terminal picker that chooses among them.

A picker returns the chosen item, or ``None`` when the user cancels. Items
that carry a command request let a picker offer "go back" and paging
escapes that run another command instead of returning a value.
"""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol, TextIO

from ..fuzzy import fuzzy_match_labels
from ..git.models import GitBranch, GitCommit, GitRemote
from ..highlight import sanitize_terminal_text
from ..ui_theme import DEFAULT_THEME, UITheme, paint

if TYPE_CHECKING:
    from ..commands.dispatcher import CommandDispatcher
    from ..commands.outcome import CommandOutcome
    from ..commands.requests import CommandRequest

CANCEL_INPUTS = frozenset({"", "q", ":q", "quit"})


@dataclass(frozen=True)
class QuickPickItem:
    label: str
    description: str = ""
    detail: str = ""

    @property
    def search_text(self) -> str:
        return f"{self.label} {self.description}".strip()


@dataclass(frozen=True)
class CommandQuickPickItem(QuickPickItem):
    """Item that runs ``request`` through the dispatcher when chosen."""

    request: CommandRequest | None = None

    async def execute(self, dispatcher: CommandDispatcher) -> CommandOutcome:
        if self.request is None:
            raise ValueError(f"quick pick item {self.label!r} has no command request")
        return await dispatcher.invoke(self.request)


@dataclass(frozen=True)
class ActionQuickPickItem(QuickPickItem):
    """Item naming an action handled by the command that showed the picker."""

    action: str = ""


@dataclass(frozen=True)
class BranchQuickPickItem(QuickPickItem):
    branch: GitBranch | None = None


@dataclass(frozen=True)
class CommitQuickPickItem(QuickPickItem):
    commit: GitCommit | None = None


@dataclass(frozen=True)
class RemoteQuickPickItem(QuickPickItem):
    remote: GitRemote | None = None


class Picker(Protocol):
    async def choose(self, items: Sequence[QuickPickItem], placeholder: str) -> QuickPickItem | None: ...


class TerminalPicker:
    """Line-based picker: numbers select, other text narrows the list.

    Empty input, ``q``, or end of input cancels.
    """

    def __init__(
        self,
        read_line: Callable[[str], str] = input,
        stream: TextIO | None = None,
        theme: UITheme = DEFAULT_THEME,
        page_size: int = 30,
    ) -> None:
        self.read_line = read_line
        self.stream = stream if stream is not None else sys.stderr
        self.theme = theme
        self.page_size = max(1, page_size)

    def _paint_label(self, item: QuickPickItem) -> str:
        theme = self.theme
        label = sanitize_terminal_text(item.label)
        if isinstance(item, BranchQuickPickItem) and item.branch is not None:
            if item.branch.current:
                return paint(theme.branch_current, label, theme)
            if item.branch.is_remote:
                return paint(theme.branch_remote, label, theme)
        elif isinstance(item, CommitQuickPickItem) and item.commit is not None:
            sha = item.commit.short_sha
            if label.startswith(sha):
                return paint(theme.commit_sha, sha, theme) + paint(theme.commit_subject, label[len(sha) :], theme)
        return label

    def _format_item(self, number: int, item: QuickPickItem) -> str:
        theme = self.theme
        row = f"{paint(theme.picker_index, f'{number:>3}', theme)}  {self._paint_label(item)}"
        if item.description:
            row = f"{row}  {paint(theme.commit_meta, sanitize_terminal_text(item.description), theme)}"
        return row

    def _render(self, placeholder: str, query: str, visible: list[QuickPickItem], total: int) -> None:
        theme = self.theme
        lines = [paint(theme.picker_prompt, placeholder, theme)]
        if query:
            lines.append(paint(theme.dim, f"  filter: {query}  ({len(visible)} of {total})", theme))
        for number, item in enumerate(visible[: self.page_size], start=1):
            lines.append(self._format_item(number, item))
        if len(visible) > self.page_size:
            lines.append(paint(theme.dim, f"  … {len(visible) - self.page_size} more, type to filter", theme))
        if not visible:
            lines.append(paint(theme.dim, "  no matching items", theme))
        self.stream.write("\n".join(lines) + "\n")
        self.stream.flush()

    def _narrow(self, items: Sequence[QuickPickItem], query: str) -> list[QuickPickItem]:
        labels = [item.search_text for item in items]
        return [items[idx] for idx, _label, _score in fuzzy_match_labels(query, labels, limit=len(labels) or 1)]

    async def choose(self, items: Sequence[QuickPickItem], placeholder: str) -> QuickPickItem | None:
        query = ""
        visible = list(items)
        while True:
            self._render(placeholder, query, visible, len(items))
            try:
                answer = await asyncio.to_thread(self.read_line, "> ")
            except EOFError:
                return None
            answer = answer.strip()
            if answer.lower() in CANCEL_INPUTS:
                return None
            if answer.isdigit():
                index = int(answer) - 1
                if 0 <= index < min(len(visible), self.page_size):
                    return visible[index]
                continue
            query = answer
            visible = self._narrow(items, query)


__all__ = [
    "QuickPickItem",
    "CommandQuickPickItem",
    "ActionQuickPickItem",
    "BranchQuickPickItem",
    "CommitQuickPickItem",
    "RemoteQuickPickItem",
    "Picker",
    "TerminalPicker",
]
