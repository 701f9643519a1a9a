"""Terminal pickers, notifications, and progress cancellation."""

from __future__ import annotations

from .notifier import TerminalNotifier, UserNotifier
from .picker import (
    ActionQuickPickItem,
    BranchQuickPickItem,
    CommandQuickPickItem,
    CommitQuickPickItem,
    Picker,
    QuickPickItem,
    RemoteQuickPickItem,
    TerminalPicker,
)
from .progress import CancellationToken, CancellationTokenSource, show_progress

__all__ = [
    "ActionQuickPickItem",
    "BranchQuickPickItem",
    "CancellationToken",
    "CancellationTokenSource",
    "CommandQuickPickItem",
    "CommitQuickPickItem",
    "Picker",
    "QuickPickItem",
    "RemoteQuickPickItem",
    "TerminalNotifier",
    "TerminalPicker",
    "UserNotifier",
    "show_progress",
]
