"""Cooperative cancellation for long-running, user-visible fetches.

A ``CancellationTokenSource`` is created when progress is shown; the host
cancels it (Ctrl+C while loading) and the command checks the token after its
fetch, dropping the result instead of raising.
"""

from __future__ import annotations

import asyncio
import signal

from .notifier import UserNotifier


class CancellationToken:
    def __init__(self) -> None:
        self._cancelled = False

    @property
    def is_cancellation_requested(self) -> bool:
        return self._cancelled


class CancellationTokenSource:
    def __init__(self) -> None:
        self.token = CancellationToken()
        self._disposed = False
        self._signal_loop: asyncio.AbstractEventLoop | None = None

    @property
    def disposed(self) -> bool:
        return self._disposed

    def cancel(self) -> None:
        if self._disposed:
            return
        self.token._cancelled = True

    def bind_interrupt(self) -> bool:
        """Route SIGINT to ``cancel`` until disposal.

        Returns ``False`` where the running loop cannot install signal
        handlers (no running loop, non-main thread, Windows).
        """
        try:
            loop = asyncio.get_running_loop()
            loop.add_signal_handler(signal.SIGINT, self.cancel)
        except (RuntimeError, NotImplementedError, ValueError):
            return False
        self._signal_loop = loop
        return True

    def dispose(self) -> None:
        """Stop tracking progress; safe to call more than once."""
        if self._disposed:
            return
        self._disposed = True
        if self._signal_loop is not None:
            self._signal_loop.remove_signal_handler(signal.SIGINT)
            self._signal_loop = None


def show_progress(message: str, notifier: UserNotifier, *, bind_interrupt: bool = True) -> CancellationTokenSource:
    """Announce ``message`` and return a source the user can cancel."""
    source = CancellationTokenSource()
    if bind_interrupt and source.bind_interrupt():
        message = f"{message} (Ctrl+C to cancel)"
    notifier.status(message)
    return source


__all__ = ["CancellationToken", "CancellationTokenSource", "show_progress"]
