"""Exception types raised across lazyhistory.

Only genuine faults are raised; "nothing found" and "user cancelled" are
returned as values by the command layer.
"""

from __future__ import annotations

from collections.abc import Sequence


class LazyHistoryError(Exception):
    """Base class for lazyhistory errors."""


class GitCommandError(LazyHistoryError):
    """A git invocation failed to run or exited with a non-zero status."""

    def __init__(self, args: Sequence[str], returncode: int | None, stderr: str = "") -> None:
        self.git_args = tuple(args)
        self.returncode = returncode
        self.stderr = stderr.strip()
        command = " ".join(self.git_args)
        if returncode is None:
            message = f"git {command} could not be run"
        else:
            message = f"git {command} exited with status {returncode}"
        if self.stderr:
            message = f"{message}: {self.stderr}"
        super().__init__(message)


class UnknownCommandError(LazyHistoryError):
    """A command request was dispatched without a registered handler."""


__all__ = ["LazyHistoryError", "GitCommandError", "UnknownCommandError"]
