"""Command-line front door for lazyhistory.

Parses global options and one subcommand, wires the application, and
dispatches the matching command request.
"""

from __future__ import annotations

import argparse
from pathlib import Path

from .app import build_deps, run_request
from .commands import (
    CommandRequest,
    OpenBranchesInRemoteRequest,
    ShowCommitsExplorerRequest,
    ShowQuickBranchHistoryRequest,
)
from .logging_config import set_debug_mode
from .ui_theme import available_theme_names


def _nonnegative_int(value: str) -> int:
    """argparse type for integer values where ``0`` means unbounded."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lazyhistory",
        description="Browse git branch history, commit details, and remote links from the terminal.",
    )
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--style", default="monokai", help="Pygments style name for patch output.")
    parser.add_argument("--debug", action="store_true", help="Echo debug logging to stderr.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    history = subparsers.add_parser("branch-history", help="Pick a branch and browse its commits.")
    history.add_argument("path", nargs="?", default=None, help="File or directory inside the repository.")
    history.add_argument("--branch", default=None, help="Skip the branch picker and show this branch.")
    history.add_argument("--max-count", type=_nonnegative_int, default=None, help="Commits per page (0: all).")

    branches = subparsers.add_parser("open-branches", help="Open the branch listing of a remote in the browser.")
    branches.add_argument("path", nargs="?", default=None, help="File or directory inside the repository.")
    branches.add_argument("--remote", default=None, help="Remote name to open without asking.")

    commits = subparsers.add_parser("commits", help="Print the commit tree of a branch.")
    commits.add_argument("path", nargs="?", default=None, help="File or directory inside the repository.")
    commits.add_argument("--branch", default=None, help="Branch or revision to list (default: HEAD).")
    commits.add_argument("--max-count", type=_nonnegative_int, default=None, help="Commits to list (0: all).")
    commits.add_argument("--all", dest="show_all", action="store_true", help="Expand truncated results.")
    return parser


def request_from_args(args: argparse.Namespace) -> CommandRequest:
    """Translate parsed arguments into the request of the chosen subcommand."""
    uri = Path(args.path) if args.path is not None else None
    if args.command == "branch-history":
        return ShowQuickBranchHistoryRequest(uri=uri, branch=args.branch, max_count=args.max_count)
    if args.command == "open-branches":
        return OpenBranchesInRemoteRequest(uri=uri, remote=args.remote)
    if args.command == "commits":
        return ShowCommitsExplorerRequest(
            uri=uri,
            branch=args.branch,
            max_count=args.max_count,
            show_all=args.show_all,
        )
    raise ValueError(f"unknown command: {args.command}")


def main(argv: list[str] | None = None) -> int:
    """Parse CLI arguments, run one command, and return the exit status.

    Completed and cancelled outcomes exit with ``0``; failures exit with ``1``
    after the command has already notified the user.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.debug:
        set_debug_mode(True)

    if args.path is not None and not Path(args.path).exists():
        raise SystemExit(f"Path not found: {args.path}")

    deps = build_deps(
        Path(args.path) if args.path is not None else None,
        theme_name=args.theme,
        no_color=args.no_color,
        style=args.style,
    )
    outcome = run_request(deps, request_from_args(args))
    return 1 if outcome.is_failed else 0


if __name__ == "__main__":
    raise SystemExit(main())
