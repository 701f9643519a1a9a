"""Map documents and directories to the repository that contains them."""

from __future__ import annotations

from pathlib import Path

from .runner import resolve_git_paths_async


class RepositoryResolver:
    """Resolve a path, or the workspace when none is given, to a repository root.

    The workspace repository is probed once and remembered; explicit paths
    are probed on every call.
    """

    def __init__(self, workspace_root: Path) -> None:
        self.workspace_root = workspace_root
        self._workspace_repo: Path | None = None
        self._workspace_probed = False

    async def resolve(self, path: Path | None) -> Path | None:
        if path is None:
            return await self.workspace_repo_path()
        return await self._probe(path)

    async def workspace_repo_path(self) -> Path | None:
        """Repository of the workspace root, used when no document is active."""
        if not self._workspace_probed:
            self._workspace_repo = await self._probe(self.workspace_root)
            self._workspace_probed = True
        return self._workspace_repo

    async def git_dir(self, path: Path) -> Path | None:
        _repo_root, git_dir = await resolve_git_paths_async(_probe_dir(path))
        return git_dir

    async def _probe(self, path: Path) -> Path | None:
        repo_root, _git_dir = await resolve_git_paths_async(_probe_dir(path))
        return repo_root


def _probe_dir(path: Path) -> Path:
    resolved = path.expanduser().resolve()
    if resolved.is_dir():
        return resolved
    # Files (including ones deleted since) resolve through their directory.
    return resolved.parent


__all__ = ["RepositoryResolver"]
