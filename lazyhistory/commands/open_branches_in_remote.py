"""Open the branch listing of the repository on its hosting provider."""

from __future__ import annotations

from ..remotes import BranchesResource
from .base import ActiveEditorCommand, show_no_repository_warning
from .outcome import NO_REPOSITORY, CommandOutcome
from .requests import OpenBranchesInRemoteRequest, OpenInRemoteRequest


class OpenBranchesInRemoteCommand(ActiveEditorCommand):
    command_id = "open_branches_in_remote"
    error_message = "Unable to open branches in remote provider"

    async def execute(self, request: OpenBranchesInRemoteRequest) -> CommandOutcome:
        uri = self.command_uri(request.uri)
        repo_path = await self.deps.resolver.resolve(uri)
        if repo_path is None:
            show_no_repository_warning(self.deps.notifier, "Unable to open branches in remote provider")
            return CommandOutcome.cancelled(NO_REPOSITORY)

        remotes = [remote for remote in await self.deps.git.get_remotes(repo_path) if remote.has_provider]
        return await self.deps.dispatcher.invoke(
            OpenInRemoteRequest(
                resource=BranchesResource(),
                remotes=tuple(remotes),
                uri=uri,
                remote=request.remote,
            )
        )


__all__ = ["OpenBranchesInRemoteCommand"]
