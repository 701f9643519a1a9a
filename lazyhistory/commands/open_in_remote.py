"""Open a branch, commit, or branch listing in the browser."""

from __future__ import annotations

from ..logging_config import log_info
from ..remotes import BranchesResource, BranchResource, CommitResource, RemoteResource
from ..ui.picker import CommandQuickPickItem, RemoteQuickPickItem
from ..ui.quick_picks import RemotesQuickPick
from .base import ActiveEditorCommand
from .outcome import NO_RESULTS, CommandOutcome
from .requests import OpenInRemoteRequest


def _describe(resource: RemoteResource) -> str:
    if isinstance(resource, BranchesResource):
        return "branches"
    if isinstance(resource, BranchResource):
        return f"branch {resource.branch}"
    if isinstance(resource, CommitResource):
        return f"commit {resource.sha[:7]}"
    return "repository"


class OpenInRemoteCommand(ActiveEditorCommand):
    command_id = "open_in_remote"
    error_message = "Unable to open in remote provider"

    async def execute(self, request: OpenInRemoteRequest) -> CommandOutcome:
        remotes = [remote for remote in request.remotes if remote.has_provider]
        if not remotes:
            self.deps.notifier.warn("No remote with a known hosting provider was found")
            return CommandOutcome.cancelled(NO_RESULTS)

        remote = None
        if request.remote:
            remote = next((candidate for candidate in remotes if candidate.name == request.remote), None)
        if remote is None and len(remotes) == 1:
            remote = remotes[0]

        if remote is None:
            pick = await RemotesQuickPick.show(
                self.deps.picker,
                remotes,
                request.resource,
                f"Open {_describe(request.resource)} in remote…",
                go_back=request.go_back,
            )
            if pick is None:
                return CommandOutcome.cancelled()
            if isinstance(pick, CommandQuickPickItem):
                return await pick.execute(self.deps.dispatcher)
            if not isinstance(pick, RemoteQuickPickItem) or pick.remote is None:
                return CommandOutcome.cancelled()
            remote = pick.remote

        assert remote.provider is not None
        url = remote.provider.url_for(request.resource)
        log_info(f"open {url}")
        self.deps.open_url(url)
        return CommandOutcome.completed(url)


__all__ = ["OpenInRemoteCommand"]
