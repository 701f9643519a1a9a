"""Render a branch's commits as an explorer tree."""

from __future__ import annotations

from ..views import CommitsResultsNode, HistoryExplorer, format_commits_label
from .base import ActiveEditorCommand, show_no_repository_warning
from .outcome import NO_REPOSITORY, CommandOutcome
from .requests import ShowCommitsExplorerRequest


class ShowCommitsExplorerCommand(ActiveEditorCommand):
    command_id = "show_commits_explorer"
    error_message = "Unable to show commits"

    async def execute(self, request: ShowCommitsExplorerRequest) -> CommandOutcome:
        deps = self.deps
        repo_path = await deps.resolver.resolve(self.command_uri(request.uri))
        if repo_path is None:
            show_no_repository_warning(deps.notifier, "Unable to show commits")
            return CommandOutcome.cancelled(NO_REPOSITORY)

        explorer = HistoryExplorer(deps.settings, deps.theme, await deps.resolver.git_dir(repo_path))
        ref = request.branch
        subject = f"on {ref}" if ref else ""

        def label_fn(log):
            return format_commits_label(log, subject)

        def log_fn(max_count):
            return deps.git.get_log_for_repo(repo_path, ref, max_count)

        node = CommitsResultsNode(repo_path, label_fn, log_fn, explorer, max_count=request.max_count)
        explorer.add_root(node)

        if request.show_all:
            for show_all in await explorer.find_show_all_nodes():
                await show_all.activate()

        deps.write_output(await explorer.render())
        return CommandOutcome.completed(explorer)


__all__ = ["ShowCommitsExplorerCommand"]
