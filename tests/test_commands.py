"""Behavior tests for the history commands and their delegation chain.

Git access, repository resolution, and the picker are replaced by doubles so
each test controls exactly what the user sees and picks.
"""

from __future__ import annotations

import unittest
from datetime import datetime, timezone
from pathlib import Path
from unittest import mock

from lazyhistory.commands import (
    CommandDeps,
    CommandDispatcher,
    OpenBranchesInRemoteRequest,
    OpenInRemoteRequest,
    ShowCommitsExplorerRequest,
    ShowQuickBranchHistoryRequest,
    ShowQuickCommitDetailsRequest,
    register_commands,
)
from lazyhistory.commands.outcome import NO_REPOSITORY, NO_RESULTS, USER_CANCELLED
from lazyhistory.config import HistorySettings
from lazyhistory.git import GitService, RepositoryResolver
from lazyhistory.git.models import GitBranch, GitCommit, GitLog, GitRemote
from lazyhistory.remotes import (
    BranchesResource,
    BranchResource,
    CommitResource,
    GitHubProvider,
    GitLabProvider,
    RepoResource,
)
from lazyhistory.ui import progress
from lazyhistory.ui.picker import (
    ActionQuickPickItem,
    BranchQuickPickItem,
    CommandQuickPickItem,
    CommitQuickPickItem,
    RemoteQuickPickItem,
)
from lazyhistory.ui_theme import PLAIN_THEME

REPO = Path("/tmp/demo-repo")


def make_commit(index: int) -> GitCommit:
    return GitCommit(
        sha=f"{index:040x}",
        author="Ada",
        email="ada@example.com",
        date=datetime(2024, 1, 1 + index % 28, 12, 0, tzinfo=timezone.utc),
        subject=f"change {index}",
        repo_path=REPO,
    )


def make_log(count: int, *, truncated: bool = False, max_count: int | None = None, ref: str | None = None) -> GitLog:
    return GitLog(
        repo_path=REPO,
        commits=tuple(make_commit(idx) for idx in range(count)),
        ref=ref,
        max_count=max_count,
        truncated=truncated,
    )


GITHUB_REMOTE = GitRemote("origin", "git@github.com:acme/app.git", GitHubProvider("github.com", "acme/app"))
GITLAB_REMOTE = GitRemote("mirror", "https://gitlab.com/acme/app.git", GitLabProvider("gitlab.com", "acme/app"))
LOCAL_REMOTE = GitRemote("backup", "/srv/backup/app.git", None)


class RecordingNotifier:
    def __init__(self) -> None:
        self.infos: list[str] = []
        self.warnings: list[str] = []
        self.errors: list[str] = []
        self.statuses: list[str] = []

    def info(self, message: str) -> None:
        self.infos.append(message)

    def warn(self, message: str) -> None:
        self.warnings.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)

    def status(self, message: str) -> None:
        self.statuses.append(message)


class ScriptedPicker:
    """Answers each ``choose`` with the next scripted selector.

    A selector receives the offered items and returns the pick (or ``None``).
    """

    def __init__(self, *selectors) -> None:
        self.selectors = list(selectors)
        self.shown: list[tuple[list, str]] = []

    async def choose(self, items, placeholder):
        self.shown.append((list(items), placeholder))
        if not self.selectors:
            return None
        return self.selectors.pop(0)(list(items))


def first_of(item_type, label: str | None = None):
    def select(items):
        for item in items:
            if isinstance(item, item_type) and (label is None or item.label == label):
                return item
        raise AssertionError(f"no {item_type.__name__} offered among {[item.label for item in items]}")

    return select


def cancel(_items):
    return None


class CommandTestCase(unittest.IsolatedAsyncioTestCase):
    def make_deps(self, *selectors, repo=REPO, spy_dispatcher: bool = False, **overrides) -> CommandDeps:
        self.git = mock.create_autospec(GitService, instance=True)
        self.git.get_remotes.return_value = [GITHUB_REMOTE]
        self.git.get_branches.return_value = [GitBranch("main", "a" * 40, current=True)]
        self.git.get_log_for_repo.return_value = make_log(3, max_count=200, ref="main")
        self.resolver = mock.create_autospec(RepositoryResolver, instance=True)
        self.resolver.resolve.return_value = repo
        self.resolver.git_dir.return_value = None
        self.picker = ScriptedPicker(*selectors)
        self.notifier = RecordingNotifier()
        self.opened: list[str] = []
        self.output: list[str] = []

        if spy_dispatcher:
            dispatcher = mock.create_autospec(CommandDispatcher, instance=True)
        else:
            dispatcher = CommandDispatcher()
        deps = CommandDeps(
            git=self.git,
            resolver=self.resolver,
            picker=self.picker,
            notifier=self.notifier,
            dispatcher=dispatcher,
            settings=overrides.pop("settings", HistorySettings()),
            theme=PLAIN_THEME,
            no_color=True,
            open_url=self.opened.append,
            write_output=self.output.append,
            **overrides,
        )
        if not spy_dispatcher:
            register_commands(deps)
        self.dispatcher = dispatcher
        return deps


class ShowQuickBranchHistoryTests(CommandTestCase):
    async def test_missing_repository_warns_once_without_git_calls(self) -> None:
        deps = self.make_deps(repo=None)

        outcome = await deps.dispatcher.invoke(ShowQuickBranchHistoryRequest())

        self.assertTrue(outcome.is_cancelled)
        self.assertEqual(outcome.reason, NO_REPOSITORY)
        self.assertEqual(self.notifier.warnings, ["Unable to show branch history. No repository could be found"])
        self.assertEqual(self.git.method_calls, [])
        self.assertEqual(self.picker.shown, [])

    async def test_missing_repository_with_branch_still_warns_once(self) -> None:
        deps = self.make_deps(repo=None)

        outcome = await deps.dispatcher.invoke(ShowQuickBranchHistoryRequest(branch="main"))

        self.assertEqual(outcome.reason, NO_REPOSITORY)
        self.assertEqual(len(self.notifier.warnings), 1)
        self.assertEqual(self.git.method_calls, [])

    async def test_progress_cancelled_during_fetch_skips_history_picker(self) -> None:
        deps = self.make_deps(first_of(CommitQuickPickItem), interruptible=False)
        sources: list[progress.CancellationTokenSource] = []

        def tracked_progress(message, notifier, *, bind_interrupt=True):
            source = progress.show_progress(message, notifier, bind_interrupt=bind_interrupt)
            sources.append(source)
            return source

        async def fetch_then_cancel(*_args):
            sources[-1].cancel()
            return make_log(3, max_count=200, ref="main")

        self.git.get_log_for_repo.side_effect = fetch_then_cancel
        with mock.patch("lazyhistory.ui.quick_picks.show_progress", side_effect=tracked_progress):
            outcome = await deps.dispatcher.invoke(ShowQuickBranchHistoryRequest(branch="main"))

        self.assertTrue(outcome.is_cancelled)
        self.assertEqual(outcome.reason, USER_CANCELLED)
        self.assertEqual(self.picker.shown, [])
        self.assertEqual(self.notifier.warnings, [])
        self.assertEqual(self.notifier.errors, [])
        self.assertEqual(len(sources), 1)
        self.assertTrue(sources[0].disposed)

    async def test_cancelled_branch_picker_is_silent_and_does_not_delegate(self) -> None:
        deps = self.make_deps(cancel, spy_dispatcher=True)
        command = deps_command(deps, ShowQuickBranchHistoryRequest)

        outcome = await command.run(ShowQuickBranchHistoryRequest())

        self.assertTrue(outcome.is_cancelled)
        self.assertEqual(outcome.reason, USER_CANCELLED)
        self.assertEqual(self.notifier.warnings, [])
        self.assertEqual(self.notifier.errors, [])
        self.dispatcher.invoke.assert_not_awaited()
        self.git.get_log_for_repo.assert_not_awaited()

    async def test_commit_pick_delegates_to_details_with_go_back(self) -> None:
        deps = self.make_deps(first_of(BranchQuickPickItem), first_of(CommitQuickPickItem), spy_dispatcher=True)
        command = deps_command(deps, ShowQuickBranchHistoryRequest)
        self.dispatcher.invoke.return_value = mock.sentinel.details_outcome

        outcome = await command.run(ShowQuickBranchHistoryRequest())

        self.assertIs(outcome, mock.sentinel.details_outcome)
        self.git.get_log_for_repo.assert_awaited_once_with(REPO, "main", 200)
        (request,), _kwargs = self.dispatcher.invoke.await_args
        self.assertIsInstance(request, ShowQuickCommitDetailsRequest)
        self.assertEqual(request.sha, make_commit(0).sha)
        self.assertEqual(request.repo_log, self.git.get_log_for_repo.return_value)
        self.assertEqual(request.go_back.description, "to main history")
        back = request.go_back.request
        self.assertIsInstance(back, ShowQuickBranchHistoryRequest)
        self.assertEqual(back.branch, "main")
        self.assertIs(back.log, self.git.get_log_for_repo.return_value)
        self.assertEqual(self.notifier.statuses, ["Loading history for main…"])

    async def test_rev_takes_precedence_over_branch_for_log_start(self) -> None:
        deps = self.make_deps(cancel)

        await deps.dispatcher.invoke(ShowQuickBranchHistoryRequest(branch="main", rev="abc123", max_count=5))

        self.git.get_log_for_repo.assert_awaited_once_with(REPO, "abc123", 5)
        self.git.get_branches.assert_not_awaited()

    async def test_missing_log_warns_and_reports_no_results(self) -> None:
        deps = self.make_deps()
        self.git.get_log_for_repo.return_value = None

        outcome = await deps.dispatcher.invoke(ShowQuickBranchHistoryRequest(branch="gone"))

        self.assertEqual(outcome.reason, NO_RESULTS)
        self.assertEqual(self.notifier.warnings, ["Unable to show branch history"])
        self.assertEqual(self.picker.shown, [])

    async def test_truncated_history_offers_show_all_and_more(self) -> None:
        deps = self.make_deps(cancel, settings=HistorySettings(max_quick_history=2))
        self.git.get_log_for_repo.return_value = make_log(2, truncated=True, max_count=2, ref="main")

        await deps.dispatcher.invoke(ShowQuickBranchHistoryRequest(branch="main"))

        items, placeholder = self.picker.shown[0]
        self.assertEqual(placeholder, "main history … 2+ commits")
        show_all, show_more = items[0], items[1]
        self.assertEqual(show_all.label, "Show All Commits")
        self.assertEqual(show_all.request.max_count, 0)
        self.assertIsNone(show_all.request.log)
        self.assertEqual(show_more.label, "Show More Commits")
        self.assertEqual(show_more.request.max_count, 4)
        self.assertEqual([type(item) for item in items[2:]], [CommitQuickPickItem, CommitQuickPickItem])

    async def test_show_all_pick_refetches_unbounded(self) -> None:
        deps = self.make_deps(first_of(CommandQuickPickItem, "Show All Commits"), cancel)
        self.git.get_log_for_repo.side_effect = [
            make_log(2, truncated=True, max_count=2, ref="main"),
            make_log(5, ref="main"),
        ]

        outcome = await deps.dispatcher.invoke(ShowQuickBranchHistoryRequest(branch="main", max_count=2))

        self.assertTrue(outcome.is_cancelled)
        self.assertEqual(self.git.get_log_for_repo.await_args_list[1], mock.call(REPO, "main", 0))
        self.assertEqual(len(self.picker.shown[1][0]), 5)

    async def test_git_failure_becomes_failed_outcome_with_error_notification(self) -> None:
        deps = self.make_deps()
        self.git.get_branches.side_effect = RuntimeError("boom")

        with mock.patch("lazyhistory.commands.base.log_error") as log_error:
            outcome = await deps.dispatcher.invoke(ShowQuickBranchHistoryRequest())

        self.assertTrue(outcome.is_failed)
        self.assertIsInstance(outcome.error, RuntimeError)
        self.assertEqual(len(self.notifier.errors), 1)
        self.assertTrue(self.notifier.errors[0].startswith("Unable to show branch history. See "))
        log_error.assert_called_once_with(outcome.error, "ShowQuickBranchHistoryCommand")


class ShowQuickCommitDetailsTests(CommandTestCase):
    async def test_show_changes_writes_patch(self) -> None:
        deps = self.make_deps(first_of(ActionQuickPickItem))
        self.git.get_commit_patch.return_value = "diff --git a/x b/x\n"
        commit = make_commit(1)

        outcome = await deps.dispatcher.invoke(ShowQuickCommitDetailsRequest(sha=commit.sha, commit=commit))

        self.assertTrue(outcome.is_completed)
        self.assertEqual(self.output, ["diff --git a/x b/x\n"])
        self.git.get_commit_patch.assert_awaited_once_with(REPO, commit.sha)

    async def test_open_in_remote_item_opens_commit_url(self) -> None:
        deps = self.make_deps(first_of(CommandQuickPickItem, "Open Commit in Remote"))
        commit = make_commit(2)

        outcome = await deps.dispatcher.invoke(ShowQuickCommitDetailsRequest(sha=commit.sha, commit=commit))

        self.assertTrue(outcome.is_completed)
        self.assertEqual(self.opened, [f"https://github.com/acme/app/commit/{commit.sha}"])

    async def test_loads_commit_by_sha_when_not_given(self) -> None:
        deps = self.make_deps(cancel)
        self.git.get_commit.return_value = make_commit(3)

        outcome = await deps.dispatcher.invoke(ShowQuickCommitDetailsRequest(sha="abc"))

        self.assertEqual(outcome.reason, USER_CANCELLED)
        self.git.get_commit.assert_awaited_once_with(REPO, "abc")

    async def test_unknown_sha_warns(self) -> None:
        deps = self.make_deps()
        self.git.get_commit.return_value = None

        outcome = await deps.dispatcher.invoke(ShowQuickCommitDetailsRequest(sha="nope"))

        self.assertEqual(outcome.reason, NO_RESULTS)
        self.assertEqual(self.notifier.warnings, ["Unable to show commit details. Commit nope was not found"])

    async def test_go_back_item_is_offered_first(self) -> None:
        back = CommandQuickPickItem(label="go back ↩", request=ShowQuickBranchHistoryRequest(branch="main"))
        deps = self.make_deps(cancel)
        commit = make_commit(0)

        await deps.dispatcher.invoke(ShowQuickCommitDetailsRequest(sha=commit.sha, commit=commit, go_back=back))

        items, _placeholder = self.picker.shown[0]
        self.assertIs(items[0], back)


class OpenBranchesInRemoteTests(CommandTestCase):
    async def test_missing_repository_warns_once_without_git_calls(self) -> None:
        deps = self.make_deps(repo=None)

        outcome = await deps.dispatcher.invoke(OpenBranchesInRemoteRequest())

        self.assertEqual(outcome.reason, NO_REPOSITORY)
        self.assertEqual(
            self.notifier.warnings, ["Unable to open branches in remote provider. No repository could be found"]
        )
        self.assertEqual(self.git.method_calls, [])

    async def test_delegates_with_provider_remotes_only(self) -> None:
        deps = self.make_deps(spy_dispatcher=True)
        self.git.get_remotes.return_value = [LOCAL_REMOTE, GITHUB_REMOTE]
        command = deps_command(deps, OpenBranchesInRemoteRequest)

        await command.run(OpenBranchesInRemoteRequest(remote="origin"))

        self.dispatcher.invoke.assert_awaited_once_with(
            OpenInRemoteRequest(resource=BranchesResource(), remotes=(GITHUB_REMOTE,), uri=None, remote="origin")
        )

    async def test_single_remote_opens_branches_page(self) -> None:
        deps = self.make_deps()

        outcome = await deps.dispatcher.invoke(OpenBranchesInRemoteRequest())

        self.assertTrue(outcome.is_completed)
        self.assertEqual(self.opened, ["https://github.com/acme/app/branches"])


class OpenInRemoteTests(CommandTestCase):
    async def test_no_provider_remote_warns(self) -> None:
        deps = self.make_deps()

        outcome = await deps.dispatcher.invoke(OpenInRemoteRequest(BranchesResource(), remotes=(LOCAL_REMOTE,)))

        self.assertEqual(outcome.reason, NO_RESULTS)
        self.assertEqual(self.notifier.warnings, ["No remote with a known hosting provider was found"])
        self.assertEqual(self.opened, [])

    async def test_named_remote_skips_picker(self) -> None:
        deps = self.make_deps()

        outcome = await deps.dispatcher.invoke(
            OpenInRemoteRequest(CommitResource("f" * 40), remotes=(GITHUB_REMOTE, GITLAB_REMOTE), remote="mirror")
        )

        self.assertEqual(outcome.value, f"https://gitlab.com/acme/app/commit/{'f' * 40}")
        self.assertEqual(self.picker.shown, [])

    async def test_several_remotes_ask_the_user(self) -> None:
        deps = self.make_deps(first_of(RemoteQuickPickItem, "Open in GitLab"))

        outcome = await deps.dispatcher.invoke(
            OpenInRemoteRequest(BranchesResource(), remotes=(GITHUB_REMOTE, GITLAB_REMOTE))
        )

        self.assertTrue(outcome.is_completed)
        self.assertEqual(self.opened, ["https://gitlab.com/acme/app/branches"])
        self.assertEqual(self.picker.shown[0][1], "Open branches in remote…")

    async def test_cancelled_remote_picker_opens_nothing(self) -> None:
        deps = self.make_deps(cancel)

        outcome = await deps.dispatcher.invoke(
            OpenInRemoteRequest(BranchesResource(), remotes=(GITHUB_REMOTE, GITLAB_REMOTE))
        )

        self.assertEqual(outcome.reason, USER_CANCELLED)
        self.assertEqual(self.opened, [])

    async def test_branch_and_repository_resources_open_their_pages(self) -> None:
        deps = self.make_deps(first_of(RemoteQuickPickItem, "Open in GitHub"))

        branch_outcome = await deps.dispatcher.invoke(
            OpenInRemoteRequest(BranchResource("feature/login"), remotes=(GITHUB_REMOTE, GITLAB_REMOTE))
        )
        repo_outcome = await deps.dispatcher.invoke(
            OpenInRemoteRequest(RepoResource(), remotes=(GITLAB_REMOTE,), remote="mirror")
        )

        self.assertEqual(branch_outcome.value, "https://github.com/acme/app/commits/feature/login")
        self.assertEqual(self.picker.shown[0][1], "Open branch feature/login in remote…")
        self.assertEqual(repo_outcome.value, "https://gitlab.com/acme/app")
        self.assertEqual(
            self.opened, ["https://github.com/acme/app/commits/feature/login", "https://gitlab.com/acme/app"]
        )


class ShowCommitsExplorerTests(CommandTestCase):
    async def test_renders_tree_for_branch(self) -> None:
        deps = self.make_deps()
        self.git.get_log_for_repo.return_value = make_log(2, ref="dev")

        outcome = await deps.dispatcher.invoke(ShowCommitsExplorerRequest(branch="dev", max_count=10))

        self.assertTrue(outcome.is_completed)
        self.git.get_log_for_repo.assert_awaited_once_with(REPO, "dev", 10)
        lines = self.output[0].splitlines()
        self.assertEqual(lines[0], "▾ 2 commits on dev")
        self.assertEqual(len(lines), 3)

    async def test_show_all_expands_truncated_results(self) -> None:
        deps = self.make_deps(settings=HistorySettings(show_all_max_count=0))
        self.git.get_log_for_repo.side_effect = [
            make_log(1, truncated=True, max_count=1),
            make_log(4),
        ]

        await deps.dispatcher.invoke(ShowCommitsExplorerRequest(max_count=1, show_all=True))

        self.assertEqual(self.git.get_log_for_repo.await_args_list[1], mock.call(REPO, None, 0))
        self.assertEqual(self.output[0].splitlines()[0], "▾ 4 commits")

    async def test_missing_repository_warns(self) -> None:
        deps = self.make_deps(repo=None)

        outcome = await deps.dispatcher.invoke(ShowCommitsExplorerRequest())

        self.assertEqual(outcome.reason, NO_REPOSITORY)
        self.assertEqual(self.notifier.warnings, ["Unable to show commits. No repository could be found"])
        self.assertEqual(self.output, [])


def deps_command(deps: CommandDeps, request_type: type):
    """Instantiate the command registered for ``request_type`` against ``deps``."""
    from lazyhistory.commands import COMMANDS

    for registered_type, command_cls in COMMANDS:
        if registered_type is request_type:
            return command_cls(deps)
    raise LookupError(request_type)


if __name__ == "__main__":
    unittest.main()
