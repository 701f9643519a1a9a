from __future__ import annotations

import doctest
import unittest

from lazyhistory.remotes import (
    BitbucketProvider,
    BranchesResource,
    BranchResource,
    CommitResource,
    GitHubProvider,
    GitLabProvider,
    RepoResource,
    detect_remote_provider,
    parse_remote_url,
)
from lazyhistory.remotes import providers


class RemoteUrlParsingTests(unittest.TestCase):
    def test_parses_common_url_forms(self) -> None:
        cases = {
            "git@github.com:acme/app.git": ("github.com", "acme/app"),
            "https://github.com/acme/app": ("github.com", "acme/app"),
            "https://user@GitLab.com/group/sub/app.git/": ("gitlab.com", "group/sub/app"),
            "ssh://git@bitbucket.org/team/app.git": ("bitbucket.org", "team/app"),
            "git://example.org/mirror/app.git": ("example.org", "mirror/app"),
        }
        for url, expected in cases.items():
            with self.subTest(url=url):
                self.assertEqual(parse_remote_url(url), expected)

    def test_local_paths_have_no_host(self) -> None:
        for url in ("", "/srv/git/app.git", "../app", "file:///srv/git/app.git", "https://github.com/"):
            with self.subTest(url=url):
                self.assertIsNone(parse_remote_url(url))

    def test_docstring_examples(self) -> None:
        results = doctest.testmod(providers)
        self.assertEqual(results.failed, 0)


class RemoteProviderTests(unittest.TestCase):
    def test_detects_known_hosts(self) -> None:
        self.assertIsInstance(detect_remote_provider("git@github.com:a/b.git"), GitHubProvider)
        self.assertIsInstance(detect_remote_provider("https://gitlab.com/a/b"), GitLabProvider)
        self.assertIsInstance(detect_remote_provider("https://bitbucket.org/a/b"), BitbucketProvider)
        self.assertIsNone(detect_remote_provider("https://git.example.com/a/b"))

    def test_custom_domain_overrides_detection(self) -> None:
        provider = detect_remote_provider("https://git.example.com/a/b", {"git.example.com": "gitlab"})

        self.assertEqual(provider, GitLabProvider("git.example.com", "a/b"))
        self.assertEqual(provider.url_for(RepoResource()), "https://git.example.com/a/b")

    def test_github_urls(self) -> None:
        provider = GitHubProvider("github.com", "acme/app")

        self.assertEqual(provider.url_for(BranchesResource()), "https://github.com/acme/app/branches")
        self.assertEqual(
            provider.url_for(BranchResource("feature/x y")),
            "https://github.com/acme/app/commits/feature/x%20y",
        )
        self.assertEqual(provider.url_for(CommitResource("abc")), "https://github.com/acme/app/commit/abc")

    def test_bitbucket_urls(self) -> None:
        provider = BitbucketProvider("bitbucket.org", "team/app")

        self.assertEqual(provider.url_for(BranchResource("dev")), "https://bitbucket.org/team/app/commits/branch/dev")
        self.assertEqual(provider.url_for(CommitResource("abc")), "https://bitbucket.org/team/app/commits/abc")


if __name__ == "__main__":
    unittest.main()
