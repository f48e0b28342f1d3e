"""Tests for ghrelease.git.local - .git/config and .git/HEAD readers."""

from __future__ import annotations

from pathlib import Path

import pytest

from ghrelease.git.local import head, parse_remote_url, remote
from ghrelease.output.console import MockConsole


def _write_git_file(root: Path, name: str, content: str) -> None:
    git_dir = root / ".git"
    git_dir.mkdir(exist_ok=True)
    (git_dir / name).write_text(content, encoding="utf-8")


_CONFIG = """\
[core]
\trepositoryformatversion = 0
\tbare = false
[remote "origin"]
\turl = {url}
\tfetch = +refs/heads/*:refs/remotes/origin/*
[remote "fork"]
\turl = git@github.com:someone-else/fork.git
"""


class TestParseRemoteUrl:
    @pytest.mark.parametrize(
        "url",
        [
            "git@github.com:alice/myrepo.git",
            "https://github.com/alice/myrepo.git",
            "https://github.com/alice/myrepo",
        ],
    )
    def test_github_urls(self, url: str) -> None:
        assert parse_remote_url(url) == ("alice", "myrepo")

    def test_unsplittable_url(self) -> None:
        assert parse_remote_url("/srv/git/project.git") == ("", "")
        assert parse_remote_url("alice") == ("", "")


class TestRemote:
    def test_ssh_remote(self, tmp_path: Path) -> None:
        _write_git_file(tmp_path, "config", _CONFIG.format(url="git@github.com:alice/myrepo.git"))
        assert remote(MockConsole(), tmp_path) == ("alice", "myrepo")

    def test_https_remote(self, tmp_path: Path) -> None:
        _write_git_file(
            tmp_path, "config", _CONFIG.format(url="https://github.com/alice/myrepo.git")
        )
        assert remote(MockConsole(), tmp_path) == ("alice", "myrepo")

    def test_first_url_wins(self, tmp_path: Path) -> None:
        _write_git_file(tmp_path, "config", _CONFIG.format(url="git@github.com:org/main.git"))
        assert remote(MockConsole(), tmp_path) == ("org", "main")

    def test_crlf_line_endings(self, tmp_path: Path) -> None:
        _write_git_file(tmp_path, "config", '[remote "origin"]\r\n\turl = git@github.com:a/b.git\r\n')
        assert remote(MockConsole(), tmp_path) == ("a", "b")

    def test_missing_config(self, tmp_path: Path) -> None:
        assert remote(MockConsole(), tmp_path) == ("", "")

    def test_config_without_remote(self, tmp_path: Path) -> None:
        _write_git_file(tmp_path, "config", "[core]\n\tbare = false\n")
        console = MockConsole()

        assert remote(console, tmp_path) == ("", "")
        assert console.find("found 0 remote url")

    def test_logs_used_url(self, tmp_path: Path) -> None:
        _write_git_file(tmp_path, "config", _CONFIG.format(url="git@github.com:alice/myrepo.git"))
        console = MockConsole()

        remote(console, tmp_path)

        assert console.find("loading git config")
        assert console.find("used remote url: git@github.com:alice/myrepo.git")


class TestHead:
    def test_branch(self, tmp_path: Path) -> None:
        _write_git_file(tmp_path, "HEAD", "ref: refs/heads/main\n")
        assert head(MockConsole(), tmp_path) == "main"

    def test_branch_with_slash(self, tmp_path: Path) -> None:
        _write_git_file(tmp_path, "HEAD", "ref: refs/heads/feature/login\n")
        assert head(MockConsole(), tmp_path) == "feature/login"

    def test_detached_head(self, tmp_path: Path) -> None:
        sha = "3f786850e387550fdab836ed7e6dc881de23001b"
        _write_git_file(tmp_path, "HEAD", f"{sha}\n")
        assert head(MockConsole(), tmp_path) == sha

    def test_missing_head(self, tmp_path: Path) -> None:
        assert head(MockConsole(), tmp_path) == ""

    def test_empty_head(self, tmp_path: Path) -> None:
        _write_git_file(tmp_path, "HEAD", "")
        assert head(MockConsole(), tmp_path) == ""
