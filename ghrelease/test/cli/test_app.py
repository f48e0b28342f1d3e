from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from ghrelease import __version__
from ghrelease.cli.app import app
from ghrelease.core.errors import ErrorCode
from ghrelease.github.client import GitHubClient
from ghrelease.github.errors import ApiError, FieldError
from ghrelease.github.http import MockHttpClient

runner = CliRunner()

BASE = "/repos/alice/myrepo"
HTML_URL = "https://github.com/alice/myrepo/releases/tag/v1.4.3"


@pytest.fixture
def checkout(tmp_path: Path) -> Path:
    git_dir = tmp_path / ".git"
    git_dir.mkdir()
    (git_dir / "config").write_text(
        '[remote "origin"]\n\turl = git@github.com:alice/myrepo.git\n', encoding="utf-8"
    )
    (git_dir / "HEAD").write_text("ref: refs/heads/main\n", encoding="utf-8")
    return tmp_path


class _RecordingHttp(MockHttpClient):
    def __init__(self) -> None:
        super().__init__()
        self.seen_tokens: list[str] = []


@pytest.fixture
def http(monkeypatch: pytest.MonkeyPatch) -> _RecordingHttp:
    import ghrelease.cli.commands.release_cmd as release_cmd

    mock = _RecordingHttp()

    def fake_new_token_client(token: str, config: object = None) -> GitHubClient:
        mock.seen_tokens.append(token)
        return GitHubClient(mock)

    monkeypatch.setattr(release_cmd, "new_token_client", fake_new_token_client)
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    return mock


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout


def test_remote(checkout: Path) -> None:
    result = runner.invoke(app, ["--workdir", str(checkout), "remote"])

    assert result.exit_code == 0
    assert "alice/myrepo" in result.stdout
    assert "main" in result.stdout


def test_remote_without_git(tmp_path: Path) -> None:
    result = runner.invoke(app, ["--workdir", str(tmp_path), "remote"])
    assert result.exit_code == int(ErrorCode.USER_ERROR)


def test_invalid_config_exits(checkout: Path) -> None:
    (checkout / ".ghrelease.toml").write_text("[github\n", encoding="utf-8")

    result = runner.invoke(app, ["--workdir", str(checkout), "remote"])

    assert result.exit_code == int(ErrorCode.CONFIG_ERROR)


def test_next_version(checkout: Path, http: _RecordingHttp) -> None:
    http.add("GET", f"{BASE}/releases/latest", {"id": 1, "tag_name": "v1.4.2"})

    result = runner.invoke(
        app, ["--workdir", str(checkout), "next-version"], env={"GITHUB_TOKEN": "tok"}
    )

    assert result.exit_code == 0
    assert "v1.4.3" in result.stdout
    assert http.seen_tokens == ["tok"]


def test_next_version_disabled_without_token(checkout: Path, http: _RecordingHttp) -> None:
    result = runner.invoke(app, ["--workdir", str(checkout), "next-version"])

    assert result.exit_code == 0
    assert result.stdout.strip() == ""
    assert http.calls == []


def test_next_version_parse_error(checkout: Path, http: _RecordingHttp) -> None:
    http.add("GET", f"{BASE}/releases/latest", {"id": 1, "tag_name": "latest"})

    result = runner.invoke(
        app, ["--workdir", str(checkout), "next-version", "--token", "tok"]
    )

    assert result.exit_code == int(ErrorCode.PARSE_ERROR)


def test_release_defaults_from_checkout(checkout: Path, http: _RecordingHttp) -> None:
    http.add("GET", f"{BASE}/releases/latest", {"id": 1, "tag_name": "v1.4.2"})
    http.add("POST", f"{BASE}/releases", {"id": 2, "tag_name": "v1.4.3", "html_url": HTML_URL})

    result = runner.invoke(app, ["--workdir", str(checkout), "release", "--token", "tok"])

    assert result.exit_code == 0
    assert HTML_URL in result.stdout
    assert http.calls_to("POST", f"{BASE}/releases")[0][2] == {
        "tag_name": "v1.4.3",
        "prerelease": False,
        "target_commitish": "main",
    }


def test_release_requires_token(checkout: Path, http: _RecordingHttp) -> None:
    result = runner.invoke(app, ["--workdir", str(checkout), "release", "--tag", "v1.0.0"])

    assert result.exit_code == int(ErrorCode.USER_ERROR)
    assert http.calls == []


def test_release_requires_coordinate(tmp_path: Path, http: _RecordingHttp) -> None:
    result = runner.invoke(
        app,
        ["--workdir", str(tmp_path), "release", "--tag", "v1.0.0", "--token", "tok"],
    )

    assert result.exit_code == int(ErrorCode.USER_ERROR)


def test_prerelease_force(checkout: Path, http: _RecordingHttp) -> None:
    conflict = ApiError(
        url="u",
        status=422,
        message="Validation Failed",
        errors=(FieldError("Release", "tag_name", "already_exists"),),
    )
    http.add("POST", f"{BASE}/releases", conflict)
    http.add("POST", f"{BASE}/releases", {"id": 5, "tag_name": "nightly", "html_url": HTML_URL})
    http.add("GET", f"{BASE}/releases/tags/nightly", {"id": 4, "tag_name": "nightly"})
    http.add("DELETE", f"{BASE}/releases/4", None)
    http.add("DELETE", f"{BASE}/git/refs/tags/nightly", None)

    result = runner.invoke(
        app,
        [
            "--workdir",
            str(checkout),
            "prerelease",
            "--tag",
            "nightly",
            "--branch",
            "develop",
            "--force",
            "--token",
            "tok",
        ],
    )

    assert result.exit_code == 0
    assert HTML_URL in result.stdout
    assert http.calls[-1][2] == {
        "tag_name": "nightly",
        "prerelease": True,
        "target_commitish": "develop",
    }


def test_prerelease_conflict_without_force(checkout: Path, http: _RecordingHttp) -> None:
    http.add(
        "POST",
        f"{BASE}/releases",
        ApiError(
            url="u",
            status=422,
            message="Validation Failed",
            errors=(FieldError("Release", "tag_name", "already_exists"),),
        ),
    )

    result = runner.invoke(
        app,
        ["--workdir", str(checkout), "prerelease", "--tag", "nightly", "--token", "tok"],
    )

    assert result.exit_code == int(ErrorCode.NETWORK_ERROR)
    assert len(http.calls) == 1
