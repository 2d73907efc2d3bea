"""Tests for GitHubClient against a mocked HTTP transport."""

from __future__ import annotations

import base64
import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from ghmcp.config import ServerConfig
from ghmcp.github.client import GitHubClient
from ghmcp.github.errors import GitHubAPIError
from tests.conftest import file_payload, pull_payload, repo_payload

API = "https://api.github.test"


class _Recorder:
    """Answers every request with one canned response and keeps the requests."""

    def __init__(self, status: int = 200, body: Any = None) -> None:
        self.status = status
        self.body = body
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, json=self.body)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> GitHubClient:
    return GitHubClient("tok", api_url=API, transport=httpx.MockTransport(handler))


class TestRequests:
    async def test_headers(self) -> None:
        recorder = _Recorder(body=[])
        async with _client(recorder) as github:
            await github.list_repositories()
        headers = recorder.last.headers
        assert headers["Authorization"] == "Bearer tok"
        assert headers["Accept"] == "application/vnd.github+json"
        assert headers["X-GitHub-Api-Version"] == "2022-11-28"
        assert headers["User-Agent"].startswith("ghmcp/")

    async def test_list_repositories(self) -> None:
        recorder = _Recorder(body=[repo_payload()])
        async with _client(recorder) as github:
            repos = await github.list_repositories(type="member")
        assert recorder.last.method == "GET"
        assert recorder.last.url.path == "/user/repos"
        assert recorder.last.url.params["type"] == "member"
        assert repos[0].name == "hello-world"
        assert repos[0].stars == 80

    async def test_create_repository_body(self) -> None:
        recorder = _Recorder(status=201, body=repo_payload())
        async with _client(recorder) as github:
            await github.create_repository("hello-world", private=True)
        assert recorder.last.method == "POST"
        assert json.loads(recorder.last.content) == {"name": "hello-world", "private": True}

    async def test_get_repository_path_is_quoted(self) -> None:
        recorder = _Recorder(body=repo_payload())
        async with _client(recorder) as github:
            details = await github.get_repository("octo cat", "a/b")
        assert recorder.last.url.raw_path == b"/repos/octo%20cat/a%2Fb"
        assert details.forks == 9

    async def test_list_branches(self) -> None:
        recorder = _Recorder(body=[{"name": "main", "protected": False, "commit": {"sha": "abc"}}])
        async with _client(recorder) as github:
            branches = await github.list_branches("o", "r")
        assert recorder.last.url.path == "/repos/o/r/branches"
        assert branches[0].sha == "abc"

    async def test_list_pull_requests_state(self) -> None:
        recorder = _Recorder(body=[pull_payload()])
        async with _client(recorder) as github:
            pulls = await github.list_pull_requests("o", "r", state="all")
        assert recorder.last.url.path == "/repos/o/r/pulls"
        assert recorder.last.url.params["state"] == "all"
        assert pulls[0].head == "new-topic"

    async def test_create_pull_request_body(self) -> None:
        recorder = _Recorder(status=201, body=pull_payload())
        async with _client(recorder) as github:
            pull = await github.create_pull_request(
                "o", "r", title="t", head="feature", base="main"
            )
        assert json.loads(recorder.last.content) == {
            "title": "t",
            "head": "feature",
            "base": "main",
        }
        assert pull.number == 1347

    async def test_create_issue_body(self) -> None:
        recorder = _Recorder(status=201, body={"number": 3, "html_url": "u"})
        async with _client(recorder) as github:
            await github.create_issue("o", "r", title="Bug", body="Steps")
        assert recorder.last.url.path == "/repos/o/r/issues"
        assert json.loads(recorder.last.content) == {"title": "Bug", "body": "Steps"}


class TestContents:
    async def test_put_file_encodes_content(self) -> None:
        recorder = _Recorder(body={"content": {"path": "docs/a.md"}, "commit": {"sha": "c1"}})
        async with _client(recorder) as github:
            commit = await github.put_file(
                "o", "r", "/docs/a.md", content="héllo", message="m", branch="dev", sha="s0"
            )
        assert recorder.last.method == "PUT"
        assert recorder.last.url.path == "/repos/o/r/contents/docs/a.md"
        body = json.loads(recorder.last.content)
        assert base64.b64decode(body["content"]).decode("utf-8") == "héllo"
        assert body["branch"] == "dev"
        assert body["sha"] == "s0"
        assert commit.sha == "c1"

    async def test_put_file_without_sha(self) -> None:
        recorder = _Recorder(status=201, body={"commit": {"sha": "c1"}})
        async with _client(recorder) as github:
            await github.put_file("o", "r", "a.txt", content="", message="m", branch="main")
        assert "sha" not in json.loads(recorder.last.content)

    async def test_get_file(self) -> None:
        recorder = _Recorder(body=file_payload())
        async with _client(recorder) as github:
            file = await github.get_file("o", "r", "README.md", ref="main")
        assert recorder.last.url.params["ref"] == "main"
        assert file is not None
        assert file.decoded_content() == "Hello, world!"

    async def test_get_file_on_directory(self) -> None:
        recorder = _Recorder(body=[file_payload()])
        async with _client(recorder) as github:
            assert await github.get_file("o", "r", "src", ref="main") is None

    async def test_list_directory_root(self) -> None:
        recorder = _Recorder(body=[file_payload(), file_payload(name="src", path="src", type="dir")])
        async with _client(recorder) as github:
            entries = await github.list_directory("o", "r", "", ref="dev")
        assert recorder.last.url.path == "/repos/o/r/contents/"
        assert [entry.type for entry in entries] == ["file", "dir"]

    async def test_list_directory_on_file(self) -> None:
        recorder = _Recorder(body=file_payload())
        async with _client(recorder) as github:
            entries = await github.list_directory("o", "r", "README.md", ref="main")
        assert len(entries) == 1
        assert entries[0].name == "README.md"


class TestErrors:
    async def test_http_error_message(self) -> None:
        recorder = _Recorder(status=404, body={"message": "Not Found"})
        async with _client(recorder) as github:
            with pytest.raises(GitHubAPIError) as info:
                await github.get_repository("o", "missing")
        assert str(info.value) == f"GET {API}/repos/o/missing: 404 Not Found"
        assert info.value.status_code == 404

    async def test_validation_errors_appended(self) -> None:
        errors = [{"resource": "Repository", "code": "custom", "message": "name already exists"}]
        recorder = _Recorder(status=422, body={"message": "Validation Failed", "errors": errors})
        async with _client(recorder) as github:
            with pytest.raises(GitHubAPIError) as info:
                await github.create_repository("dup")
        assert str(info.value) == (
            f"POST {API}/user/repos: 422 Validation Failed {json.dumps(errors)}"
        )

    async def test_non_json_error_body_uses_reason(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(502, text="<html>bad gateway</html>")

        async with _client(handler) as github:
            with pytest.raises(GitHubAPIError, match="502 Bad Gateway"):
                await github.list_branches("o", "r")

    async def test_network_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with _client(handler) as github:
            with pytest.raises(GitHubAPIError, match="connection refused") as info:
                await github.list_repositories()
        assert info.value.status_code is None

    async def test_invalid_json_success_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, text="not json")

        async with _client(handler) as github:
            with pytest.raises(GitHubAPIError, match="invalid JSON"):
                await github.list_repositories()


class TestFromConfig:
    async def test_uses_config_values(self) -> None:
        config = ServerConfig(token="abc", api_url="https://ghe.example.com/api/v3/", timeout=5)
        github = GitHubClient.from_config(config)
        try:
            assert github._http.base_url == httpx.URL("https://ghe.example.com/api/v3/")
            assert github._http.headers["Authorization"] == "Bearer abc"
            assert github._http.timeout.read == 5
        finally:
            await github.aclose()
