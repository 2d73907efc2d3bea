"""Shared fixtures: a recording stand-in for the GitHub client and sample payloads."""

from __future__ import annotations

from typing import Any
from unittest.mock import MagicMock

import pytest

from ghmcp.github.client import GitHubClient


@pytest.fixture
def github() -> MagicMock:
    """A GitHubClient double; its async methods are AsyncMocks that record calls."""
    return MagicMock(spec=GitHubClient)


def repo_payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": 1296269,
        "name": "hello-world",
        "full_name": "octocat/hello-world",
        "description": "My first repo",
        "private": False,
        "url": "https://api.github.com/repos/octocat/hello-world",
        "html_url": "https://github.com/octocat/hello-world",
        "language": "Python",
        "stargazers_count": 80,
        "forks_count": 9,
        "open_issues_count": 2,
        "created_at": "2011-01-26T19:01:12Z",
        "updated_at": "2011-01-26T19:14:43Z",
    }
    data.update(overrides)
    return data


def pull_payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "number": 1347,
        "title": "Amazing new feature",
        "state": "open",
        "url": "https://api.github.com/repos/octocat/hello-world/pulls/1347",
        "html_url": "https://github.com/octocat/hello-world/pull/1347",
        "user": {"login": "octocat"},
        "head": {"ref": "new-topic", "sha": "6dcb09b"},
        "base": {"ref": "main", "sha": "6dcb09c"},
    }
    data.update(overrides)
    return data


def file_payload(**overrides: Any) -> dict[str, Any]:
    data: dict[str, Any] = {
        "type": "file",
        "name": "README.md",
        "path": "README.md",
        "sha": "3d21ec53a331a6f037a91c368710b99387d012c1",
        "size": 13,
        # "Hello, world!" wrapped the way GitHub wraps base64
        "content": "SGVsbG8s\nIHdvcmxkIQ==\n",
        "encoding": "base64",
        "html_url": "https://github.com/octocat/hello-world/blob/main/README.md",
    }
    data.update(overrides)
    return data
