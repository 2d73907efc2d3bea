"""GitHubClient — the authenticated GitHub REST collaborator.

One coroutine per remote call used by the tools. Each issues exactly one
HTTP request and returns typed entity models; failures raise
:class:`~ghmcp.github.errors.GitHubAPIError` with GitHub's message.
"""

from __future__ import annotations

import base64
import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote

import httpx

from ghmcp import __version__
from ghmcp.config import DEFAULT_API_URL, DEFAULT_TIMEOUT
from ghmcp.github.errors import GitHubAPIError
from ghmcp.github.models import (
    BranchSummary,
    ContentEntry,
    FileCommit,
    FileContent,
    IssueSummary,
    PullRequestSummary,
    RepoDetails,
    RepoSummary,
)
from ghmcp.utils.telemetry import ATTR_HTTP_METHOD, ATTR_HTTP_PATH, ATTR_HTTP_STATUS, get_tracer

if TYPE_CHECKING:
    from ghmcp.config import ServerConfig

logger = logging.getLogger(__name__)
_tracer = get_tracer(__name__)

API_VERSION = "2022-11-28"


class GitHubClient:
    """Thin async wrapper over the GitHub REST API.

    Built once at startup and shared by every request; it holds no state
    besides the underlying :class:`httpx.AsyncClient`.

    Usage::

        async with GitHubClient(token) as github:
            repo = await github.get_repository("octocat", "hello-world")
    """

    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=api_url,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": API_VERSION,
                "User-Agent": f"ghmcp/{__version__}",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_config(cls, config: ServerConfig) -> GitHubClient:
        return cls(config.token, api_url=config.api_url, timeout=config.timeout)

    async def __aenter__(self) -> GitHubClient:
        return self

    async def __aexit__(self, *_: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # -- repositories -------------------------------------------------------

    async def list_repositories(self, type: str = "all") -> list[RepoSummary]:
        data = await self._request("GET", "/user/repos", params={"type": type})
        return [RepoSummary.model_validate(item) for item in data]

    async def create_repository(
        self,
        name: str,
        *,
        description: str | None = None,
        private: bool | None = None,
    ) -> RepoSummary:
        body: dict[str, Any] = {"name": name}
        if description is not None:
            body["description"] = description
        if private is not None:
            body["private"] = private
        data = await self._request("POST", "/user/repos", json=body)
        return RepoSummary.model_validate(data)

    async def get_repository(self, owner: str, repo: str) -> RepoDetails:
        data = await self._request("GET", _repo_path(owner, repo))
        return RepoDetails.model_validate(data)

    async def list_branches(self, owner: str, repo: str) -> list[BranchSummary]:
        data = await self._request("GET", f"{_repo_path(owner, repo)}/branches")
        return [BranchSummary.model_validate(item) for item in data]

    # -- pull requests and issues -------------------------------------------

    async def list_pull_requests(
        self, owner: str, repo: str, state: str = "open"
    ) -> list[PullRequestSummary]:
        data = await self._request(
            "GET", f"{_repo_path(owner, repo)}/pulls", params={"state": state}
        )
        return [PullRequestSummary.model_validate(item) for item in data]

    async def create_pull_request(
        self,
        owner: str,
        repo: str,
        *,
        title: str,
        head: str,
        base: str,
        body: str | None = None,
    ) -> PullRequestSummary:
        payload: dict[str, Any] = {"title": title, "head": head, "base": base}
        if body is not None:
            payload["body"] = body
        data = await self._request("POST", f"{_repo_path(owner, repo)}/pulls", json=payload)
        return PullRequestSummary.model_validate(data)

    async def list_issues(self, owner: str, repo: str, state: str = "open") -> list[IssueSummary]:
        data = await self._request(
            "GET", f"{_repo_path(owner, repo)}/issues", params={"state": state}
        )
        return [IssueSummary.model_validate(item) for item in data]

    async def create_issue(
        self, owner: str, repo: str, *, title: str, body: str | None = None
    ) -> IssueSummary:
        payload: dict[str, Any] = {"title": title}
        if body is not None:
            payload["body"] = body
        data = await self._request("POST", f"{_repo_path(owner, repo)}/issues", json=payload)
        return IssueSummary.model_validate(data)

    # -- contents -----------------------------------------------------------

    async def put_file(
        self,
        owner: str,
        repo: str,
        path: str,
        *,
        content: str,
        message: str,
        branch: str,
        sha: str | None = None,
    ) -> FileCommit:
        """Create (``sha`` is ``None``) or update a file with one commit."""
        payload: dict[str, Any] = {
            "message": message,
            "content": base64.b64encode(content.encode("utf-8")).decode("ascii"),
            "branch": branch,
        }
        if sha is not None:
            payload["sha"] = sha
        data = await self._request("PUT", _contents_path(owner, repo, path), json=payload)
        return FileCommit.model_validate(data)

    async def get_file(self, owner: str, repo: str, path: str, *, ref: str) -> FileContent | None:
        """Fetch the file at *path*; ``None`` when *path* is a directory."""
        data = await self._request("GET", _contents_path(owner, repo, path), params={"ref": ref})
        if isinstance(data, list):
            return None
        return FileContent.model_validate(data)

    async def list_directory(
        self, owner: str, repo: str, path: str, *, ref: str
    ) -> list[ContentEntry]:
        """List *path*; a path naming a single file yields a one-entry listing."""
        data = await self._request("GET", _contents_path(owner, repo, path), params={"ref": ref})
        if isinstance(data, list):
            return [ContentEntry.model_validate(item) for item in data]
        return [ContentEntry.model_validate(data)]

    # -- transport ----------------------------------------------------------

    async def _request(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, str] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        with _tracer.start_as_current_span("ghmcp.github.request") as span:
            span.set_attribute(ATTR_HTTP_METHOD, method)
            span.set_attribute(ATTR_HTTP_PATH, path)
            logger.debug("GitHub %s %s", method, path)
            try:
                response = await self._http.request(method, path, params=params, json=json)
            except httpx.HTTPError as exc:
                logger.warning("GitHub %s %s failed: %s", method, path, exc)
                raise GitHubAPIError(str(exc) or type(exc).__name__) from exc
            span.set_attribute(ATTR_HTTP_STATUS, response.status_code)

        if response.is_error:
            error = GitHubAPIError.from_response(response)
            logger.warning("%s", error)
            raise error

        try:
            return response.json()
        except ValueError as exc:
            raise GitHubAPIError(
                f"{method} {response.request.url}: invalid JSON in response",
                status_code=response.status_code,
            ) from exc


def _repo_path(owner: str, repo: str) -> str:
    return f"/repos/{quote(owner, safe='')}/{quote(repo, safe='')}"


def _contents_path(owner: str, repo: str, path: str) -> str:
    return f"{_repo_path(owner, repo)}/contents/{quote(path.strip('/'), safe='/')}"
