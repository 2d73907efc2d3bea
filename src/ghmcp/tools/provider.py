"""GitHubTools — the twelve GitHub tools behind ``tools/call``.

Satisfies the :class:`~ghmcp.protocol.provider.ToolProvider` protocol.
Each handler validates its required arguments before touching the network,
makes exactly one GitHub call and renders the outcome as a single string.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from ghmcp.protocol.errors import MissingArgumentError, ToolExecutionError, ToolNotFoundError
from ghmcp.tools.catalog import (
    CREATE_FILE,
    CREATE_ISSUE,
    CREATE_PR,
    CREATE_REPO,
    GET_FILE,
    GET_REPO,
    LIST_BRANCHES,
    LIST_FILES,
    LIST_ISSUES,
    LIST_PRS,
    LIST_REPOS,
    TOOL_CATALOG,
    UPDATE_FILE,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from ghmcp.github.client import GitHubClient
    from ghmcp.protocol.models import ToolDef

logger = logging.getLogger(__name__)

DEFAULT_BRANCH = "main"

_REQUIRED_MESSAGES: dict[str, str] = {
    "owner": "owner required",
    "repo": "repository name required",
    "name": "repository name required",
    "title": "title required",
    "head": "head branch required",
    "base": "base branch required",
    "path": "file path required",
    "content": "file content required",
    "message": "commit message required",
    "sha": "file SHA required",
}


def _require(arguments: dict[str, Any], field: str) -> str:
    value = arguments.get(field)
    if not isinstance(value, str):
        raise MissingArgumentError(field, _REQUIRED_MESSAGES[field])
    return value


def _string_or(arguments: dict[str, Any], field: str, default: str) -> str:
    value = arguments.get(field)
    return value if isinstance(value, str) else default


def _optional_string(arguments: dict[str, Any], field: str) -> str | None:
    value = arguments.get(field)
    return value if isinstance(value, str) else None


def _optional_bool(arguments: dict[str, Any], field: str) -> bool | None:
    value = arguments.get(field)
    return value if isinstance(value, bool) else None


def _to_json(data: Any) -> str:
    return json.dumps(data, indent=2, ensure_ascii=False, sort_keys=True)


class GitHubTools:
    """Routes a tool name to its handler.

    Usage::

        tools = GitHubTools(GitHubClient(token))
        text = await tools.call_tool("github_get_repo", {"owner": "o", "repo": "r"})
    """

    def __init__(self, client: GitHubClient) -> None:
        self._client = client
        self._handlers: dict[str, Callable[[dict[str, Any]], Awaitable[str]]] = {
            LIST_REPOS: self._list_repos,
            CREATE_REPO: self._create_repo,
            GET_REPO: self._get_repo,
            LIST_BRANCHES: self._list_branches,
            LIST_PRS: self._list_prs,
            CREATE_PR: self._create_pr,
            LIST_ISSUES: self._list_issues,
            CREATE_ISSUE: self._create_issue,
            CREATE_FILE: self._create_file,
            UPDATE_FILE: self._update_file,
            GET_FILE: self._get_file,
            LIST_FILES: self._list_files,
        }

    def list_tools(self) -> list[ToolDef]:
        return list(TOOL_CATALOG)

    async def call_tool(self, name: str, arguments: dict[str, Any]) -> str:
        """Execute tool *name* and return its text output."""
        handler = self._handlers.get(name)
        if handler is None:
            raise ToolNotFoundError(name)
        logger.debug("Calling tool %s", name)
        return await handler(arguments)

    # -- repositories -------------------------------------------------------

    async def _list_repos(self, args: dict[str, Any]) -> str:
        repos = await self._client.list_repositories(type=_string_or(args, "type", "all"))
        return _to_json([repo.model_dump() for repo in repos])

    async def _create_repo(self, args: dict[str, Any]) -> str:
        name = _require(args, "name")
        repo = await self._client.create_repository(
            name,
            description=_optional_string(args, "description"),
            private=_optional_bool(args, "private"),
        )
        return f"Repository '{repo.name}' created successfully: {repo.url}"

    async def _get_repo(self, args: dict[str, Any]) -> str:
        owner = _require(args, "owner")
        repo = _require(args, "repo")
        details = await self._client.get_repository(owner, repo)
        return _to_json(details.model_dump())

    async def _list_branches(self, args: dict[str, Any]) -> str:
        owner = _require(args, "owner")
        repo = _require(args, "repo")
        branches = await self._client.list_branches(owner, repo)
        return _to_json([branch.model_dump() for branch in branches])

    # -- pull requests and issues -------------------------------------------

    async def _list_prs(self, args: dict[str, Any]) -> str:
        owner = _require(args, "owner")
        repo = _require(args, "repo")
        state = _string_or(args, "state", "open")
        pulls = await self._client.list_pull_requests(owner, repo, state=state)
        return _to_json([pull.model_dump() for pull in pulls])

    async def _create_pr(self, args: dict[str, Any]) -> str:
        owner = _require(args, "owner")
        repo = _require(args, "repo")
        title = _require(args, "title")
        head = _require(args, "head")
        base = _require(args, "base")
        pull = await self._client.create_pull_request(
            owner,
            repo,
            title=title,
            head=head,
            base=base,
            body=_optional_string(args, "body"),
        )
        return f"Pull Request #{pull.number} created: {pull.url}"

    async def _list_issues(self, args: dict[str, Any]) -> str:
        owner = _require(args, "owner")
        repo = _require(args, "repo")
        state = _string_or(args, "state", "open")
        issues = await self._client.list_issues(owner, repo, state=state)
        return _to_json([issue.model_dump() for issue in issues])

    async def _create_issue(self, args: dict[str, Any]) -> str:
        owner = _require(args, "owner")
        repo = _require(args, "repo")
        title = _require(args, "title")
        issue = await self._client.create_issue(
            owner, repo, title=title, body=_optional_string(args, "body")
        )
        return f"Issue #{issue.number} created: {issue.url}"

    # -- contents -----------------------------------------------------------

    async def _create_file(self, args: dict[str, Any]) -> str:
        owner = _require(args, "owner")
        repo = _require(args, "repo")
        path = _require(args, "path")
        content = _require(args, "content")
        message = _require(args, "message")
        commit = await self._client.put_file(
            owner,
            repo,
            path,
            content=content,
            message=message,
            branch=_string_or(args, "branch", DEFAULT_BRANCH),
        )
        return f"File '{path}' created successfully. Commit SHA: {commit.sha}"

    async def _update_file(self, args: dict[str, Any]) -> str:
        owner = _require(args, "owner")
        repo = _require(args, "repo")
        path = _require(args, "path")
        content = _require(args, "content")
        message = _require(args, "message")
        sha = _require(args, "sha")
        commit = await self._client.put_file(
            owner,
            repo,
            path,
            content=content,
            message=message,
            branch=_string_or(args, "branch", DEFAULT_BRANCH),
            sha=sha,
        )
        return f"File '{path}' updated successfully. Commit SHA: {commit.sha}"

    async def _get_file(self, args: dict[str, Any]) -> str:
        owner = _require(args, "owner")
        repo = _require(args, "repo")
        path = _require(args, "path")
        ref = _string_or(args, "branch", DEFAULT_BRANCH)
        file = await self._client.get_file(owner, repo, path, ref=ref)
        if file is None:
            raise ToolExecutionError(GET_FILE, f"'{path}' is a directory, not a file")
        try:
            data = file.to_output()
        except ValueError as exc:
            raise ToolExecutionError(GET_FILE, str(exc)) from exc
        return _to_json(data)

    async def _list_files(self, args: dict[str, Any]) -> str:
        owner = _require(args, "owner")
        repo = _require(args, "repo")
        path = _string_or(args, "path", "")
        ref = _string_or(args, "branch", DEFAULT_BRANCH)
        entries = await self._client.list_directory(owner, repo, path, ref=ref)
        return _to_json([entry.model_dump() for entry in entries])
