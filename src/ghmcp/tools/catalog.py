"""The static tool catalog returned by ``tools/list``."""

from __future__ import annotations

from ghmcp.protocol.models import ToolDef, ToolInputSchema, ToolProperty

LIST_REPOS = "github_list_repos"
CREATE_REPO = "github_create_repo"
GET_REPO = "github_get_repo"
LIST_BRANCHES = "github_list_branches"
LIST_PRS = "github_list_prs"
CREATE_PR = "github_create_pr"
LIST_ISSUES = "github_list_issues"
CREATE_ISSUE = "github_create_issue"
CREATE_FILE = "github_create_file"
UPDATE_FILE = "github_update_file"
GET_FILE = "github_get_file"
LIST_FILES = "github_list_files"


def _string(description: str) -> ToolProperty:
    return ToolProperty(type="string", description=description)


def _tool(
    name: str,
    description: str,
    properties: dict[str, ToolProperty],
    required: list[str] | None = None,
) -> ToolDef:
    return ToolDef(
        name=name,
        description=description,
        input_schema=ToolInputSchema(properties=properties, required=required),
    )


_OWNER = _string("Repository owner")
_REPO = _string("Repository name")
_STATE = _string("State: open, closed, all")
_BRANCH = _string("Branch (optional, default: main)")


TOOL_CATALOG: tuple[ToolDef, ...] = (
    _tool(
        LIST_REPOS,
        "List repositories of the authenticated user",
        {"type": _string("Type: all, owner, member")},
    ),
    _tool(
        CREATE_REPO,
        "Create a new repository",
        {
            "name": _string("Repository name"),
            "description": _string("Repository description"),
            "private": ToolProperty(type="boolean", description="Private repository"),
        },
        ["name"],
    ),
    _tool(
        GET_REPO,
        "Get information about a repository",
        {"owner": _OWNER, "repo": _REPO},
        ["owner", "repo"],
    ),
    _tool(
        LIST_BRANCHES,
        "List branches of a repository",
        {"owner": _OWNER, "repo": _REPO},
        ["owner", "repo"],
    ),
    _tool(
        LIST_PRS,
        "List pull requests of a repository",
        {"owner": _OWNER, "repo": _REPO, "state": _STATE},
        ["owner", "repo"],
    ),
    _tool(
        CREATE_PR,
        "Create a new pull request",
        {
            "owner": _OWNER,
            "repo": _REPO,
            "title": _string("Pull request title"),
            "body": _string("Pull request description"),
            "head": _string("Source branch"),
            "base": _string("Target branch"),
        },
        ["owner", "repo", "title", "head", "base"],
    ),
    _tool(
        LIST_ISSUES,
        "List issues of a repository",
        {"owner": _OWNER, "repo": _REPO, "state": _STATE},
        ["owner", "repo"],
    ),
    _tool(
        CREATE_ISSUE,
        "Create a new issue",
        {
            "owner": _OWNER,
            "repo": _REPO,
            "title": _string("Issue title"),
            "body": _string("Issue description"),
        },
        ["owner", "repo", "title"],
    ),
    _tool(
        CREATE_FILE,
        "Create a new file in the repository",
        {
            "owner": _OWNER,
            "repo": _REPO,
            "path": _string("File path"),
            "content": _string("File content"),
            "message": _string("Commit message"),
            "branch": _BRANCH,
        },
        ["owner", "repo", "path", "content", "message"],
    ),
    _tool(
        UPDATE_FILE,
        "Update an existing file in the repository",
        {
            "owner": _OWNER,
            "repo": _REPO,
            "path": _string("File path"),
            "content": _string("New file content"),
            "message": _string("Commit message"),
            "sha": _string("SHA of the current file"),
            "branch": _BRANCH,
        },
        ["owner", "repo", "path", "content", "message", "sha"],
    ),
    _tool(
        GET_FILE,
        "Get the content of a file in the repository",
        {
            "owner": _OWNER,
            "repo": _REPO,
            "path": _string("File path"),
            "branch": _BRANCH,
        },
        ["owner", "repo", "path"],
    ),
    _tool(
        LIST_FILES,
        "List files and directories at a path in the repository",
        {
            "owner": _OWNER,
            "repo": _REPO,
            "path": _string("Directory path (optional, default: repository root)"),
            "branch": _BRANCH,
        },
        ["owner", "repo"],
    ),
)

TOOL_NAMES: tuple[str, ...] = tuple(tool.name for tool in TOOL_CATALOG)
