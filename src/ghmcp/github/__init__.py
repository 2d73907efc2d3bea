"""GitHub REST client and the entity subsets reported by the tools."""

from ghmcp.github.client import GitHubClient
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

__all__ = [
    "BranchSummary",
    "ContentEntry",
    "FileCommit",
    "FileContent",
    "GitHubAPIError",
    "GitHubClient",
    "IssueSummary",
    "PullRequestSummary",
    "RepoDetails",
    "RepoSummary",
]
