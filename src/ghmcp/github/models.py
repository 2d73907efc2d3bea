"""GitHub entity models — the field subsets each tool reports.

Each model reads a raw REST payload (``validation_alias`` names the GitHub
field) and dumps under the short output names. Missing or ``null`` fields
fall back to the type's zero value, so output never contains ``null``.
"""

from __future__ import annotations

import base64
import binascii
from typing import Any

from pydantic import AliasPath, BaseModel, ConfigDict, Field, model_validator


def _drop_nulls(value: Any) -> Any:
    if isinstance(value, dict):
        return {k: _drop_nulls(v) for k, v in value.items() if v is not None}
    return value


class GitHubEntity(BaseModel):
    """Base for all entity subsets."""

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _nulls_to_defaults(cls, data: Any) -> Any:
        return _drop_nulls(data)


# ---------------------------------------------------------------------------
# Repositories
# ---------------------------------------------------------------------------


class RepoSummary(GitHubEntity):
    name: str = ""
    description: str = ""
    private: bool = False
    url: str = Field(default="", validation_alias="html_url")
    language: str = ""
    stars: int = Field(default=0, validation_alias="stargazers_count")


class RepoDetails(RepoSummary):
    forks: int = Field(default=0, validation_alias="forks_count")
    issues: int = Field(default=0, validation_alias="open_issues_count")
    created: str = Field(default="", validation_alias="created_at")
    updated: str = Field(default="", validation_alias="updated_at")


class BranchSummary(GitHubEntity):
    name: str = ""
    protected: bool = False
    sha: str = Field(default="", validation_alias=AliasPath("commit", "sha"))


# ---------------------------------------------------------------------------
# Pull requests and issues
# ---------------------------------------------------------------------------


class IssueSummary(GitHubEntity):
    number: int = 0
    title: str = ""
    state: str = ""
    url: str = Field(default="", validation_alias="html_url")
    user: str = Field(default="", validation_alias=AliasPath("user", "login"))


class PullRequestSummary(IssueSummary):
    head: str = Field(default="", validation_alias=AliasPath("head", "ref"))
    base: str = Field(default="", validation_alias=AliasPath("base", "ref"))


# ---------------------------------------------------------------------------
# Repository contents
# ---------------------------------------------------------------------------


class ContentEntry(GitHubEntity):
    """One item of a directory listing."""

    name: str = ""
    path: str = ""
    type: str = ""
    size: int = 0
    sha: str = ""
    url: str = Field(default="", validation_alias="html_url")


class FileContent(GitHubEntity):
    """A single file as returned by the contents API (content still encoded)."""

    path: str = ""
    content: str = ""
    sha: str = ""
    size: int = 0
    encoding: str = ""
    url: str = Field(default="", validation_alias="html_url")

    def decoded_content(self) -> str:
        """Return the file text.

        Raises:
            ValueError: If the encoding is neither ``base64`` nor empty (GitHub
                reports ``none`` for files too large to inline).
        """
        if self.encoding == "base64":
            try:
                raw = base64.b64decode(self.content)
            except binascii.Error as exc:
                msg = f"invalid base64 content: {exc}"
                raise ValueError(msg) from exc
            return raw.decode("utf-8", errors="replace")
        if self.encoding == "":
            return self.content
        msg = f"unsupported content encoding: {self.encoding}"
        raise ValueError(msg)

    def to_output(self) -> dict[str, Any]:
        """Dump with ``content`` decoded."""
        data = self.model_dump()
        data["content"] = self.decoded_content()
        return data


class FileCommit(GitHubEntity):
    """The commit created by a file create or update."""

    sha: str = Field(default="", validation_alias=AliasPath("commit", "sha"))
