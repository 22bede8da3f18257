"""Subset of the GitLab v4 payloads the fetcher reads; unknown fields are ignored."""

from pydantic import BaseModel, ConfigDict, TypeAdapter


class GitLabTreeItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    path: str
    type: str


class GitLabProject(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    default_branch: str | None = None


class GitLabFileContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str
    encoding: str = "base64"
    size: int | None = None


class GitLabRepoItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    path_with_namespace: str
    description: str | None = None
    star_count: int = 0


TREE_RESPONSE = TypeAdapter(list[GitLabTreeItem])
PROJECT_RESPONSE = TypeAdapter(GitLabProject)
FILE_RESPONSE = TypeAdapter(GitLabFileContent)
SEARCH_RESPONSE = TypeAdapter(list[GitLabRepoItem])
