"""Subset of the GitHub REST payloads the fetcher reads; unknown fields are ignored."""

from pydantic import BaseModel, ConfigDict, TypeAdapter


class GitHubContent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str
    path: str
    type: str
    size: int | None = None
    encoding: str | None = None
    content: str | None = None


class GitHubRepo(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    default_branch: str | None = None


class GitHubRepoItem(BaseModel):
    model_config = ConfigDict(extra="ignore")

    full_name: str
    description: str | None = None
    stargazers_count: int = 0


class GitHubSearchRepoResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[GitHubRepoItem] = []


# The contents endpoint answers a list for directories and an object for files.
CONTENT_RESPONSE = TypeAdapter(list[GitHubContent] | GitHubContent)
REPO_RESPONSE = TypeAdapter(GitHubRepo)
SEARCH_RESPONSE = TypeAdapter(GitHubSearchRepoResponse)
