import base64
import binascii
from urllib.parse import quote

import httpx

from gitingest_mcp.core.application.ports import ContentFetcherPort
from gitingest_mcp.core.domain.repository import (
    EntryKind,
    RepoEntry,
    RepoIdentifier,
    RepoMetadata,
    RepoSearchResult,
)
from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.core.exceptions import PathIsDirectoryError, UpstreamParseError
from gitingest_mcp.infrastructure.observability import get_logger
from gitingest_mcp.infrastructure.providers.common import ProviderHttpClient
from gitingest_mcp.infrastructure.providers.github.github_models import (
    CONTENT_RESPONSE,
    REPO_RESPONSE,
    SEARCH_RESPONSE,
    GitHubContent,
)

logger = get_logger(__name__)

MAX_PER_PAGE = 100


def to_entry(content: GitHubContent) -> RepoEntry:
    # Symlinks and submodules are listed as files.
    kind = EntryKind.DIRECTORY if content.type == "dir" else EntryKind.FILE
    return RepoEntry(name=content.name, path=content.path, kind=kind, size=content.size)


class GitHubContentFetcher(ContentFetcherPort):
    """GitHub REST v3 contents, repository and search endpoints."""

    root_label = ""

    def __init__(
        self,
        api_url: str = "https://api.github.com",
        token: str | None = None,
        timeout: float = 10.0,
        user_agent: str = "GitIngest-MCP-Agent/1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {
            "User-Agent": user_agent,
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            headers["Authorization"] = f"Bearer {token}"
        self._client = ProviderHttpClient(ProviderType.GITHUB, api_url, headers, timeout, transport)

    @property
    def provider(self) -> ProviderType:
        return ProviderType.GITHUB

    def _contents_path(self, identifier: RepoIdentifier, path: str) -> str:
        base = f"repos/{identifier.owner_or_namespace}/{identifier.repo}/contents"
        if not path:
            return base
        return f"{base}/{quote(path, safe='/')}"

    async def list_directory(
        self, identifier: RepoIdentifier, path: str, ref: str | None
    ) -> list[RepoEntry]:
        payload = await self._client.get_json(
            self._contents_path(identifier, path), params={"ref": ref}
        )
        contents = self._client.decode(CONTENT_RESPONSE, payload, "contents")
        if isinstance(contents, GitHubContent):
            contents = [contents]
        return [to_entry(content) for content in contents]

    async def read_file(self, identifier: RepoIdentifier, path: str, ref: str | None) -> bytes:
        payload = await self._client.get_json(
            self._contents_path(identifier, path), params={"ref": ref}
        )
        content = self._client.decode(CONTENT_RESPONSE, payload, "file contents")
        if isinstance(content, list) or content.type == "dir":
            raise PathIsDirectoryError(path)
        if content.content is None or content.encoding != "base64":
            raise UpstreamParseError(
                self.provider.value,
                f"File content not found in response for {path} (encoding={content.encoding})",
            )

        try:
            return base64.b64decode(content.content.replace("\n", ""), validate=True)
        except binascii.Error as exc:
            raise UpstreamParseError(
                self.provider.value, f"File content for {path} is not valid base64"
            ) from exc

    async def get_metadata(self, identifier: RepoIdentifier) -> RepoMetadata:
        payload = await self._client.get_json(
            f"repos/{identifier.owner_or_namespace}/{identifier.repo}"
        )
        repo = self._client.decode(REPO_RESPONSE, payload, "repository")
        return RepoMetadata(name=repo.name, default_branch=repo.default_branch)

    async def search(self, query: str, limit: int | None) -> list[RepoSearchResult]:
        per_page = min(limit, MAX_PER_PAGE) if limit else None
        logger.info("Searching repositories", provider=self.provider.value, query=query, per_page=per_page)
        payload = await self._client.get_json(
            "search/repositories", params={"q": query, "per_page": per_page}
        )
        response = self._client.decode(SEARCH_RESPONSE, payload, "search")
        return [
            RepoSearchResult(
                provider=self.provider,
                full_name=item.full_name,
                description=item.description,
                stargazers_count=item.stargazers_count,
            )
            for item in response.items
        ]
