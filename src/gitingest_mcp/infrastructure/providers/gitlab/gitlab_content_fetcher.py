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
from gitingest_mcp.core.exceptions import NotFoundError, PathIsDirectoryError, UpstreamParseError
from gitingest_mcp.infrastructure.observability import get_logger
from gitingest_mcp.infrastructure.providers.common import ProviderHttpClient
from gitingest_mcp.infrastructure.providers.gitlab.gitlab_models import (
    FILE_RESPONSE,
    PROJECT_RESPONSE,
    SEARCH_RESPONSE,
    TREE_RESPONSE,
    GitLabTreeItem,
)

logger = get_logger(__name__)

MAX_PER_PAGE = 100


def to_entry(item: GitLabTreeItem) -> RepoEntry:
    # The tree API reports no sizes; submodules ("commit") are listed as files.
    kind = EntryKind.DIRECTORY if item.type == "tree" else EntryKind.FILE
    return RepoEntry(name=item.name, path=item.path, kind=kind)


class GitLabContentFetcher(ContentFetcherPort):
    """GitLab REST v4 project, repository tree/files and project search endpoints."""

    root_label = "root"

    def __init__(
        self,
        base_url: str = "https://gitlab.com",
        token: str | None = None,
        timeout: float = 10.0,
        user_agent: str = "GitIngest-MCP-Agent/1.0",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        headers = {"User-Agent": user_agent, "Accept": "application/json"}
        if token:
            headers["PRIVATE-TOKEN"] = token
        api_url = f"{base_url.rstrip('/')}/api/v4"
        self._client = ProviderHttpClient(ProviderType.GITLAB, api_url, headers, timeout, transport)

    @property
    def provider(self) -> ProviderType:
        return ProviderType.GITLAB

    @staticmethod
    def _project_path(identifier: RepoIdentifier) -> str:
        return f"projects/{quote(identifier.project_path, safe='')}"

    async def _list_tree(
        self, identifier: RepoIdentifier, path: str, ref: str | None
    ) -> list[GitLabTreeItem]:
        payload = await self._client.get_json(
            f"{self._project_path(identifier)}/repository/tree",
            params={"path": path or None, "ref": ref, "per_page": MAX_PER_PAGE},
        )
        return self._client.decode(TREE_RESPONSE, payload, "repository tree")

    async def list_directory(
        self, identifier: RepoIdentifier, path: str, ref: str | None
    ) -> list[RepoEntry]:
        items = await self._list_tree(identifier, path, ref)
        if items or not path:
            return [to_entry(item) for item in items]
        # The tree of a file path is empty; report the file itself.
        return await self._file_entry(identifier, path, ref)

    def _file_url(self, identifier: RepoIdentifier, path: str) -> str:
        return f"{self._project_path(identifier)}/repository/files/{quote(path, safe='')}"

    async def _file_entry(
        self, identifier: RepoIdentifier, path: str, ref: str | None
    ) -> list[RepoEntry]:
        try:
            payload = await self._client.get_json(
                self._file_url(identifier, path), params={"ref": ref}
            )
        except NotFoundError:
            return []
        file_data = self._client.decode(FILE_RESPONSE, payload, "file")
        name = path.rsplit("/", 1)[-1]
        return [RepoEntry(name=name, path=path, kind=EntryKind.FILE, size=file_data.size)]

    async def read_file(self, identifier: RepoIdentifier, path: str, ref: str | None) -> bytes:
        try:
            payload = await self._client.get_json(
                self._file_url(identifier, path), params={"ref": ref}
            )
        except NotFoundError:
            # The files endpoint answers 404 for directories too.
            if await self._is_directory(identifier, path, ref):
                raise PathIsDirectoryError(path) from None
            raise

        file_data = self._client.decode(FILE_RESPONSE, payload, "file")
        if file_data.encoding != "base64":
            return file_data.content.encode("utf-8")
        try:
            return base64.b64decode(file_data.content, validate=True)
        except binascii.Error as exc:
            raise UpstreamParseError(
                self.provider.value, f"File content for {path} is not valid base64"
            ) from exc

    async def _is_directory(self, identifier: RepoIdentifier, path: str, ref: str | None) -> bool:
        try:
            return bool(await self._list_tree(identifier, path, ref))
        except NotFoundError:
            return False

    async def get_metadata(self, identifier: RepoIdentifier) -> RepoMetadata:
        payload = await self._client.get_json(self._project_path(identifier))
        project = self._client.decode(PROJECT_RESPONSE, payload, "project")
        return RepoMetadata(name=project.name, default_branch=project.default_branch)

    async def get_display_name(
        self, identifier: RepoIdentifier, metadata: RepoMetadata | None = None
    ) -> str:
        if metadata is None:
            metadata = await self.get_metadata(identifier)
        return metadata.name or identifier.repo

    async def search(self, query: str, limit: int | None) -> list[RepoSearchResult]:
        per_page = min(limit, MAX_PER_PAGE) if limit else None
        logger.info("Searching repositories", provider=self.provider.value, query=query, per_page=per_page)
        payload = await self._client.get_json(
            "projects",
            params={
                "search": query,
                "per_page": per_page,
                "order_by": "star_count",
                "sort": "desc",
            },
        )
        items = self._client.decode(SEARCH_RESPONSE, payload, "project search")
        return [
            RepoSearchResult(
                provider=self.provider,
                full_name=item.path_with_namespace,
                description=item.description,
                stargazers_count=item.star_count,
            )
            for item in items
        ]
