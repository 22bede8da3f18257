from abc import ABC, abstractmethod

from gitingest_mcp.core.domain.repository import (
    RepoEntry,
    RepoIdentifier,
    RepoMetadata,
    RepoSearchResult,
)
from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.core.exceptions import NotFoundError


class ContentFetcherPort(ABC):
    """Per-provider access to listings, file payloads, metadata and search.

    Implementations must be safe to call concurrently: the tree builder issues
    one listing per sibling directory at the same time.
    """

    #: Name given to a node built for the repository root (empty path).
    root_label: str = ""

    @property
    @abstractmethod
    def provider(self) -> ProviderType: ...

    @abstractmethod
    async def list_directory(
        self, identifier: RepoIdentifier, path: str, ref: str | None
    ) -> list[RepoEntry]:
        """List the entries of ``path`` ("" is the repository root).

        When ``path`` names a file the listing is that single file entry.
        """

    @abstractmethod
    async def read_file(self, identifier: RepoIdentifier, path: str, ref: str | None) -> bytes:
        """Return the raw file payload. Raises PathIsDirectoryError for directories."""

    @abstractmethod
    async def get_metadata(self, identifier: RepoIdentifier) -> RepoMetadata:
        """Fetch the repository record (one request)."""

    @abstractmethod
    async def search(self, query: str, limit: int | None) -> list[RepoSearchResult]:
        """Search repositories by keyword, one API page at most."""

    def default_branch_of(self, identifier: RepoIdentifier, metadata: RepoMetadata) -> str:
        if not metadata.default_branch:
            raise NotFoundError(
                self.provider.value,
                f"Repository {identifier.project_path} has no default branch (empty repository?)",
            )
        return metadata.default_branch

    async def get_default_branch(self, identifier: RepoIdentifier) -> str:
        return self.default_branch_of(identifier, await self.get_metadata(identifier))

    async def get_display_name(
        self, identifier: RepoIdentifier, metadata: RepoMetadata | None = None
    ) -> str:
        """Name shown at the top of a rendered tree.

        ``metadata`` is reused when the caller already fetched it.
        """
        return identifier.repo
