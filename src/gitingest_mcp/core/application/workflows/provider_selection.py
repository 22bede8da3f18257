from collections.abc import Mapping

from gitingest_mcp.core.application.ports import ContentFetcherPort
from gitingest_mcp.core.domain.repository import (
    RepoLocator,
    parse_locator,
    split_qualified_identifier,
)
from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.core.exceptions import ProviderNotSupportedError

FetcherTable = Mapping[ProviderType, ContentFetcherPort]


def select_repository(fetchers: FetcherTable, repo: str) -> tuple[ContentFetcherPort, RepoLocator]:
    """Resolve ``"<provider>:<path>"`` to its fetcher and parsed locator, with no I/O."""
    provider_name, path = split_qualified_identifier(repo)
    supported = [provider.value for provider in fetchers]
    if provider_name not in supported:
        raise ProviderNotSupportedError(provider_name, supported)

    provider = ProviderType(provider_name)
    return fetchers[provider], parse_locator(provider, path)
