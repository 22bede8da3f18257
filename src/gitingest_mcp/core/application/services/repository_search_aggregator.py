import asyncio
from collections.abc import Sequence

import structlog

from gitingest_mcp.core.application.ports import ContentFetcherPort
from gitingest_mcp.core.domain.repository import RepoSearchResult, SearchOutcome
from gitingest_mcp.core.exceptions import InvalidInputError

logger = structlog.get_logger()


class RepositorySearchAggregator:
    """Fans a keyword query out to every provider and merges by popularity.

    A failing provider never fails the aggregate call; it is dropped from the
    results and named in ``SearchOutcome.failed_providers``.
    """

    def __init__(self, fetchers: Sequence[ContentFetcherPort]) -> None:
        self._fetchers = tuple(fetchers)

    async def search(self, query: str, limit: int | None = None) -> SearchOutcome:
        if not query or not query.strip():
            raise InvalidInputError("Empty search query is not allowed")

        responses = await asyncio.gather(
            *(fetcher.search(query, limit) for fetcher in self._fetchers),
            return_exceptions=True,
        )

        merged: list[RepoSearchResult] = []
        failed = []
        for fetcher, response in zip(self._fetchers, responses):
            if isinstance(response, BaseException):
                if not isinstance(response, Exception):
                    raise response
                logger.warning(
                    "Repository search failed for provider",
                    provider=fetcher.provider.value,
                    error=str(response),
                )
                failed.append(fetcher.provider)
                continue
            merged.extend(response)

        merged.sort(key=lambda result: result.stargazers_count, reverse=True)
        return SearchOutcome(results=tuple(merged), failed_providers=tuple(failed))
