from gitingest_mcp.core.application.services import RepositorySearchAggregator
from gitingest_mcp.core.domain.repository import SearchOutcome


def parse_limit(limit: int | str | None) -> int | None:
    """Accept a positive int or numeric string; anything else means "provider default"."""
    if isinstance(limit, bool):
        return None
    if isinstance(limit, str):
        try:
            limit = int(limit.strip())
        except ValueError:
            return None
    if isinstance(limit, int) and limit > 0:
        return limit
    return None


def format_search_outcome(query: str, outcome: SearchOutcome) -> str:
    if not outcome.results:
        text = f'No repositories found matching query: "{query}"'
    else:
        lines = [f'Search results for: "{query}"\n\n']
        for result in outcome.results:
            description = (result.description or "").strip()
            lines.append(
                f"- {result.provider}:{result.full_name} ⭐️{result.stargazers_count}\n"
                f"  {description}\n\n"
            )
        text = "".join(lines)

    if outcome.is_degraded:
        failed = ", ".join(provider.value for provider in outcome.failed_providers)
        separator = "" if text.endswith("\n") else "\n\n"
        text += f"{separator}(search failed for: {failed})"
    return text


class FindRepositoriesWorkflow:
    def __init__(self, aggregator: RepositorySearchAggregator) -> None:
        self._aggregator = aggregator

    async def execute(self, query: str, limit: int | str | None = None) -> str:
        outcome = await self._aggregator.search(query, parse_limit(limit))
        return format_search_outcome(query, outcome)
