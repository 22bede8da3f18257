from __future__ import annotations

from dataclasses import dataclass, field

from gitingest_mcp.core.domain.shared.provider_type import ProviderType


@dataclass(frozen=True, kw_only=True)
class RepoSearchResult:
    provider: ProviderType
    full_name: str
    description: str | None = None
    stargazers_count: int = 0


@dataclass(frozen=True)
class SearchOutcome:
    """Merged search results plus the providers whose query failed."""

    results: tuple[RepoSearchResult, ...] = ()
    failed_providers: tuple[ProviderType, ...] = field(default_factory=tuple)

    @property
    def is_degraded(self) -> bool:
        return bool(self.failed_providers)
