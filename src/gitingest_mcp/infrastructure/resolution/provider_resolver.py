from collections.abc import Callable

from pydantic import SecretStr

from gitingest_mcp.core.application.ports import ContentFetcherPort
from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.infrastructure.configuration import Settings
from gitingest_mcp.infrastructure.providers.github import GitHubContentFetcher
from gitingest_mcp.infrastructure.providers.gitlab import GitLabContentFetcher


def _secret(value: SecretStr | None) -> str | None:
    return value.get_secret_value() if value else None


def _build_github(settings: Settings) -> ContentFetcherPort:
    return GitHubContentFetcher(
        api_url=settings.github_api_url,
        token=_secret(settings.github_token),
        timeout=settings.http_timeout_seconds,
        user_agent=settings.user_agent,
    )


def _build_gitlab(settings: Settings) -> ContentFetcherPort:
    return GitLabContentFetcher(
        base_url=settings.gitlab_base_url,
        token=_secret(settings.gitlab_token),
        timeout=settings.http_timeout_seconds,
        user_agent=settings.user_agent,
    )


# Adding a provider means adding a ProviderType member and an entry here.
_FACTORIES: dict[ProviderType, Callable[[Settings], ContentFetcherPort]] = {
    ProviderType.GITHUB: _build_github,
    ProviderType.GITLAB: _build_gitlab,
}


class ProviderResolver:
    """
    Builds the provider -> content fetcher table once, from explicit settings.
    """

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    def resolve(self, provider: ProviderType) -> ContentFetcherPort:
        try:
            factory = _FACTORIES[provider]
        except KeyError:
            raise ValueError(f"Unsupported git provider: {provider}") from None
        return factory(self.settings)

    def resolve_all(self) -> dict[ProviderType, ContentFetcherPort]:
        return {provider: self.resolve(provider) for provider in ProviderType}
