from gitingest_mcp.infrastructure.providers.github.github_content_fetcher import (
    GitHubContentFetcher,
)

__all__ = ["GitHubContentFetcher"]
