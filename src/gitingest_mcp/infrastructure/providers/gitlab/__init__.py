from gitingest_mcp.infrastructure.providers.gitlab.gitlab_content_fetcher import (
    GitLabContentFetcher,
)

__all__ = ["GitLabContentFetcher"]
