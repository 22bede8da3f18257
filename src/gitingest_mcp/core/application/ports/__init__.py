from gitingest_mcp.core.application.ports.content_fetcher_port import ContentFetcherPort

__all__ = ["ContentFetcherPort"]
