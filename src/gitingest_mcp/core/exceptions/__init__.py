from gitingest_mcp.core.exceptions.access_denied_error import AccessDeniedError
from gitingest_mcp.core.exceptions.git_ingest_error import GitIngestError
from gitingest_mcp.core.exceptions.invalid_input_error import InvalidInputError
from gitingest_mcp.core.exceptions.not_found_error import NotFoundError
from gitingest_mcp.core.exceptions.path_is_directory_error import PathIsDirectoryError
from gitingest_mcp.core.exceptions.provider_error import ProviderError
from gitingest_mcp.core.exceptions.provider_not_supported_error import ProviderNotSupportedError
from gitingest_mcp.core.exceptions.rate_limited_error import RateLimitedError
from gitingest_mcp.core.exceptions.upstream_parse_error import UpstreamParseError

__all__ = [
    "AccessDeniedError",
    "GitIngestError",
    "InvalidInputError",
    "NotFoundError",
    "PathIsDirectoryError",
    "ProviderError",
    "ProviderNotSupportedError",
    "RateLimitedError",
    "UpstreamParseError",
]
