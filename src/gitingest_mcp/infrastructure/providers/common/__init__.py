from gitingest_mcp.infrastructure.providers.common.http_error_mapper import (
    raise_for_provider_status,
)
from gitingest_mcp.infrastructure.providers.common.provider_http_client import ProviderHttpClient

__all__ = ["ProviderHttpClient", "raise_for_provider_status"]
