from dataclasses import dataclass

from gitingest_mcp.core.exceptions.provider_error import ProviderError


@dataclass(eq=False)
class UpstreamParseError(ProviderError):
    """Raised when a provider response does not have the expected shape."""
