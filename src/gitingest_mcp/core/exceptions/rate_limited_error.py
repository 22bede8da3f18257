from dataclasses import dataclass

from gitingest_mcp.core.exceptions.provider_error import ProviderError


@dataclass(eq=False)
class RateLimitedError(ProviderError):
    """Raised when the provider throttles the caller."""
