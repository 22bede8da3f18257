from dataclasses import dataclass

from gitingest_mcp.core.exceptions.provider_error import ProviderError


@dataclass(eq=False)
class AccessDeniedError(ProviderError):
    """Raised when the provider rejects the credentials (or their absence)."""
