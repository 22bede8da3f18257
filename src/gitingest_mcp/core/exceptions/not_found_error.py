from dataclasses import dataclass

from gitingest_mcp.core.exceptions.provider_error import ProviderError


@dataclass(eq=False)
class NotFoundError(ProviderError):
    """Raised when the repository, path or file does not exist."""
