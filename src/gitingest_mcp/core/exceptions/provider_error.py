from __future__ import annotations

from dataclasses import dataclass

from gitingest_mcp.core.exceptions.git_ingest_error import GitIngestError


@dataclass(eq=False)
class ProviderError(GitIngestError):
    """Upstream failure reported by (or while talking to) a git provider."""

    provider: str
    message: str
    status_code: int | None = None

    def __str__(self) -> str:
        code = f" (status={self.status_code})" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"
