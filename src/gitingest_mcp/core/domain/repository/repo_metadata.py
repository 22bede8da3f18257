from dataclasses import dataclass


@dataclass(frozen=True)
class RepoMetadata:
    """Repository-level facts reported by the provider's project/repo endpoint."""

    name: str | None = None
    default_branch: str | None = None
