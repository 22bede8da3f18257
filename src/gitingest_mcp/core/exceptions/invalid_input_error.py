from gitingest_mcp.core.exceptions.git_ingest_error import GitIngestError


class InvalidInputError(GitIngestError):
    """Raised before any network call when caller input cannot be used."""
