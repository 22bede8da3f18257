class GitIngestError(Exception):
    """
    Base class for all errors raised by the repository inspection core.
    Ensures a consistent exception hierarchy for catching domain-specific issues.
    """

    pass
