from enum import StrEnum, auto


class ProviderType(StrEnum):
    """Closed set of git hosting services the server can talk to."""

    GITHUB = auto()
    GITLAB = auto()
