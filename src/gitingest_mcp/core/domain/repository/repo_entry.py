from dataclasses import dataclass
from enum import StrEnum, auto


class EntryKind(StrEnum):
    FILE = auto()
    DIRECTORY = auto()


@dataclass(frozen=True, kw_only=True)
class RepoEntry:
    """One item of a directory listing, already normalised across providers."""

    name: str
    path: str
    kind: EntryKind
    size: int | None = None

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY
