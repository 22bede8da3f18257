from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, replace

from gitingest_mcp.core.domain.repository.repo_entry import EntryKind


@dataclass(frozen=True, kw_only=True)
class RepoNode:
    """An aggregated file or directory of the rendered tree.

    Directory aggregates are derived from the children, so ``size``,
    ``file_count`` and ``dir_count`` always agree with the subtree.
    """

    name: str
    kind: EntryKind
    size: int = 0
    children: tuple[RepoNode, ...] = field(default_factory=tuple)
    file_count: int = 0
    dir_count: int = 0

    @classmethod
    def file(cls, name: str, size: int | None) -> RepoNode:
        return cls(name=name, kind=EntryKind.FILE, size=size or 0, file_count=1)

    @classmethod
    def directory(cls, name: str, children: Iterable[RepoNode] = ()) -> RepoNode:
        ordered = tuple(sorted(children, key=sort_key))
        return cls(
            name=name,
            kind=EntryKind.DIRECTORY,
            size=sum(child.size for child in ordered),
            children=ordered,
            file_count=sum(child.file_count for child in ordered),
            dir_count=1 + sum(child.dir_count for child in ordered),
        )

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    def renamed(self, name: str) -> RepoNode:
        return replace(self, name=name)


def sort_key(node: RepoNode) -> tuple[int, str]:
    """Directories before files, then ordinal name order."""
    return (0 if node.is_directory else 1, node.name)
