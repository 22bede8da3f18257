from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from gitingest_mcp.core.exceptions import InvalidInputError


class GitRefKind(StrEnum):
    DEFAULT = auto()
    BRANCH = auto()
    TAG = auto()
    COMMIT = auto()


_PREFIXED_KINDS = {
    "branch": GitRefKind.BRANCH,
    "tag": GitRefKind.TAG,
    "commit": GitRefKind.COMMIT,
}


@dataclass(frozen=True)
class GitRef:
    """A revision selector: the provider's default branch, or a named branch, tag or commit."""

    kind: GitRefKind = GitRefKind.DEFAULT
    name: str | None = None

    def __post_init__(self) -> None:
        if self.kind is GitRefKind.DEFAULT:
            if self.name is not None:
                raise ValueError("A default reference cannot carry a name.")
        elif not self.name:
            raise ValueError(f"A {self.kind} reference needs a non-empty name.")

    @classmethod
    def default(cls) -> GitRef:
        return cls()

    @classmethod
    def branch(cls, name: str) -> GitRef:
        return cls(GitRefKind.BRANCH, name)

    @classmethod
    def tag(cls, name: str) -> GitRef:
        return cls(GitRefKind.TAG, name)

    @classmethod
    def commit(cls, sha: str) -> GitRef:
        return cls(GitRefKind.COMMIT, sha)

    @property
    def is_default(self) -> bool:
        return self.kind is GitRefKind.DEFAULT

    @classmethod
    def parse(cls, text: str) -> GitRef:
        """Parse the tool-level syntax: ``""``, ``name``, ``tag:x``, ``commit:sha`` or ``branch:x``.

        Strings with an unknown prefix or more than one colon are taken as a
        literal branch name.
        """
        value = text.strip()
        if not value:
            return cls.default()

        parts = value.split(":")
        if len(parts) != 2 or parts[0] not in _PREFIXED_KINDS:
            return cls.branch(value)

        prefix, name = parts
        if not name.strip():
            raise InvalidInputError(f"Git reference '{text}' is missing a name after '{prefix}:'.")
        return cls(_PREFIXED_KINDS[prefix], name.strip())
