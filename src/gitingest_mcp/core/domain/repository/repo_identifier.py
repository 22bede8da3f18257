"""Repository identifiers and the per-provider path grammars that produce them.

Accepted forms (after the ``<provider>:`` prefix has been split off)::

    github   owner/repo[/tree|blob/<ref>[/<subpath>]]
    gitlab   namespace[/subgroup...]/repo[/-/tree|blob/<ref>[/<subpath>]]

A ref containing slashes cannot be told apart from a subpath in either form;
the first segment after ``tree``/``blob`` is always taken as the ref.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from gitingest_mcp.core.domain.shared.provider_type import ProviderType
from gitingest_mcp.core.exceptions import InvalidInputError

_REF_MARKERS = ("tree", "blob")
_GITLAB_SEPARATOR = "/-/"


@dataclass(frozen=True)
class RepoIdentifier:
    provider: ProviderType
    owner_or_namespace: str
    repo: str

    @property
    def project_path(self) -> str:
        return f"{self.owner_or_namespace}/{self.repo}"


@dataclass(frozen=True)
class RepoLocator:
    """A repository plus the optional ref and subpath embedded in its path string."""

    identifier: RepoIdentifier
    ref: str | None = None
    subpath: str | None = None


def split_qualified_identifier(value: str) -> tuple[str, str]:
    """Split ``"<provider>:<owner>/<repo>..."`` into its provider name and path."""
    parts = value.strip().split(":")
    if len(parts) != 2 or "/" not in parts[1]:
        raise InvalidInputError(
            "Invalid repository format. Expected 'gitprovider:username/reponame'"
        )
    return parts[0].strip().lower(), parts[1].strip()


def _segments(path: str) -> list[str]:
    return [segment for segment in path.split("/") if segment]


def _parse_ref_suffix(raw: str, segments: list[str]) -> tuple[str | None, str | None]:
    if not segments:
        return None, None
    if segments[0] not in _REF_MARKERS or len(segments) < 2:
        raise InvalidInputError(
            f"Invalid repository path: {raw}. Expected '.../tree/<ref>[/<path>]'"
        )
    subpath = "/".join(segments[2:]) or None
    return segments[1], subpath


def parse_github_path(path: str) -> RepoLocator:
    segments = _segments(path)
    if len(segments) < 2:
        raise InvalidInputError(f"Invalid repository path: {path}")

    ref, subpath = _parse_ref_suffix(path, segments[2:])
    identifier = RepoIdentifier(ProviderType.GITHUB, segments[0], segments[1])
    return RepoLocator(identifier, ref, subpath)


def parse_gitlab_path(path: str) -> RepoLocator:
    project, _, suffix = path.partition(_GITLAB_SEPARATOR)
    segments = _segments(project)
    if len(segments) < 2:
        raise InvalidInputError(f"Invalid repository path: {path}")

    ref, subpath = _parse_ref_suffix(path, _segments(suffix))
    identifier = RepoIdentifier(ProviderType.GITLAB, "/".join(segments[:-1]), segments[-1])
    return RepoLocator(identifier, ref, subpath)


_PATH_PARSERS: dict[ProviderType, Callable[[str], RepoLocator]] = {
    ProviderType.GITHUB: parse_github_path,
    ProviderType.GITLAB: parse_gitlab_path,
}


def parse_locator(provider: ProviderType, path: str) -> RepoLocator:
    return _PATH_PARSERS[provider](path)
