from gitingest_mcp.core.domain.repository.filter_spec import FilterSpec, split_patterns
from gitingest_mcp.core.domain.repository.git_ref import GitRef, GitRefKind
from gitingest_mcp.core.domain.repository.ignore_spec import DEFAULT_IGNORE_PATTERNS, IgnoreSpec
from gitingest_mcp.core.domain.repository.repo_entry import EntryKind, RepoEntry
from gitingest_mcp.core.domain.repository.repo_identifier import (
    RepoIdentifier,
    RepoLocator,
    parse_locator,
    split_qualified_identifier,
)
from gitingest_mcp.core.domain.repository.repo_metadata import RepoMetadata
from gitingest_mcp.core.domain.repository.repo_node import RepoNode
from gitingest_mcp.core.domain.repository.repo_search_result import RepoSearchResult, SearchOutcome

__all__ = [
    "DEFAULT_IGNORE_PATTERNS",
    "EntryKind",
    "FilterSpec",
    "GitRef",
    "GitRefKind",
    "IgnoreSpec",
    "RepoEntry",
    "RepoIdentifier",
    "RepoLocator",
    "RepoMetadata",
    "RepoNode",
    "RepoSearchResult",
    "SearchOutcome",
    "parse_locator",
    "split_patterns",
    "split_qualified_identifier",
]
