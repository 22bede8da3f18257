from gitingest_mcp.core.application.services.pattern_filter import is_included
from gitingest_mcp.core.application.services.reference_resolver import resolve_reference
from gitingest_mcp.core.application.services.repository_search_aggregator import (
    RepositorySearchAggregator,
)
from gitingest_mcp.core.application.services.tree_builder import TreeBuilder
from gitingest_mcp.core.application.services.tree_renderer import render_tree

__all__ = [
    "RepositorySearchAggregator",
    "TreeBuilder",
    "is_included",
    "render_tree",
    "resolve_reference",
]
