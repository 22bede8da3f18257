from dataclasses import dataclass

from gitingest_mcp.core.application.services import RepositorySearchAggregator
from gitingest_mcp.core.application.workflows import (
    FindRepositoriesWorkflow,
    RepositoryReadWorkflow,
    RepositoryTreeViewWorkflow,
)
from gitingest_mcp.core.domain.repository import IgnoreSpec
from gitingest_mcp.infrastructure.configuration import Settings
from gitingest_mcp.infrastructure.resolution.provider_resolver import ProviderResolver


@dataclass(frozen=True)
class Container:
    tree_view: RepositoryTreeViewWorkflow
    repository_read: RepositoryReadWorkflow
    find_repositories: FindRepositoriesWorkflow


def build_container(settings: Settings) -> Container:
    """Wire every workflow against one shared provider table."""
    fetchers = ProviderResolver(settings).resolve_all()
    ignore = IgnoreSpec.with_defaults(settings.extra_ignore_entries)
    return Container(
        tree_view=RepositoryTreeViewWorkflow(fetchers, ignore),
        repository_read=RepositoryReadWorkflow(fetchers),
        find_repositories=FindRepositoriesWorkflow(
            RepositorySearchAggregator(list(fetchers.values()))
        ),
    )
