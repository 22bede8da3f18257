from gitingest_mcp.core.application.workflows.find_repositories_workflow import (
    FindRepositoriesWorkflow,
)
from gitingest_mcp.core.application.workflows.repository_read_workflow import (
    RepositoryReadWorkflow,
)
from gitingest_mcp.core.application.workflows.repository_tree_view_workflow import (
    RepositoryTreeViewWorkflow,
)

__all__ = [
    "FindRepositoriesWorkflow",
    "RepositoryReadWorkflow",
    "RepositoryTreeViewWorkflow",
]
