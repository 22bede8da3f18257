from mcp.server.fastmcp import FastMCP

from gitingest_mcp.core.domain.shared import ProviderType
from gitingest_mcp.infrastructure.configuration import Settings
from gitingest_mcp.infrastructure.observability import get_logger
from gitingest_mcp.infrastructure.resolution import Container, build_container

logger = get_logger(__name__)

SERVER_NAME = "gitingest-mcp"

_REPO_HELP = (
    "Repository identifier in format 'gitprovider:username/reponame' "
    "(e.g., 'github:rust-lang/rust')"
)
_REF_HELP = "Optional git reference: branch name, 'tag:name', or 'commit:sha'. Default: main branch"


def create_server(settings: Settings, container: Container | None = None) -> FastMCP:
    """Register the three repository tools on a FastMCP server."""
    if settings.github_token is None:
        logger.warning("GITHUB_TOKEN environment variable not set. API rate limits may apply.")

    container = container or build_container(settings)
    providers = ", ".join(provider.value for provider in ProviderType)
    server = FastMCP(SERVER_NAME)

    @server.tool(
        name="repository_tree_view",
        description=(
            "View the file structure of a Git repository recursively. "
            f"Supported providers: {providers}. repo: {_REPO_HELP}. git_ref: {_REF_HELP}. "
            "exclude_patterns / include_patterns: optional comma-separated glob lists."
        ),
    )
    async def repository_tree_view(
        repo: str,
        git_ref: str | None = None,
        exclude_patterns: str | None = None,
        include_patterns: str | None = None,
    ) -> str:
        return await container.tree_view.execute(repo, git_ref, exclude_patterns, include_patterns)

    @server.tool(
        name="repository_read",
        description=(
            "Read file content from a Git repository. "
            f"Supported providers: {providers}. repo: {_REPO_HELP}. "
            f"file_path: path of the file within the repository. git_ref: {_REF_HELP}."
        ),
    )
    async def repository_read(repo: str, file_path: str, git_ref: str | None = None) -> str:
        return await container.repository_read.execute(repo, file_path, git_ref)

    @server.tool(
        name="find_repositories",
        description=(
            "Find code repositories matching a search query. "
            f"Supported providers: {providers}. query: e.g. 'lang:rust web framework'. "
            "limit: optional maximum number of results per provider."
        ),
    )
    async def find_repositories(query: str, limit: int | str | None = None) -> str:
        return await container.find_repositories.execute(query, limit)

    logger.info("MCP server ready", server=SERVER_NAME, providers=providers)
    return server
