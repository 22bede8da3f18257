import structlog
from structlog.contextvars import bound_contextvars

from gitingest_mcp.core.application.services import TreeBuilder, render_tree, resolve_reference
from gitingest_mcp.core.application.workflows.provider_selection import (
    FetcherTable,
    select_repository,
)
from gitingest_mcp.core.domain.repository import FilterSpec, GitRef, IgnoreSpec, RepoMetadata

logger = structlog.get_logger()


class RepositoryTreeViewWorkflow:
    """Identifier -> ref -> recursive listing -> fenced ASCII tree."""

    def __init__(self, fetchers: FetcherTable, ignore: IgnoreSpec | None = None) -> None:
        self._fetchers = fetchers
        self._ignore = ignore or IgnoreSpec.with_defaults()

    async def execute(
        self,
        repo: str,
        git_ref: str | None = None,
        exclude_patterns: str | None = None,
        include_patterns: str | None = None,
    ) -> str:
        fetcher, locator = select_repository(self._fetchers, repo)
        identifier = locator.identifier
        explicit_ref = GitRef.parse(git_ref) if git_ref is not None else None
        filters = FilterSpec.from_csv(include=include_patterns, exclude=exclude_patterns)

        # Fetched at most once, then reused for the root display name.
        metadata: RepoMetadata | None = None

        async def fetch_default_branch() -> str:
            nonlocal metadata
            metadata = await fetcher.get_metadata(identifier)
            return fetcher.default_branch_of(identifier, metadata)

        with bound_contextvars(provider=identifier.provider.value, repo=identifier.project_path):
            ref = await resolve_reference(explicit_ref, locator.ref, fetch_default_branch)
            tree = await TreeBuilder(fetcher).build(
                identifier, ref, locator.subpath or "", filters, self._ignore
            )
            if not locator.subpath:
                tree = tree.renamed(await fetcher.get_display_name(identifier, metadata))

            logger.info(
                "Repository tree built",
                ref=ref,
                files=tree.file_count,
                directories=tree.dir_count,
                size=tree.size,
            )

        return f"```\n{render_tree(tree)}\n```"
