import structlog
from structlog.contextvars import bound_contextvars

from gitingest_mcp.core.application.services import resolve_reference
from gitingest_mcp.core.application.workflows.provider_selection import (
    FetcherTable,
    select_repository,
)
from gitingest_mcp.core.domain.repository import GitRef
from gitingest_mcp.core.exceptions import InvalidInputError

logger = structlog.get_logger()

# Extensions whose content is returned inside a fenced code block.
CODE_EXTENSIONS = frozenset(
    {"rs", "js", "py", "go", "java", "c", "cpp", "h", "ts", "sh", "json", "yaml", "yml", "toml", "md"}
)


def fence_content(file_path: str, content: str) -> str:
    extension = file_path.rsplit(".", 1)[-1] if "." in file_path else ""
    if extension not in CODE_EXTENSIONS:
        return content
    return f"```{extension}\n{content}\n```"


class RepositoryReadWorkflow:
    """Reads a single file at the resolved ref, paths being relative to the repository root."""

    def __init__(self, fetchers: FetcherTable) -> None:
        self._fetchers = fetchers

    async def execute(self, repo: str, file_path: str, git_ref: str | None = None) -> str:
        file_path = file_path.strip().strip("/")
        if not file_path:
            raise InvalidInputError("Missing or invalid file path")

        fetcher, locator = select_repository(self._fetchers, repo)
        identifier = locator.identifier
        explicit_ref = GitRef.parse(git_ref) if git_ref is not None else None

        with bound_contextvars(provider=identifier.provider.value, repo=identifier.project_path):
            ref = await resolve_reference(
                explicit_ref,
                locator.ref,
                lambda: fetcher.get_default_branch(identifier),
            )
            payload = await fetcher.read_file(identifier, file_path, ref)
            logger.info("File read", path=file_path, ref=ref, bytes=len(payload))

        try:
            content = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidInputError(f"File '{file_path}' is not UTF-8 text") from exc

        return fence_content(file_path, content)
