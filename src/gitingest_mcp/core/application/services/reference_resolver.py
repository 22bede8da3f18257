"""Decides which single git reference an operation queries."""

from collections.abc import Awaitable, Callable

import structlog

from gitingest_mcp.core.domain.repository import GitRef

logger = structlog.get_logger()

DefaultBranchFetcher = Callable[[], Awaitable[str]]


async def resolve_reference(
    explicit_ref: GitRef | None,
    path_embedded_branch: str | None,
    fetch_default_branch: DefaultBranchFetcher,
) -> str | None:
    """Pick a ref; first match wins.

    1. An explicit branch, tag or commit is used verbatim.
    2. An explicit default ref asks the provider.
    3. No explicit ref and no ref in the path asks the provider.
    4. No explicit ref but a ref in the path uses the path's ref.

    ``fetch_default_branch`` is awaited only in cases 2 and 3 and its errors
    propagate, since there is nothing to fall back to.
    """
    if explicit_ref is not None and not explicit_ref.is_default:
        return explicit_ref.name

    if explicit_ref is None and path_embedded_branch:
        return path_embedded_branch

    default_branch = await fetch_default_branch()
    logger.debug("Resolved default branch", ref=default_branch)
    return default_branch
