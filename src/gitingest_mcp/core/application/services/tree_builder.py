"""Recursive, provider-agnostic expansion of a remote directory into a RepoNode tree."""

import asyncio

import structlog

from gitingest_mcp.core.application.ports import ContentFetcherPort
from gitingest_mcp.core.application.services.pattern_filter import is_included
from gitingest_mcp.core.domain.repository import (
    FilterSpec,
    IgnoreSpec,
    RepoEntry,
    RepoIdentifier,
    RepoNode,
)

logger = structlog.get_logger()

MAX_DEPTH = 10
# Checked per directory level against that level's own files, not tree-wide.
MAX_FILES_PER_DIRECTORY = 500


class TreeBuilder:
    """Walks a repository listing API one directory at a time.

    Sibling directories are expanded concurrently. A listing failure anywhere
    fails the whole build, but only after every sibling fetch has finished.
    """

    def __init__(
        self,
        fetcher: ContentFetcherPort,
        max_depth: int = MAX_DEPTH,
        max_files_per_directory: int = MAX_FILES_PER_DIRECTORY,
    ) -> None:
        self._fetcher = fetcher
        self._max_depth = max_depth
        self._max_files = max_files_per_directory

    async def build(
        self,
        identifier: RepoIdentifier,
        ref: str | None,
        path: str,
        filters: FilterSpec,
        ignore: IgnoreSpec,
        depth: int = 0,
    ) -> RepoNode:
        name = self._node_name(path)
        if depth > self._max_depth:
            logger.debug("Depth limit reached", path=path, depth=depth)
            return RepoNode.directory(name)

        entries = await self._fetcher.list_directory(identifier, path, ref)
        if _is_file_listing(path, entries):
            return RepoNode.file(name, entries[0].size)

        files: list[RepoNode] = []
        subdirectories = []
        for entry in entries:
            if not is_included(entry.path, filters.include, filters.exclude, ignore.entries):
                continue

            if entry.is_directory:
                subdirectories.append(
                    self.build(identifier, ref, entry.path, filters, ignore, depth + 1)
                )
            else:
                files.append(RepoNode.file(entry.name, entry.size))

            if len(files) > self._max_files:
                logger.info("File limit reached, truncating directory", path=path, files=len(files))
                break

        results = await asyncio.gather(*subdirectories, return_exceptions=True)
        for result in results:
            if isinstance(result, BaseException):
                raise result

        return RepoNode.directory(name, [*files, *results])

    def _node_name(self, path: str) -> str:
        if not path:
            return self._fetcher.root_label
        return path.rsplit("/", 1)[-1]


def _is_file_listing(path: str, entries: list[RepoEntry]) -> bool:
    """A listing of a file path holds just that file."""
    return (
        bool(path)
        and len(entries) == 1
        and entries[0].path == path
        and not entries[0].is_directory
    )
