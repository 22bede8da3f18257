"""Per-entry inclusion rules for the tree builder.

Include/exclude patterns are shell-style globs (``*``, ``?``, ``[...]``)
matched against the full entry path; ``*`` also crosses ``/``. A malformed
pattern (an unclosed ``[`` class, or ``**`` that is not a whole path
component) never matches: a bad include hides everything it was meant to
select, and a bad exclude prunes nothing. Ignore entries are plain substrings,
so they prune matching directories at any nesting depth.
"""

from collections.abc import Iterable
from fnmatch import fnmatchcase
from functools import lru_cache


def _class_end(pattern: str, start: int) -> int:
    index = start + 1
    if index < len(pattern) and pattern[index] == "!":
        index += 1
    # A leading "]" is a literal member of the class.
    if index < len(pattern) and pattern[index] == "]":
        index += 1
    return pattern.find("]", index)


@lru_cache(maxsize=256)
def is_valid_glob(pattern: str) -> bool:
    for component in pattern.split("/"):
        if "**" in component and component != "**":
            return False

    index = 0
    while index < len(pattern):
        if pattern[index] == "[":
            index = _class_end(pattern, index)
            if index < 0:
                return False
        index += 1
    return True


def glob_matches(pattern: str, path: str) -> bool:
    return is_valid_glob(pattern) and fnmatchcase(path, pattern)


def is_included(
    path: str,
    include: Iterable[str],
    exclude: Iterable[str],
    ignore: Iterable[str],
) -> bool:
    include = tuple(include)
    if include and not any(glob_matches(pattern, path) for pattern in include):
        return False
    if any(glob_matches(pattern, path) for pattern in exclude):
        return False
    return not any(entry and entry in path for entry in ignore)
