from gitingest_mcp.core.domain.repository import RepoNode

LAST_BRANCH = "└── "
BRANCH = "├── "
LAST_INDENT = "    "
INDENT = "│   "


def render_tree(node: RepoNode, prefix: str = "", is_last: bool = True) -> str:
    """Render ``node`` and its subtree as box-drawing lines, one per node."""
    lines: list[str] = []
    _render_into(lines, node, prefix, is_last)
    return "".join(lines)


def _render_into(lines: list[str], node: RepoNode, prefix: str, is_last: bool) -> None:
    marker = LAST_BRANCH if is_last else BRANCH
    lines.append(f"{prefix}{marker}{node.name}\n")

    child_prefix = prefix + (LAST_INDENT if is_last else INDENT)
    last_index = len(node.children) - 1
    for index, child in enumerate(node.children):
        _render_into(lines, child, child_prefix, index == last_index)
