"""Text rendering of move trees."""

from typing import List, Optional

from .cursor import Cursor


def node_str(loc: Cursor) -> str:
    """Attractively formatted contents of a node."""
    return f"> {loc.content}"


def format_tree(root: Cursor, max_lines: Optional[int] = None) -> str:
    """
    One line per branch node, indented by depth.

    Leaves are skipped; their content is visible in the parent line's children.
    """
    lines: List[str] = []
    for loc in root.iter_subtree():
        if loc.is_leaf:
            continue
        lines.append(" " * (loc.depth - root.depth) + node_str(loc))
        if max_lines is not None and len(lines) >= max_lines:
            break
    return "\n".join(lines)


def print_tree(root: Cursor, max_lines: Optional[int] = None) -> None:
    print(format_tree(root, max_lines=max_lines))
