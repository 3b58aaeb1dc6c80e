"""
Cursor-based tree whose nodes carry content and can gain children after creation.

Nodes live in an arena (a flat list) and refer to each other by integer
handle. A Cursor is a (tree, handle) pair; the end of a pre-order walk is a
cursor with handle None.

Pre-order order is computed from the structure at the moment `next()` is
called, so children appended during a walk are visited later in that walk.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional


@dataclass
class TreeNode:
    content: Any
    parent: Optional[int]
    index: int  # position in the parent's child list
    depth: int
    children: List[int] = field(default_factory=list)


class CursorTree:
    """Single-owner tree. Nodes are never removed or re-parented."""

    def __init__(self, content: Any):
        self.nodes: List[TreeNode] = [TreeNode(content, parent=None, index=0, depth=0)]

    def __len__(self) -> int:
        return len(self.nodes)

    def root(self) -> "Cursor":
        return Cursor(self, 0)

    def _add(self, parent: int, content: Any) -> int:
        parent_node = self.nodes[parent]
        handle = len(self.nodes)
        self.nodes.append(TreeNode(content, parent=parent, index=len(parent_node.children),
                                   depth=parent_node.depth + 1))
        parent_node.children.append(handle)
        return handle


class Cursor:
    __slots__ = ("tree", "handle")

    def __init__(self, tree: CursorTree, handle: Optional[int]):
        self.tree = tree
        self.handle = handle

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self.tree is other.tree and self.handle == other.handle

    def __hash__(self) -> int:
        return hash((id(self.tree), self.handle))

    def __repr__(self) -> str:
        if self.is_end:
            return "Cursor(<end>)"
        return f"Cursor(depth={self.depth}, content={self.content!r})"

    @property
    def is_end(self) -> bool:
        return self.handle is None

    @property
    def node(self) -> TreeNode:
        if self.handle is None:
            raise ValueError("Cursor is at the end of the tree")
        return self.tree.nodes[self.handle]

    @property
    def content(self) -> Any:
        return self.node.content

    @property
    def depth(self) -> int:
        """Ancestor count from the root."""
        return self.node.depth

    @property
    def is_leaf(self) -> bool:
        return not self.node.children

    def append_child(self, content: Any) -> "Cursor":
        """Attach a new last child; the returned cursor stays at this node."""
        if self.is_end:
            raise ValueError("Cannot append a child at the end of the tree")
        self.tree._add(self.handle, content)
        return self

    def parent(self) -> Optional["Cursor"]:
        parent = self.node.parent
        return None if parent is None else Cursor(self.tree, parent)

    def first_child(self) -> Optional["Cursor"]:
        children = self.node.children
        return Cursor(self.tree, children[0]) if children else None

    def next_sibling(self) -> Optional["Cursor"]:
        node = self.node
        if node.parent is None:
            return None
        siblings = self.tree.nodes[node.parent].children
        if node.index + 1 < len(siblings):
            return Cursor(self.tree, siblings[node.index + 1])
        return None

    def children(self) -> List["Cursor"]:
        return [Cursor(self.tree, h) for h in self.node.children]

    def next(self) -> "Cursor":
        """
        Pre-order successor: first child if any, else the next sibling of the
        nearest ancestor that has one, else the end cursor.
        """
        nodes = self.tree.nodes
        node = self.node
        if node.children:
            return Cursor(self.tree, node.children[0])
        while node.parent is not None:
            siblings = nodes[node.parent].children
            if node.index + 1 < len(siblings):
                return Cursor(self.tree, siblings[node.index + 1])
            node = nodes[node.parent]
        return Cursor(self.tree, None)

    def path(self) -> List[Any]:
        """Contents from the root down to and including this location."""
        nodes = self.tree.nodes
        contents = []
        handle = self.handle
        if handle is None:
            raise ValueError("Cursor is at the end of the tree")
        while handle is not None:
            contents.append(nodes[handle].content)
            handle = nodes[handle].parent
        contents.reverse()
        return contents

    def iter_subtree(self) -> Iterator["Cursor"]:
        """Pre-order walk of this node and its descendants."""
        stack = [self.handle] if self.handle is not None else []
        nodes = self.tree.nodes
        while stack:
            handle = stack.pop()
            yield Cursor(self.tree, handle)
            stack.extend(reversed(nodes[handle].children))
