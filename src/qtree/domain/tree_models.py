from __future__ import annotations

"""
Directory Tree Data Models.

Provides the node types used to mirror a filesystem hierarchy in memory,
plus the record type used to report directories that could not be read.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

class NodeKind(str, Enum):
    """Filesystem entry classification. Values match the serialized type names."""
    FILE = "file"
    DIRECTORY = "directory"


@dataclass
class Node:
    """
    One filesystem entry and, for directories, its children.

    Attributes:
        name: Base name of the entry. For the root, the path as supplied.
        kind: File or directory.
        children: Child nodes in directory enumeration order.
            Always empty for files.
    """
    name: str
    kind: NodeKind
    children: List[Node] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.kind is NodeKind.FILE and self.children:
            raise ValueError(f"File node '{self.name}' cannot have children")

    @classmethod
    def file(cls, name: str) -> Node:
        return cls(name=name, kind=NodeKind.FILE)

    @classmethod
    def directory(cls, name: str, children: Optional[List[Node]] = None) -> Node:
        return cls(name=name, kind=NodeKind.DIRECTORY, children=list(children or []))

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def add_child(self, child: Node) -> None:
        """
        Append a child node, preserving insertion order.

        Raises:
            ValueError: If this node is a file.
        """
        if not self.is_dir:
            raise ValueError(f"File node '{self.name}' cannot have children")
        self.children.append(child)

    def iter_preorder(self) -> Iterator[Tuple[Node, int]]:
        """
        Yield (node, depth) pairs in pre-order, root at depth 0.

        Uses an explicit stack so arbitrarily deep trees do not hit the
        interpreter recursion limit.
        """
        stack: List[Tuple[Node, int]] = [(self, 0)]
        while stack:
            node, depth = stack.pop()
            yield node, depth
            for child in reversed(node.children):
                stack.append((child, depth + 1))

    def count(self) -> Tuple[int, int]:
        """
        Count the nodes of this subtree.

        Returns:
            Tuple[int, int]: (directories, files), this node included.
        """
        dirs = files = 0
        for node, _ in self.iter_preorder():
            if node.is_dir:
                dirs += 1
            else:
                files += 1
        return dirs, files

# -----------------------------------------------------------------------------
# ERROR TRACKING MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TraversalError:
    """
    A directory that could not be enumerated during the walk.

    Attributes:
        path: Filesystem path that failed to open.
        error: Descriptive error message.
    """
    path: str
    error: str
