from __future__ import annotations

"""
Directory Tree Generator.

Walks a directory and builds an in-memory Node tree that mirrors the
filesystem hierarchy. Entries keep the order in which the operating system
enumerates them. Directories that cannot be opened are reported and left
empty; the walk continues with their siblings.
"""

import logging
import os
from typing import List, Optional, TextIO, Tuple

from qtree.core.analysis.tree_renderer import render
from qtree.domain.constants import OutputFormat
from qtree.domain.tree_models import Node, TraversalError

logger = logging.getLogger(__name__)

_SKIPPED_NAMES = (".", "..")

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def build_tree(path: str, errors: Optional[List[TraversalError]] = None) -> Node:
    """
    Build the Node tree rooted at the given path.

    The root node is always a directory named after `path` verbatim, even
    when the path does not exist or is not a directory; in that case the
    failure is reported and the root has no children.

    MemoryError is not handled here: it aborts the whole walk and
    propagates to the caller.

    Args:
        path: Directory to walk.
        errors: Optional accumulator for unreadable directories.

    Returns:
        Node: Fully populated tree.
    """
    logger.debug(f"Building directory tree for: {path}")

    root = Node.directory(path)

    # Pending (filesystem path, node) pairs still to be enumerated
    pending: List[Tuple[str, Node]] = [(path, root)]
    while pending:
        dir_path, dir_node = pending.pop()
        subdirs = _scan_into(dir_path, dir_node, errors)
        # Reverse so siblings are walked in enumeration order
        pending.extend(reversed(subdirs))

    if logger.isEnabledFor(logging.DEBUG):
        dirs, files = root.count()
        logger.debug(f"Tree built: {dirs} directories, {files} files")
    return root


def generate_directory_tree(
        path: str,
        fmt: OutputFormat | str,
        sink: TextIO,
) -> List[TraversalError]:
    """
    Build the tree for `path` and write it to `sink` in the given format.

    Returns:
        List[TraversalError]: Directories that could not be read.
    """
    errors: List[TraversalError] = []
    tree = build_tree(path, errors)
    render(tree, fmt, sink)
    return errors

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _scan_into(
        dir_path: str,
        dir_node: Node,
        errors: Optional[List[TraversalError]],
) -> List[Tuple[str, Node]]:
    """
    Enumerate one directory, attaching a child node per entry.

    Returns:
        List[Tuple[str, Node]]: Subdirectories to descend into, in
        enumeration order.
    """
    subdirs: List[Tuple[str, Node]] = []
    try:
        with os.scandir(dir_path) as it:
            for entry in it:
                if entry.name in _SKIPPED_NAMES:
                    continue
                if _is_directory(entry):
                    child = Node.directory(entry.name)
                    subdirs.append((os.path.join(dir_path, entry.name), child))
                else:
                    child = Node.file(entry.name)
                dir_node.add_child(child)
    except OSError as e:
        # Entries yielded before a mid-listing failure are kept
        _report_unreadable(dir_path, e, errors)

    return subdirs


def _is_directory(entry: os.DirEntry) -> bool:
    """
    Classify an entry without following symlinks.

    DirEntry caches the type reported by the directory listing and only
    falls back to lstat when that type is unknown.
    """
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        return False


def _report_unreadable(
        dir_path: str,
        exc: OSError,
        errors: Optional[List[TraversalError]],
) -> None:
    """Log a directory that could not be opened and record it."""
    reason = exc.strerror or str(exc)
    logger.error(f"Cannot open directory '{dir_path}': {reason}")
    if errors is not None:
        errors.append(TraversalError(path=dir_path, error=reason))
