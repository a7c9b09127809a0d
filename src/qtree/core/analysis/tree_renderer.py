from __future__ import annotations

"""
Tree Renderer.

Serializes Node trees as indented text, single-line JSON or single-line XML.
All three formats are written in pre-order. Traversal uses an explicit
stack so the output does not depend on the interpreter recursion limit.
"""

import io
import json
from typing import Callable, Dict, List, TextIO, Tuple

from qtree.domain.constants import TEXT_INDENT_WIDTH, OutputFormat
from qtree.domain.tree_models import Node

_XML_ESCAPES: Dict[str, str] = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    '"': "&quot;",
}

# Stack markers for the open/close passes of JSON and XML
_OPEN = 0
_CLOSE = 1
_SEPARATOR = 2

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render(node: Node, fmt: OutputFormat | str, sink: TextIO) -> None:
    """
    Write the tree rooted at `node` to `sink` in the selected format.

    Args:
        node: Root of the tree to serialize.
        fmt: OutputFormat member or its string value.
        sink: Writable text stream.

    Raises:
        ValueError: If the format is not supported.
    """
    renderer = _RENDERERS[_coerce_format(fmt)]
    renderer(node, sink)


def render_to_string(node: Node, fmt: OutputFormat | str) -> str:
    """Render the tree into a string instead of a stream."""
    buffer = io.StringIO()
    render(node, fmt, buffer)
    return buffer.getvalue()


def render_text(node: Node, sink: TextIO) -> None:
    """
    Indented listing, one entry per line.

    Each line is indented by two spaces per depth level. Directory names
    carry a trailing '/'.
    """
    for current, depth in node.iter_preorder():
        suffix = "/" if current.is_dir else ""
        sink.write(f"{' ' * (TEXT_INDENT_WIDTH * depth)}{current.name}{suffix}\n")


def render_json(node: Node, sink: TextIO) -> None:
    """
    Single-line JSON document.

    Files: {"name":"...","type":"file"}
    Directories: {"name":"...","type":"directory","children":[...]}
    """
    stack: List[Tuple[int, Node]] = [(_OPEN, node)]
    while stack:
        action, current = stack.pop()
        if action == _SEPARATOR:
            sink.write(",")
            continue
        if action == _CLOSE:
            sink.write("]}")
            continue

        name = escape_json(current.name)
        if not current.is_dir:
            sink.write(f'{{"name":"{name}","type":"file"}}')
            continue

        sink.write(f'{{"name":"{name}","type":"directory","children":[')
        stack.append((_CLOSE, current))
        _push_children(stack, current, separated=True)


def render_xml(node: Node, sink: TextIO) -> None:
    """
    Single-line XML fragment.

    Files: <file name="..."/>
    Directories: <directory name="...">...</directory>
    """
    stack: List[Tuple[int, Node]] = [(_OPEN, node)]
    while stack:
        action, current = stack.pop()
        if action == _CLOSE:
            sink.write("</directory>")
            continue

        name = escape_xml(current.name)
        if not current.is_dir:
            sink.write(f'<file name="{name}"/>')
            continue

        sink.write(f'<directory name="{name}">')
        stack.append((_CLOSE, current))
        _push_children(stack, current, separated=False)


def escape_xml(value: str) -> str:
    """
    Escape a name for use inside a double-quoted XML attribute.

    Only <, >, & and " are replaced. Apostrophes are left as-is.
    """
    return "".join(_XML_ESCAPES.get(ch, ch) for ch in value)


def escape_json(value: str) -> str:
    """
    Escape a name for use inside a JSON string literal.

    Quotes, backslashes and control characters are escaped; every other
    character, including non-ASCII, is emitted unchanged.
    """
    return json.dumps(value, ensure_ascii=False)[1:-1]

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _push_children(
        stack: List[Tuple[int, Node]],
        node: Node,
        separated: bool,
) -> None:
    """Queue children so they pop in stored order, with optional separators."""
    last = len(node.children) - 1
    for i in range(last, -1, -1):
        stack.append((_OPEN, node.children[i]))
        if separated and i > 0:
            stack.append((_SEPARATOR, node))


def _coerce_format(fmt: OutputFormat | str) -> OutputFormat:
    try:
        return OutputFormat(fmt)
    except ValueError:
        raise ValueError(f"Unsupported output format: {fmt!r}") from None


_RENDERERS: Dict[OutputFormat, Callable[[Node, TextIO], None]] = {
    OutputFormat.TEXT: render_text,
    OutputFormat.JSON: render_json,
    OutputFormat.XML: render_xml,
}
