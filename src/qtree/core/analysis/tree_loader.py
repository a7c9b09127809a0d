from __future__ import annotations

"""
Tree Loader.

Parses JSON and XML listings produced by the renderer back into Node trees.
"""

import json
import xml.etree.ElementTree as ET
from typing import Any, List, Tuple

from qtree.domain.tree_models import Node, NodeKind

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def load_json(text: str) -> Node:
    """
    Rebuild a tree from a JSON listing.

    Raises:
        ValueError: On malformed JSON or an unexpected document shape.
    """
    try:
        document = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON listing: {e}") from e

    root = _node_from_mapping(document)
    pending: List[Tuple[Any, Node]] = [(document, root)]
    while pending:
        mapping, node = pending.pop()
        if not node.is_dir:
            continue
        children = mapping.get("children")
        if not isinstance(children, list):
            raise ValueError(f"Directory '{node.name}' is missing its children list")
        for raw_child in children:
            child = _node_from_mapping(raw_child)
            node.add_child(child)
            pending.append((raw_child, child))
    return root


def load_xml(text: str) -> Node:
    """
    Rebuild a tree from an XML listing.

    Raises:
        ValueError: On malformed XML or an unknown element.
    """
    try:
        element = ET.fromstring(text)
    except ET.ParseError as e:
        raise ValueError(f"Invalid XML listing: {e}") from e

    root = _node_from_element(element)
    pending: List[Tuple[ET.Element, Node]] = [(element, root)]
    while pending:
        elem, node = pending.pop()
        for raw_child in elem:
            child = _node_from_element(raw_child)
            node.add_child(child)
            pending.append((raw_child, child))
    return root

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _node_from_mapping(mapping: Any) -> Node:
    if not isinstance(mapping, dict) or not isinstance(mapping.get("name"), str):
        raise ValueError(f"Expected a node object, got: {mapping!r}")
    kind = _parse_kind(mapping.get("type"))
    return Node(name=mapping["name"], kind=kind)


def _node_from_element(element: ET.Element) -> Node:
    name = element.get("name")
    if name is None:
        raise ValueError(f"Element <{element.tag}> has no name attribute")
    return Node(name=name, kind=_parse_kind(element.tag))


def _parse_kind(value: Any) -> NodeKind:
    try:
        return NodeKind(value)
    except ValueError:
        raise ValueError(f"Unknown node type: {value!r}") from None
