from __future__ import annotations

"""
Domain Constants.

Application identity and the output format registry shared by the
configuration, rendering and CLI layers.
"""

from enum import Enum

APP_NAME = "qtree"
APP_VERSION = "0.0.1"
VERSION_STRING = f"{APP_NAME} {APP_VERSION}"

# Indentation width per depth level in text output
TEXT_INDENT_WIDTH = 2


class OutputFormat(str, Enum):
    """Serialization formats supported by the renderer."""
    TEXT = "text"
    JSON = "json"
    XML = "xml"
