from __future__ import annotations

"""
Run Configuration.

Holds the resolved settings for a single qtree execution. The tool has no
persisted state and reads no environment variables: every value comes from
the command line or the defaults below.
"""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from qtree.domain.constants import OutputFormat


@dataclass(frozen=True)
class RunConfig:
    """
    Immutable settings for one listing run.

    Attributes:
        root_path: Directory to list, used verbatim as the root node name.
        output_format: Serialization format.
        output_file: Destination file, or None for standard output.
        debug: Elevate logging verbosity to DEBUG.
        log_file: Optional path for persistent diagnostics.
    """
    root_path: str
    output_format: OutputFormat = OutputFormat.TEXT
    output_file: Optional[str] = None
    debug: bool = False
    log_file: Optional[str] = None


def get_default_config() -> Dict[str, Any]:
    """
    Return the default values for every optional RunConfig field.
    """
    return {
        "output_format": OutputFormat.TEXT,
        "output_file": None,
        "debug": False,
        "log_file": None,
    }
