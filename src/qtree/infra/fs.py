from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Resolves the output sink for rendered listings: standard output by default,
or a caller-specified file opened in truncate/write mode.
"""

import sys
from contextlib import contextmanager
from typing import Iterator, Optional, TextIO

# Names that are not valid in the platform encoding survive a round trip
# through os.fsdecode as lone surrogates; write them back as raw bytes.
OUTPUT_ENCODING = "utf-8"
OUTPUT_ERRORS = "surrogateescape"

# -----------------------------------------------------------------------------
# OUTPUT SINK API
# -----------------------------------------------------------------------------

@contextmanager
def open_output_sink(output_file: Optional[str] = None) -> Iterator[TextIO]:
    """
    Yield a writable text stream for rendered output.

    The file, when given, is created or truncated before anything is yielded,
    so an unwritable destination fails before rendering starts. The handle is
    closed on every exit path; standard output is flushed but left open.

    Args:
        output_file: Destination path, or None for standard output.

    Raises:
        OSError: If the destination file cannot be opened.
    """
    if output_file is None:
        try:
            yield sys.stdout
        finally:
            sys.stdout.flush()
        return

    # newline="" keeps '\n' as-is on every platform
    with open(
            output_file, "w",
            encoding=OUTPUT_ENCODING, errors=OUTPUT_ERRORS, newline="",
    ) as handle:
        yield handle
