from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates output sink resolution: standard output by default, truncating
file writes otherwise, and failure before any write when the destination
cannot be opened.
"""

import sys
from pathlib import Path

import pytest

from qtree.infra.fs import open_output_sink

# -----------------------------------------------------------------------------
# OUTPUT SINK TESTS
# -----------------------------------------------------------------------------

def test_default_sink_is_stdout(capsys) -> None:
    """TC-01: Without a file, output goes to standard output."""
    with open_output_sink() as sink:
        assert sink is sys.stdout
        sink.write("hello")
    assert capsys.readouterr().out == "hello"


def test_file_sink_truncates(tmp_path: Path) -> None:
    """TC-02: An existing file is replaced, not appended to."""
    target = tmp_path / "out.txt"
    target.write_text("previous content\n", encoding="utf-8")

    with open_output_sink(str(target)) as sink:
        sink.write("new\n")

    assert target.read_bytes() == b"new\n"


def test_file_sink_is_closed_on_error(tmp_path: Path) -> None:
    """TC-03: The handle is released even when rendering fails."""
    target = tmp_path / "out.txt"

    with pytest.raises(RuntimeError):
        with open_output_sink(str(target)) as sink:
            sink.write("partial")
            raise RuntimeError("boom")

    assert sink.closed


def test_unopenable_destination_raises(tmp_path: Path) -> None:
    """TC-04: A missing parent directory surfaces as OSError on entry."""
    with pytest.raises(OSError):
        with open_output_sink(str(tmp_path / "missing" / "out.txt")):
            pytest.fail("sink must not be yielded")


def test_undecodable_names_round_trip_as_bytes(tmp_path: Path) -> None:
    """TC-05: Surrogate-escaped names are written back as their raw bytes."""
    target = tmp_path / "out.txt"
    name = b"caf\xe9".decode("utf-8", "surrogateescape")

    with open_output_sink(str(target)) as sink:
        sink.write(name)

    assert target.read_bytes() == b"caf\xe9"
