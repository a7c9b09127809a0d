from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies idempotency of configuration, preservation of foreign handlers,
log file rotation and level parsing.
"""

import logging
from pathlib import Path

from qtree.infra.logging import (
    LoggingConfig,
    configure_logging,
    get_logger,
    reset_logging,
)
from qtree.infra.logging.core import _CONFIGURED_FLAG_ATTR
from qtree.infra.logging.handlers import _HANDLER_TAG_ATTR


def _our_handlers():
    return [h for h in logging.getLogger().handlers if getattr(h, _HANDLER_TAG_ATTR, False)]


def test_logging_idempotency() -> None:
    """TC-01: Multiple config calls do not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    initial = len(_our_handlers())
    configure_logging(cfg)

    assert initial == 1
    assert len(_our_handlers()) == initial


def test_force_reconfigures() -> None:
    """TC-02: force=True replaces our handlers and applies the new level."""
    configure_logging(LoggingConfig(level="WARNING"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    assert root.level == logging.DEBUG
    assert len(_our_handlers()) == 1


def test_foreign_handlers_are_preserved() -> None:
    """TC-03: Handlers installed by others survive (re)configuration."""
    root = logging.getLogger()
    foreign = logging.NullHandler()
    root.addHandler(foreign)
    try:
        configure_logging(LoggingConfig(), force=True)
        reset_logging()
        assert foreign in root.handlers
    finally:
        root.removeHandler(foreign)


def test_console_handler_writes_to_stderr(capsys) -> None:
    """TC-04: Console output uses the level | message format on stderr."""
    configure_logging(LoggingConfig(level="WARNING"))
    get_logger("qtree.test").error("disk on fire")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "ERROR | disk on fire" in captured.err


def test_log_file_receives_records(tmp_path: Path) -> None:
    """TC-05: The optional log file gets timestamped records."""
    log_file = tmp_path / "logs" / "qtree.log"
    configure_logging(LoggingConfig(level="DEBUG", console=False, log_file=str(log_file)))

    get_logger("qtree.test").debug("walk started")
    for h in _our_handlers():
        h.flush()

    content = log_file.read_text(encoding="utf-8")
    assert "DEBUG | qtree.test | walk started" in content


def test_log_rotation(tmp_path: Path) -> None:
    """TC-06: File rotation when the size limit is exceeded."""
    log_file = tmp_path / "rotate.log"
    configure_logging(LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    ))

    logger = get_logger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    assert log_file.exists()
    assert (tmp_path / "rotate.log.1").exists()


def test_unknown_level_falls_back_to_warning() -> None:
    """TC-07: Unrecognised level names do not break configuration."""
    configure_logging(LoggingConfig(level="chatty"))
    assert logging.getLogger().level == logging.WARNING


def test_reset_clears_flag() -> None:
    configure_logging(LoggingConfig())
    reset_logging()
    assert not hasattr(logging.getLogger(), _CONFIGURED_FLAG_ATTR)
    assert _our_handlers() == []
