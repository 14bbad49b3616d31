"""Tests for nestor.logging."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from loguru import logger

import nestor  # noqa: F401  (package import disables nestor records)
from nestor.logging import setup_logging
from nestor.models import OutboundPayload
from nestor.sink import BufferSink


@pytest.fixture
def _restore_loguru():
    yield
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("nestor")


@pytest.mark.usefixtures("_restore_loguru")
def test_package_records_disabled_until_setup(capsys: pytest.CaptureFixture[str]):
    logger.remove()
    logger.add(sys.stderr, level="DEBUG")
    BufferSink().append(OutboundPayload(strings=["hello"]))
    logger.complete()
    assert "Buffered outbound" not in capsys.readouterr().err


@pytest.mark.usefixtures("_restore_loguru")
def test_setup_logging_writes_nestor_records_to_file(tmp_path: Path):
    log_dir = tmp_path / "logs"
    log_file = setup_logging(log_dir=log_dir)

    assert log_file == log_dir / "nestor.log"
    BufferSink().append(OutboundPayload(strings=["hello"], reply=True))
    logger.info("host application message")
    logger.complete()

    content = log_file.read_text(encoding="utf-8")
    assert "Buffered outbound: strings=1 reply=True" in content
    assert "host application message" not in content


@pytest.mark.usefixtures("_restore_loguru")
def test_quiet_console_hides_info(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    setup_logging(quiet=True, log_dir=tmp_path)
    logger.info("should not reach the console")
    logger.warning("should reach the console")
    logger.complete()

    err = capsys.readouterr().err
    assert "should not reach the console" not in err
    assert "should reach the console" in err


@pytest.mark.usefixtures("_restore_loguru")
def test_verbose_console_shows_delivery_debug(tmp_path: Path, capsys: pytest.CaptureFixture[str]):
    setup_logging(verbose=True, log_dir=tmp_path)
    BufferSink().append(OutboundPayload(strings=["a", "b"]))
    logger.complete()

    assert "Buffered outbound: strings=2 reply=False" in capsys.readouterr().err
