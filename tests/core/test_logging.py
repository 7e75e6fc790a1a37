"""Tests for structured logging setup."""

import json
from unittest.mock import MagicMock

import pytest

from chunkline.core import logging as chunk_logging
from chunkline.core.logging import log, setup_logging

pytestmark = pytest.mark.unit

CI_VARS = ["CI", "CONTINUOUS_INTEGRATION", "GITHUB_ACTIONS", "JENKINS_URL"]


def test_json_format_to_stderr(capsys):
    setup_logging("json")

    log.info("chunk.test", chunks=3)

    captured = capsys.readouterr()
    assert captured.out == ""
    record = json.loads(captured.err.strip().splitlines()[-1])
    assert record["event"] == "chunk.test"
    assert record["chunks"] == 3
    assert record["level"] == "info"
    assert "timestamp" in record


def test_plain_format(capsys):
    setup_logging("plain")

    log.warning("chunk.plain", size=12)

    err = capsys.readouterr().err
    assert "chunk.plain" in err
    assert "size=12" in err
    with pytest.raises(json.JSONDecodeError):
        json.loads(err.strip().splitlines()[-1])


def test_ci_forces_json(monkeypatch):
    monkeypatch.setenv("CI", "true")
    assert chunk_logging._should_use_json_format() is True


def test_tty_without_ci_is_plain(monkeypatch):
    for var in CI_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setattr(chunk_logging.sys, "stderr", MagicMock(isatty=lambda: True))

    assert chunk_logging._should_use_json_format() is False


def test_debug_events_filtered_by_default(capsys):
    setup_logging("json")

    log.debug("chunk.tables_isolated", tables=1)
    log.info("chunk.kept")

    events = [json.loads(line)["event"] for line in capsys.readouterr().err.strip().splitlines()]
    assert events == ["chunk.kept"]


def test_debug_level_shows_routing_events(capsys):
    setup_logging("json", level="debug")

    log.debug("chunk.tables_isolated", tables=1)

    record = json.loads(capsys.readouterr().err.strip().splitlines()[-1])
    assert record["event"] == "chunk.tables_isolated"
    assert record["level"] == "debug"


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("json", level="chatty")


def test_explicit_stream(tmp_path):
    path = tmp_path / "chunkline.log"
    with open(path, "w") as stream:
        setup_logging("auto", level="warning", stream=stream)
        log.info("chunk.quiet")
        log.warning("chunk.size_limit_exceeded", size=30, limit=10)

    lines = path.read_text().splitlines()
    assert len(lines) == 1
    # A file is not a TTY, so auto picks JSON
    assert json.loads(lines[0])["event"] == "chunk.size_limit_exceeded"
