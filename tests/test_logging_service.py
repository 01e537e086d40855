import json
import logging

import pytest

from contrast_widget.launcher import build_parser, export_session_logs
from contrast_widget.services.logging_service import (
    SessionLogBuffer,
    configure_logging,
    get_session_buffer,
)


@pytest.fixture()
def buffer():
    buf = SessionLogBuffer(capacity=5)
    root = logging.getLogger()
    previous = root.level
    root.addHandler(buf)
    root.setLevel(logging.DEBUG)
    yield buf
    root.removeHandler(buf)
    root.setLevel(previous)


def test_records_captured(buffer):
    logging.getLogger("alpha").info("Hello World")
    rows = buffer.rows()
    assert rows[-1]["message"] == "Hello World"
    assert rows[-1]["name"] == "alpha"


def test_capacity_eviction(buffer):
    for i in range(10):
        logging.getLogger("cap").info("M%d", i)
    assert [r["message"] for r in buffer.rows()] == ["M5", "M6", "M7", "M8", "M9"]


def test_min_level_filter(buffer):
    logging.getLogger("contrast_widget.app").debug("state loaded")
    logging.getLogger("contrast_widget.app").warning("state reset")
    assert [r["level"] for r in buffer.rows(logging.INFO)] == ["WARNING"]


def test_rejected_color_entry_is_buffered(buffer):
    from contrast_widget.app.widget_state import StateStore
    from contrast_widget.viewmodels.contrast_viewmodel import ContrastViewModel

    ContrastViewModel(StateStore()).commit_foreground("zzzzzz")
    assert any("Rejected foreground" in r["message"] for r in buffer.rows())


def test_launcher_exports_session_log(buffer, tmp_path):
    logging.getLogger("contrast_widget.viewmodels").info("Rejected background entry")
    target = tmp_path / "logs" / "session.jsonl"
    args = build_parser().parse_args(["--export-logs", str(target)])
    assert export_session_logs(args.export_logs, buffer) == 1
    lines = [json.loads(line) for line in target.read_text(encoding="utf-8").splitlines()]
    assert lines[0]["message"] == "Rejected background entry"
    assert lines[0]["level"] == "INFO"


def test_launcher_export_skipped_without_option(buffer, tmp_path):
    args = build_parser().parse_args([])
    assert args.export_logs is None
    assert export_session_logs(args.export_logs, buffer) == 0


def test_configure_logging_attaches_shared_buffer_once():
    root = logging.getLogger()
    previous = root.level
    try:
        first = configure_logging("WARNING")
        second = configure_logging("WARNING")
        assert first is second is get_session_buffer()
        assert root.handlers.count(first) == 1
    finally:
        root.removeHandler(get_session_buffer())
        root.setLevel(previous)
