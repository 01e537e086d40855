"""Launcher for `python -m contrast_widget` or the `contrast-widget` script.

Loads the persisted widget state from the data directory and shows the widget;
the widget saves the state when it closes.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from contrast_widget.app.widget_state import StateStore
from contrast_widget.config import settings
from contrast_widget.services.logging_service import SessionLogBuffer, configure_logging

_logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="contrast-widget", description="Show the color contrast ratio widget."
    )
    parser.add_argument(
        "--data-dir", default=settings.DATA_DIR, help="Directory holding widget_state.json"
    )
    parser.add_argument(
        "--reset", action="store_true", help="Discard the persisted state before starting"
    )
    parser.add_argument("--log-level", default=settings.LOG_LEVEL)
    parser.add_argument(
        "--export-logs",
        metavar="PATH",
        help="Write the session log as JSON Lines to PATH on exit",
    )
    return parser


def prepare_store(data_dir: str | Path, *, reset: bool = False) -> StateStore:
    """Return the store for *data_dir*, removing persisted state first if *reset*."""
    if reset:
        state_file = Path(data_dir) / settings.STATE_FILENAME
        if state_file.exists():
            state_file.unlink()
            _logger.info("Removed persisted state: %s", state_file)
    return StateStore.load(data_dir)


def startup_notice(reset: bool) -> Optional[str]:
    return settings.RESET_NOTICE if reset else None


def export_session_logs(path: str | None, buffer: SessionLogBuffer) -> int:
    """Dump the buffered session log to *path*; no-op when *path* is None."""
    if not path:
        return 0
    written = buffer.export_jsonl(path)
    _logger.info("Exported %d log records to %s", written, path)
    return written


def main(argv: Optional[List[str]] = None) -> int:  # pragma: no cover - runtime
    args = build_parser().parse_args(argv)
    buffer = configure_logging(args.log_level)
    store = prepare_store(args.data_dir, reset=args.reset)

    from PyQt6.QtWidgets import QApplication

    from contrast_widget.views.contrast_widget_view import ContrastWidget

    app = QApplication.instance() or QApplication(sys.argv)
    widget = ContrastWidget(store, startup_notice=startup_notice(args.reset))
    widget.setWindowTitle("Contrast Ratio")
    widget.show()
    _logger.info("Contrast widget started (data dir %s)", args.data_dir)
    code = app.exec()
    # ContrastWidget.closeEvent has already saved the state
    export_session_logs(args.export_logs, buffer)
    return code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
