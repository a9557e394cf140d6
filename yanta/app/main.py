from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from PySide6.QtCore import QtMsgType, qInstallMessageHandler
from PySide6.QtWidgets import QApplication

from yanta.adapters import files
from yanta.app import config
from yanta.app.ui.main_window import MainWindow


# ============================================================================
# DEBUG CONFIGURATION - Environment Variables
# ============================================================================
# YANTA_DEBUG - Verbose logging (search, file I/O, stylesheet loading)
#
# Example:
#   YANTA_DEBUG=1 yanta notes.txt
# ============================================================================


def _qt_message_handler(mode: QtMsgType, context, message: str) -> None:
    """Route Qt messages through logging, dropping known harmless warnings."""
    if "QTextCursor::setPosition" in message:
        return
    qt_logger = logging.getLogger("qt")
    if mode == QtMsgType.QtDebugMsg:
        qt_logger.debug(message)
    elif mode == QtMsgType.QtWarningMsg:
        qt_logger.warning(message)
    elif mode in (QtMsgType.QtCriticalMsg, QtMsgType.QtFatalMsg):
        qt_logger.error(message)
    else:
        qt_logger.info(message)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Yanta note editor.")
    parser.add_argument("file", nargs="?", help="Text file (.txt) to open at startup.")
    return parser.parse_args(argv)


def _configure_logging() -> None:
    level = logging.DEBUG if config.debug_enabled("YANTA_DEBUG") else logging.WARNING
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _diag(msg: str) -> None:
    """Lightweight diagnostic logger for startup/teardown events."""
    timestamp = time.strftime("%Y-%m-%d %H:%M:%S")
    print(f"[YantaDiag {timestamp}] {msg}", file=sys.stderr)


def startup_file(arg: str | None) -> Path | None:
    """Return the command-line path if it names an existing .txt file."""
    if not arg:
        return None
    path = Path(arg)
    if path.is_file() and files.is_text_file(path):
        return path
    return None


def main() -> None:
    args = _parse_args(sys.argv[1:])
    _configure_logging()
    qInstallMessageHandler(_qt_message_handler)
    qt_app = QApplication(sys.argv)
    app_config = config.load_app_config()
    window = MainWindow(app_config)
    window.load_startup_stylesheet()
    initial = startup_file(args.file)
    if initial is not None:
        window.open_file(initial)
    elif args.file:
        _diag(f"Ignoring startup argument (not an existing .txt file): {args.file}")
    window.show()
    rc = qt_app.exec()
    _diag(f"Qt event loop exited with code {rc}.")
    sys.exit(rc)


if __name__ == "__main__":  # pragma: no cover - manual entry point
    main()
