from __future__ import annotations

import logging
import re
from pathlib import Path

logger = logging.getLogger(__name__)

CSS_SUFFIX = ".css"


class StylesheetError(RuntimeError):
    pass


_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)


def _strip_comments(source: str) -> str:
    # Keep the newlines so reported line numbers still match the file.
    return _COMMENT.sub(lambda m: "\n" * m.group(0).count("\n"), source)


def _check_braces(source: str) -> None:
    depth = 0
    for line_no, line in enumerate(_strip_comments(source).splitlines(), start=1):
        for ch in line:
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth < 0:
                    raise StylesheetError(f"Unexpected '}}' on line {line_no}.")
    if depth:
        raise StylesheetError("Unclosed '{' block at end of file.")


def load_stylesheet(path: Path | str) -> str:
    """Read and sanity-check a custom stylesheet, returning its text."""
    target = Path(path)
    if not target.is_file():
        raise StylesheetError(f"Stylesheet not found: {target}")
    try:
        source = target.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise StylesheetError(f"Could not read {target}: {exc}") from exc
    _check_braces(source)
    logger.debug("Loaded stylesheet %s (%d chars)", target, len(source))
    return source


def apply_stylesheet(app, path: Path | str | None) -> None:
    """Apply ``path`` to the Qt application; an empty path restores the default theme.

    On failure the default theme is restored before StylesheetError propagates.
    """
    if not path:
        app.setStyleSheet("")
        return
    try:
        source = load_stylesheet(path)
    except StylesheetError as exc:
        logger.warning("Error loading CSS file: %s", exc)
        app.setStyleSheet("")
        raise
    app.setStyleSheet(source)
