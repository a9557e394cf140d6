from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

TEXT_SUFFIX = ".txt"
UNTITLED_NAME = "untitled"
DEFAULT_NEWLINE = "\n"


class FileAccessError(RuntimeError):
    pass


def is_text_file(path: Path | str) -> bool:
    return Path(path).suffix.lower() == TEXT_SUFFIX


def default_save_name(base_name: str | None) -> str:
    """Suggested file name for a save dialog, always ending in .txt."""
    name = (base_name or "").strip() or UNTITLED_NAME
    if name.lower().endswith(TEXT_SUFFIX):
        return name
    return f"{name}{TEXT_SUFFIX}"


def detect_newline(raw: str) -> str:
    """Return the line ending used by ``raw`` (first match wins: CRLF, CR, LF)."""
    if "\r\n" in raw:
        return "\r\n"
    if "\r" in raw:
        return "\r"
    return DEFAULT_NEWLINE


def load_text_file(path: Path | str) -> tuple[str, str]:
    """Read a note, returning its text with ``\\n`` line endings and the file's own newline."""
    target = Path(path)
    try:
        with target.open("r", encoding="utf-8", newline="") as handle:
            raw = handle.read()
    except FileNotFoundError as exc:
        raise FileAccessError(f"File not found: {target}") from exc
    except UnicodeDecodeError as exc:
        raise FileAccessError(f"{target.name} is not a UTF-8 text file.") from exc
    except OSError as exc:
        logger.warning("Failed to read %s: %s", target, exc)
        raise FileAccessError(f"Could not read {target}: {exc.strerror or exc}") from exc
    newline = detect_newline(raw)
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    return text, newline


def read_text_file(path: Path | str) -> str:
    return load_text_file(path)[0]


def write_text_file(path: Path | str, content: str, newline: str = DEFAULT_NEWLINE) -> None:
    """Write ``content`` translating each ``\\n`` into ``newline``."""
    target = Path(path)
    try:
        with target.open("w", encoding="utf-8", newline=newline) as handle:
            handle.write(content)
    except OSError as exc:
        logger.warning("Failed to write %s: %s", target, exc)
        raise FileAccessError(f"Could not save {target}: {exc.strerror or exc}") from exc
