from __future__ import annotations

from PySide6.QtGui import QTextCursor
from PySide6.QtWidgets import QPlainTextEdit


class NoteEditor(QPlainTextEdit):
    """Plain-text note buffer; owns the document text and its undo history."""

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setObjectName("noteEditor")
        self.set_word_wrap(False)

    def get_text(self) -> str:
        return self.toPlainText()

    def set_text(self, text: str) -> None:
        self.setPlainText(text)

    def _to_qt_position(self, offset: int) -> int:
        """Convert a code-point offset into the document's UTF-16 position."""
        text = self.toPlainText()
        offset = max(0, min(offset, len(text)))
        return len(text[:offset].encode("utf-16-le")) // 2

    def select_range(self, start: int, end: int) -> None:
        start = self._to_qt_position(start)
        end = max(start, self._to_qt_position(end))
        cursor = self.textCursor()
        cursor.setPosition(start)
        cursor.setPosition(end, QTextCursor.KeepAnchor)
        self.setTextCursor(cursor)

    def scroll_to(self, offset: int) -> None:
        position = self._to_qt_position(offset)
        cursor = self.textCursor()
        if cursor.selectionStart() != position:
            cursor.setPosition(position)
            self.setTextCursor(cursor)
        self.ensureCursorVisible()

    def set_word_wrap(self, enabled: bool) -> None:
        if enabled:
            self.setLineWrapMode(QPlainTextEdit.LineWrapMode.WidgetWidth)
        else:
            self.setLineWrapMode(QPlainTextEdit.LineWrapMode.NoWrap)

    def word_wrap(self) -> bool:
        return self.lineWrapMode() != QPlainTextEdit.LineWrapMode.NoWrap

    def set_font_point_size(self, size: int) -> None:
        # Clamp to a sensible, positive point size to avoid Qt warnings
        safe_size = max(1, int(size))
        font = self.font()
        font.setPointSize(safe_size)
        self.setFont(font)
