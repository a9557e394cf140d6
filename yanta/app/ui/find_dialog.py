from __future__ import annotations

from PySide6.QtCore import Qt, Signal, QEvent, QObject
from PySide6.QtWidgets import (
    QDialog,
    QVBoxLayout,
    QHBoxLayout,
    QLineEdit,
    QPushButton,
    QCheckBox,
)

from yanta.core.search import SearchQuery


class FindDialog(QDialog):
    findRequested = Signal(object)  # SearchQuery
    nextRequested = Signal(object)
    previousRequested = Signal(object)

    def __init__(self, parent=None) -> None:
        super().__init__(parent)
        self.setWindowTitle("Find")
        self.setModal(False)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(6, 6, 6, 6)
        layout.setSpacing(5)

        self.query_edit = QLineEdit()
        layout.addWidget(self.query_edit)

        self.case_checkbox = QCheckBox("Match Case")
        self.case_checkbox.setChecked(False)
        layout.addWidget(self.case_checkbox)
        self.whole_word_checkbox = QCheckBox("Match Whole Word")
        self.whole_word_checkbox.setChecked(False)
        layout.addWidget(self.whole_word_checkbox)

        actions_row = QHBoxLayout()
        actions_row.setContentsMargins(0, 0, 0, 0)
        self.find_btn = QPushButton("Find")
        self.find_btn.clicked.connect(lambda: self.findRequested.emit(self.current_query()))
        actions_row.addWidget(self.find_btn)
        self.next_btn = QPushButton("Next")
        self.next_btn.clicked.connect(lambda: self.nextRequested.emit(self.current_query()))
        actions_row.addWidget(self.next_btn)
        self.prev_btn = QPushButton("Previous")
        self.prev_btn.clicked.connect(lambda: self.previousRequested.emit(self.current_query()))
        actions_row.addWidget(self.prev_btn)
        self.cancel_btn = QPushButton("Cancel")
        self.cancel_btn.clicked.connect(self.hide)
        actions_row.addWidget(self.cancel_btn)
        layout.addLayout(actions_row)

        self.query_edit.installEventFilter(self)

    def current_query(self) -> SearchQuery:
        return SearchQuery(
            text=self.query_edit.text(),
            match_case=self.case_checkbox.isChecked(),
            match_whole_word=self.whole_word_checkbox.isChecked(),
        )

    def show_dialog(self, query: str = "") -> None:
        if query:
            self.query_edit.setText(query)
        self.show()
        self.raise_()
        self.activateWindow()
        self.query_edit.setFocus(Qt.ShortcutFocusReason)
        self.query_edit.selectAll()

    def eventFilter(self, obj: QObject, event: QEvent):  # type: ignore[override]
        if obj == self.query_edit and event.type() == QEvent.KeyPress:
            if event.key() in (Qt.Key_Return, Qt.Key_Enter):
                if event.modifiers() & Qt.ShiftModifier:
                    self.previousRequested.emit(self.current_query())
                else:
                    self.nextRequested.emit(self.current_query())
                return True
        return super().eventFilter(obj, event)
