from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication,
    QFileDialog,
    QLabel,
    QMainWindow,
    QMessageBox,
    QTabWidget,
)

from yanta.adapters import files
from yanta.app import config
from yanta.app.stylesheet import StylesheetError, apply_stylesheet
from yanta.core import counters, session as note_session, zoom
from yanta.core.dirty_state import APP_NAME
from yanta.core.search import SearchQuery
from yanta.core.session import Effect, NoteSession, ScrollTo, SelectRange, ShowNotice, UpdateTitle
from .find_dialog import FindDialog
from .note_editor import NoteEditor

logger = logging.getLogger(__name__)

TEXT_FILTER = "Text files (*.txt)"
CSS_FILTER = "CSS files (*.css)"


class MainWindow(QMainWindow):
    def __init__(self, app_config: Optional[config.AppConfig] = None) -> None:
        super().__init__()
        self.app_config = app_config if app_config is not None else config.AppConfig()
        self.session: NoteSession = NoteSession()
        self.zoom_level: float = zoom.DEFAULT_ZOOM
        self._suspend_dirty_tracking: bool = False

        self.tabs = QTabWidget()
        self.editor = NoteEditor()
        self.editor.set_word_wrap(self.app_config.word_wrap)
        self.tabs.addTab(self.editor, note_session.NEW_NOTE_NAME)
        self.setCentralWidget(self.tabs)
        self.editor.textChanged.connect(self._on_text_changed)

        self.find_dialog = FindDialog(self)
        self.find_dialog.findRequested.connect(self._find)
        self.find_dialog.nextRequested.connect(self._find_next)
        self.find_dialog.previousRequested.connect(self._find_previous)

        self._count_labels = [QLabel() for _ in range(4)]
        for label in self._count_labels:
            self.statusBar().addPermanentWidget(label)

        self._build_menus()
        self.resize(800, 600)
        self._apply(*note_session.new_note())
        self._refresh_counters()

    # ------------------------------------------------------------------ menus
    def _add_action(self, menu, text: str, slot, shortcut: Optional[str] = None) -> QAction:
        action = QAction(text, self)
        if shortcut:
            action.setShortcut(QKeySequence(shortcut))
        action.triggered.connect(lambda checked=False: slot())
        menu.addAction(action)
        return action

    def _build_menus(self) -> None:
        file_menu = self.menuBar().addMenu("&File")
        self._add_action(file_menu, "Open", self._open_file_dialog, "Ctrl+O")
        self._add_action(file_menu, "Save", self._save_current_file, "Ctrl+S")
        self._add_action(file_menu, "Save As...", self._save_file_as, "Ctrl+Shift+S")
        file_menu.addSeparator()
        self._add_action(file_menu, "Quit", self.close, "Ctrl+Q")

        edit_menu = self.menuBar().addMenu("&Edit")
        self._add_action(edit_menu, "Undo", self.editor.undo, "Ctrl+Z")
        self._add_action(edit_menu, "Redo", self.editor.redo, "Ctrl+Y")
        edit_menu.addSeparator()
        self._add_action(edit_menu, "Cut", self.editor.cut, "Ctrl+X")
        self._add_action(edit_menu, "Copy", self.editor.copy, "Ctrl+C")
        self._add_action(edit_menu, "Paste", self.editor.paste, "Ctrl+V")
        edit_menu.addSeparator()
        self._add_action(edit_menu, "Find", self._show_find_dialog, "Ctrl+F")
        edit_menu.addSeparator()
        preferences_menu = edit_menu.addMenu("Preferences")
        self._add_action(preferences_menu, "Upload theme CSS", self._upload_css_dialog)

        view_menu = self.menuBar().addMenu("&View")
        self._add_action(view_menu, "Zoom In", lambda: self._set_zoom(zoom.zoom_in(self.zoom_level)), "Ctrl+=")
        self._add_action(view_menu, "Zoom Out", lambda: self._set_zoom(zoom.zoom_out(self.zoom_level)), "Ctrl+-")
        self._add_action(view_menu, "Reset Zoom", lambda: self._set_zoom(zoom.reset_zoom()), "Ctrl+0")
        view_menu.addSeparator()
        self.word_wrap_action = QAction("Word Wrap", self)
        self.word_wrap_action.setCheckable(True)
        self.word_wrap_action.setChecked(self.app_config.word_wrap)
        self.word_wrap_action.setShortcut(QKeySequence("Alt+Z"))
        self.word_wrap_action.toggled.connect(self._toggle_word_wrap)
        view_menu.addAction(self.word_wrap_action)

    # ---------------------------------------------------------------- effects
    def _apply(self, updated: NoteSession, effects: Iterable[Effect]) -> None:
        self.session = updated
        for effect in effects:
            if isinstance(effect, UpdateTitle):
                self.tabs.setTabText(0, effect.label)
                self.setWindowTitle(effect.window_title)
            elif isinstance(effect, SelectRange):
                self.editor.select_range(effect.start, effect.end)
            elif isinstance(effect, ScrollTo):
                self.editor.scroll_to(effect.offset)
            elif isinstance(effect, ShowNotice):
                if effect.error:
                    QMessageBox.critical(self, effect.title, effect.message)
                else:
                    QMessageBox.information(self, effect.title, effect.message)

    def _alert(self, message: str) -> None:
        QMessageBox.critical(self, APP_NAME, message)

    def _refresh_counters(self) -> None:
        stats = counters.compute_stats(self.editor.get_text())
        for label, text in zip(self._count_labels, stats.labels()):
            label.setText(text)

    def _on_text_changed(self) -> None:
        self._refresh_counters()
        if self._suspend_dirty_tracking:
            return
        self._apply(*note_session.text_changed(self.session, self.editor.get_text()))

    # ------------------------------------------------------------------ files
    def open_file(self, path: Path | str) -> bool:
        target = Path(path)
        try:
            text, newline = files.load_text_file(target)
        except files.FileAccessError as exc:
            logger.error("Error opening file: %s", exc)
            self._alert(str(exc))
            return False
        self._suspend_dirty_tracking = True
        try:
            self.editor.set_text(text)
        finally:
            self._suspend_dirty_tracking = False
        self._apply(*note_session.open_note(target, text, newline))
        self._refresh_counters()
        return True

    def _open_file_dialog(self) -> None:
        start_dir = str(self.session.path.parent) if self.session.path else str(Path.home())
        path, _ = QFileDialog.getOpenFileName(self, "Open File", start_dir, TEXT_FILTER)
        if path:
            self.open_file(path)

    def save_to(self, path: Path | str) -> bool:
        updated, effects = note_session.save_note(self.session, path, self.editor.get_text())
        self._apply(updated, effects)
        return not any(isinstance(effect, ShowNotice) and effect.error for effect in effects)

    def _save_current_file(self) -> bool:
        if self.session.path is not None:
            return self.save_to(self.session.path)
        return self._save_file_as()

    def _save_file_as(self) -> bool:
        suggested = files.default_save_name(None if self.session.path is None else self.session.base_name)
        if self.session.path is not None:
            suggested = str(self.session.path.parent / suggested)
        path, _ = QFileDialog.getSaveFileName(self, "Save File As...", suggested, TEXT_FILTER)
        if not path:
            return False
        return self.save_to(path)

    # ----------------------------------------------------------------- search
    def _show_find_dialog(self) -> None:
        selected = self.editor.textCursor().selectedText()
        # multi-line selections (U+2029 separators) are not used as a query
        self.find_dialog.show_dialog(selected if "\u2029" not in selected else "")

    def _find(self, query: SearchQuery) -> None:
        self._apply(*note_session.find(self.session, self.editor.get_text(), query))

    def _find_next(self, query: SearchQuery) -> None:
        self._apply(*note_session.find_next(self.session, self.editor.get_text(), query))

    def _find_previous(self, query: SearchQuery) -> None:
        self._apply(*note_session.find_previous(self.session, self.editor.get_text(), query))

    # ------------------------------------------------------------------- view
    def _set_zoom(self, level: float) -> None:
        self.zoom_level = level
        self.editor.set_font_point_size(zoom.point_size(level))
        if self.app_config.custom_css_path and Path(self.app_config.custom_css_path).exists():
            try:
                apply_stylesheet(QApplication.instance(), self.app_config.custom_css_path)
            except StylesheetError as exc:
                logger.warning("Error loading CSS file: %s", exc)

    def _toggle_word_wrap(self, enabled: bool) -> None:
        self.app_config.word_wrap = bool(enabled)
        self.editor.set_word_wrap(self.app_config.word_wrap)

    # ------------------------------------------------------------ stylesheet
    def load_startup_stylesheet(self) -> None:
        """Apply the configured stylesheet, offering to forget a broken path."""
        css_path = self.app_config.custom_css_path
        try:
            apply_stylesheet(QApplication.instance(), css_path)
        except StylesheetError as exc:
            reply = QMessageBox.question(
                self,
                "Stylesheet Error",
                f"Error loading CSS file: {css_path}\n\nDetails:\n{exc}\n\n"
                "Do you want to delete this custom CSS path from the configuration?",
                QMessageBox.Yes | QMessageBox.No,
                QMessageBox.No,
            )
            if reply == QMessageBox.Yes:
                self.app_config.custom_css_path = ""

    def upload_stylesheet(self, css_path: str) -> bool:
        try:
            apply_stylesheet(QApplication.instance(), css_path)
        except StylesheetError as exc:
            self.app_config.custom_css_path = ""
            QMessageBox.critical(
                self,
                "Invalid CSS file",
                "The selected CSS file contains errors and could not be loaded.\n\n"
                f"{exc}\n\nFalling back to default system theme.",
            )
            return False
        self.app_config.custom_css_path = css_path
        return True

    def _upload_css_dialog(self) -> None:
        path, _ = QFileDialog.getOpenFileName(self, "Upload Theme CSS", str(Path.home()), CSS_FILTER)
        if path:
            self.upload_stylesheet(path)

    # ------------------------------------------------------------------- quit
    def _persist_config(self) -> None:
        try:
            config.save_app_config(self.app_config)
        except OSError as exc:
            logger.error("Failed to save config: %s", exc)
            self._alert(f"Could not save settings: {exc}")

    def closeEvent(self, event) -> None:  # type: ignore[override]
        prompt = note_session.close_prompt(self.session)
        if prompt:
            reply = QMessageBox.question(
                self,
                APP_NAME,
                prompt,
                QMessageBox.Yes | QMessageBox.No,
                QMessageBox.Yes,
            )
            if reply == QMessageBox.Yes:
                self._save_current_file()
        self.find_dialog.hide()
        self._persist_config()
        super().closeEvent(event)
