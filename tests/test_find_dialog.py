from PySide6.QtCore import Qt
from PySide6.QtTest import QTest

from yanta.app.ui.find_dialog import FindDialog
from yanta.core.search import SearchQuery


def test_buttons_emit_current_query(qapp):
    dialog = FindDialog()
    emitted = []
    dialog.findRequested.connect(lambda q: emitted.append(("find", q)))
    dialog.nextRequested.connect(lambda q: emitted.append(("next", q)))
    dialog.previousRequested.connect(lambda q: emitted.append(("previous", q)))

    dialog.query_edit.setText("cat")
    dialog.case_checkbox.setChecked(True)
    dialog.whole_word_checkbox.setChecked(True)
    dialog.find_btn.click()
    dialog.next_btn.click()
    dialog.prev_btn.click()

    query = SearchQuery("cat", match_case=True, match_whole_word=True)
    assert emitted == [("find", query), ("next", query), ("previous", query)]
    dialog.close()


def test_enter_requests_next_and_shift_enter_previous(qapp):
    dialog = FindDialog()
    emitted = []
    dialog.nextRequested.connect(lambda q: emitted.append("next"))
    dialog.previousRequested.connect(lambda q: emitted.append("previous"))
    dialog.show_dialog("dog")
    QTest.keyClick(dialog.query_edit, Qt.Key_Return)
    QTest.keyClick(dialog.query_edit, Qt.Key_Return, Qt.ShiftModifier)
    assert emitted == ["next", "previous"]
    dialog.close()


def test_cancel_hides_dialog(qapp):
    dialog = FindDialog()
    dialog.show_dialog("word")
    assert dialog.isVisible()
    assert dialog.query_edit.text() == "word"
    dialog.cancel_btn.click()
    assert not dialog.isVisible()
