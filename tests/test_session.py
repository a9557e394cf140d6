from pathlib import Path

from yanta.adapters.files import FileAccessError
from yanta.core import session
from yanta.core.search import SearchQuery
from yanta.core.session import ScrollTo, SelectRange, ShowNotice, UpdateTitle


def _opened(text: str = "cat dog cat"):
    note, _ = session.open_note(Path("/notes/pets.txt"), text)
    return note


def test_new_note_title():
    note, effects = session.new_note()
    assert note.path is None
    assert effects == [UpdateTitle("New note", "Yanta: New note")]


def test_open_note_sets_baseline_and_title():
    note, effects = session.open_note("/notes/pets.txt", "hello")
    assert note.dirty.baseline == "hello"
    assert note.modified is False
    assert effects == [UpdateTitle("pets.txt", "Yanta: pets.txt")]


def test_text_changed_marks_and_clears_modified():
    note = _opened("hello")
    note, effects = session.text_changed(note, "hello!")
    assert note.modified is True
    assert effects == [UpdateTitle("pets.txt *", "Yanta: pets.txt *")]

    note, effects = session.text_changed(note, "hello!!")
    assert effects == []

    note, effects = session.text_changed(note, "hello")
    assert note.modified is False
    assert effects == [UpdateTitle("pets.txt", "Yanta: pets.txt")]


def test_find_selects_first_match():
    note, effects = session.find(_opened(), "cat dog cat", SearchQuery("cat"))
    assert note.matches.matches == (0, 8)
    assert effects == [SelectRange(0, 3), ScrollTo(0)]


def test_find_reports_not_found():
    note, effects = session.find(_opened(), "cat dog cat", SearchQuery("zebra"))
    assert not note.matches
    assert effects == [ShowNotice("Not Found", "Text 'zebra' not found.")]


def test_find_next_and_previous_cycle():
    text = "cat dog cat"
    query = SearchQuery("cat")
    note, _ = session.find(_opened(), text, query)
    note, effects = session.find_next(note, text, query)
    assert effects == [SelectRange(8, 11), ScrollTo(8)]
    note, effects = session.find_next(note, text, query)
    assert effects == [SelectRange(0, 3), ScrollTo(0)]
    note, effects = session.find_previous(note, text, query)
    assert effects == [SelectRange(8, 11), ScrollTo(8)]


def test_find_next_without_prior_find_runs_search():
    note, effects = session.find_next(_opened(), "cat dog cat", SearchQuery("dog"))
    assert note.matches.matches == (4,)
    assert effects == [SelectRange(4, 7), ScrollTo(4)]


def test_switching_query_text_rebuilds_matches():
    text = "cat dog cat"
    note, _ = session.find(_opened(), text, SearchQuery("cat"))
    note, effects = session.find_next(note, text, SearchQuery("dog"))
    assert note.query == SearchQuery("dog")
    assert effects == [SelectRange(4, 7), ScrollTo(4)]


def test_edit_invalidates_match_set():
    query = SearchQuery("cat")
    note, _ = session.find(_opened(), "cat dog cat", query)
    note, _ = session.text_changed(note, "dog cat")
    assert not note.matches
    assert note.query == query
    note, effects = session.find_next(note, "dog cat", query)
    assert effects == [SelectRange(4, 7), ScrollTo(4)]


def test_save_resets_baseline(tmp_path):
    note, _ = session.text_changed(_opened("old"), "new")
    target = tmp_path / "saved.txt"
    note, effects = session.save_note(note, target, "new")
    assert target.read_text(encoding="utf-8") == "new"
    assert note.modified is False
    assert note.path == target
    assert effects == [UpdateTitle("saved.txt", "Yanta: saved.txt")]
    _, effects = session.text_changed(note, "new")
    assert effects == []


def test_failed_save_keeps_baseline():
    def failing_writer(path, text, newline):
        raise FileAccessError("Could not save /notes/pets.txt: Permission denied")

    note, _ = session.text_changed(_opened("old"), "new")
    after, effects = session.save_note(note, "/notes/pets.txt", "new", writer=failing_writer)
    assert after == note
    assert after.dirty.baseline == "old"
    assert effects == [
        ShowNotice("Save Failed", "Could not save /notes/pets.txt: Permission denied", error=True)
    ]
    after, _ = session.text_changed(after, "new")
    assert after.modified is True


def test_close_prompt_only_when_modified():
    note = _opened("text")
    assert session.close_prompt(note) is None
    note, _ = session.text_changed(note, "text changed")
    assert session.close_prompt(note) == session.CLOSE_PROMPT


def test_save_keeps_newline_style_of_opened_file(tmp_path):
    target = tmp_path / "dos.txt"
    note, _ = session.open_note(target, "one\ntwo", newline="\r\n")
    session.save_note(note, target, "one\ntwo")
    assert target.read_bytes() == b"one\r\ntwo"
