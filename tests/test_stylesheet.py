import pytest

from yanta.app.stylesheet import StylesheetError, apply_stylesheet, load_stylesheet


class RecordingApp:
    def __init__(self) -> None:
        self.sheets: list[str] = []

    def setStyleSheet(self, sheet: str) -> None:
        self.sheets.append(sheet)


def test_load_valid_stylesheet(tmp_path):
    css = tmp_path / "theme.css"
    css.write_text("QPlainTextEdit { color: #eee; }\n", encoding="utf-8")
    assert "color" in load_stylesheet(css)


def test_missing_stylesheet(tmp_path):
    with pytest.raises(StylesheetError, match="not found"):
        load_stylesheet(tmp_path / "gone.css")


@pytest.mark.parametrize("source", ["QWidget { color: red;", "}\nQWidget {}"])
def test_unbalanced_braces(tmp_path, source):
    css = tmp_path / "broken.css"
    css.write_text(source, encoding="utf-8")
    with pytest.raises(StylesheetError):
        load_stylesheet(css)


def test_apply_falls_back_to_default_on_error(tmp_path):
    app = RecordingApp()
    with pytest.raises(StylesheetError):
        apply_stylesheet(app, tmp_path / "gone.css")
    assert app.sheets == [""]


def test_apply_empty_path_uses_default():
    app = RecordingApp()
    apply_stylesheet(app, "")
    assert app.sheets == [""]


def test_braces_inside_comments_are_ignored(tmp_path):
    css = tmp_path / "commented.css"
    css.write_text("/* closes } early\n   { */\nQWidget { color: red; }\n", encoding="utf-8")
    assert "QWidget" in load_stylesheet(css)


def test_error_line_accounts_for_multiline_comments(tmp_path):
    css = tmp_path / "broken.css"
    css.write_text("/* a\nb */\n}\n", encoding="utf-8")
    with pytest.raises(StylesheetError, match="line 3"):
        load_stylesheet(css)
