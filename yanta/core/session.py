"""Per-note session state and the command handlers the UI dispatches to.

Handlers are pure with respect to the UI: each takes the current session and a
snapshot of the editor text and returns the new session along with a list of
effects (select a range, scroll, show a notice, retitle) for the host to apply.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Optional, Union

from yanta.adapters.files import DEFAULT_NEWLINE, FileAccessError, write_text_file
from yanta.core import dirty_state, search
from yanta.core.dirty_state import DirtyState
from yanta.core.search import EMPTY_MATCHES, MatchSet, SearchQuery

logger = logging.getLogger(__name__)

NEW_NOTE_NAME = "New note"
CLOSE_PROMPT = "This file has been modified, do you wish to save it before closing?"


@dataclass(frozen=True)
class SelectRange:
    start: int
    end: int


@dataclass(frozen=True)
class ScrollTo:
    offset: int


@dataclass(frozen=True)
class ShowNotice:
    title: str
    message: str
    error: bool = False


@dataclass(frozen=True)
class UpdateTitle:
    label: str
    window_title: str


Effect = Union[SelectRange, ScrollTo, ShowNotice, UpdateTitle]


@dataclass(frozen=True)
class NoteSession:
    path: Optional[Path] = None
    base_name: str = NEW_NOTE_NAME
    dirty: DirtyState = field(default_factory=DirtyState)
    modified: bool = False
    query: Optional[SearchQuery] = None
    matches: MatchSet = EMPTY_MATCHES
    newline: str = DEFAULT_NEWLINE

    @property
    def label(self) -> str:
        return dirty_state.render_title(self.base_name, self.modified)


CommandResult = tuple[NoteSession, list[Effect]]


def _title_effect(session: NoteSession) -> UpdateTitle:
    label = session.label
    return UpdateTitle(label, dirty_state.window_title(label))


def _select_effects(match_set: MatchSet, query: SearchQuery) -> list[Effect]:
    selection = match_set.selection(query.length)
    if selection is None:
        return []
    start, end = selection
    return [SelectRange(start, end), ScrollTo(start)]


def new_note() -> CommandResult:
    session = NoteSession(dirty=dirty_state.on_load(""))
    return session, [_title_effect(session)]


def open_note(path: Path | str, text: str, newline: str = DEFAULT_NEWLINE) -> CommandResult:
    target = Path(path)
    session = NoteSession(
        path=target,
        base_name=target.name,
        dirty=dirty_state.on_load(text),
        newline=newline,
    )
    return session, [_title_effect(session)]


def text_changed(session: NoteSession, text: str) -> CommandResult:
    """Refresh the modified flag; any match set built on older text is dropped."""
    _, modified = dirty_state.on_text_changed(session.dirty, text)
    updated = replace(session, modified=modified, matches=EMPTY_MATCHES)
    effects: list[Effect] = []
    if modified != session.modified:
        effects.append(_title_effect(updated))
    return updated, effects


def find(session: NoteSession, text: str, query: SearchQuery) -> CommandResult:
    match_set = search.find(text, query)
    updated = replace(session, query=query, matches=match_set)
    if not match_set:
        return updated, [ShowNotice("Not Found", f"Text '{query.text}' not found.")]
    return updated, _select_effects(match_set, query)


def _needs_rescan(session: NoteSession, query: SearchQuery) -> bool:
    if not session.matches or session.query is None:
        return True
    return session.query.text != query.text


def _step(session: NoteSession, text: str, query: SearchQuery, backwards: bool) -> CommandResult:
    if _needs_rescan(session, query):
        return find(session, text, query)
    cycle = search.previous_match if backwards else search.next_match
    match_set = cycle(session.matches, text, query)
    updated = replace(session, query=query, matches=match_set)
    return updated, _select_effects(match_set, query)


def find_next(session: NoteSession, text: str, query: SearchQuery) -> CommandResult:
    return _step(session, text, query, backwards=False)


def find_previous(session: NoteSession, text: str, query: SearchQuery) -> CommandResult:
    return _step(session, text, query, backwards=True)


def save_note(
    session: NoteSession,
    path: Path | str,
    text: str,
    writer: Callable[[Path, str, str], None] = write_text_file,
) -> CommandResult:
    """Write ``text`` to ``path`` in the note's newline style; the baseline only moves on success."""
    target = Path(path)
    try:
        writer(target, text, session.newline)
    except FileAccessError as exc:
        logger.error("Save failed for %s: %s", target, exc)
        return session, [ShowNotice("Save Failed", str(exc), error=True)]
    updated = replace(
        session,
        path=target,
        base_name=target.name,
        dirty=dirty_state.on_saved(text),
        modified=False,
    )
    return updated, [_title_effect(updated)]


def close_prompt(session: NoteSession) -> Optional[str]:
    """Question to put to the user before closing, or None when nothing is unsaved."""
    return CLOSE_PROMPT if session.modified else None
