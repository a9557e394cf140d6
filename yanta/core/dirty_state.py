from __future__ import annotations

from dataclasses import dataclass

APP_NAME = "Yanta"
MODIFIED_MARKER = " *"


@dataclass(frozen=True)
class DirtyState:
    """Baseline text a note is compared against to decide if it has unsaved edits."""

    baseline: str = ""

    def is_modified(self, current: str) -> bool:
        return current != self.baseline


def on_load(text: str) -> DirtyState:
    return DirtyState(baseline=text)


def on_text_changed(state: DirtyState, current: str) -> tuple[DirtyState, bool]:
    return state, state.is_modified(current)


def on_saved(current: str) -> DirtyState:
    """Reset the baseline. Only call once the write has succeeded."""
    return DirtyState(baseline=current)


def render_title(base_name: str, modified: bool) -> str:
    """Add or strip the trailing modified marker; idempotent for a given flag."""
    if modified:
        if base_name.endswith(MODIFIED_MARKER):
            return base_name
        return base_name + MODIFIED_MARKER
    if base_name.endswith(MODIFIED_MARKER):
        return base_name[: -len(MODIFIED_MARKER)]
    return base_name


def window_title(label: str, app_name: str = APP_NAME) -> str:
    return f"{app_name}: {label}"
