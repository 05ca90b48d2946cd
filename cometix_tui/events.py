"""Mapping of key presses to configurator actions."""

from __future__ import annotations

from enum import Enum, auto


class AppEvent(Enum):
    QUIT = auto()
    SAVE = auto()
    MOVE_UP = auto()
    MOVE_DOWN = auto()
    EDIT = auto()
    TOGGLE = auto()
    SWITCH_PANEL = auto()
    OPEN_COLOR_PICKER = auto()
    OPEN_ICON_SELECTOR = auto()
    UNKNOWN = auto()


_KEYMAP = {
    "q": AppEvent.QUIT,
    "s": AppEvent.SAVE,
    "up": AppEvent.MOVE_UP,
    "down": AppEvent.MOVE_DOWN,
    "enter": AppEvent.EDIT,
    " ": AppEvent.TOGGLE,
    "tab": AppEvent.SWITCH_PANEL,
    "c": AppEvent.OPEN_COLOR_PICKER,
    "i": AppEvent.OPEN_ICON_SELECTOR,
}


def handle_key_event(key: str) -> AppEvent:
    """Translate a key into an event.

    A single character is a character key and is matched exactly; longer
    strings name special keys ("up", "down", "enter", "tab"), case-insensitively.
    """
    if len(key) != 1:
        key = key.lower()
    return _KEYMAP.get(key, AppEvent.UNKNOWN)