"""Popup for entering a short identifier such as a theme name."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from cometix_tui.layout import Rect

_ACTIONS = "[Enter] Confirm  [Esc] Cancel"
_POPUP_HEIGHT = 8


@dataclass
class NameInputComponent:
    is_open: bool = False
    input: str = ""
    title: str = "Input Name"
    placeholder: str = "Enter name..."

    def open(self, title: str, placeholder: str) -> None:
        self.is_open = True
        self.input = ""
        self.title = title
        self.placeholder = placeholder

    def close(self) -> None:
        self.is_open = False
        self.input = ""

    def input_char(self, c: str) -> None:
        """Append ``c`` if it is an ASCII letter, digit, '_' or '-'."""
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if (c.isascii() and c.isalnum()) or c in "_-":
            self.input += c

    def backspace(self) -> None:
        self.input = self.input[:-1]

    def get_input(self) -> Optional[str]:
        """Return the trimmed input, or None when it is blank."""
        value = self.input.strip()
        return value or None

    def popup_area(self, area: Rect) -> Rect:
        """Place the popup centred, keeping the bottom help rows uncovered."""
        width = min(60, max(area.width - 4, 0))
        max_y = max(area.height - (_POPUP_HEIGHT + 4), 0)
        popup_y = max(area.height - _POPUP_HEIGHT, 0) // 2 if max_y > 2 else 2
        return Rect(
            x=max(area.width - width, 0) // 2,
            y=min(popup_y, max_y),
            width=width,
            height=_POPUP_HEIGHT,
        )

    def render(self, area: Rect) -> Optional[tuple[Rect, list[str]]]:
        """Return the popup area and its lines (title, input, actions), or None when closed."""
        if not self.is_open:
            return None
        shown = self.input or self.placeholder
        return self.popup_area(area), [self.title, f"> {shown} <", _ACTIONS]