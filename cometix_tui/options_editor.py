"""Popup for viewing and editing a segment's free-form options."""

from __future__ import annotations

import json
import math
import re
from typing import Any, Mapping, Optional

from cometix_tui.layout import Rect

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I64_MIN = -(2**63)
_I64_MAX = 2**63 - 1
_POPUP_WIDTH = 60
_CURSOR = "\u2581"
_EMPTY_MESSAGE = "No options available for this segment."


def _display(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _parse_value(text: str) -> Any:
    """Read typed text as an integer, a finite float, a boolean, or else a string."""
    if _INTEGER.fullmatch(text):
        number = int(text)
        if _I64_MIN <= number <= _I64_MAX:
            return number
    if text.isascii() and "_" not in text:
        try:
            number = float(text)
        except ValueError:
            pass
        else:
            return number if math.isfinite(number) else text
    lowered = text.lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    return text


class OptionsEditorComponent:
    """Lists options sorted by key and lets one be edited at a time."""

    def __init__(self) -> None:
        self.is_open = False
        self._entries: list[list[Any]] = []
        self._selected_index = 0
        self._editing = False
        self._edit_buffer = ""

    @property
    def selected_index(self) -> int:
        return self._selected_index

    @property
    def edit_buffer(self) -> str:
        return self._edit_buffer

    def open(self, options: Mapping[str, Any]) -> None:
        self.is_open = True
        self._selected_index = 0
        self._editing = False
        self._edit_buffer = ""
        self._entries = [[key, value] for key, value in sorted(options.items())]

    def close(self) -> Optional[dict[str, Any]]:
        """Close and hand back the options, or None if there were none."""
        self.is_open = False
        entries, self._entries = self._entries, []
        if not entries:
            return None
        return {key: value for key, value in entries}

    def move_selection(self, delta: int) -> None:
        if self._editing or not self._entries:
            return
        self._selected_index = max(0, min(self._selected_index + delta, len(self._entries) - 1))

    def start_editing(self) -> None:
        if not self._entries:
            return
        self._editing = True
        self._edit_buffer = _display(self._entries[self._selected_index][1])

    def confirm_edit(self) -> None:
        if not self._editing:
            return
        self._entries[self._selected_index][1] = _parse_value(self._edit_buffer.strip())
        self._editing = False
        self._edit_buffer = ""

    def cancel_edit(self) -> None:
        self._editing = False
        self._edit_buffer = ""

    def input_char(self, c: str) -> None:
        if self._editing:
            self._edit_buffer += c

    def backspace(self) -> None:
        if self._editing:
            self._edit_buffer = self._edit_buffer[:-1]

    def is_editing(self) -> bool:
        return self._editing

    def render(self, area: Rect) -> Optional[tuple[Rect, list[str]]]:
        """Return the popup area and its lines (one per option, then actions), or None when closed."""
        if not self.is_open:
            return None

        height = max(8, min(len(self._entries) + 8, 20))
        popup = Rect(
            x=max(area.width - _POPUP_WIDTH, 0) // 2,
            y=max(area.height - height, 0) // 2,
            width=_POPUP_WIDTH,
            height=height,
        )
        if not self._entries:
            return popup, [_EMPTY_MESSAGE]

        lines = []
        for i, (key, value) in enumerate(self._entries):
            selected = i == self._selected_index
            if selected and self._editing:
                shown = f"{self._edit_buffer}{_CURSOR}"
            else:
                shown = _display(value)
            marker = "\u25b8 " if selected else "  "
            lines.append(f"{marker}{key}: {shown}")
        lines.append(
            "[Enter] Confirm  [Esc] Cancel" if self._editing else "[Enter] Edit  [Esc] Close"
        )
        return popup, lines