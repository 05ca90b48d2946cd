"""State of the colour picker popup: basic, extended and RGB selection."""

from __future__ import annotations

import string
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional

from cometix_tui.colors import AnsiColor, Color16, Color256, Rgb

_BASIC_COUNT = 16
_EXTENDED_COUNT = 256
_DIGITS = frozenset(string.digits)
_HEX_DIGITS = frozenset(string.hexdigits)


class NavDirection(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()


class ColorPickerMode(Enum):
    BASIC16 = auto()
    EXTENDED256 = auto()
    RGB_INPUT = auto()


class RgbField(Enum):
    RED = auto()
    GREEN = auto()
    BLUE = auto()
    HEX = auto()


_FIELD_ORDER = (RgbField.RED, RgbField.GREEN, RgbField.BLUE, RgbField.HEX)
_MODE_CYCLE = {
    ColorPickerMode.BASIC16: ColorPickerMode.EXTENDED256,
    ColorPickerMode.EXTENDED256: ColorPickerMode.RGB_INPUT,
    ColorPickerMode.RGB_INPUT: ColorPickerMode.BASIC16,
}
_FIELD_ATTR = {
    RgbField.RED: "r",
    RgbField.GREEN: "g",
    RgbField.BLUE: "b",
    RgbField.HEX: "hex",
}


@dataclass
class RgbInput:
    """Text typed into the RGB and hex fields."""

    r: str = ""
    g: str = ""
    b: str = ""
    hex: str = ""
    editing_field: RgbField = RgbField.RED


def _parse_byte(text: str, base: int = 10) -> Optional[int]:
    if not text:
        return None
    try:
        value = int(text, base)
    except ValueError:
        return None
    return value if 0 <= value <= 255 else None


def _grid_step(selected: int, cols: int, count: int, direction: NavDirection) -> int:
    """Move within a grid of ``count`` cells laid out ``cols`` to a row."""
    last = count - 1
    row, col = divmod(selected, cols)
    if direction is NavDirection.UP:
        return min((row - 1) * cols + col, last) if row > 0 else selected
    if direction is NavDirection.DOWN:
        total_rows = -(-count // cols)
        return min((row + 1) * cols + col, last) if row + 1 < total_rows else selected
    if direction is NavDirection.LEFT:
        return selected - 1 if selected > 0 else last
    return selected + 1 if selected < last else 0


@dataclass
class ColorPickerComponent:
    is_open: bool = False
    mode: ColorPickerMode = ColorPickerMode.BASIC16
    selected_basic: int = 0
    selected_extended: int = 0
    rgb_input: RgbInput = field(default_factory=RgbInput)
    current_color: Optional[AnsiColor] = None
    show_extended: bool = False
    # Columns per row as last laid out, used for grid navigation.
    cached_basic_cols: int = 4
    cached_extended_cols: int = 16

    def open(self) -> None:
        self.is_open = True
        self.mode = ColorPickerMode.BASIC16
        self.selected_basic = 0

    def close(self) -> None:
        self.is_open = False

    def toggle_extended(self) -> None:
        self.show_extended = not self.show_extended
        self.mode = (
            ColorPickerMode.EXTENDED256 if self.show_extended else ColorPickerMode.BASIC16
        )

    def switch_to_rgb(self) -> None:
        self.mode = ColorPickerMode.RGB_INPUT

    def cycle_mode(self) -> None:
        """Basic, then extended, then RGB, then back to basic."""
        self.mode = _MODE_CYCLE[self.mode]
        self.show_extended = self.mode is ColorPickerMode.EXTENDED256

    def _select_basic(self, index: int) -> None:
        self.selected_basic = index
        self.current_color = Color16(index)

    def _select_extended(self, index: int) -> None:
        self.selected_extended = index
        self.current_color = Color256(index)

    def move_selection(self, delta: int) -> None:
        """Step the selection by ``delta``; in RGB mode, step between fields without wrapping."""
        if self.mode is ColorPickerMode.BASIC16:
            self._select_basic(max(0, min(self.selected_basic + delta, _BASIC_COUNT - 1)))
        elif self.mode is ColorPickerMode.EXTENDED256:
            self._select_extended(
                max(0, min(self.selected_extended + delta, _EXTENDED_COUNT - 1))
            )
        else:
            position = _FIELD_ORDER.index(self.rgb_input.editing_field)
            if delta > 0 and position < len(_FIELD_ORDER) - 1:
                self.rgb_input.editing_field = _FIELD_ORDER[position + 1]
            elif delta < 0 and position > 0:
                self.rgb_input.editing_field = _FIELD_ORDER[position - 1]

    def move_direction(self, direction: NavDirection) -> None:
        """Navigate the colour grid, or cycle RGB fields with left and right."""
        if self.mode is ColorPickerMode.BASIC16:
            self._select_basic(
                _grid_step(self.selected_basic, self.cached_basic_cols, _BASIC_COUNT, direction)
            )
        elif self.mode is ColorPickerMode.EXTENDED256:
            self._select_extended(
                _grid_step(
                    self.selected_extended,
                    self.cached_extended_cols,
                    _EXTENDED_COUNT,
                    direction,
                )
            )
        elif direction in (NavDirection.LEFT, NavDirection.RIGHT):
            step = -1 if direction is NavDirection.LEFT else 1
            position = _FIELD_ORDER.index(self.rgb_input.editing_field)
            self.rgb_input.editing_field = _FIELD_ORDER[(position + step) % len(_FIELD_ORDER)]

    def input_char(self, c: str) -> None:
        """Type into the current RGB field; ignored outside RGB mode."""
        if self.mode is not ColorPickerMode.RGB_INPUT:
            return
        editing = self.rgb_input.editing_field
        attr = _FIELD_ATTR[editing]
        current = getattr(self.rgb_input, attr)
        if editing is RgbField.HEX:
            if len(current) < 6 and c in _HEX_DIGITS:
                setattr(self.rgb_input, attr, current + c.upper())
        elif len(current) < 3 and c in _DIGITS:
            setattr(self.rgb_input, attr, current + c)
        self._update_rgb_color()

    def backspace(self) -> None:
        if self.mode is not ColorPickerMode.RGB_INPUT:
            return
        attr = _FIELD_ATTR[self.rgb_input.editing_field]
        setattr(self.rgb_input, attr, getattr(self.rgb_input, attr)[:-1])
        self._update_rgb_color()

    def _update_rgb_color(self) -> None:
        hex_text = self.rgb_input.hex
        if len(hex_text) == 6:
            parts = [_parse_byte(hex_text[i : i + 2], 16) for i in (0, 2, 4)]
            if None not in parts:
                self.current_color = Rgb(*parts)
                return
        parts = [_parse_byte(text) for text in (self.rgb_input.r, self.rgb_input.g, self.rgb_input.b)]
        if None not in parts:
            self.current_color = Rgb(*parts)

    def get_selected_color(self) -> Optional[AnsiColor]:
        return self.current_color