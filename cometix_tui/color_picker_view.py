"""Text layout of the colour picker popup: mode bar, colour grids, RGB fields and preview."""

from __future__ import annotations

from typing import NamedTuple, Optional

from cometix_tui.color_picker import (
    ColorPickerComponent,
    ColorPickerMode,
    RgbField,
    RgbInput,
)
from cometix_tui.colors import AnsiColor, Color16, Color256, Rgb
from cometix_tui.layout import Direction, Length, Min, Rect, centered_rect, split

_SWATCH = "██"
_SELECTED_CELL = f"[ {_SWATCH} ]"
_PLAIN_CELL = f"  {_SWATCH}  "
_BASIC_CELL_WIDTH = 6
_EXTENDED_CELL_WIDTH = 7
_BASIC_COUNT = 16
_EXTENDED_COUNT = 256
_ACTIONS = "[Enter] Select  [Esc] Cancel  [Tab] Cycle Mode  [R] RGB"

_MODE_TEXT = {
    ColorPickerMode.BASIC16: "[•] Basic (ANSI 16)  [ ] Extended (256)  [ ] RGB",
    ColorPickerMode.EXTENDED256: "[ ] Basic (ANSI 16)  [•] Extended (256)  [ ] RGB",
    ColorPickerMode.RGB_INPUT: "[ ] Basic (ANSI 16)  [ ] Extended (256)  [•] RGB",
}

_PICKER_NAMES = (
    "Black",
    "Red",
    "Green",
    "Yellow",
    "Blue",
    "Magenta",
    "Cyan",
    "White",
    "DarkGray",
    "LightRed",
    "LightGreen",
    "LightYellow",
    "LightBlue",
    "LightMagenta",
    "LightCyan",
    "Gray",
)


class _GridCell(NamedTuple):
    """One colour swatch, positioned relative to the grid's content area."""

    index: int
    x: int
    y: int
    text: str


def _picker_name(index: int) -> str:
    return _PICKER_NAMES[index] if 0 <= index < len(_PICKER_NAMES) else "Unknown"


def _cell_text(selected: bool) -> str:
    return _SELECTED_CELL if selected else _PLAIN_CELL


def mode_text(mode: ColorPickerMode) -> str:
    """The mode bar with the active mode marked."""
    return _MODE_TEXT[mode]


def preview_text(color: Optional[AnsiColor]) -> str:
    """Describe the colour currently chosen, behind a swatch."""
    if color is None:
        return "████ No color selected"
    if isinstance(color, Color16):
        return f"████ Color 16: {color.c16} ({_picker_name(color.c16)})"
    if isinstance(color, Color256):
        return f"████ Color 256: {color.c256}"
    if isinstance(color, Rgb):
        return f"████ RGB: ({color.r}, {color.g}, {color.b})"
    raise TypeError(f"not a colour: {color!r}")


def rgb_input_text(rgb_input: RgbInput) -> tuple[str, str]:
    """Return the RGB line and the hex line, with the field being edited marked."""

    def shown(value: str, which: RgbField) -> str:
        return f"> {value} <" if rgb_input.editing_field is which else value

    rgb = (
        f"R[{shown(rgb_input.r, RgbField.RED)}] "
        f"G[{shown(rgb_input.g, RgbField.GREEN)}] "
        f"B[{shown(rgb_input.b, RgbField.BLUE)}]"
    )
    return rgb, f"#{shown(rgb_input.hex, RgbField.HEX)}"


def basic_grid(
    picker: ColorPickerComponent, width: int, height: int
) -> tuple[list[_GridCell], Optional[tuple[int, str]]]:
    """Lay out the 16 basic colours in a content area of ``width`` x ``height``.

    Records the column count on the picker for navigation. Returns the cells
    and, when there is room below them, the info line as ``(row, text)``.
    """
    cols = max(width // _BASIC_CELL_WIDTH, 1)
    picker.cached_basic_cols = cols
    rows_needed = -(-_BASIC_COUNT // cols)

    cells = []
    for index in range(_BASIC_COUNT):
        row, col = divmod(index, cols)
        display_row = row * 2
        if display_row >= height:
            break
        cells.append(
            _GridCell(
                index,
                col * _BASIC_CELL_WIDTH,
                display_row,
                _cell_text(index == picker.selected_basic),
            )
        )

    info = None
    display_rows_needed = rows_needed * 2
    if height > display_rows_needed and picker.selected_basic < _BASIC_COUNT:
        info = (
            display_rows_needed,
            f"Selected: {picker.selected_basic} ({_picker_name(picker.selected_basic)})",
        )
    return cells, info


def extended_grid(
    picker: ColorPickerComponent, width: int, height: int
) -> tuple[list[_GridCell], Optional[tuple[int, str]]]:
    """Lay out the page of the 256-colour palette that holds the selection.

    Records the column count on the picker for navigation. Returns the cells
    and, when the area is tall enough, the info line on its last row.
    """
    cols = max(width // _EXTENDED_CELL_WIDTH, 1)
    picker.cached_extended_cols = cols
    logical_rows = (height - 2) // 2 if height > 3 else 1
    per_page = cols * logical_rows

    start = (picker.selected_extended // per_page) * per_page
    end = min(start + per_page, _EXTENDED_COUNT)
    row_limit = max(height - 2, 0)

    cells = []
    for offset, index in enumerate(range(start, end)):
        row, col = divmod(offset, cols)
        display_row = row * 2
        if display_row >= row_limit:
            break
        cells.append(
            _GridCell(
                index,
                col * _EXTENDED_CELL_WIDTH,
                display_row,
                _cell_text(index == picker.selected_extended),
            )
        )

    info = None
    if height > 2:
        info = (
            height - 1,
            f"Selected: {picker.selected_extended} | Use ↑↓←→ to navigate",
        )
    return cells, info


def _grid_lines(
    cells: list[_GridCell],
    info: Optional[tuple[int, str]],
    height: int,
    cell_width: int,
) -> list[str]:
    rows = [""] * height
    for cell in cells:
        rows[cell.y] = rows[cell.y].ljust(cell.x) + cell.text.ljust(cell_width)
    if info is not None:
        row, text = info
        rows[row] = text
    return [row.rstrip() for row in rows]


def render(picker: ColorPickerComponent, area: Rect) -> Optional[tuple[Rect, list[str]]]:
    """Return the popup area and its lines (mode, content, preview, actions), or None when closed."""
    if not picker.is_open:
        return None

    popup = centered_rect(70, 75, area)
    chunks = split(
        popup.inner(),
        Direction.VERTICAL,
        [Length(3), Min(8), Length(3), Length(3)],
    )

    if picker.mode is ColorPickerMode.RGB_INPUT:
        content = list(rgb_input_text(picker.rgb_input))
    else:
        content_area = split(chunks[1].inner(), Direction.HORIZONTAL, [Min(10), Length(1)])[0]
        if picker.mode is ColorPickerMode.BASIC16:
            cells, info = basic_grid(picker, content_area.width, content_area.height)
            cell_width = _BASIC_CELL_WIDTH
        else:
            cells, info = extended_grid(picker, content_area.width, content_area.height)
            cell_width = _EXTENDED_CELL_WIDTH
        content = _grid_lines(cells, info, content_area.height, cell_width)

    lines = [mode_text(picker.mode), *content, preview_text(picker.current_color), _ACTIONS]
    return popup, lines