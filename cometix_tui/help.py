"""Key-binding help bar, wrapped so that each shortcut stays on one line."""

from __future__ import annotations

from typing import Optional, Sequence

_SEPARATOR = "  "


def _shortcuts(spec: str) -> tuple[tuple[str, str], ...]:
    """Turn ``"Key=Description; ..."`` into bracketed (key, description) pairs."""
    pairs = (entry.split("=", 1) for entry in spec.split(";"))
    return tuple((f"[{key.strip()}]", description.strip()) for key, description in pairs)


_PICKER_SHORTCUTS = _shortcuts("↑↓=Navigate; Tab=Mode; Enter=Select; Esc=Cancel")

_SELECTOR_SHORTCUTS = _shortcuts(
    "↑↓=Navigate; Tab=Style; C=Custom; Enter=Select; Esc=Cancel"
)

_EDITOR_SHORTCUTS = _shortcuts(
    "Tab=Switch Panel; Enter=Toggle/Edit; Shift+↑↓=Reorder; 1-9=Theme;"
    " P=Switch Theme; R=Reset; E=Edit Separator; S=Save Config;"
    " W=Write Theme; Ctrl+S=Save Theme; Esc=Quit"
)


def help_items(color_picker_open: bool, icon_selector_open: bool) -> list[tuple[str, str]]:
    """The shortcuts to show; the colour picker's take precedence over the icon selector's."""
    if color_picker_open:
        return list(_PICKER_SHORTCUTS)
    if icon_selector_open:
        return list(_SELECTOR_SHORTCUTS)
    return list(_EDITOR_SHORTCUTS)


def wrap_help(items: Sequence[tuple[str, str]], width: int) -> list[str]:
    """Pack "key description" items into lines of at most ``width`` characters.

    Items on one line are separated by two spaces. An item wider than
    ``width`` gets a line of its own.
    """
    lines: list[str] = []
    line = ""
    for key, description in items:
        item = f"{key} {description}"
        candidate = f"{line}{_SEPARATOR}{item}" if line else item
        if len(candidate) <= width:
            line = candidate
            continue
        if line:
            lines.append(line)
        line = item
    if line:
        lines.append(line)
    return lines


def render_help(
    width: int,
    status_message: Optional[str] = None,
    color_picker_open: bool = False,
    icon_selector_open: bool = False,
) -> list[str]:
    """Lines of the help panel for a box ``width`` cells wide, status message last."""
    content_width = max(width - 2, 0)
    lines = wrap_help(help_items(color_picker_open, icon_selector_open), content_width)
    if status_message:
        lines += ["", status_message]
    return lines