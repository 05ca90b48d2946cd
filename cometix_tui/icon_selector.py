"""State of the icon selector popup: emoji or Nerd Font icons, or a custom one."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from cometix_tui.layout import Direction, Length, Min, Rect, centered_rect, split


class StyleMode(Enum):
    """How the status line is drawn; decides which icon set applies."""

    PLAIN = auto()
    NERD_FONT = auto()
    POWERLINE = auto()


class IconStyle(Enum):
    PLAIN = auto()
    NERD_FONT = auto()


@dataclass(frozen=True)
class IconInfo:
    icon: str
    name: str


_PLAIN_ICONS = (
    IconInfo("🤖", "Robot (Model)"),
    IconInfo("💻", "Laptop (Computer)"),
    IconInfo("🖥️", "Desktop"),
    IconInfo("⚙️", "Gear (Settings)"),
    IconInfo("📁", "Folder"),
    IconInfo("📂", "Open Folder"),
    IconInfo("🗿", "Card Index"),
    IconInfo("📊", "Bar Chart"),
    IconInfo("🌿", "Branch (Git)"),
    IconInfo("🌱", "Seedling"),
    IconInfo("🔧", "Wrench"),
    IconInfo("⚡", "Lightning (Usage)"),
    IconInfo("⭐", "Star"),
    IconInfo("✨", "Sparkles"),
    IconInfo("🔥", "Fire"),
    IconInfo("💎", "Gem"),
    IconInfo("✓", "Check Mark"),
    IconInfo("✗", "X Mark"),
    IconInfo("●", "Circle (Dirty)"),
    IconInfo("○", "Open Circle"),
    IconInfo("▶", "Play"),
    IconInfo("▼", "Down Triangle"),
    IconInfo("►", "Right Triangle"),
    IconInfo("◄", "Left Triangle"),
)

_NERD_FONT_ICONS = (
    IconInfo("\ue26d", "Robot (Model)"),
    IconInfo("\U000f02a2", "Git Branch"),
    IconInfo("\U000f024b", "Folder"),
    IconInfo("\uf111", "Circle"),
    IconInfo("\uf135", "Rocket"),
    IconInfo("\uf49b", "Chart"),
    IconInfo("\uf0c6", "Database"),
    IconInfo("\uf0c9", "List"),
    IconInfo("\uf013", "Cog"),
    IconInfo("\uf015", "Home"),
    IconInfo("\uf07b", "Folder Open"),
    IconInfo("\uf0e7", "Lightning"),
    IconInfo("\uf121", "Code"),
    IconInfo("\uf126", "Code Fork"),
    IconInfo("\uf1c0", "Database"),
    IconInfo("\uf251", "Headphones"),
    IconInfo("\uf252", "Terminal"),
    IconInfo("\uf269", "Map"),
    IconInfo("\uf2d0", "Chrome"),
    IconInfo("\uf31b", "Github"),
)

_STYLE_TEXT = {
    IconStyle.PLAIN: "[•] Emoji  [ ] Nerd Font",
    IconStyle.NERD_FONT: "[ ] Emoji  [•] Nerd Font",
}
_CUSTOM_HINT = "[Enter text to input custom icon]"
_ACTIONS_EDITING = "[Enter] Confirm  [Esc] Cancel"
_ACTIONS = "[Enter] Select  [Tab] Switch Style  [c] Custom  [Esc] Cancel"


def plain_icons() -> list[IconInfo]:
    """The emoji icons offered by the selector."""
    return list(_PLAIN_ICONS)


def nerd_font_icons() -> list[IconInfo]:
    """The Nerd Font icons offered by the selector."""
    return list(_NERD_FONT_ICONS)


def _icons_for(style: IconStyle) -> tuple[IconInfo, ...]:
    return _PLAIN_ICONS if style is IconStyle.PLAIN else _NERD_FONT_ICONS


@dataclass
class IconSelectorComponent:
    is_open: bool = False
    icon_style: IconStyle = IconStyle.PLAIN
    selected_plain: int = 0
    selected_nerd: int = 0
    custom_input: str = ""
    editing_custom: bool = False
    current_icon: Optional[str] = None
    plain_offset: int = 0
    nerd_offset: int = 0

    def open(self, current_style: StyleMode) -> None:
        self.is_open = True
        self.icon_style = (
            IconStyle.PLAIN if current_style is StyleMode.PLAIN else IconStyle.NERD_FONT
        )
        self._update_current_icon()

    def close(self) -> None:
        self.is_open = False
        self.editing_custom = False

    def toggle_style(self) -> None:
        self.icon_style = (
            IconStyle.NERD_FONT if self.icon_style is IconStyle.PLAIN else IconStyle.PLAIN
        )
        self._update_current_icon()

    def start_custom_input(self) -> None:
        self.editing_custom = True
        self.custom_input = ""

    def finish_custom_input(self) -> bool:
        """Stop editing; adopt the typed icon and return True if anything was typed."""
        self.editing_custom = False
        if self.custom_input:
            self.current_icon = self.custom_input
            return True
        return False

    def input_char(self, c: str) -> None:
        if self.editing_custom:
            self.custom_input += c

    def backspace(self) -> None:
        if self.editing_custom:
            self.custom_input = self.custom_input[:-1]

    @property
    def selected(self) -> int:
        """Index selected in the list of the current style."""
        return self.selected_plain if self.icon_style is IconStyle.PLAIN else self.selected_nerd

    @property
    def offset(self) -> int:
        """First visible index in the list of the current style."""
        return self.plain_offset if self.icon_style is IconStyle.PLAIN else self.nerd_offset

    def move_selection(self, delta: int) -> None:
        """Step the selection by ``delta``, clamped to the list; ignored while typing."""
        if self.editing_custom:
            return
        last = len(_icons_for(self.icon_style)) - 1
        index = max(0, min(self.selected + delta, last))
        if self.icon_style is IconStyle.PLAIN:
            self.selected_plain = index
        else:
            self.selected_nerd = index
        self._update_current_icon()

    def _update_current_icon(self) -> None:
        icons = _icons_for(self.icon_style)
        if 0 <= self.selected < len(icons):
            self.current_icon = icons[self.selected].icon

    def get_selected_icon(self) -> Optional[str]:
        return self.current_icon

    def adjust_offset(self, view_height: int) -> int:
        """Scroll the current list so the selection is visible; return the new offset."""
        selected = self.selected
        offset = self.offset
        view = max(view_height, 1)
        if selected >= offset + view:
            offset = selected + 1 - view
        elif selected < offset:
            offset = selected
        if self.icon_style is IconStyle.PLAIN:
            self.plain_offset = offset
        else:
            self.nerd_offset = offset
        return offset

    def render(self, area: Rect) -> Optional[tuple[Rect, list[str]]]:
        """Return the popup area and its lines (style, visible icons, custom, actions), or None when closed."""
        if not self.is_open:
            return None
        popup = centered_rect(60, 70, area)
        chunks = split(
            popup.inner(),
            Direction.VERTICAL,
            [Length(3), Min(10), Length(3), Length(3)],
        )
        list_height = chunks[1].inner().height
        offset = self.adjust_offset(list_height)
        visible = _icons_for(self.icon_style)[offset : offset + list_height]

        custom = f"> {self.custom_input} <" if self.editing_custom else _CUSTOM_HINT
        actions = _ACTIONS_EDITING if self.editing_custom else _ACTIONS
        lines = [
            _STYLE_TEXT[self.icon_style],
            *(f"{info.icon} {info.name}" for info in visible),
            custom,
            actions,
        ]
        return popup, lines