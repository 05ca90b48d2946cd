"""Start-up menu: open the configurator, initialise or check the config, or quit."""

from __future__ import annotations

import curses
from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Optional, Union

from cometix_tui.layout import Direction, Length, Min, Rect, centered_rect, split

_VERSION = "1.1.2"

_MENU_ITEMS = (
    (" Configuration Mode", "Enter TUI configuration interface"),
    (" Initialize Config", "Create default configuration"),
    (" Check Configuration", "Validate configuration file"),
    (" About", "Show application information"),
    (" Exit", "Exit CCometixLine"),
)

_FOOTER = "[↑↓] Navigate  [Enter] Select  [Esc/Q] Exit"

_ABOUT_LINES = (
    "",
    f"CCometixLine v{_VERSION}",
    "",
    "Features:",
    "• 🎨 TUI Configuration Interface",
    "• 🎯 Multiple Built-in Themes",
    "• ⚡ Real-time Usage Tracking",
    "• 💰 Cost Monitoring",
    "• 📊 Session Statistics",
    "• 🎨 Nerd Font Support",
    "• 🔧 Highly Customizable",
    "",
    "Press any key to continue...",
)

InitConfig = Callable[[], "tuple[Union[str, Path], bool]"]
CheckConfig = Callable[[], None]


class MenuResult(Enum):
    LAUNCH_CONFIGURATOR = auto()
    INIT_CONFIG = auto()
    CHECK_CONFIG = auto()
    EXIT = auto()


@dataclass(frozen=True)
class StatusMessage:
    """A message shown in the footer; errors are drawn in red."""

    message: str
    is_error: bool


@dataclass
class MainMenu:
    """Menu state.

    ``init_config`` creates the default configuration and returns
    ``(path, created)``, where ``created`` is False if the file already
    existed. ``check_config`` loads and validates the configuration: an
    ``OSError`` means it could not be loaded, any other exception that it
    is invalid.
    """

    init_config: Optional[InitConfig] = None
    check_config: Optional[CheckConfig] = None
    selected_item: int = 0
    should_quit: bool = False
    show_about: bool = False
    status_message: Optional[StatusMessage] = None
    _items: tuple = field(default=_MENU_ITEMS, init=False, repr=False)

    def menu_items(self) -> list[tuple[str, str]]:
        """The (title, description) pairs of the menu, in order."""
        return list(self._items)

    def handle_key(self, key: str) -> Optional[MenuResult]:
        """Apply one key press ("up", "down", "enter", "esc" or a character).

        Returns the menu's result once it has one, else None.
        """
        if self.show_about:
            self.show_about = False
            return None

        self.status_message = None
        name = key if len(key) == 1 else key.lower()

        if name in ("esc", "q"):
            self.should_quit = True
        elif name == "up":
            if self.selected_item > 0:
                self.selected_item -= 1
        elif name == "down":
            if self.selected_item < len(self._items) - 1:
                self.selected_item += 1
        elif name == "enter":
            result = self.handle_selection()
            if result is not None:
                return result

        if self.should_quit:
            return MenuResult.EXIT
        return None

    def handle_selection(self) -> Optional[MenuResult]:
        """Act on the selected item; None means stay in the menu."""
        if self.selected_item == 0:
            return MenuResult.LAUNCH_CONFIGURATOR
        if self.selected_item == 1:
            self._run_init()
            return None
        if self.selected_item == 2:
            self._run_check()
            return None
        if self.selected_item == 3:
            self.show_about = True
            return None
        return MenuResult.EXIT

    def _run_init(self) -> None:
        try:
            if self.init_config is None:
                raise RuntimeError("no configuration initialiser")
            path, created = self.init_config()
        except Exception as exc:  # noqa: BLE001 - reported in the footer
            self.status_message = StatusMessage(f"✗ Error: {exc}", True)
            return
        if created:
            self.status_message = StatusMessage(f"✓ Created config at {path}", False)
        else:
            self.status_message = StatusMessage(f"Config already exists at {path}", False)

    def _run_check(self) -> None:
        try:
            if self.check_config is None:
                raise OSError("no configuration checker")
            self.check_config()
        except OSError as exc:
            self.status_message = StatusMessage(f"✗ Failed to load: {exc}", True)
        except Exception as exc:  # noqa: BLE001 - reported in the footer
            self.status_message = StatusMessage(f"✗ Invalid: {exc}", True)
        else:
            self.status_message = StatusMessage("✓ Configuration is valid!", False)

    def render(self, width: int, height: int) -> list[tuple[str, Rect, list[str]]]:
        """Lay out the screen as (title, area, lines) panels, drawn in order."""
        area = Rect(0, 0, width, height)
        footer_height = 5 if self.status_message is not None else 3
        header, menu, footer = split(
            area, Direction.VERTICAL, [Length(5), Min(10), Length(footer_height)]
        )

        header_lines = [
            f"CCometixLine v{_VERSION}",
            "",
            "High-performance Claude Code StatusLine Configuration",
        ]
        menu_lines = [
            f"{'▶ ' if i == self.selected_item else '  '}{title} - {desc}"
            for i, (title, desc) in enumerate(self._items)
        ]
        footer_lines = [_FOOTER]
        if self.status_message is not None:
            footer_lines.extend(["", self.status_message.message])

        panels = [
            ("Welcome", header, header_lines),
            ("Main Menu", menu, menu_lines),
            ("Help", footer, footer_lines),
        ]
        if self.show_about:
            panels.append(("About CCometixLine", centered_rect(60, 60, area), list(_ABOUT_LINES)))
        return panels


_CENTERED = frozenset({"Welcome", "Help", "About CCometixLine"})


def _draw(screen: "curses.window", menu: MainMenu) -> None:
    screen.erase()
    rows, cols = screen.getmaxyx()
    for title, rect, lines in menu.render(cols, rows):
        if rect.width < 2 or rect.height < 2:
            continue
        inner = rect.inner()
        try:
            for y in range(rect.y, rect.y + rect.height):
                screen.addstr(y, rect.x, " " * max(rect.width - 1, 0))
            win = screen.derwin(rect.height, rect.width, rect.y, rect.x)
            win.box()
            win.addstr(0, 1, title[: max(rect.width - 2, 0)])
        except curses.error:
            continue
        for offset, line in enumerate(lines[: inner.height]):
            text = line[: inner.width]
            x = inner.x
            if title in _CENTERED:
                x += max(inner.width - len(text), 0) // 2
            try:
                screen.addstr(inner.y + offset, x, text)
            except curses.error:
                pass
    screen.refresh()


def _key_name(key: Union[int, str]) -> str:
    if key in (curses.KEY_UP,):
        return "up"
    if key in (curses.KEY_DOWN,):
        return "down"
    if key in (curses.KEY_ENTER, "\n", "\r"):
        return "enter"
    if key == "\x1b":
        return "esc"
    if isinstance(key, str):
        return key
    return "unknown"


def run(init_config: InitConfig, check_config: CheckConfig) -> Optional[MenuResult]:
    """Show the menu in the terminal until a result is chosen, and return it."""

    def loop(screen: "curses.window") -> Optional[MenuResult]:
        curses.curs_set(0)
        screen.keypad(True)
        menu = MainMenu(init_config=init_config, check_config=check_config)
        while True:
            _draw(screen, menu)
            result = menu.handle_key(_key_name(screen.get_wch()))
            if result is not None:
                return result

    return curses.wrapper(loop)