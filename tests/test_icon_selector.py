import pytest

from cometix_tui.icon_selector import (
    IconSelectorComponent,
    IconStyle,
    StyleMode,
    nerd_font_icons,
    plain_icons,
)
from cometix_tui.layout import Rect


def test_first_icons_are_robots():
    assert plain_icons()[0].icon == "🤖"
    assert plain_icons()[0].name == "Robot (Model)"
    assert nerd_font_icons()[0].icon == "\ue26d"


@pytest.mark.parametrize(
    "style, expected",
    [
        (StyleMode.PLAIN, IconStyle.PLAIN),
        (StyleMode.NERD_FONT, IconStyle.NERD_FONT),
        (StyleMode.POWERLINE, IconStyle.NERD_FONT),
    ],
)
def test_open_picks_icon_style(style, expected):
    selector = IconSelectorComponent()
    selector.open(style)
    assert selector.is_open
    assert selector.icon_style is expected


def test_open_sets_current_icon():
    selector = IconSelectorComponent()
    selector.open(StyleMode.POWERLINE)
    assert selector.get_selected_icon() == nerd_font_icons()[0].icon


def test_move_selection_clamps():
    selector = IconSelectorComponent()
    selector.open(StyleMode.PLAIN)
    selector.move_selection(1000)
    assert selector.selected_plain == len(plain_icons()) - 1
    assert selector.get_selected_icon() == plain_icons()[-1].icon
    selector.move_selection(-1000)
    assert selector.selected_plain == 0
    assert selector.get_selected_icon() == plain_icons()[0].icon


def test_styles_keep_separate_selections():
    selector = IconSelectorComponent()
    selector.open(StyleMode.PLAIN)
    selector.move_selection(3)
    selector.toggle_style()
    assert selector.icon_style is IconStyle.NERD_FONT
    assert selector.get_selected_icon() == nerd_font_icons()[0].icon
    selector.toggle_style()
    assert selector.get_selected_icon() == plain_icons()[3].icon


def test_custom_input_round_trip():
    selector = IconSelectorComponent()
    selector.open(StyleMode.PLAIN)
    selector.start_custom_input()
    for c in "ab":
        selector.input_char(c)
    selector.backspace()
    selector.input_char("z")
    assert selector.custom_input == "az"
    assert selector.finish_custom_input() is True
    assert selector.get_selected_icon() == "az"
    assert selector.editing_custom is False


def test_empty_custom_input_keeps_icon():
    selector = IconSelectorComponent()
    selector.open(StyleMode.PLAIN)
    selector.start_custom_input()
    assert selector.finish_custom_input() is False
    assert selector.get_selected_icon() == plain_icons()[0].icon


def test_typing_ignored_when_not_editing():
    selector = IconSelectorComponent()
    selector.input_char("x")
    selector.backspace()
    assert selector.custom_input == ""


def test_move_ignored_while_editing():
    selector = IconSelectorComponent()
    selector.open(StyleMode.PLAIN)
    selector.start_custom_input()
    selector.move_selection(2)
    assert selector.selected_plain == 0


def test_close_stops_editing():
    selector = IconSelectorComponent()
    selector.open(StyleMode.PLAIN)
    selector.start_custom_input()
    selector.close()
    assert selector.is_open is False
    assert selector.editing_custom is False


@pytest.mark.parametrize("steps", [0, 3, 10, 23])
@pytest.mark.parametrize("view", [1, 4, 7])
def test_adjust_offset_keeps_selection_visible(steps, view):
    selector = IconSelectorComponent()
    selector.open(StyleMode.PLAIN)
    selector.move_selection(steps)
    offset = selector.adjust_offset(view)
    assert offset == selector.plain_offset
    assert offset <= selector.selected_plain < offset + view


def test_adjust_offset_scrolls_back_up():
    selector = IconSelectorComponent()
    selector.open(StyleMode.PLAIN)
    selector.move_selection(15)
    selector.adjust_offset(3)
    selector.move_selection(-15)
    assert selector.adjust_offset(3) == 0


def test_render_closed_is_none():
    assert IconSelectorComponent().render(Rect(0, 0, 100, 50)) is None


def test_render_open_lines():
    selector = IconSelectorComponent()
    selector.open(StyleMode.PLAIN)
    selector.move_selection(5)
    popup, lines = selector.render(Rect(0, 0, 120, 60))
    assert lines[0] == "[•] Emoji  [ ] Nerd Font"
    assert lines[-1] == "[Enter] Select  [Tab] Switch Style  [c] Custom  [Esc] Cancel"
    assert lines[-2] == "[Enter text to input custom icon]"
    info = plain_icons()[5]
    assert f"{info.icon} {info.name}" in lines
    assert popup.width <= 120 and popup.height <= 60


def test_render_while_editing_shows_input():
    selector = IconSelectorComponent()
    selector.open(StyleMode.NERD_FONT)
    selector.start_custom_input()
    selector.input_char("Q")
    _, lines = selector.render(Rect(0, 0, 120, 60))
    assert lines[0] == "[ ] Emoji  [•] Nerd Font"
    assert lines[-2] == "> Q <"
    assert lines[-1] == "[Enter] Confirm  [Esc] Cancel"