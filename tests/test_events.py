import pytest

from cometix_tui.events import AppEvent, handle_key_event


@pytest.mark.parametrize(
    "key,event",
    [
        ("q", AppEvent.QUIT),
        ("s", AppEvent.SAVE),
        ("up", AppEvent.MOVE_UP),
        ("down", AppEvent.MOVE_DOWN),
        ("enter", AppEvent.EDIT),
        (" ", AppEvent.TOGGLE),
        ("tab", AppEvent.SWITCH_PANEL),
        ("c", AppEvent.OPEN_COLOR_PICKER),
        ("i", AppEvent.OPEN_ICON_SELECTOR),
    ],
)
def test_bound_keys(key, event):
    assert handle_key_event(key) is event


@pytest.mark.parametrize("key", ["x", "Q", "esc", "left", "1"])
def test_unbound_keys(key):
    assert handle_key_event(key) is AppEvent.UNKNOWN


def test_named_keys_ignore_case():
    assert handle_key_event("Enter") is AppEvent.EDIT