import pytest

from cometix_tui.separator_editor import SeparatorEditorComponent, SeparatorPreset


def test_default_presets():
    editor = SeparatorEditorComponent()
    assert [p.name for p in editor.presets] == ["Pipe", "Thin", "Arrow", "Space", "Dot"]
    assert editor.presets[2].value == "\ue0b0"


def test_open_matches_preset():
    editor = SeparatorEditorComponent()
    editor.open(" | ")
    assert editor.is_open
    assert editor.selected_preset == 0
    assert editor.get_separator() == " | "


def test_open_without_matching_preset():
    editor = SeparatorEditorComponent()
    editor.open("::")
    assert editor.selected_preset is None
    assert editor.get_separator() == "::"


def test_input_char_clears_preset_and_skips_control():
    editor = SeparatorEditorComponent()
    editor.open(" | ")
    editor.input_char("\n")
    assert editor.selected_preset == 0
    assert editor.get_separator() == " | "
    editor.input_char("x")
    assert editor.get_separator() == " | x"
    assert editor.selected_preset is None


def test_input_char_rejects_multiple_characters():
    editor = SeparatorEditorComponent()
    with pytest.raises(ValueError):
        editor.input_char("ab")


def test_backspace_removes_last_and_clears_preset():
    editor = SeparatorEditorComponent()
    editor.open(" • ")
    editor.backspace()
    assert editor.get_separator() == " •"
    assert editor.selected_preset is None
    editor.open("")
    editor.backspace()
    assert editor.get_separator() == ""


def test_move_from_none_forward_picks_first():
    editor = SeparatorEditorComponent()
    editor.open("::")
    editor.move_preset_selection(1)
    assert editor.selected_preset == 0
    assert editor.get_separator() == editor.presets[0].value


def test_move_from_none_backward_picks_last():
    editor = SeparatorEditorComponent()
    editor.open("::")
    editor.move_preset_selection(-1)
    assert editor.selected_preset == len(editor.presets) - 1
    assert editor.get_separator() == " • "


def test_move_clamps_at_ends():
    editor = SeparatorEditorComponent()
    editor.open(" | ")
    editor.move_preset_selection(-3)
    assert editor.selected_preset == 0
    editor.move_preset_selection(50)
    assert editor.selected_preset == len(editor.presets) - 1
    assert editor.get_separator() == editor.presets[-1].value


def test_custom_presets():
    editor = SeparatorEditorComponent(presets=[SeparatorPreset("Dash", "-", "dash")])
    editor.move_preset_selection(1)
    assert editor.get_separator() == "-"


def test_close_resets_state():
    editor = SeparatorEditorComponent()
    editor.open(" | ")
    editor.close()
    assert (editor.is_open, editor.input, editor.selected_preset) == (False, "", None)


def test_render_closed_and_open():
    editor = SeparatorEditorComponent()
    assert editor.render() is None
    editor.open(" | ")
    lines = editor.render()
    assert lines[0] == ">  |  <"
    assert lines[1] == "[•] Pipe - Classic pipe separator"
    assert lines[2].startswith("[ ] Thin")
    assert lines[-1] == "[Enter] Confirm  [Esc] Cancel  [Tab] Clear"
    assert len(lines) == len(editor.presets) + 2