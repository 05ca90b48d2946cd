from cometix_tui.editor import EditorComponent


def test_starts_idle():
    editor = EditorComponent()
    assert editor.editing_segment is None
    assert editor.is_editing("model") is False


def test_edit_segment():
    editor = EditorComponent()
    editor.edit_segment("git")
    assert editor.is_editing("git") is True
    assert editor.is_editing("model") is False


def test_switching_segment():
    editor = EditorComponent()
    editor.edit_segment("git")
    editor.edit_segment("cost")
    assert editor.editing_segment == "cost"
    assert editor.is_editing("git") is False


def test_stop_editing():
    editor = EditorComponent()
    editor.edit_segment("git")
    editor.stop_editing()
    assert editor.editing_segment is None
    assert editor.is_editing("git") is False