# cometix-tui

The interactive pieces of a status line configurator, written as plain
Python objects that hold state and produce text. Each component keeps its
selection, input buffers and mode, and its `render` method (or the
functions of its view module) returns the area and lines to show, so the
components can be plugged into any terminal library, or tested without one.
Only the main menu draws to the terminal itself, through the standard
library's `curses`.

## What is inside

- `cometix_tui.layout` – `Rect` (with `inner()` for the area inside a
  border), the constraints `Length`, `Min` and `Percentage`, `Direction`,
  and `split` for dividing an area. `main_layout`, `content_layout` and
  `centered_rect` give the screen arrangement of the configurator.
- `cometix_tui.colors` – the color kinds `Color16`, `Color256` and `Rgb`
  (values outside 0..255 raise `ValueError`), plus `color_name` and
  `describe_color` for the labels shown in a settings panel.
- `cometix_tui.events` – `AppEvent` and `handle_key_event`, which maps a key
  (a single character, or a special key name such as `"up"`, `"down"`,
  `"enter"`, `"tab"`) to an action.
- `cometix_tui.color_picker` – `ColorPickerComponent` with basic (16),
  extended (256) and RGB/hex input modes (`ColorPickerMode`), grid
  navigation via `NavDirection`, and the typed fields in `RgbInput` /
  `RgbField`.
- `cometix_tui.color_picker_view` – the picker's text: `mode_text`,
  `preview_text`, `rgb_input_text`, `basic_grid`, `extended_grid` and
  `render`, which returns the popup area and its lines.
- `cometix_tui.icon_selector` – `IconSelectorComponent` with emoji and
  Nerd Font lists (`plain_icons`, `nerd_font_icons`), custom input, and
  scrolling through `adjust_offset`. `StyleMode` decides which list opens.
- `cometix_tui.separator_editor` – `SeparatorEditorComponent` with the
  presets Pipe, Thin, Arrow, Space and Dot (`SeparatorPreset`).
- `cometix_tui.options_editor` – `OptionsEditorComponent` for a segment's
  key/value options, listed sorted by key. A confirmed edit is read as an
  integer, a finite float, `true`/`false` (any case), or else a string.
- `cometix_tui.name_input` – `NameInputComponent`, a popup accepting ASCII
  letters, digits, `_` and `-`.
- `cometix_tui.editor` – `EditorComponent`, tracking which segment is being
  edited.
- `cometix_tui.help` – the context-sensitive help bar: `help_items`,
  `wrap_help` and `render_help`.
- `cometix_tui.main_menu` – `MainMenu`, `MenuResult`, `StatusMessage` and
  `run(init_config, check_config)`, which shows the menu with `curses` and
  returns the chosen `MenuResult`.

## Examples

Picking a color:

```python
from cometix_tui.color_picker import ColorPickerComponent, NavDirection

picker = ColorPickerComponent()
picker.open()
picker.move_direction(NavDirection.RIGHT)
picker.move_direction(NavDirection.RIGHT)
print(picker.get_selected_color())   # Color16(c16=2)
```

Typing a hex color:

```python
picker.cycle_mode()   # extended
picker.cycle_mode()   # RGB input
picker.move_direction(NavDirection.LEFT)   # wraps from red to the hex field
for ch in "ff8800":
    picker.input_char(ch)
print(picker.get_selected_color())   # Rgb(r=255, g=136, b=0)
```

Editing options:

```python
from cometix_tui.options_editor import OptionsEditorComponent

editor = OptionsEditorComponent()
editor.open({"threshold": 80, "label": "ctx"})
editor.move_selection(1)           # entries are sorted by key
editor.start_editing()             # the buffer starts as "80"
editor.backspace()
editor.backspace()
for ch in "90":
    editor.input_char(ch)
editor.confirm_edit()
print(editor.close())              # {'label': 'ctx', 'threshold': 90}
```

Splitting the screen:

```python
from cometix_tui.layout import Rect, main_layout, content_layout

title, preview, styles, content, help_area = main_layout(Rect(0, 0, 100, 40))
segments, settings = content_layout(content)
```

Running the main menu, with your own functions for the config file:

```python
from cometix_tui.main_menu import run

def init_config():
    return "/tmp/config.toml", True   # (path, created)

def check_config():
    pass                               # raise OSError or another error on failure

result = run(init_config, check_config)
```

## What this package does not do

- It has no configurator screen. Choosing "Configuration Mode" in the main
  menu only returns `MenuResult.LAUNCH_CONFIGURATOR`; the segment list,
  settings panel, theme selector and live preview are not part of it.
- It does not read, write or validate a configuration file, and does not
  generate a status line. `MainMenu` and `run` take these jobs as the
  `init_config` and `check_config` callables.
- It installs no command. `run` needs `curses`, which is not available on
  Windows.

## Running the tests

Install the package with its `test` extra and run `pytest` from the project
directory.