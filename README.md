# shortcutter

A small terminal picker for zsh keyboard shortcuts. It lists the built-in zsh
line-editor bindings together with your own additions, lets you fuzzy-search
them, and prints your choice so a shell widget can act on it.

## Installation

```
pip install .
```

## Usage

```
shortcutter
```

The picker is drawn on `/dev/tty` when it can be opened, otherwise on the
terminal of the process. Type to filter the list (printable ASCII characters
only; Backspace removes the last one) and use the Up and Down arrow keys to
move. Then:

- **Enter** selects the shortcut for execution
- **Tab** selects the shortcut to populate the command line
- **Esc** or **Ctrl+C** quits without a selection

When a shortcut is chosen, one line is written to standard output:

```
<enter|tab>:<type>:<target>
```

where `type` is `widget`, `command` or `sequence`. Your shell integration
reads that line and runs the zsh widget, the command, or the key sequence.
If the shortcuts or the configuration cannot be loaded, a message is written
to standard error and the command exits with status 1.

## Configuration

Settings are read from `~/.config/shortcutter/config.toml`. A missing file
means no overrides and the default theme.

```toml
[theme]
name = "dark"

[shortcuts]
# Hide a built-in shortcut
"Ctrl+S" = false

# Change only the description of a built-in
"Ctrl+E" = "Jump to end of line"

# A new key with just a string is a command that runs that string
"Ctrl+X" = "git status"

# Full definition; any of display, description, type and target may be given
[shortcuts.git-status]
display = "gs"
description = "Git status"
type = "command"
target = "git status"
```

Keys can be written in several notations — `^A`, `C-a`, `ctrl+a`, `M-f`,
`meta+f` — and are normalised to forms such as `Ctrl+A` and `Alt+F` before
they are matched against the built-ins (`^[`, `^I`, `^M` and `^H` become
`Esc`, `Tab`, `Enter` and `Backspace`). Shortcuts you add or change are
marked with `*` in the list. The merged list is sorted by its displayed key.

## Themes

Themes live in `~/.config/shortcutter/themes/<name>.toml`. A theme without a
`name` takes the file's name, and every colour except `query` that is left
out falls back to the built-in `default` theme:

```toml
name = "dark"
primary = "#FF0000"
secondary = "#00FF00"
query = "#FFFFFF"
accent = "#0000FF"
selected_bg = "#333333"
app_bg = "transparent"
muted = "#666666"
help = "#999999"
custom_indicator = "#FFFF00"
border = "#CCCCCC"
```

Colours are drawn when they are written as `#RRGGBB`, `#RGB` or a 256-colour
number from `0` to `255`; any other value, such as `transparent`, leaves the
terminal's own colour. If the named theme cannot be found or read, the
default theme is used.

## Library use

- `shortcutter.shortcuts`: `normalize_key`, `detect_shell`,
  `zsh_builtin_shortcuts`, `load_config`, `merge_shortcuts`,
  `load_shortcuts` and `load_shortcuts_and_theme`; errors are raised as
  `ShortcutError`.
- `shortcutter.theme`: `default_theme`, `load_theme` (raises `ThemeError`),
  `create_theme_styles`, `ensure_theme_directory` and
  `list_available_themes`.
- `shortcutter.fuzzy.find(pattern, data)`: case-insensitive subsequence
  matches as `Match` objects, best first.
- `shortcutter.ui`: the picker `Model`, `initial_model` and `show_ui`.

## Limitations

- Only zsh is supported; `SHELL` must point at it. bash, fish and other
  shells are rejected with an error.
- The picker is keyboard-only; mouse input is not read.

## Development

```
pip install -e ".[test]"
pytest
```