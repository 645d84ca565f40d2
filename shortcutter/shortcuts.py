"""Built-in shell shortcuts, user configuration and merging of the two."""

from __future__ import annotations

import os
import re
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass, field, replace

from shortcutter.theme import (
    ThemeError,
    ThemeStyles,
    config_dir,
    create_theme_styles,
    default_theme,
    load_theme,
)

_CARET = re.compile(r"\^[A-Za-z@_\[\]\\]")
_CTRL_DASH = re.compile(r"[Cc]-[a-zA-Z@_\[\]\\]")
_META_DASH = re.compile(r"[Mm]-[a-zA-Z]")
_MODIFIER_REWRITES = (
    (re.compile(r"ctrl\+", re.IGNORECASE), "Ctrl+"),
    (re.compile(r"alt\+", re.IGNORECASE), "Alt+"),
    (re.compile(r"shift\+", re.IGNORECASE), "Shift+"),
    (re.compile(r"meta\+", re.IGNORECASE), "Alt+"),
)
_CARET_SPECIALS = {
    "[": "Esc",
    "I": "Tab",
    "M": "Enter",
    "H": "Backspace",
}
# Config object keys and the Shortcut attributes they set.
_OBJECT_KEYS = {
    "display": "display",
    "description": "description",
    "type": "kind",
    "target": "target",
}


class ShortcutError(Exception):
    """Raised when shortcuts or their configuration cannot be loaded."""


@dataclass(frozen=True)
class Shortcut:
    """A key binding: what is shown, what it means and what it runs."""

    display: str
    description: str = ""
    kind: str = ""  # "widget", "command" or "sequence"
    target: str = ""
    is_custom: bool = False


@dataclass
class Config:
    """User configuration: shortcut overrides and the chosen theme."""

    shortcuts: dict[str, object] = field(default_factory=dict)
    theme_name: str = ""


def normalize_key(key: str) -> str:
    """Bring a key description into the canonical ``Ctrl+X`` form."""
    key = key.strip()

    if _CARET.fullmatch(key):
        char = key[1].upper()
        if char in _CARET_SPECIALS:
            return _CARET_SPECIALS[char]
        return "Ctrl+" + char

    if _CTRL_DASH.fullmatch(key):
        return "Ctrl+" + key[2].upper()

    if _META_DASH.fullmatch(key):
        return "Alt+" + key[2].upper()

    for pattern, replacement in _MODIFIER_REWRITES:
        key = pattern.sub(replacement, key)

    parts = key.split("+")
    if len(parts) > 1:
        last = parts[-1]
        if len(last) == 1 and "a" <= last <= "z":
            parts[-1] = last.upper()
        elif last.lower() == "tab":
            parts[-1] = "Tab"
        key = "+".join(parts)

    return key


def detect_shell(shell: str | None = None) -> str:
    """Return the supported shell name for a shell path (default: $SHELL)."""
    if shell is None:
        shell = os.environ.get("SHELL", "")
    if not shell:
        raise ShortcutError("SHELL environment variable not set")

    stripped = shell.rstrip("/")
    name = os.path.basename(stripped) if stripped else "/"

    if name == "zsh":
        return "zsh"
    if name in ("bash", "fish"):
        raise ShortcutError(f"{name} support not implemented yet - please use zsh")
    raise ShortcutError(f"unsupported shell '{name}' - only zsh is supported")


def builtin_shortcuts(shell: str) -> list[Shortcut]:
    """The built-in shortcuts for a shell."""
    if shell == "zsh":
        return zsh_builtin_shortcuts()
    raise ShortcutError(f"no built-in shortcuts available for shell: {shell}")


def _widget(display: str, description: str, target: str) -> Shortcut:
    return Shortcut(display, description, "widget", target)


def _sequence(display: str, description: str, target: str) -> Shortcut:
    return Shortcut(display, description, "sequence", target)


def zsh_builtin_shortcuts() -> list[Shortcut]:
    """The default zsh line-editor bindings."""
    return [
        _widget("Ctrl+A", "Beginning of the line", "beginning-of-line"),
        _widget("Ctrl+E", "End of the line", "end-of-line"),
        _widget("Ctrl+F", "Forward one character", "forward-char"),
        _widget("Ctrl+B", "Back one character", "backward-char"),
        _widget("Alt+F", "Forward one word", "forward-word"),
        _widget("Alt+B", "Back one word", "backward-word"),
        _widget("Ctrl+T", "Swap cursor with prev character", "transpose-chars"),
        _widget("Alt+T", "Swap cursor with prev word", "transpose-words"),
        _widget("Ctrl+U", "Clear to beginning of line", "backward-kill-line"),
        _widget("Ctrl+K", "Kill to end of line", "kill-line"),
        _widget("Ctrl+H", "Kill one character backward", "backward-delete-char"),
        _widget("Ctrl+W", "Kill word back (if no Mark)", "backward-kill-word"),
        _widget("Ctrl+@", "Set Mark", "set-mark-command"),
        _widget("Ctrl+Y", "Paste from Kill Ring", "yank"),
        _widget("Ctrl+V", "Quoted insert", "quoted-insert"),
        _widget("Ctrl+Q", "Push line to be used again", "push-line"),
        _widget("Ctrl+_", "Undo", "undo"),
        _widget("Ctrl+P", "Prev line", "up-line-or-history"),
        _widget("Ctrl+N", "Next Line", "down-line-or-history"),
        _widget("Ctrl+R", "Search", "history-incremental-search-backward"),
        _widget("Alt+P", "Match word on line", "history-search-backward"),
        _widget("Alt+.", "Extract last word", "insert-last-word"),
        _widget("Ctrl+L", "Clear screen", "clear-screen"),
        _sequence("Ctrl+S", "Stop screen output", "C-s"),
        _sequence("Ctrl+C", "Kill proc", "C-c"),
        _sequence("Ctrl+Z", "Suspend proc", "C-z"),
        _widget("Ctrl+O", "Exec cmd but keep line", "accept-line-and-down-history"),
        _widget("Tab", "Complete command/filename", "expand-or-complete"),
        _widget("Enter", "Execute command", "accept-line"),
        _widget("Ctrl+D", "Delete character or EOF", "delete-char-or-list"),
        _widget("Ctrl+G", "Abort current operation", "send-break"),
        _widget("Ctrl+X Ctrl+E", "Edit command in editor", "edit-command-line"),
        _widget("↑", "Previous command in history", "up-line-or-history"),
        _widget("↓", "Next command in history", "down-line-or-history"),
        _widget("←", "Move cursor left", "backward-char"),
        _widget("→", "Move cursor right", "forward-char"),
        _widget("Home", "Beginning of line", "beginning-of-line"),
        _widget("End", "End of line", "end-of-line"),
    ]


def load_config() -> Config:
    """Read the user's config.toml; a missing file gives an empty config."""
    try:
        config_path = config_dir() / "config.toml"
    except RuntimeError:
        return Config()

    if not config_path.exists():
        return Config()

    try:
        with config_path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ShortcutError(f"failed to parse config file: {exc}") from exc

    shortcuts = data.get("shortcuts", {})
    if not isinstance(shortcuts, dict):
        raise ShortcutError("failed to parse config file: 'shortcuts' must be a table")

    theme = data.get("theme", {})
    if not isinstance(theme, dict):
        raise ShortcutError("failed to parse config file: 'theme' must be a table")
    theme_name = theme.get("name", "")
    if not isinstance(theme_name, str):
        raise ShortcutError("failed to parse config file: theme 'name' must be a string")

    return Config(shortcuts=dict(shortcuts), theme_name=theme_name)


def merge_shortcuts(builtins: list[Shortcut], config: Config) -> list[Shortcut]:
    """Apply the config's overrides to the built-ins, sorted by display."""
    table = {normalize_key(shortcut.display): shortcut for shortcut in builtins}

    for config_key, value in config.shortcuts.items():
        key = normalize_key(config_key)

        if isinstance(value, bool):
            if not value:
                table.pop(key, None)
        elif isinstance(value, str):
            if not value:
                continue
            if key in table:
                table[key] = replace(table[key], description=value, is_custom=True)
            else:
                table[key] = Shortcut(
                    display=key,
                    description=value,
                    kind="command",
                    target=value,
                    is_custom=True,
                )
        elif isinstance(value, Mapping):
            if key in table:
                shortcut = replace(table[key], is_custom=True)
            else:
                shortcut = Shortcut(display=key, is_custom=True)
            overrides = {
                attr: value[name]
                for name, attr in _OBJECT_KEYS.items()
                if isinstance(value.get(name), str)
            }
            table[key] = replace(shortcut, **overrides)

    return sorted(table.values(), key=lambda shortcut: shortcut.display)


def load_shortcuts() -> list[Shortcut]:
    """Built-ins for the current shell merged with the user's config."""
    shell = detect_shell()
    builtins = builtin_shortcuts(shell)
    config = load_config()
    return merge_shortcuts(builtins, config)


def detect_shortcuts() -> list[Shortcut]:
    """Alias of :func:`load_shortcuts`."""
    return load_shortcuts()


def load_shortcuts_and_theme() -> tuple[list[Shortcut], ThemeStyles]:
    """Load shortcuts and the styles of the configured theme."""
    shortcuts = load_shortcuts()

    try:
        config = load_config()
    except ShortcutError:
        return shortcuts, create_theme_styles(default_theme())

    try:
        theme = load_theme(config.theme_name or "default")
    except ThemeError:
        theme = default_theme()

    return shortcuts, create_theme_styles(theme)