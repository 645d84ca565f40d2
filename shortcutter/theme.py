"""Colour themes and terminal styles for the shortcut picker."""

from __future__ import annotations

import re
import tomllib
from dataclasses import dataclass, field, fields, replace
from pathlib import Path

_HEX_COLOR = re.compile(r"^#([0-9A-Fa-f]{6}|[0-9A-Fa-f]{3})$")
_RESET = "\x1b[0m"


class ThemeError(Exception):
    """Raised when a theme cannot be found or read."""


def _color_codes(color: str, *, background: bool) -> list[str]:
    """SGR parameters for a colour string, or an empty list if it is not a colour."""
    color = color.strip()
    match = _HEX_COLOR.match(color)
    if match:
        digits = match.group(1)
        if len(digits) == 3:
            digits = "".join(ch * 2 for ch in digits)
        red, green, blue = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
        return ["48" if background else "38", "2", str(red), str(green), str(blue)]
    if color.isdigit() and 0 <= int(color) <= 255:
        return ["48" if background else "38", "5", str(int(color))]
    return []


@dataclass(frozen=True)
class Style:
    """An immutable text style: bold flag plus optional colours."""

    foreground: str = ""
    background: str = ""
    bold: bool = False

    def with_foreground(self, color: str) -> Style:
        return replace(self, foreground=color)

    def with_background(self, color: str) -> Style:
        return replace(self, background=color)

    def _prefix(self) -> str:
        codes: list[str] = []
        if self.bold:
            codes.append("1")
        codes.extend(_color_codes(self.foreground, background=False))
        codes.extend(_color_codes(self.background, background=True))
        return f"\x1b[{';'.join(codes)}m" if codes else ""

    def render(self, text: str) -> str:
        """Wrap each line of text in this style's escape sequences."""
        prefix = self._prefix()
        if not prefix:
            return text
        return "\n".join(
            f"{prefix}{line}{_RESET}" if line else line for line in text.split("\n")
        )


@dataclass
class Theme:
    """A named set of colours."""

    name: str = ""
    primary: str = ""
    secondary: str = ""
    query: str = ""
    accent: str = ""
    selected_bg: str = ""
    app_bg: str = ""
    muted: str = ""
    help: str = ""
    custom_indicator: str = ""
    border: str = ""


@dataclass
class ThemeStyles:
    """Styles derived from a theme, one per UI element."""

    title: Style = field(default_factory=Style)
    selected_bar: Style = field(default_factory=Style)
    unselected_bar: Style = field(default_factory=Style)
    selected_line: Style = field(default_factory=Style)
    status: Style = field(default_factory=Style)
    separator: Style = field(default_factory=Style)
    match: Style = field(default_factory=Style)
    command: Style = field(default_factory=Style)
    description: Style = field(default_factory=Style)
    query: Style = field(default_factory=Style)
    help: Style = field(default_factory=Style)
    custom_indicator: Style = field(default_factory=Style)
    app_background: Style = field(default_factory=Style)


# Fields filled from the default theme when a theme file leaves them empty.
_DEFAULTED_FIELDS = (
    "primary",
    "secondary",
    "accent",
    "selected_bg",
    "app_bg",
    "muted",
    "help",
    "custom_indicator",
    "border",
)


def config_dir() -> Path:
    """The directory holding configuration and themes."""
    return Path.home() / ".config" / "shortcutter"


def default_theme() -> Theme:
    """The built-in theme."""
    return Theme(
        name="default",
        primary="#10B981",
        secondary="#3B82F6",
        query="#FFFFFF",
        accent="#F97316",
        selected_bg="#3F3F3F",
        app_bg="transparent",
        muted="#6B7280",
        help="#9CA3AF",
        custom_indicator="#9333EA",
        border="#6B7280",
    )


def load_theme(name: str) -> Theme:
    """Load a theme from the themes directory; raise ThemeError on failure."""
    if name in ("", "default"):
        return default_theme()

    try:
        home_config = config_dir()
    except RuntimeError as exc:
        raise ThemeError(f"could not get home directory: {exc}") from exc

    theme_path = home_config / "themes" / f"{name}.toml"
    if not theme_path.exists():
        raise ThemeError(f"theme '{name}' not found at {theme_path}")

    try:
        with theme_path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ThemeError(f"failed to parse theme file {theme_path}: {exc}") from exc

    values: dict[str, str] = {}
    for theme_field in fields(Theme):
        if theme_field.name not in data:
            continue
        value = data[theme_field.name]
        if not isinstance(value, str):
            raise ThemeError(
                f"failed to parse theme file {theme_path}: "
                f"'{theme_field.name}' must be a string"
            )
        values[theme_field.name] = value

    theme = Theme(**values)
    if not theme.name:
        theme.name = name
    defaults = default_theme()
    for attr in _DEFAULTED_FIELDS:
        if not getattr(theme, attr):
            setattr(theme, attr, getattr(defaults, attr))
    return theme


def create_theme_styles(theme: Theme) -> ThemeStyles:
    """Build the UI styles for a theme."""
    app_bg = theme.app_bg
    if app_bg not in ("transparent", "default", ""):
        app_background = Style(background=app_bg)
    else:
        app_background = Style()

    return ThemeStyles(
        title=Style(foreground=theme.primary, background=app_bg, bold=True),
        selected_bar=Style(foreground=theme.accent, background=theme.selected_bg),
        unselected_bar=Style(foreground=theme.selected_bg, background=app_bg),
        selected_line=Style(background=theme.selected_bg),
        status=Style(foreground=theme.muted, background=app_bg),
        separator=Style(foreground=theme.border, background=app_bg),
        match=Style(foreground=theme.secondary, background=app_bg),
        command=Style(foreground=theme.primary, background=app_bg, bold=True),
        description=Style(foreground=theme.muted, background=app_bg),
        query=Style(foreground=theme.query, background="transparent", bold=True),
        help=Style(foreground=theme.help, background=app_bg),
        custom_indicator=Style(foreground=theme.custom_indicator, background=app_bg),
        app_background=app_background,
    )


def ensure_theme_directory() -> Path:
    """Create the themes directory if needed and return its path."""
    themes_dir = config_dir() / "themes"
    themes_dir.mkdir(mode=0o755, parents=True, exist_ok=True)
    return themes_dir


def list_available_themes() -> list[str]:
    """Names of all themes: the built-in default, then those on disk."""
    themes = ["default"]
    try:
        themes_dir = config_dir() / "themes"
        entries = sorted(themes_dir.iterdir(), key=lambda entry: entry.name)
    except (RuntimeError, OSError):
        return themes

    themes.extend(
        entry.stem
        for entry in entries
        if not entry.is_dir() and entry.suffix == ".toml" and entry.stem != "default"
    )
    return themes