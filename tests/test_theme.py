from pathlib import Path

import pytest

from shortcutter.theme import (
    Style,
    Theme,
    ThemeError,
    config_dir,
    create_theme_styles,
    default_theme,
    ensure_theme_directory,
    list_available_themes,
    load_theme,
)


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


def _write_theme(home: Path, name: str, content: str) -> Path:
    themes = home / ".config" / "shortcutter" / "themes"
    themes.mkdir(parents=True, exist_ok=True)
    path = themes / f"{name}.toml"
    path.write_text(content)
    return path


def test_default_theme_has_all_colours():
    theme = default_theme()
    assert theme.primary == "#10B981"
    assert theme.secondary == "#3B82F6"
    assert theme.accent == "#F97316"
    assert theme.selected_bg == "#3F3F3F"
    assert theme.app_bg == "transparent"
    assert theme.muted == "#6B7280"
    assert theme.help == "#9CA3AF"
    assert theme.custom_indicator == "#9333EA"
    assert theme.border == "#6B7280"


def test_create_theme_styles_render_text():
    styles = create_theme_styles(default_theme())
    for style in (
        styles.command,
        styles.query,
        styles.status,
        styles.description,
        styles.help,
        styles.match,
        styles.selected_bar,
        styles.unselected_bar,
        styles.custom_indicator,
        styles.separator,
        styles.selected_line,
    ):
        assert "test" in style.render("test")


def test_load_theme_default():
    assert load_theme("default").primary == "#10B981"
    assert load_theme("") == default_theme()


def test_load_theme_nonexistent(home):
    with pytest.raises(ThemeError):
        load_theme("nonexistent")


def test_load_theme_from_file(home):
    _write_theme(
        home,
        "test",
        'name = "test"\n'
        'primary = "#FF0000"\n'
        'secondary = "#00FF00"\n'
        'accent = "#0000FF"\n'
        'selected_bg = "#333333"\n'
        'app_bg = "black"\n'
        'muted = "#666666"\n'
        'help = "#999999"\n'
        'custom_indicator = "#FFFF00"\n'
        'border = "#CCCCCC"\n',
    )
    theme = load_theme("test")
    assert theme.primary == "#FF0000"
    assert theme.secondary == "#00FF00"
    assert theme.accent == "#0000FF"
    assert theme.app_bg == "black"


def test_load_theme_fills_missing_fields(home):
    _write_theme(home, "partial", 'primary = "#123456"\n')
    theme = load_theme("partial")
    defaults = default_theme()
    assert theme.name == "partial"
    assert theme.primary == "#123456"
    assert theme.border == defaults.border
    assert theme.app_bg == defaults.app_bg
    assert theme.query == ""


def test_load_theme_invalid_toml(home):
    _write_theme(home, "broken", "primary = \n")
    with pytest.raises(ThemeError):
        load_theme("broken")


def test_load_theme_wrong_value_type(home):
    _write_theme(home, "typed", "primary = 5\n")
    with pytest.raises(ThemeError):
        load_theme("typed")


def test_transparent_background_renders():
    theme = Theme(
        primary="#10B981",
        secondary="#3B82F6",
        accent="#F97316",
        selected_bg="#2D2D2D",
        app_bg="transparent",
        muted="#6B7280",
        help="#9CA3AF",
        custom_indicator="#9333EA",
        border="#6B7280",
    )
    styles = create_theme_styles(theme)
    assert "test" in styles.command.render("test")
    assert styles.app_background.render("x") == "x"


def test_app_background_set_for_solid_colour():
    theme = default_theme()
    theme.app_bg = "#000000"
    styles = create_theme_styles(theme)
    assert styles.app_background.background == "#000000"
    assert styles.app_background.render("x") == "\x1b[48;2;0;0;0mx\x1b[0m"


def test_style_render_codes():
    assert Style().render("plain") == "plain"
    assert Style(foreground="#FF0000").render("x") == "\x1b[38;2;255;0;0mx\x1b[0m"
    assert Style(bold=True).render("x") == "\x1b[1mx\x1b[0m"
    assert Style(foreground="transparent").render("x") == "x"
    assert Style(background="42").render("x") == "\x1b[48;5;42mx\x1b[0m"


def test_style_with_methods_return_new_style():
    base = Style(foreground="#111111")
    changed = base.with_background("#222222").with_foreground("#333333")
    assert base == Style(foreground="#111111")
    assert changed == Style(foreground="#333333", background="#222222")


def test_config_dir_under_home(home):
    assert config_dir() == home / ".config" / "shortcutter"


def test_ensure_theme_directory_creates(home):
    path = ensure_theme_directory()
    assert path == home / ".config" / "shortcutter" / "themes"
    assert path.is_dir()


def test_list_available_themes_without_directory(home):
    assert list_available_themes() == ["default"]


def test_list_available_themes_lists_files(home):
    _write_theme(home, "zeta", "")
    _write_theme(home, "alpha", "")
    _write_theme(home, "default", "")
    themes_dir = home / ".config" / "shortcutter" / "themes"
    (themes_dir / "notes.txt").write_text("x")
    (themes_dir / "dir.toml").mkdir()
    assert list_available_themes() == ["default", "alpha", "zeta"]