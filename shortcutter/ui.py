"""Interactive picker: model, input messages and the terminal loop."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from shortcutter import fuzzy
from shortcutter.shortcuts import Shortcut
from shortcutter.theme import Style, ThemeStyles

_HELP = "↑/↓: navigate • Enter: execute • Tab: populate • Esc: quit"


@dataclass(frozen=True)
class WindowSizeMsg:
    width: int
    height: int


@dataclass(frozen=True)
class KeyMsg:
    """A key press: a named key such as "enter", or typed characters."""

    key: str = ""
    runes: str = ""


class MouseAction(enum.Enum):
    LEFT = "left"
    WHEEL_UP = "wheel_up"
    WHEEL_DOWN = "wheel_down"


@dataclass(frozen=True)
class MouseMsg:
    action: MouseAction
    x: int = 0
    y: int = 0


@dataclass
class Model:
    """State of the picker."""

    shortcuts: list[Shortcut]
    styles: ThemeStyles
    filtered: list[Shortcut] = field(default_factory=list)
    cursor: int = 0
    query: str = ""
    width: int = 0
    height: int = 0
    selected: Shortcut | None = None
    selected_key: str = ""
    quitting: bool = False
    scroll_offset: int = 0
    max_visible: int = 10

    def _select(self, key: str) -> bool:
        if self.filtered and self.cursor < len(self.filtered):
            self.selected = self.filtered[self.cursor]
            self.selected_key = key
            self.quitting = True
            return True
        return False

    def _move_up(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1
            if self.cursor - self.scroll_offset < 0:
                self.scroll_offset -= 1

    def _move_down(self, window: int) -> None:
        if self.cursor < len(self.filtered) - 1:
            self.cursor += 1
            if self.cursor - self.scroll_offset > window - 1:
                self.scroll_offset += 1

    def update(self, msg: object) -> bool:
        """Apply a message; return True when the picker should quit."""
        if isinstance(msg, WindowSizeMsg):
            self.width, self.height = msg.width, msg.height
        elif isinstance(msg, KeyMsg):
            key = msg.key
            if key in ("ctrl+c", "esc"):
                self.quitting = True
                return True
            if key in ("enter", "tab"):
                return self._select(key)
            if key == "up":
                self._move_up()
            elif key == "down":
                self._move_down(10)
            elif key == "backspace":
                if self.query:
                    self.query = self.query[:-1]
                    self.filtered = self.filter_shortcuts()
                    self.cursor = 0
            elif msg.runes:
                self.query += "".join(ch for ch in msg.runes if 32 <= ord(ch) < 127)
                self.filtered = self.filter_shortcuts()
                self.cursor = 0
                self.scroll_offset = 0
        elif isinstance(msg, MouseMsg):
            if msg.action is MouseAction.LEFT:
                item = msg.y - (self.height - 14) - 2
                if 0 <= item < 10:
                    self.cursor = item + self.scroll_offset
            elif msg.action is MouseAction.WHEEL_UP:
                self._move_up()
            elif msg.action is MouseAction.WHEEL_DOWN:
                self._move_down(self.max_visible)
        return False

    def filter_shortcuts(self) -> list[Shortcut]:
        """Shortcuts matching the query, best match first."""
        if not self.query:
            return self.shortcuts
        targets = [f"{s.display} {s.description}" for s in self.shortcuts]
        return [self.shortcuts[m.index] for m in fuzzy.find(self.query, targets)]

    def highlight_matches(
        self, text: str, query: str, base_style: Style, is_selected: bool
    ) -> str:
        """Render text, colouring the query's characters if they mostly run together."""
        if not query:
            if is_selected:
                return base_style.with_background(
                    self.styles.selected_bar.background
                ).render(text)
            return base_style.render(text)

        query_lower = query.lower()
        highlighted: list[str] = []
        plain: list[str] = []
        position = 0
        longest = 0
        run = 0
        for char in text:
            style = base_style
            if is_selected:
                style = style.with_background(self.styles.selected_line.background)
            if position < len(query_lower) and char.lower() == query_lower[position]:
                highlighted.append(
                    style.with_foreground(self.styles.match.foreground).render(char)
                )
                position += 1
                run += 1
                longest = max(longest, run)
            else:
                run = 0
                highlighted.append(style.render(char))
            plain.append(style.render(char))

        if len(query) - longest < 2:
            return "".join(highlighted)
        return "".join(plain)

    def view(self) -> str:
        """The screen contents for the current state."""
        if self.quitting:
            return ""
        styles = self.styles
        head = styles.query.render("❯ ") + styles.query.render(self.query) + "\n"

        body: list[str] = []
        status = f"  {len(self.filtered)}/{len(self.shortcuts)} "
        body.append(styles.status.render(status))
        separator_length = self.width - len(status) - 2
        if separator_length > 0:
            body.append(styles.separator.render("─" * separator_length))
        body.append("\n")

        max_visible = self.max_visible
        if 0 < self.height < 15:
            max_visible = self.height - 5
        max_visible = max(max_visible, 5)

        start = self.scroll_offset
        end = min(start + max_visible, len(self.filtered))
        command_width = 30 if self.width > 80 else 22
        indicator_width = 3

        for position, shortcut in enumerate(self.filtered[start:end], start):
            command = shortcut.display
            if len(command) > command_width:
                command = command[: command_width - 3] + "..."
            else:
                command = command.ljust(command_width)

            description = shortcut.description
            max_desc = self.width - command_width - indicator_width - 12
            if max_desc > 0 and len(description) > max_desc:
                description = description[: max_desc - 3] + "..."

            indicator = (
                styles.custom_indicator.render("*")
                if shortcut.is_custom
                else styles.app_background.render(" ")
            )
            is_selected = position == self.cursor
            cmd_text = self.highlight_matches(
                command, self.query, styles.command, is_selected
            )
            desc_text = self.highlight_matches(
                description, self.query, styles.description, False
            )
            column = styles.app_background.render("  ")
            if is_selected:
                line = (
                    styles.selected_bar.render("▌")
                    + styles.selected_line.render(" ")
                    + cmd_text + column + desc_text + indicator
                )
                body.append(styles.app_background.render(line))
            else:
                body.append(
                    styles.unselected_bar.render("█")
                    + styles.app_background.render(" ")
                    + cmd_text + column + desc_text + indicator
                )
            body.append("\n")

        body.append("\n")
        body.append(styles.help.render(_HELP))
        return head + styles.app_background.render("".join(body))


def initial_model(shortcuts: list[Shortcut], styles: ThemeStyles) -> Model:
    """A fresh picker showing all shortcuts."""
    return Model(shortcuts=shortcuts, styles=styles, filtered=shortcuts)


_KEY_NAMES = {
    "KEY_ESCAPE": "esc",
    "KEY_ENTER": "enter",
    "KEY_TAB": "tab",
    "KEY_UP": "up",
    "KEY_DOWN": "down",
    "KEY_BACKSPACE": "backspace",
    "KEY_DELETE": "backspace",
}
_CHAR_NAMES = {"\t": "tab", "\r": "enter", "\n": "enter", "\x03": "ctrl+c",
               "\x7f": "backspace", "\x08": "backspace", "\x1b": "esc"}


def _to_message(keystroke) -> KeyMsg:
    if keystroke.is_sequence:
        return KeyMsg(key=_KEY_NAMES.get(keystroke.name or "", ""))
    text = str(keystroke)
    if text in _CHAR_NAMES:
        return KeyMsg(key=_CHAR_NAMES[text])
    return KeyMsg(runes=text)


def show_ui(
    shortcuts: list[Shortcut], styles: ThemeStyles
) -> tuple[Shortcut | None, str]:
    """Run the picker on the terminal; return the chosen shortcut and key."""
    import blessed

    model = initial_model(shortcuts, styles)
    try:
        tty = open("/dev/tty", "w", encoding="utf-8")
    except OSError:
        tty = None
    try:
        term = blessed.Terminal(stream=tty) if tty else blessed.Terminal()
        with term.fullscreen(), term.cbreak(), term.hidden_cursor():
            while True:
                if (term.width, term.height) != (model.width, model.height):
                    model.update(WindowSizeMsg(term.width, term.height))
                print(term.home + term.clear + model.view(), end="",
                      file=term.stream, flush=True)
                try:
                    keystroke = term.inkey(timeout=0.5)
                except KeyboardInterrupt:
                    model.update(KeyMsg(key="ctrl+c"))
                    break
                if not keystroke:
                    continue
                if model.update(_to_message(keystroke)):
                    break
    finally:
        if tty:
            tty.close()
    return model.selected, model.selected_key