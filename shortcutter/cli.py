"""Command entry point: pick a shortcut and print how to run it."""

from __future__ import annotations

import argparse
import sys

from shortcutter.shortcuts import ShortcutError, load_shortcuts_and_theme
from shortcutter.ui import show_ui


def main(argv: list[str] | None = None) -> int:
    """Show the picker and print "key:type:target" for the chosen shortcut."""
    argparse.ArgumentParser(prog="shortcutter").parse_args(argv)
    try:
        shortcuts, styles = load_shortcuts_and_theme()
    except ShortcutError as exc:
        print(f"Error loading shortcuts and theme: {exc}", file=sys.stderr)
        return 1

    try:
        selected, selected_key = show_ui(shortcuts, styles)
    except (OSError, RuntimeError) as exc:
        print(f"Error showing UI: {exc}", file=sys.stderr)
        return 1

    if selected is not None:
        print(f"{selected_key}:{selected.kind}:{selected.target}")
    return 0


if __name__ == "__main__":
    sys.exit(main())