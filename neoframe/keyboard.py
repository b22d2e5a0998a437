"""Translation of key presses into editor keybinding strings."""

from __future__ import annotations

import enum
import sys
from typing import Any, Callable


class Key(enum.Enum):
    """Named (non-character) keys."""

    BACKSPACE = "Backspace"
    TAB = "Tab"
    ENTER = "Enter"
    ESCAPE = "Escape"
    SPACE = "Space"
    DELETE = "Delete"
    ARROW_UP = "ArrowUp"
    ARROW_DOWN = "ArrowDown"
    ARROW_LEFT = "ArrowLeft"
    ARROW_RIGHT = "ArrowRight"
    F1 = "F1"
    F2 = "F2"
    F3 = "F3"
    F4 = "F4"
    F5 = "F5"
    F6 = "F6"
    F7 = "F7"
    F8 = "F8"
    F9 = "F9"
    F10 = "F10"
    F11 = "F11"
    F12 = "F12"
    INSERT = "Insert"
    HOME = "Home"
    END = "End"
    PAGE_UP = "PageUp"
    PAGE_DOWN = "PageDown"
    SHIFT = "Shift"
    CONTROL = "Control"
    ALT = "Alt"
    SUPER = "Super"
    CAPS_LOCK = "CapsLock"


_SPECIAL_CHARACTERS = {
    " ": "Space",
    "<": "lt",
    "\\": "Bslash",
    "|": "Bar",
    "\t": "Tab",
    "\n": "CR",
}

_NAMED_KEYS = {
    Key.BACKSPACE: "BS",
    Key.TAB: "Tab",
    Key.ENTER: "CR",
    Key.ESCAPE: "Esc",
    Key.SPACE: "Space",
    Key.DELETE: "Del",
    Key.ARROW_UP: "Up",
    Key.ARROW_DOWN: "Down",
    Key.ARROW_LEFT: "Left",
    Key.ARROW_RIGHT: "Right",
    **{Key[f"F{n}"]: f"F{n}" for n in range(1, 13)},
    Key.INSERT: "Insert",
    Key.HOME: "Home",
    Key.END: "End",
    Key.PAGE_UP: "PageUp",
    Key.PAGE_DOWN: "PageDown",
}


def key_text(key: Key | str) -> tuple[str, bool] | None:
    """Keybinding text for a key and whether it needs ``<...>`` brackets.

    A string is the text a character key produced. Keys with no binding,
    such as modifiers on their own, give None.
    """
    if isinstance(key, str):
        if key in _SPECIAL_CHARACTERS:
            return _SPECIAL_CHARACTERS[key], True
        return key, False
    name = _NAMED_KEYS.get(key)
    if name is None:
        return None
    return name, True


class KeyboardManager:
    """Tracks modifier state and sends keybinding strings for key presses.

    The logo (Windows) key is reserved for the operating system on Windows,
    so by default it adds no modifier there.
    """

    def __init__(
        self,
        send: Callable[[str], Any],
        ignore_logo: bool = sys.platform == "win32",
    ) -> None:
        self._send = send
        self._ignore_logo = ignore_logo
        self.shift = False
        self.ctrl = False
        self.alt = False
        self.logo = False

    def format_keybinding(self, special: bool, text: str) -> str:
        special = special or self.shift or self.ctrl or self.alt or self.logo
        use_logo = self.logo and not self._ignore_logo
        parts = [
            "<" if special else "",
            "S-" if self.shift else "",
            "C-" if self.ctrl else "",
            "M-" if self.alt else "",
            "D-" if use_logo else "",
            text,
            ">" if special else "",
        ]
        return "".join(parts)

    def set_modifiers(self, shift: bool, ctrl: bool, alt: bool, logo: bool) -> None:
        self.shift = shift
        self.ctrl = ctrl
        self.alt = alt
        self.logo = logo

    def handle_key_press(self, key: Key | str) -> str | None:
        """Send the keybinding for a pressed key; return it, or None if unbound."""
        text = key_text(key)
        if text is None:
            return None
        keybinding = self.format_keybinding(*reversed(text))
        self._send(keybinding)
        return keybinding