"""Key tokens understood by controller binding tables.

Tokens follow the terminal decoder's naming: printable keys are the character
itself, named keys are upper-case words and modifiers are prefixes joined with
``_`` (``CTRL_R``, ``SHIFT_DOWN``).
"""

from __future__ import annotations

UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
PAGE_UP = "PAGE_UP"
PAGE_DOWN = "PAGE_DOWN"
HOME = "HOME"
END = "END"
ENTER = "ENTER"
ESC = "ESC"
TAB = "TAB"
BACKSPACE = "BACKSPACE"
SPACE = " "
SHIFT_UP = "SHIFT_UP"
SHIFT_DOWN = "SHIFT_DOWN"
CTRL_O = "CTRL_O"
CTRL_R = "CTRL_R"
CTRL_Z = "CTRL_Z"

_NAMED_LABELS: dict[str, str] = {
    SPACE: "Space",
    ENTER: "Enter",
    ESC: "Esc",
    TAB: "Tab",
    BACKSPACE: "Backspace",
    PAGE_UP: "PgUp",
    PAGE_DOWN: "PgDn",
    HOME: "Home",
    END: "End",
    UP: "Up",
    DOWN: "Down",
    LEFT: "Left",
    RIGHT: "Right",
}

_MODIFIER_LABELS: dict[str, str] = {
    "CTRL": "Ctrl",
    "SHIFT": "Shift",
    "ALT": "Alt",
}


def normalize_key(key: str) -> str:
    """Map decoder aliases onto the canonical token used in binding tables."""
    if key in ("ENTER_CR", "ENTER_LF", "\r", "\n"):
        return ENTER
    if key == "SPACE":
        return SPACE
    return key


def key_label(key: str) -> str:
    """Return a human-readable label such as ``Ctrl+R`` for ``key``."""
    key = normalize_key(key)
    if key in _NAMED_LABELS:
        return _NAMED_LABELS[key]
    prefix, sep, rest = key.partition("_")
    if sep and prefix in _MODIFIER_LABELS and rest:
        return f"{_MODIFIER_LABELS[prefix]}+{_NAMED_LABELS.get(rest, rest.capitalize() if len(rest) > 1 else rest)}"
    return key
