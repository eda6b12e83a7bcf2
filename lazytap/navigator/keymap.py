"""Translate decoded key tokens into navigator commands."""

from __future__ import annotations

from . import commands as cmd
from .commands import NavCommand

_KEY_COMMANDS: dict[str, str] = {
    "ENTER": cmd.COMMIT,
    "ESC": cmd.CANCEL,
    "DOWN": cmd.MOVE_DOWN,
    "UP": cmd.MOVE_UP,
    "PAGE_UP": cmd.PAGE_UP,
    "CTRL_H": cmd.PAGE_UP,
    "PAGE_DOWN": cmd.PAGE_DOWN,
    "CTRL_L": cmd.PAGE_DOWN,
    "CTRL_Z": cmd.RANDOM_PAGE,
    "BACKSPACE": cmd.BACKSPACE,
    "DELETE": cmd.DELETE,
    "LEFT": cmd.CURSOR_LEFT,
    "RIGHT": cmd.CURSOR_RIGHT,
    "HOME": cmd.CURSOR_HOME,
    "END": cmd.CURSOR_END,
    "CTRL_U": cmd.CLEAR,
    "CTRL_P": cmd.PARENT,
    "CTRL_O": cmd.OPEN_EXTERNAL,
}

_MOUSE_COMMANDS: dict[str, str] = {
    "MOUSE_LEFT_DOWN": cmd.POINTER,
    "MOUSE_RIGHT_DOWN": cmd.CANCEL,
    "MOUSE_WHEEL_UP": cmd.MOVE_UP,
    "MOUSE_WHEEL_DOWN": cmd.MOVE_DOWN,
}


def parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


def command_for_key(key: str) -> NavCommand | None:
    """Return the navigator command bound to ``key``, or ``None`` when unbound."""
    kind = _KEY_COMMANDS.get(key)
    if kind is not None:
        return NavCommand(kind)

    if key.startswith("MOUSE_"):
        name = key.split(":", 1)[0]
        kind = _MOUSE_COMMANDS.get(name)
        if kind is None:
            return None
        _col, row = parse_mouse_col_row(key)
        if row is None:
            return None
        return NavCommand(kind, row=row)

    if len(key) == 1 and key.isprintable():
        return NavCommand(cmd.INSERT, text=key)
    return None
