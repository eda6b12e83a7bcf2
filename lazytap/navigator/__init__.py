"""Fuzzy-filtering list navigator: state, commands, keymap, and rendering."""

from __future__ import annotations

from .commands import COMMAND_KINDS, NavCommand, NavOutcome
from .keymap import command_for_key
from .navigator import ListNavigator, NavigatorState, available_rows_for
from .rendering import navigator_rows

__all__ = [
    "COMMAND_KINDS",
    "ListNavigator",
    "NavCommand",
    "NavOutcome",
    "NavigatorState",
    "available_rows_for",
    "command_for_key",
    "navigator_rows",
]
