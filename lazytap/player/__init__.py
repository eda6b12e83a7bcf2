"""Playback sessions, the external player backend, and the player view."""

from __future__ import annotations

from .backend import ProcessBackend, detect_player_command
from .session import PlayerSession, ViewportSize, build_session
from .view import PlayerView

__all__ = [
    "PlayerSession",
    "PlayerView",
    "ProcessBackend",
    "ViewportSize",
    "build_session",
    "detect_player_command",
]
