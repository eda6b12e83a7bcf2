"""Player view: track list, playback status, and playback keys."""

from __future__ import annotations

from pathlib import Path

from ..ansi import clip_ansi_line
from ..navigator.keymap import parse_mouse_col_row
from ..ui_theme import UITheme
from .session import PlayerSession, ViewportSize

HEADER_ROWS = 1
FOOTER_ROWS = 1


class PlayerView:
    """Renders one ``PlayerSession`` and maps keys onto it."""

    def __init__(self, session: PlayerSession, size: ViewportSize, theme: UITheme) -> None:
        self.session = session
        self.size = size
        self.theme = theme
        self.track_start = 0
        self.list_rows = 0

    @property
    def path(self) -> Path:
        return self.session.path

    def handle_key(self, key: str) -> bool:
        """Apply a playback key; return whether it was consumed."""
        session = self.session
        if key in {" ", "p"}:
            session.toggle_pause()
        elif key in {"n", "j", "DOWN"}:
            session.next_track()
        elif key in {"k", "UP"}:
            session.previous_track()
        elif key == "s":
            session.stop()
        elif key == "ENTER":
            session.play_index(session.index)
        elif key.startswith("MOUSE_LEFT_DOWN:"):
            _col, row = parse_mouse_col_row(key)
            if row is None:
                return False
            list_row = row - 1 - HEADER_ROWS
            index = self.track_start + list_row
            if not (0 <= list_row < self.list_rows and index < len(session.tracks)):
                return False
            session.play_index(index)
        else:
            return False
        return True

    def _status(self, notice: str) -> str:
        theme = self.theme
        if notice:
            return f"{theme.notice}{notice}{theme.reset}"
        if self.session.error:
            return f"{theme.notice}{self.session.error}{theme.reset}"
        if self.session.paused:
            label = "paused"
        elif self.session.playing:
            label = "playing"
        else:
            label = "stopped"
        position = f"{self.session.index + 1}/{len(self.session.tracks)}"
        return f"{theme.player_status}[{label}] {position}  {self.session.path}{theme.reset}"

    def rows(self, height: int, width: int, notice: str = "") -> list[str]:
        """Compose ``height`` rows: title, visible tracks, and a status line."""
        theme = self.theme
        width = min(width, self.size.columns)
        out: list[str] = [""] * max(0, height)
        if height <= 0:
            return out
        out[0] = clip_ansi_line(f"{theme.player_title}{self.session.path.name}{theme.reset}", width)
        if height == 1:
            return out

        list_rows = max(0, height - HEADER_ROWS - FOOTER_ROWS)
        self.list_rows = list_rows
        tracks = self.session.tracks
        current = self.session.index
        if current < self.track_start:
            self.track_start = current
        elif list_rows and current >= self.track_start + list_rows:
            self.track_start = current - list_rows + 1
        self.track_start = max(0, min(self.track_start, max(0, len(tracks) - list_rows)))

        for offset in range(list_rows):
            idx = self.track_start + offset
            if idx >= len(tracks):
                break
            number = f"{idx + 1:>3} "
            if idx == current:
                line = f"{theme.marker}>{theme.reset}{theme.player_current}{number}{tracks[idx].stem}{theme.reset}"
            else:
                line = f" {theme.player_track}{number}{tracks[idx].stem}{theme.reset}"
            out[HEADER_ROWS + offset] = clip_ansi_line(line, width)

        out[height - 1] = clip_ansi_line(self._status(notice), width)
        return out
