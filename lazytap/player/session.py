"""Playback sessions: the track list for one leaf and its playback cursor.

``build_session`` is the factory used by activation, "previous", and the
random sampler alike. It never starts audio; ``PlayerSession.start`` does.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import NamedTuple, Protocol

from ..catalog.scan import is_audio_file, scan_directory
from ..errors import PlayerBackendError, SessionBuildError
from ..logging_config import get_logger

logger = get_logger("session")

MIN_COLUMNS = 53
TITLE_PADDING = 10
CHROME_ROWS = 4


class ViewportSize(NamedTuple):
    columns: int
    rows: int


class Backend(Protocol):
    def play(self, path: Path) -> None: ...

    def pause(self) -> None: ...

    def resume(self) -> None: ...

    def stop(self) -> None: ...

    def finished(self) -> bool: ...


@dataclass
class PlayerSession:
    """Tracks of one leaf plus the current track index and pause state."""

    path: Path
    tracks: list[Path]
    index: int = 0
    playing: bool = False
    paused: bool = False
    backend: Backend | None = field(default=None, repr=False)
    error: str = ""

    @property
    def current_track(self) -> Path:
        return self.tracks[self.index]

    def attach(self, backend: Backend) -> None:
        self.backend = backend

    def play_index(self, index: int) -> None:
        """Start track ``index``; backend failures are kept in ``error``."""
        self.index = max(0, min(index, len(self.tracks) - 1))
        self.paused = False
        if self.backend is None:
            self.playing = False
            return
        try:
            self.backend.play(self.current_track)
        except PlayerBackendError as exc:
            self.playing = False
            self.error = str(exc)
            return
        self.error = ""
        self.playing = True

    def start(self) -> None:
        self.play_index(self.index)

    def toggle_pause(self) -> None:
        if self.backend is None or not self.playing:
            return
        if self.paused:
            self.backend.resume()
        else:
            self.backend.pause()
        self.paused = not self.paused

    def next_track(self) -> None:
        if self.index + 1 < len(self.tracks):
            self.play_index(self.index + 1)

    def previous_track(self) -> None:
        self.play_index(self.index - 1 if self.index > 0 else 0)

    def stop(self) -> None:
        if self.backend is not None:
            self.backend.stop()
        self.playing = False
        self.paused = False

    def poll(self) -> bool:
        """Advance after a track ends on its own; return whether state changed."""
        if self.backend is None or not self.playing or self.paused:
            return False
        if not self.backend.finished():
            return False
        if self.index + 1 < len(self.tracks):
            self.play_index(self.index + 1)
        else:
            self.stop()
        return True


def _tracks_for(path: Path) -> list[Path]:
    if path.is_file():
        if not is_audio_file(path):
            raise SessionBuildError(path, "not an audio file")
        return [path]
    try:
        _child_dirs, audio_files = scan_directory(path)
    except OSError as exc:
        raise SessionBuildError(path, exc.strerror or str(exc)) from exc
    return audio_files


def build_session(path: Path) -> tuple[PlayerSession, ViewportSize]:
    """Collect the tracks for ``path`` and size the player view for them.

    Raises ``SessionBuildError`` when ``path`` is missing or holds no audio.
    """
    target = path.resolve()
    if not target.exists():
        raise SessionBuildError(target, "path does not exist")
    tracks = _tracks_for(target)
    if not tracks:
        raise SessionBuildError(target, "no audio files")
    longest = max(len(track.stem) for track in tracks)
    size = ViewportSize(max(MIN_COLUMNS, longest + TITLE_PADDING), len(tracks) + CHROME_ROWS)
    logger.debug("built session for %s with %d tracks", target, len(tracks))
    return PlayerSession(path=target, tracks=tracks), size
