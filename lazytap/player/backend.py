"""External audio player process management.

Decoding is delegated to whichever player program is available. Each track
runs in its own process group so pause/resume/stop signal the whole group.
"""

from __future__ import annotations

import os
import shlex
import shutil
import signal
import subprocess
from pathlib import Path

from ..errors import PlayerBackendError
from ..logging_config import get_logger

logger = get_logger("backend")

PLAYER_CANDIDATES: tuple[tuple[str, ...], ...] = (
    ("mpv", "--no-video", "--really-quiet"),
    ("ffplay", "-nodisp", "-autoexit", "-loglevel", "quiet"),
    ("mpg123", "-q"),
    ("afplay",),
)


def detect_player_command(configured: str | None = None) -> list[str]:
    """Return the player command line, preferring an explicit configuration."""
    if configured:
        cmd = shlex.split(configured)
        if cmd:
            return cmd
    for candidate in PLAYER_CANDIDATES:
        if shutil.which(candidate[0]) is not None:
            return list(candidate)
    raise PlayerBackendError("no audio player found (install mpv, ffplay, or mpg123)")


class ProcessBackend:
    """Play one file at a time through an external command."""

    def __init__(self, command: list[str]) -> None:
        self.command = command
        self.process: subprocess.Popen | None = None

    def play(self, path: Path) -> None:
        self.stop()
        try:
            self.process = subprocess.Popen(
                [*self.command, str(path)],
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            logger.error("failed to start %s: %s", self.command[0], exc)
            raise PlayerBackendError(f"failed to start {self.command[0]}: {exc}") from exc
        logger.info("started playback of %s (pid %s)", path, self.process.pid)

    def _signal(self, signum: int) -> None:
        if self.process is None or self.process.poll() is not None:
            return
        try:
            os.killpg(os.getpgid(self.process.pid), signum)
        except (ProcessLookupError, PermissionError) as exc:
            logger.warning("signal %s to player failed: %s", signum, exc)

    def pause(self) -> None:
        self._signal(signal.SIGSTOP)

    def resume(self) -> None:
        self._signal(signal.SIGCONT)

    def stop(self) -> None:
        process = self.process
        if process is None:
            return
        self.process = None
        if process.poll() is not None:
            return
        self._signal_process(process, signal.SIGCONT)
        self._signal_process(process, signal.SIGTERM)
        try:
            process.wait(timeout=1.0)
        except subprocess.TimeoutExpired:
            self._signal_process(process, signal.SIGKILL)
            try:
                process.wait(timeout=0.5)
            except subprocess.TimeoutExpired:
                logger.warning("player process %s did not exit", process.pid)

    @staticmethod
    def _signal_process(process: subprocess.Popen, signum: int) -> None:
        try:
            os.killpg(os.getpgid(process.pid), signum)
        except (ProcessLookupError, PermissionError):
            pass

    def finished(self) -> bool:
        """Return whether the current track's process has exited on its own."""
        return self.process is not None and self.process.poll() is not None
