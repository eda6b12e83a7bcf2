"""File-manager launch helper.

The child runs in its own session and is reaped on a daemon thread, so the
caller never blocks on it. Callers treat a failed launch as best effort and
discard the error.
"""

from __future__ import annotations

import shlex
import subprocess
import sys
import threading
from pathlib import Path

from .logging_config import get_logger

logger = get_logger("launcher")


def file_manager_command(configured: str | None = None) -> list[str]:
    if configured:
        return shlex.split(configured)
    if sys.platform == "darwin":
        return ["open"]
    return ["xdg-open"]


def open_in_file_manager(path: Path, configured: str | None = None) -> threading.Thread:
    """Open ``path`` (or its directory, for files) in the system file manager.

    Returns the thread that waits on the child. Raises ``OSError`` when the
    command cannot be started.
    """
    target = path if path.is_dir() else path.parent
    cmd = [*file_manager_command(configured), str(target)]
    logger.info("opening file manager: %s", cmd)
    proc = subprocess.Popen(
        cmd,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        start_new_session=True,
    )
    reaper = threading.Thread(target=proc.wait, name="lazytap-launcher-reap", daemon=True)
    reaper.start()
    return reaper
