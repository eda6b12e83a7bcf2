"""Main interactive event loop for the terminal UI.

One event is read and fully handled before the next; idle timeouts drive
notice expiry and track advancement. Feature logic lives in the controller.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..input import read_key
from ..terminal import TerminalController
from .app import TapController


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    idle_timeout_ms: int = 120


def run_main_loop(
    controller: TapController,
    terminal: TerminalController,
    stdin_fd: int,
    timing: RuntimeLoopTiming = RuntimeLoopTiming(),
) -> None:
    """Run the TUI until the controller requests exit.

    Each iteration handles resize bookkeeping, optional rendering, and input
    dispatch. The player is stopped on every exit path.
    """
    try:
        with terminal.raw_mode():
            while True:
                rows, columns = terminal.size()
                controller.resize(rows, columns)
                if controller.dirty:
                    terminal.write_frame(controller.frame(rows, columns))
                    controller.dirty = False

                try:
                    key = read_key(stdin_fd, timeout_ms=timing.idle_timeout_ms)
                except KeyboardInterrupt:
                    continue
                if key == "":
                    controller.tick()
                    continue
                if controller.handle_key(key):
                    break
    finally:
        controller.shutdown()
