"""Public runtime orchestration entry points.

This package groups the controller (`TapController`) and the event loop
that drives it from terminal input.
"""

from __future__ import annotations

from .app import TapController
from .loop import RuntimeLoopTiming, run_main_loop

__all__ = [
    "RuntimeLoopTiming",
    "TapController",
    "run_main_loop",
]
