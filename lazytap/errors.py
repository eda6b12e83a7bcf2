"""Exception taxonomy for lazytap.

Construction failures abort a single view transition and surface as notices.
``InvariantViolation`` marks a broken contract and is allowed to end the process.
"""

from __future__ import annotations

from pathlib import Path


class LazyTapError(Exception):
    """Base exception for lazytap errors."""


class CatalogError(LazyTapError, OSError):
    """Raised when a directory cannot be listed into candidate items."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read {path}: {reason}")


class SessionBuildError(LazyTapError):
    """Raised when a playback session cannot be built for a path."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot play {path}: {reason}")


class PlayerBackendError(LazyTapError):
    """Raised when no external audio player program can be started."""


class InvariantViolation(LazyTapError):
    """Raised when session state contradicts an earlier successful step."""
