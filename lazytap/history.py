"""Two-slot history of activated leaf paths.

Index 0 is the "previous" activation and the last entry is the current one.
The first push seeds both slots so "previous" is valid after any activation.
"""

from __future__ import annotations

from pathlib import Path

from .errors import InvariantViolation

HISTORY_CAPACITY = 2


class NavigationHistory:
    """Bounded FIFO of activated paths owned by the controller."""

    def __init__(self) -> None:
        self.paths: list[Path] = []

    @property
    def has_activation(self) -> bool:
        return bool(self.paths)

    @property
    def current(self) -> Path | None:
        return self.paths[-1] if self.paths else None

    def push(self, path: Path) -> None:
        """Record an activation, evicting the oldest entry past capacity."""
        if not self.paths:
            self.paths = [path, path]
            return
        self.paths.append(path)
        if len(self.paths) > HISTORY_CAPACITY:
            del self.paths[0]

    def previous(self) -> Path:
        """Return the previous activation; only valid after one activation."""
        if not self.paths:
            raise InvariantViolation("previous() requested before any activation")
        return self.paths[0]
