"""Command and outcome records exchanged between keymap, navigator, and controller."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..catalog.items import CandidateItem

INSERT = "insert"
COMMIT = "commit"
CANCEL = "cancel"
POINTER = "pointer"
MOVE_DOWN = "move_down"
MOVE_UP = "move_up"
PAGE_UP = "page_up"
PAGE_DOWN = "page_down"
RANDOM_PAGE = "random_page"
BACKSPACE = "backspace"
DELETE = "delete"
CURSOR_LEFT = "cursor_left"
CURSOR_RIGHT = "cursor_right"
CURSOR_HOME = "cursor_home"
CURSOR_END = "cursor_end"
CLEAR = "clear"
PARENT = "parent"
OPEN_EXTERNAL = "open_external"

COMMAND_KINDS: tuple[str, ...] = (
    INSERT,
    COMMIT,
    CANCEL,
    POINTER,
    MOVE_DOWN,
    MOVE_UP,
    PAGE_UP,
    PAGE_DOWN,
    RANDOM_PAGE,
    BACKSPACE,
    DELETE,
    CURSOR_LEFT,
    CURSOR_RIGHT,
    CURSOR_HOME,
    CURSOR_END,
    CLEAR,
    PARENT,
    OPEN_EXTERNAL,
)


@dataclass(frozen=True)
class NavCommand:
    """One logical navigator command.

    ``text`` carries the inserted character for ``insert``; ``row`` carries
    the 1-based terminal row for ``pointer``.
    """

    kind: str
    text: str = ""
    row: int = 0

    def __post_init__(self) -> None:
        if self.kind not in COMMAND_KINDS:
            raise ValueError(f"unknown navigator command: {self.kind!r}")


# Outcome kinds the controller acts on.
CONSUMED = "consumed"
ACTIVATE = "activate"
DESCEND = "descend"
NOTICE = "notice"
EXTERNAL = "external"
CANCELLED = "cancelled"


@dataclass(frozen=True)
class NavOutcome:
    """Result of one navigator command, interpreted by the controller."""

    kind: str = CONSUMED
    path: Path | None = None
    items: list[CandidateItem] = field(default_factory=list)
    message: str = ""


CONSUMED_OUTCOME = NavOutcome()
