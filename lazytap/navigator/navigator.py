"""Interactive fuzzy-filtering list navigator.

Owns one browsing session: the query and its edit cursor, the ranked item
list, the scroll offset and the selection. Index 0 is the row next to the
input line and indices grow upward on screen.

The navigator never replaces itself. Commands that leave the current list
return a ``NavOutcome`` and the controller performs the transition.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from ..ansi import byte_to_char_offset, grapheme_after, grapheme_before, utf8_len
from ..catalog.items import CandidateItem, build_items
from ..catalog.scorer import fuzzy_indices
from ..errors import CatalogError
from ..logging_config import get_logger
from . import commands as cmd
from .commands import CONSUMED_OUTCOME, NavCommand, NavOutcome

logger = get_logger("navigator")

RESERVED_ROWS = 3
NOTHING_TO_SELECT = "Nothing to select!"


@dataclass
class NavigatorState:
    """Mutable browsing state; ``cursor`` is a UTF-8 byte offset into ``query``."""

    query: str = ""
    cursor: int = 0
    selected: int = 0
    offset: int = 0
    matches: int = 0
    rows: int = 0
    columns: int = 0
    available_rows: int = 0


def available_rows_for(rows: int) -> int:
    return rows - RESERVED_ROWS if rows > 2 else 0


class ListNavigator:
    """Stateful fuzzy list over one directory catalog."""

    def __init__(
        self,
        items: list[CandidateItem],
        *,
        search_root: Path,
        catalog: Callable[[Path], list[CandidateItem]] = build_items,
        scorer: Callable[[str, str], tuple[int, list[int]] | None] = fuzzy_indices,
        rng: random.Random | None = None,
    ) -> None:
        self.items = items
        self.search_root = search_root
        self.catalog = catalog
        self.scorer = scorer
        self.rng = rng or random.Random()
        self.state = NavigatorState(matches=len(items))
        self._handlers: dict[str, Callable[[NavCommand], NavOutcome]] = {
            cmd.INSERT: lambda c: self._edit(self.insert, c.text),
            cmd.COMMIT: lambda c: self.on_select(),
            cmd.CANCEL: lambda c: NavOutcome(kind=cmd.CANCELLED),
            cmd.POINTER: lambda c: self.pointer_select(c.row),
            cmd.MOVE_DOWN: lambda c: self._consume(self.move_down),
            cmd.MOVE_UP: lambda c: self._consume(self.move_up),
            cmd.PAGE_UP: lambda c: self._consume(self.page_up),
            cmd.PAGE_DOWN: lambda c: self._consume(self.page_down),
            cmd.RANDOM_PAGE: lambda c: self._consume(self.random_page),
            cmd.BACKSPACE: lambda c: self._consume(self.backspace),
            cmd.DELETE: lambda c: self._consume(self.delete),
            cmd.CURSOR_LEFT: lambda c: self._consume(self.move_left),
            cmd.CURSOR_RIGHT: lambda c: self._consume(self.move_right),
            cmd.CURSOR_HOME: lambda c: self._consume(self.move_home),
            cmd.CURSOR_END: lambda c: self._consume(self.move_end),
            cmd.CLEAR: lambda c: self._consume(self.clear),
            cmd.PARENT: lambda c: self.parent(),
            cmd.OPEN_EXTERNAL: lambda c: self.open_external(),
        }

    # dispatch
    def handle(self, command: NavCommand) -> NavOutcome:
        """Apply one command and report what the controller should do next."""
        return self._handlers[command.kind](command)

    @staticmethod
    def _consume(action: Callable[[], None]) -> NavOutcome:
        action()
        return CONSUMED_OUTCOME

    @staticmethod
    def _edit(action: Callable[[str], None], text: str) -> NavOutcome:
        action(text)
        return CONSUMED_OUTCOME

    # viewport
    def layout(self, rows: int, columns: int) -> None:
        self.state.rows = rows
        self.state.columns = columns
        self.state.available_rows = available_rows_for(rows)

    @property
    def selected_item(self) -> CandidateItem | None:
        if not self.items or self.state.matches == 0:
            return None
        return self.items[self.state.selected]

    def page_indicator(self) -> tuple[int, int]:
        """Approximate ``(page, pages)`` position of the selection, 1-based."""
        rows = max(1, self.state.available_rows)
        pages = max(1, -(-self.state.matches // rows))
        return min(pages, self.state.selected // rows + 1), pages

    # selection movement
    def move_down(self) -> None:
        s = self.state
        if s.selected == 0:
            return
        if s.selected == s.offset:
            s.offset -= 1
        s.selected -= 1

    def move_up(self) -> None:
        s = self.state
        if s.matches == 0 or s.selected == s.matches - 1:
            return
        if s.selected - s.offset >= s.available_rows:
            s.offset += 1
        s.selected += 1

    def page_up(self) -> None:
        s = self.state
        if s.matches == 0:
            return
        if s.selected + s.available_rows <= s.matches - 1:
            s.offset += s.available_rows
            s.selected += s.available_rows
        else:
            s.selected = s.matches - 1
            if s.offset + s.available_rows < s.selected:
                s.offset += s.available_rows

    def page_down(self) -> None:
        s = self.state
        if s.matches == 0:
            return
        s.selected = s.selected - s.available_rows if s.selected > s.available_rows else 0
        s.offset = s.offset - s.available_rows if s.offset > s.available_rows else 0

    def random_page(self) -> None:
        """Clear the query and jump to a random page other than the current one."""
        s = self.state
        count = len(self.items)
        if s.available_rows == 0 or count <= s.available_rows:
            return
        pages = count // s.available_rows + 1
        while True:
            y = self.rng.randrange(pages) * s.available_rows
            # The last page is empty when the count divides evenly.
            if y != s.offset and y < count:
                break
        self.clear()
        s.offset = y
        s.selected = y

    # text editing
    def move_left(self) -> None:
        if self.state.cursor > 0:
            self.state.cursor -= utf8_len(grapheme_before(self.state.query, self.state.cursor))

    def move_right(self) -> None:
        if self.state.cursor < utf8_len(self.state.query):
            self.state.cursor += utf8_len(grapheme_after(self.state.query, self.state.cursor))

    def move_home(self) -> None:
        self.state.cursor = 0

    def move_end(self) -> None:
        self.state.cursor = utf8_len(self.state.query)

    def backspace(self) -> None:
        if self.state.cursor > 0:
            self.move_left()
            self.delete()

    def delete(self) -> None:
        s = self.state
        if s.cursor >= utf8_len(s.query):
            self.update_list()
            return
        start = byte_to_char_offset(s.query, s.cursor)
        cluster = grapheme_after(s.query, s.cursor)
        s.query = s.query[:start] + s.query[start + len(cluster) :]
        self.update_list()

    def insert(self, ch: str) -> None:
        s = self.state
        start = byte_to_char_offset(s.query, s.cursor)
        s.query = s.query[:start] + ch + s.query[start:]
        s.cursor += utf8_len(ch)
        self.update_list()

    def clear(self) -> None:
        self.state.query = ""
        self.state.cursor = 0
        self.update_list()

    # filtering
    def update_list(self) -> None:
        """Re-score every item against the query and stably re-rank them."""
        s = self.state
        if not s.query:
            for item in self.items:
                item.weight = 1
                item.matched_indices = []
            s.matches = len(self.items)
            s.selected = 0
            s.offset = 0
            return

        count = 0
        for item in self.items:
            scored = self.scorer(item.display, s.query)
            if scored is None:
                item.weight = 0
                item.matched_indices = []
                continue
            item.weight, item.matched_indices = scored[0], list(scored[1])
            count += 1
        s.matches = count
        self.items.sort(key=lambda item: -item.weight)
        s.selected = 0
        s.offset = 0

    # activation
    def on_select(self) -> NavOutcome:
        item = self.selected_item
        if item is None:
            return NavOutcome(kind=cmd.NOTICE, message=NOTHING_TO_SELECT)
        if item.child_count == 0:
            return NavOutcome(kind=cmd.ACTIVATE, path=item.path)

        try:
            children = self.catalog(item.path)
        except CatalogError as exc:
            return NavOutcome(kind=cmd.NOTICE, message=str(exc))
        if len(children) == 1:
            only = children[0]
            if only.has_audio and only.child_count == 0:
                return NavOutcome(kind=cmd.ACTIVATE, path=only.path)
        return NavOutcome(kind=cmd.DESCEND, path=item.path, items=children)

    def pointer_select(self, mouse_y: int) -> NavOutcome:
        """Map a 1-based pointer row to a list index; re-clicking the selection commits."""
        s = self.state
        if mouse_y < 1 or mouse_y > s.available_rows + 1:
            return CONSUMED_OUTCOME
        target = s.available_rows + 1 + s.offset - mouse_y
        if target >= s.matches:
            return CONSUMED_OUTCOME
        if target == s.selected:
            return self.on_select()
        s.selected = target
        return CONSUMED_OUTCOME

    def parent(self) -> NavOutcome:
        """Rebuild over the parent of the listed directory, staying at the search root."""
        if not self.items:
            return CONSUMED_OUTCOME
        directory = self.items[0].path.parent
        if directory != self.search_root:
            directory = directory.parent
        try:
            items = self.catalog(directory)
        except CatalogError as exc:
            logger.debug("parent listing failed: %s", exc)
            return CONSUMED_OUTCOME
        return NavOutcome(kind=cmd.DESCEND, path=directory, items=items)

    def open_external(self) -> NavOutcome:
        item = self.selected_item
        if item is None:
            return CONSUMED_OUTCOME
        return NavOutcome(kind=cmd.EXTERNAL, path=item.path)
