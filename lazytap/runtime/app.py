"""Top-level controller owning the active view and session history.

At most two views exist at once: the player for the current activation and
a navigator stacked over it. Every transition (descend, ascend, previous,
random) replaces the navigator or the player wholesale.
"""

from __future__ import annotations

import random
import time
from collections.abc import Callable
from pathlib import Path

from ..catalog.items import CandidateItem, build_items
from ..catalog.scan import count_directories, directory_at, has_child_dirs
from ..errors import CatalogError, InvariantViolation, PlayerBackendError, SessionBuildError
from ..history import NavigationHistory
from ..logging_config import get_logger
from ..navigator import ListNavigator, command_for_key, navigator_rows
from ..navigator import commands as cmd
from ..navigator.commands import NavOutcome
from ..player.session import Backend, PlayerSession, ViewportSize, build_session
from ..player.view import PlayerView
from ..sampler import RandomRetrySampler
from ..ui_theme import DEFAULT_THEME, UITheme

logger = get_logger("app")

NOTICE_SECONDS = 2.5

SessionFactory = Callable[[Path], tuple[PlayerSession, ViewportSize]]


class TapController:
    """Route keys to the active view and perform view transitions."""

    def __init__(
        self,
        search_root: Path,
        *,
        theme: UITheme = DEFAULT_THEME,
        catalog: Callable[[Path], list[CandidateItem]] = build_items,
        session_factory: SessionFactory = build_session,
        backend_factory: Callable[[], Backend] | None = None,
        launcher: Callable[[Path], object] | None = None,
        history: NavigationHistory | None = None,
        rng: random.Random | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.search_root = search_root.resolve()
        self.theme = theme
        self.catalog = catalog
        self.session_factory = session_factory
        self.backend_factory = backend_factory
        self.launcher = launcher
        self.history = history if history is not None else NavigationHistory()
        self.rng = rng or random.Random()
        self.clock = clock
        self.searchable = has_child_dirs(self.search_root)
        self.navigator: ListNavigator | None = None
        self.player: PlayerView | None = None
        self.sampler: RandomRetrySampler | None = None
        self.notice = ""
        self.notice_until = 0.0
        self.quit_requested = False
        self.dirty = True
        self.viewport = (0, 0)

    # startup / shutdown
    def start(self) -> None:
        """Open the root navigator, or play the root directly when it has no subdirectories.

        Raises ``CatalogError`` or ``SessionBuildError``; both are fatal at startup.
        """
        if self.searchable:
            self.show_navigator(self.catalog(self.search_root))
            return
        session, size = self.session_factory(self.search_root)
        self.load_player(session, size)

    def shutdown(self) -> None:
        if self.player is not None:
            self.player.session.stop()

    # views
    @property
    def active_view(self) -> ListNavigator | PlayerView | None:
        return self.navigator if self.navigator is not None else self.player

    def show_navigator(self, items: list[CandidateItem]) -> None:
        """Replace any navigator with a fresh one over ``items``."""
        self.navigator = ListNavigator(
            items,
            search_root=self.search_root,
            catalog=self.catalog,
            rng=self.rng,
        )
        self.navigator.layout(*self.viewport)
        self.dirty = True

    def open_root_navigator(self) -> None:
        if not self.searchable:
            return
        try:
            items = self.catalog(self.search_root)
        except CatalogError as exc:
            self.set_notice(str(exc))
            return
        self.show_navigator(items)

    def resize(self, rows: int, columns: int) -> None:
        if (rows, columns) == self.viewport:
            return
        self.viewport = (rows, columns)
        if self.navigator is not None:
            self.navigator.layout(rows, columns)
        self.dirty = True

    def set_notice(self, message: str) -> None:
        self.notice = message
        self.notice_until = self.clock() + NOTICE_SECONDS
        self.dirty = True

    def load_player(self, session: PlayerSession, size: ViewportSize) -> None:
        """Make ``session`` the playing view and record it in history."""
        if self.player is not None:
            self.player.session.stop()
        if self.backend_factory is not None:
            try:
                session.attach(self.backend_factory())
            except PlayerBackendError as exc:
                logger.error("no playback backend: %s", exc)
                session.error = str(exc)
        session.start()
        self.player = PlayerView(session, size, self.theme)
        self.history.push(session.path)
        self.navigator = None
        self.dirty = True
        logger.info("now playing %s", session.path)

    # transitions
    def activate(self, path: Path) -> bool:
        """Commit a leaf selection; return whether the view changed."""
        if self.player is not None and self.player.path == path:
            self.navigator = None
            self.dirty = True
            return True
        try:
            session, size = self.session_factory(path)
        except SessionBuildError as exc:
            logger.warning("activation failed: %s", exc)
            self.set_notice(str(exc))
            return False
        self.load_player(session, size)
        return True

    def previous(self) -> None:
        """Reload the previous activation; failing to rebuild it is fatal."""
        path = self.history.previous()
        try:
            session, size = self.session_factory(path)
        except SessionBuildError as exc:
            raise InvariantViolation(f"previous selection {path} no longer plays: {exc}") from exc
        logger.info("returning to previous selection %s", path)
        self.load_player(session, size)

    def random(self) -> bool:
        """Play a random directory below the search root; return whether one was found."""
        if not self.searchable:
            return False
        if self.sampler is None:
            root = self.search_root
            self.sampler = RandomRetrySampler(
                count_directories(root),
                lambda index: directory_at(root, index),
                self.session_factory,
                rng=self.rng,
            )
        result = self.sampler.sample(self.history.current)
        if result is None:
            return False
        _path, built = result
        session, size = built
        self.load_player(session, size)
        return True

    def cancel(self) -> None:
        """Quit before the first activation, otherwise return to the player."""
        if not self.history.has_activation or self.player is None:
            self.quit_requested = True
            return
        self.navigator = None
        self.dirty = True

    def apply_outcome(self, outcome: NavOutcome) -> None:
        kind = outcome.kind
        if kind == cmd.CONSUMED:
            self.dirty = True
        elif kind == cmd.ACTIVATE:
            self.activate(outcome.path)
        elif kind == cmd.DESCEND:
            self.show_navigator(outcome.items)
        elif kind == cmd.NOTICE:
            self.set_notice(outcome.message)
        elif kind == cmd.EXTERNAL:
            self.open_external(outcome.path)
        elif kind == cmd.CANCELLED:
            self.cancel()
        else:
            raise InvariantViolation(f"unhandled navigator outcome: {kind!r}")

    def open_external(self, path: Path) -> None:
        if self.launcher is None:
            return
        try:
            self.launcher(path)
        except OSError as exc:
            logger.info("file manager launch failed for %s: %s", path, exc)

    # events
    def handle_key(self, key: str) -> bool:
        """Dispatch one key token; return ``True`` when the program should exit."""
        if key == "CTRL_C":
            self.quit_requested = True
        elif self.navigator is not None:
            command = command_for_key(key)
            if command is not None:
                self.apply_outcome(self.navigator.handle(command))
        elif self.player is not None:
            self._handle_player_key(key)
        return self.quit_requested

    def _handle_player_key(self, key: str) -> None:
        if key == "q":
            self.quit_requested = True
        elif key == "TAB":
            self.open_root_navigator()
        elif key == "-":
            self.previous()
        elif key == "r":
            self.random()
        elif self.player.handle_key(key):
            self.dirty = True

    def tick(self) -> None:
        """Idle work: expire notices and advance finished tracks."""
        if self.notice and self.clock() >= self.notice_until:
            self.notice = ""
            self.dirty = True
        if self.player is not None and self.player.session.poll():
            self.dirty = True

    def frame(self, rows: int, columns: int) -> list[str]:
        if self.navigator is not None:
            self.navigator.layout(rows, columns)
            return navigator_rows(self.navigator, self.theme, self.notice)
        if self.player is not None:
            return self.player.rows(rows, columns, self.notice)
        return [""] * rows
