"""Player view key handling and frame composition tests."""

from __future__ import annotations

import unittest
from pathlib import Path

from lazytap.ansi import ANSI_ESCAPE_RE
from lazytap.player.session import PlayerSession, ViewportSize
from lazytap.player.view import PlayerView
from lazytap.ui_theme import PLAIN_THEME


class _Backend:
    def __init__(self) -> None:
        self.played: list[str] = []

    def play(self, path: Path) -> None:
        self.played.append(path.name)

    def pause(self) -> None:
        pass

    def resume(self) -> None:
        pass

    def stop(self) -> None:
        pass

    def finished(self) -> bool:
        return False


def _view(count: int = 5) -> tuple[PlayerView, _Backend]:
    tracks = [Path(f"/music/album/{idx:02d} song.mp3") for idx in range(count)]
    session = PlayerSession(path=Path("/music/album"), tracks=tracks)
    backend = _Backend()
    session.attach(backend)
    session.start()
    return PlayerView(session, ViewportSize(60, count + 4), PLAIN_THEME), backend


class PlayerViewKeyTests(unittest.TestCase):
    def test_playback_keys(self) -> None:
        view, backend = _view()
        self.assertTrue(view.handle_key("n"))
        self.assertEqual(view.session.index, 1)
        self.assertTrue(view.handle_key("k"))
        self.assertEqual(view.session.index, 0)
        self.assertTrue(view.handle_key(" "))
        self.assertTrue(view.session.paused)
        self.assertTrue(view.handle_key("s"))
        self.assertFalse(view.session.playing)

    def test_unknown_key_is_not_consumed(self) -> None:
        view, _backend = _view()
        self.assertFalse(view.handle_key("x"))

    def test_click_on_track_plays_it(self) -> None:
        view, backend = _view()
        view.rows(10, 60)
        # Row 1 is the title, so terminal row 4 is the third track.
        self.assertTrue(view.handle_key("MOUSE_LEFT_DOWN:5:4"))
        self.assertEqual(view.session.index, 2)
        self.assertEqual(backend.played[-1], "02 song.mp3")

    def test_click_outside_track_list_is_ignored(self) -> None:
        view, _backend = _view(2)
        view.rows(10, 60)
        self.assertFalse(view.handle_key("MOUSE_LEFT_DOWN:5:1"))
        self.assertFalse(view.handle_key("MOUSE_LEFT_DOWN:5:9"))


class PlayerViewRowsTests(unittest.TestCase):
    def test_rows_layout(self) -> None:
        view, _backend = _view(3)
        rows = [ANSI_ESCAPE_RE.sub("", row) for row in view.rows(8, 60)]
        self.assertEqual(len(rows), 8)
        self.assertEqual(rows[0], "album")
        self.assertTrue(rows[1].startswith(">  1 00 song"))
        self.assertTrue(rows[2].startswith("   2 01 song"))
        self.assertIn("[playing] 1/3", rows[-1])

    def test_notice_replaces_status(self) -> None:
        view, _backend = _view(3)
        rows = [ANSI_ESCAPE_RE.sub("", row) for row in view.rows(8, 60, notice="Cannot play")]
        self.assertEqual(rows[-1], "Cannot play")

    def test_current_track_scrolls_into_view(self) -> None:
        view, _backend = _view(20)
        view.session.play_index(15)
        rows = [ANSI_ESCAPE_RE.sub("", row) for row in view.rows(6, 60)]
        self.assertTrue(any(row.startswith("> 16") for row in rows))


if __name__ == "__main__":
    unittest.main()
