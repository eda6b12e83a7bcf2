"""Raw byte to key-token decoding tests driven through an OS pipe."""

from __future__ import annotations

import os
import unittest

from lazytap import input as key_input


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        key_input._PENDING_BYTES.clear()
        self.read_fd, self.write_fd = os.pipe()

    def tearDown(self) -> None:
        key_input._PENDING_BYTES.clear()
        os.close(self.read_fd)
        os.close(self.write_fd)

    def _keys(self, data: bytes, count: int) -> list[str]:
        os.write(self.write_fd, data)
        return [key_input.read_key(self.read_fd, timeout_ms=50) for _ in range(count)]

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(key_input.read_key(self.read_fd, timeout_ms=1), "")

    def test_control_keys(self) -> None:
        data = b"\x03\x08\t\x0c\x0f\x10\x15\x1a\x7f\r"
        self.assertEqual(
            self._keys(data, 10),
            ["CTRL_C", "CTRL_H", "TAB", "CTRL_L", "CTRL_O", "CTRL_P", "CTRL_U", "CTRL_Z", "BACKSPACE", "ENTER"],
        )

    def test_arrow_and_editing_sequences(self) -> None:
        data = b"\x1b[A\x1b[B\x1b[C\x1b[D\x1b[H\x1b[F\x1b[3~\x1b[5~\x1b[6~\x1bOA"
        self.assertEqual(
            self._keys(data, 10),
            ["UP", "DOWN", "RIGHT", "LEFT", "HOME", "END", "DELETE", "PAGE_UP", "PAGE_DOWN", "UP"],
        )

    def test_multibyte_utf8_character(self) -> None:
        self.assertEqual(self._keys("é€".encode("utf-8"), 2), ["é", "€"])

    def test_lone_escape(self) -> None:
        self.assertEqual(self._keys(b"\x1b", 1), ["ESC"])

    def test_double_escape_is_two_escapes(self) -> None:
        self.assertEqual(self._keys(b"\x1b\x1b", 2), ["ESC", "ESC"])

    def test_alt_letter_is_swallowed(self) -> None:
        self.assertEqual(self._keys(b"\x1bqz", 2), [key_input.UNKNOWN_KEY, "z"])

    def test_unrecognised_sequences_are_not_escape(self) -> None:
        sequences = {
            "F5": b"\x1b[15~",
            "INSERT": b"\x1b[2~",
            "SHIFT_TAB": b"\x1b[Z",
            "CTRL_UP": b"\x1b[1;5A",
            "F1": b"\x1bOP",
        }
        for name, data in sequences.items():
            with self.subTest(name=name):
                self.assertEqual(self._keys(data + b"x", 2), [key_input.UNKNOWN_KEY, "x"])

    def test_sgr_mouse_events(self) -> None:
        data = b"\x1b[<0;5;7M\x1b[<0;5;7m\x1b[<2;1;2M\x1b[<64;3;4M\x1b[<65;3;4M\x1b[<32;1;1M"
        self.assertEqual(
            self._keys(data, 6),
            [
                "MOUSE_LEFT_DOWN:5:7",
                "MOUSE_LEFT_UP:5:7",
                "MOUSE_RIGHT_DOWN:1:2",
                "MOUSE_WHEEL_UP:3:4",
                "MOUSE_WHEEL_DOWN:3:4",
                "MOUSE",
            ],
        )


if __name__ == "__main__":
    unittest.main()
