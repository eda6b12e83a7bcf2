"""Grapheme and display-width helpers for terminal text.

Query editing works on UTF-8 byte offsets that always sit on grapheme-cluster
boundaries. Rendering measures clusters in terminal cells and clips styled
lines without cutting escape sequences.
"""

from __future__ import annotations

import re

import regex
from wcwidth import wcswidth

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
GRAPHEME_RE = regex.compile(r"\X")


def graphemes(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters."""
    return GRAPHEME_RE.findall(text)


def utf8_len(text: str) -> int:
    return len(text.encode("utf-8"))


def byte_to_char_offset(text: str, byte_offset: int) -> int:
    """Convert a UTF-8 byte offset into a ``str`` index."""
    return len(text.encode("utf-8")[:byte_offset].decode("utf-8", errors="ignore"))


def grapheme_before(text: str, byte_offset: int) -> str:
    """Return the cluster ending at ``byte_offset`` (empty at start of text)."""
    head = text[: byte_to_char_offset(text, byte_offset)]
    clusters = graphemes(head)
    return clusters[-1] if clusters else ""


def grapheme_after(text: str, byte_offset: int) -> str:
    """Return the cluster starting at ``byte_offset`` (empty at end of text)."""
    tail = text[byte_to_char_offset(text, byte_offset):]
    match = GRAPHEME_RE.match(tail)
    return match.group(0) if match else ""


def cluster_width(cluster: str) -> int:
    """Terminal cells occupied by one grapheme cluster; control text counts as 1."""
    width = wcswidth(cluster)
    return width if width >= 0 else 1


def display_width(text: str) -> int:
    return sum(cluster_width(cluster) for cluster in graphemes(ANSI_ESCAPE_RE.sub("", text)))


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Trim a styled line to at most ``max_cols`` display columns.

    ANSI escape sequences are preserved verbatim and do not count toward width.
    A wide cluster that would straddle the edge is dropped entirely.
    """
    if max_cols <= 0 or not text:
        return ""

    out: list[str] = []
    col = 0
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        col = _append_clusters(out, text[pos : match.start()], col, max_cols)
        if col >= max_cols:
            return "".join(out)
        out.append(match.group(0))
        pos = match.end()
    _append_clusters(out, text[pos:], col, max_cols)
    return "".join(out)


def _append_clusters(out: list[str], plain: str, col: int, max_cols: int) -> int:
    for cluster in graphemes(plain):
        width = cluster_width(cluster)
        if col + width > max_cols:
            return max_cols
        out.append(cluster)
        col += width
    return col
