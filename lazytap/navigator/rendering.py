"""Compose navigator frames as ANSI rows.

The list is drawn bottom-up: the last row holds the query, the row above it
the match count, and items climb from there starting at ``offset``.
"""

from __future__ import annotations

from ..ansi import byte_to_char_offset, clip_ansi_line, display_width, grapheme_after
from ..catalog.items import CandidateItem
from ..ui_theme import UITheme
from .navigator import ListNavigator


def _item_row(item: CandidateItem, selected: bool, theme: UITheme) -> str:
    base = theme.item_selected if selected else theme.item
    hit = theme.match_selected if selected else theme.match
    marker = f"{theme.marker}>{theme.reset} " if selected else "  "
    matched = set(item.matched_indices)
    out = [marker, base]
    for idx, ch in enumerate(item.display):
        if idx in matched:
            out.append(f"{theme.reset}{hit}{ch}{theme.reset}{base}")
        else:
            out.append(ch)
    out.append(theme.reset)
    return "".join(out)


def _pad_right(text: str, width: int) -> str:
    return text + " " * max(0, width - display_width(text))


def _query_row(navigator: ListNavigator, theme: UITheme, width: int) -> str:
    s = navigator.state
    cut = byte_to_char_offset(s.query, s.cursor)
    if cut < len(s.query):
        cell = grapheme_after(s.query, s.cursor)
        after = s.query[cut + len(cell) :]
    else:
        cell, after = "_", ""
    row = (
        f"{theme.prompt}>{theme.reset} {theme.query}{s.query[:cut]}{theme.reset}"
        f"{theme.reverse}{cell}{theme.reset}{theme.query}{after}{theme.reset}"
    )
    return clip_ansi_line(row, width)


def _separator_row(navigator: ListNavigator, theme: UITheme, width: int, notice: str) -> str:
    if notice:
        label = f"{theme.notice}{notice}{theme.reset} "
    else:
        label = f"{theme.count}{navigator.state.matches}/{len(navigator.items)}{theme.reset} "
    fill = max(0, width - 2 - display_width(label))
    return clip_ansi_line(f"  {label}{theme.separator}{'─' * fill}{theme.reset}", width)


def navigator_rows(navigator: ListNavigator, theme: UITheme, notice: str = "") -> list[str]:
    """Return exactly ``rows`` composed lines for the navigator's viewport."""
    s = navigator.state
    height, width = s.rows, s.columns
    rows = [""] * max(0, height)
    if height > 3:
        start_row = height - 3
        visible = min(s.matches - s.offset, height - 2)
        for y in range(max(0, visible)):
            index = s.offset + y
            row = start_row - y
            if row < 0 or index >= len(navigator.items):
                break
            rows[row] = clip_ansi_line(_item_row(navigator.items[index], index == s.selected, theme), width)

        page, pages = navigator.page_indicator()
        indicator = f" {page}/{pages}"
        room = max(0, width - len(indicator) - 1)
        top = _pad_right(clip_ansi_line(rows[0], room), room)
        rows[0] = f"{top}{theme.count}{indicator}{theme.reset}"

    if height > 1:
        rows[height - 2] = _separator_row(navigator, theme, width, notice)
        rows[height - 1] = _query_row(navigator, theme, width)
    elif height == 1:
        rows[0] = _query_row(navigator, theme, width)
    return rows
