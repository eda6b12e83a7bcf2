"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the navigator and player views.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    prompt: str
    query: str
    item: str
    item_selected: str
    match: str
    match_selected: str
    marker: str
    separator: str
    count: str
    notice: str
    player_title: str
    player_track: str
    player_current: str
    player_status: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    reverse="\033[7m",
    prompt="\033[38;5;44m",
    query="\033[1;38;5;81m",
    item="\033[38;5;252m",
    item_selected="\033[1;38;5;229m",
    match="\033[1;38;5;81m",
    match_selected="\033[1;38;5;214m",
    marker="\033[38;5;214m",
    separator="\033[2;38;5;250m",
    count="\033[38;5;109m",
    notice="\033[1;38;5;203m",
    player_title="\033[1;38;5;81m",
    player_track="\033[38;5;252m",
    player_current="\033[1;38;5;229m",
    player_status="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    reverse="\033[7m",
    prompt="\033[38;5;39m",
    query="\033[1;38;5;45m",
    item="\033[38;5;153m",
    item_selected="\033[1;38;5;231m",
    match="\033[1;38;5;45m",
    match_selected="\033[1;38;5;215m",
    marker="\033[38;5;39m",
    separator="\033[2;38;5;31m",
    count="\033[38;5;73m",
    notice="\033[1;38;5;209m",
    player_title="\033[1;38;5;45m",
    player_track="\033[38;5;153m",
    player_current="\033[1;38;5;231m",
    player_status="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="\033[0m",
    reverse="\033[7m",
    prompt="",
    query="",
    item="",
    item_selected="",
    match="",
    match_selected="",
    marker="",
    separator="",
    count="",
    notice="",
    player_title="",
    player_track="",
    player_current="",
    player_status="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
