"""Candidate items and the directory catalog that produces them."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..errors import CatalogError
from ..logging_config import get_logger
from .scan import scan_directory

logger = get_logger("catalog")


@dataclass(eq=False)
class CandidateItem:
    """One selectable row of a navigator.

    ``display``, ``path``, ``has_audio`` and ``child_count`` describe the
    filesystem entry. ``weight`` and ``matched_indices`` belong to the
    navigator and are rewritten on every query change.
    """

    display: str
    path: Path
    has_audio: bool
    child_count: int
    weight: int = 1
    matched_indices: list[int] = field(default_factory=list)

    @property
    def is_leaf(self) -> bool:
        return self.child_count == 0


def _directory_item(directory: Path) -> CandidateItem:
    try:
        child_dirs, audio_files = scan_directory(directory)
    except OSError:
        child_dirs, audio_files = [], []
    return CandidateItem(
        display=f"{directory.name}/",
        path=directory,
        has_audio=bool(audio_files),
        child_count=len(child_dirs),
    )


def build_items(path: Path) -> list[CandidateItem]:
    """List ``path`` as candidate items: directories first, then audio files.

    Raises ``CatalogError`` when ``path`` cannot be read.
    """
    directory = path.resolve()
    try:
        child_dirs, audio_files = scan_directory(directory)
    except OSError as exc:
        logger.warning("catalog build failed for %s: %s", directory, exc)
        raise CatalogError(directory, exc.strerror or str(exc)) from exc

    items = [_directory_item(child) for child in child_dirs]
    items.extend(
        CandidateItem(display=audio.name, path=audio, has_audio=True, child_count=0)
        for audio in audio_files
    )
    logger.debug("catalog for %s: %d items", directory, len(items))
    return items
