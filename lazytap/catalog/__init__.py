"""Directory catalog, filesystem scanning, and fuzzy scoring."""

from __future__ import annotations

from .items import CandidateItem, build_items
from .scan import (
    AUDIO_EXTENSIONS,
    clear_directory_cache,
    count_directories,
    directory_at,
    has_child_dirs,
)
from .scorer import fuzzy_indices

__all__ = [
    "AUDIO_EXTENSIONS",
    "CandidateItem",
    "build_items",
    "clear_directory_cache",
    "count_directories",
    "directory_at",
    "fuzzy_indices",
    "has_child_dirs",
]
