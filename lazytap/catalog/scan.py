"""Filesystem scanning helpers shared by the catalog, player, and sampler.

Hidden entries are skipped everywhere. Directory walks used by the random
sampler are cached per root for the lifetime of the process.
"""

from __future__ import annotations

import os
from pathlib import Path

AUDIO_EXTENSIONS = frozenset({".aac", ".flac", ".m4a", ".mp3", ".ogg", ".opus", ".wav"})

_DIRECTORY_CACHE: dict[Path, list[Path]] = {}


def clear_directory_cache() -> None:
    _DIRECTORY_CACHE.clear()


def is_hidden(name: str) -> bool:
    return name.startswith(".")


def is_audio_file(path: Path) -> bool:
    return path.suffix.lower() in AUDIO_EXTENSIONS and path.is_file()


def scan_directory(directory: Path) -> tuple[list[Path], list[Path]]:
    """Return visible ``(child_dirs, audio_files)`` of ``directory``, name-sorted.

    Raises ``OSError`` when the directory cannot be listed.
    """
    child_dirs: list[Path] = []
    audio_files: list[Path] = []
    with os.scandir(directory) as entries:
        for entry in entries:
            if is_hidden(entry.name):
                continue
            try:
                if entry.is_dir():
                    child_dirs.append(Path(entry.path))
                elif entry.is_file() and Path(entry.name).suffix.lower() in AUDIO_EXTENSIONS:
                    audio_files.append(Path(entry.path))
            except OSError:
                continue
    child_dirs.sort(key=lambda p: p.name.casefold())
    audio_files.sort(key=lambda p: p.name.casefold())
    return child_dirs, audio_files


def has_child_dirs(directory: Path) -> bool:
    """Return whether ``directory`` has at least one visible subdirectory."""
    try:
        with os.scandir(directory) as entries:
            for entry in entries:
                if is_hidden(entry.name):
                    continue
                try:
                    if entry.is_dir():
                        return True
                except OSError:
                    continue
    except OSError:
        return False
    return False


def _walk_directories(root: Path) -> list[Path]:
    directories: list[Path] = []
    for dirpath, dirnames, _filenames in os.walk(root):
        dirnames[:] = sorted((name for name in dirnames if not is_hidden(name)), key=str.lower)
        base = Path(dirpath)
        directories.extend(base / name for name in dirnames)
    return directories


def collect_directories(root: Path) -> list[Path]:
    """Return every visible directory below ``root`` in walk order (cached)."""
    root = root.resolve()
    cached = _DIRECTORY_CACHE.get(root)
    if cached is None:
        cached = _walk_directories(root)
        _DIRECTORY_CACHE[root] = cached
    return list(cached)


def count_directories(root: Path) -> int:
    return len(collect_directories(root))


def directory_at(root: Path, index: int) -> Path:
    """Resolve a sampler index into a directory path below ``root``."""
    directories = collect_directories(root)
    if not directories:
        return root.resolve()
    return directories[index % len(directories)]
