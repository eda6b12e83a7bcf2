"""Case-insensitive fuzzy scorer returning weights and matched positions.

Substring hits always outrank scattered subsequence hits. Every match has a
weight of at least 1 so that weight 0 can mean "filtered out".
"""

from __future__ import annotations

SUBSTRING_BASE = 10_000
FUZZY_CEILING = 5_000
FUZZY_BASE = 100
BOUNDARY_CHARS = "/_- ."


def _fold(ch: str) -> str:
    return ch.casefold()


def substring_index(query: str, label: str) -> int | None:
    if not query:
        return 0
    folded_label = [_fold(ch) for ch in label]
    folded_query = [_fold(ch) for ch in query]
    width = len(folded_query)
    for start in range(len(folded_label) - width + 1):
        if folded_label[start : start + width] == folded_query:
            return start
    return None


def fuzzy_score(query: str, label: str) -> tuple[int, list[int]] | None:
    """Score ``query`` as an in-order subsequence of ``label``.

    Consecutive runs and word-boundary hits add to the score, gaps and long
    labels subtract from it. Returns ``(score, indices)`` or ``None``.
    """
    folded_label = [_fold(ch) for ch in label]
    score = 0
    prev_idx = -1
    run = 0
    indices: list[int] = []
    for needle in (_fold(ch) for ch in query):
        idx = prev_idx + 1
        while idx < len(folded_label) and folded_label[idx] != needle:
            idx += 1
        if idx >= len(folded_label):
            return None
        if idx == prev_idx + 1:
            run += 1
            score += 20 + min(16, run * 4)
        else:
            gap = idx - prev_idx - 1
            run = 0
            score -= min(40, gap * 2)
        if idx == 0 or label[idx - 1] in BOUNDARY_CHARS:
            score += 35
        indices.append(idx)
        prev_idx = idx

    score -= len(label) // 5
    return score, indices


def fuzzy_indices(label: str, query: str) -> tuple[int, list[int]] | None:
    """Return ``(weight, indices)`` for ``label`` against ``query``, or ``None``.

    Deterministic for a fixed pair. ``indices`` are ascending character
    offsets into ``label``.
    """
    if not query:
        return 1, []

    start = substring_index(query, label)
    if start is not None:
        weight = SUBSTRING_BASE - (start * 50) - len(label)
        return max(FUZZY_CEILING + 1, weight), list(range(start, start + len(query)))

    scored = fuzzy_score(query, label)
    if scored is None:
        return None
    score, indices = scored
    return max(1, min(FUZZY_CEILING, score + FUZZY_BASE)), indices
