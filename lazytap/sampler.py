"""Bounded random selection of a new leaf to play.

The directory count is estimated once per top-level session. Each attempt
draws an index, resolves it to a path, and tries to build a session from it.
"""

from __future__ import annotations

import random
from collections.abc import Callable
from pathlib import Path

from .errors import SessionBuildError
from .logging_config import get_logger

MAX_ATTEMPTS = 10

logger = get_logger("sampler")


class RandomRetrySampler:
    """Draw random leaves, rejecting the current one and failed builds."""

    def __init__(
        self,
        directory_count: int,
        resolve: Callable[[int], Path],
        build: Callable[[Path], object],
        rng: random.Random | None = None,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        self.directory_count = directory_count
        self.resolve = resolve
        self.build = build
        self.rng = rng or random.Random()
        self.max_attempts = max_attempts
        self.attempts = 0

    def sample(self, current: Path | None) -> tuple[Path, object] | None:
        """Return ``(path, built)`` for the first acceptable draw, else ``None``.

        A draw equal to ``current`` is rejected without building. A build that
        raises ``SessionBuildError`` is rejected too.
        """
        self.attempts = 0
        if self.directory_count <= 0:
            return None
        while self.attempts < self.max_attempts:
            candidate = self.resolve(self.rng.randrange(self.directory_count))
            if current is not None and candidate == current:
                self.attempts += 1
                logger.debug("random draw %s is already playing", candidate)
                continue
            try:
                built = self.build(candidate)
            except SessionBuildError as exc:
                self.attempts += 1
                logger.debug("random draw rejected: %s", exc)
                continue
            logger.info("random selection %s after %d rejections", candidate, self.attempts)
            return candidate, built
        logger.info("random selection gave up after %d attempts", self.attempts)
        return None
