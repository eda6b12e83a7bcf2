"""Two-slot activation history and bounded random sampler tests."""

from __future__ import annotations

import random
import unittest
from pathlib import Path

from lazytap.errors import InvariantViolation, SessionBuildError
from lazytap.history import HISTORY_CAPACITY, NavigationHistory
from lazytap.sampler import MAX_ATTEMPTS, RandomRetrySampler


class NavigationHistoryTests(unittest.TestCase):
    def test_first_push_seeds_both_slots(self) -> None:
        history = NavigationHistory()
        history.push(Path("/a"))
        self.assertEqual(history.paths, [Path("/a"), Path("/a")])
        self.assertEqual(history.previous(), Path("/a"))
        self.assertEqual(history.current, Path("/a"))

    def test_push_evicts_oldest_entry(self) -> None:
        history = NavigationHistory()
        for name in ("/a", "/b", "/c"):
            history.push(Path(name))
        self.assertEqual(len(history.paths), HISTORY_CAPACITY)
        self.assertEqual(history.previous(), Path("/b"))
        self.assertEqual(history.current, Path("/c"))

    def test_previous_before_activation_is_invariant_violation(self) -> None:
        history = NavigationHistory()
        self.assertFalse(history.has_activation)
        self.assertIsNone(history.current)
        with self.assertRaises(InvariantViolation):
            history.previous()

    def test_size_stays_bounded(self) -> None:
        history = NavigationHistory()
        for idx in range(50):
            history.push(Path(f"/{idx}"))
            self.assertGreaterEqual(len(history.paths), 1)
            self.assertLessEqual(len(history.paths), HISTORY_CAPACITY)


class RandomRetrySamplerTests(unittest.TestCase):
    def test_returns_first_acceptable_build(self) -> None:
        sampler = RandomRetrySampler(
            3,
            lambda index: Path(f"/d{index}"),
            lambda path: f"session:{path.name}",
            rng=random.Random(1),
        )
        result = sampler.sample(None)
        self.assertIsNotNone(result)
        path, built = result
        self.assertEqual(built, f"session:{path.name}")
        self.assertEqual(sampler.attempts, 0)

    def test_single_directory_equal_to_current_gives_up(self) -> None:
        builds: list[Path] = []
        sampler = RandomRetrySampler(
            1,
            lambda index: Path("/only"),
            lambda path: builds.append(path),
            rng=random.Random(0),
        )
        self.assertIsNone(sampler.sample(Path("/only")))
        self.assertEqual(sampler.attempts, MAX_ATTEMPTS)
        self.assertEqual(builds, [])

    def test_build_failures_count_as_rejections(self) -> None:
        draws = iter([Path("/d0"), Path("/d1"), Path("/current"), Path("/d2"), Path("/d3")])
        built: list[Path] = []

        def build(path: Path) -> str:
            built.append(path)
            if path.name != "d2":
                raise SessionBuildError(path, "no audio files")
            return "ok"

        sampler = RandomRetrySampler(4, lambda index: next(draws), build, rng=random.Random(4))
        result = sampler.sample(Path("/current"))
        self.assertEqual(result, (Path("/d2"), "ok"))
        self.assertEqual(sampler.attempts, 3)
        self.assertEqual(built, [Path("/d0"), Path("/d1"), Path("/d2")])

    def test_never_more_than_max_attempts(self) -> None:
        def build(path: Path) -> str:
            raise SessionBuildError(path, "no audio files")

        sampler = RandomRetrySampler(5, lambda index: Path(f"/d{index}"), build, rng=random.Random(9))
        self.assertIsNone(sampler.sample(Path("/d0")))
        self.assertEqual(sampler.attempts, MAX_ATTEMPTS)

    def test_empty_tree_returns_none(self) -> None:
        sampler = RandomRetrySampler(0, lambda index: Path("/"), lambda path: "x")
        self.assertIsNone(sampler.sample(None))
        self.assertEqual(sampler.attempts, 0)


if __name__ == "__main__":
    unittest.main()
