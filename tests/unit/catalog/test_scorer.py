"""Fuzzy scorer weight and matched-position tests."""

from __future__ import annotations

import unittest

from lazytap.catalog.scorer import FUZZY_CEILING, fuzzy_indices, fuzzy_score, substring_index


class SubstringIndexTests(unittest.TestCase):
    def test_case_insensitive(self) -> None:
        self.assertEqual(substring_index("BEA", "the beatles"), 4)

    def test_missing(self) -> None:
        self.assertIsNone(substring_index("xyz", "the beatles"))


class FuzzyIndicesTests(unittest.TestCase):
    def test_empty_query_matches_everything_with_unit_weight(self) -> None:
        self.assertEqual(fuzzy_indices("anything", ""), (1, []))

    def test_substring_positions(self) -> None:
        weight, indices = fuzzy_indices("Abbey Road/", "road")
        self.assertGreater(weight, 0)
        self.assertEqual(indices, [6, 7, 8, 9])

    def test_subsequence_positions_are_ascending(self) -> None:
        weight, indices = fuzzy_indices("dark side of the moon/", "dsm")
        self.assertGreater(weight, 0)
        self.assertEqual(indices, sorted(indices))
        self.assertEqual([("dark side of the moon/")[idx] for idx in indices], ["d", "s", "m"])

    def test_non_match_returns_none(self) -> None:
        self.assertIsNone(fuzzy_indices("abbey road/", "zq"))

    def test_substring_outranks_scattered_match(self) -> None:
        substring, _ = fuzzy_indices("kind of blue/", "blue")
        scattered, _ = fuzzy_indices("b-l-u-e sessions/", "blue")
        self.assertGreater(substring, scattered)

    def test_earlier_substring_ranks_higher(self) -> None:
        early, _ = fuzzy_indices("alpha/", "al")
        late, _ = fuzzy_indices("royal/", "al")
        self.assertGreater(early, late)

    def test_late_substring_in_long_label_still_outranks_fuzzy(self) -> None:
        label = "x" * 300 + "blue/"
        substring, indices = fuzzy_indices(label, "blue")
        self.assertEqual(indices, [300, 301, 302, 303])
        self.assertGreater(substring, FUZZY_CEILING)
        best_fuzzy, _ = fuzzy_indices("b l u e/", "blue")
        self.assertLessEqual(best_fuzzy, FUZZY_CEILING)
        self.assertGreater(substring, best_fuzzy)

    def test_deterministic(self) -> None:
        self.assertEqual(fuzzy_indices("Revolver/", "rvl"), fuzzy_indices("Revolver/", "rvl"))

    def test_weight_is_always_positive_for_matches(self) -> None:
        weight, _ = fuzzy_indices("a" + "x" * 500 + "b", "ab")
        self.assertGreaterEqual(weight, 1)


class FuzzyScoreTests(unittest.TestCase):
    def test_boundary_hits_score_higher(self) -> None:
        boundary, _ = fuzzy_score("sm", "some_music")
        inner, _ = fuzzy_score("sm", "xsxxmxxxxx")
        self.assertGreater(boundary, inner)


if __name__ == "__main__":
    unittest.main()
