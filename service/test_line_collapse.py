"""Tests for the single-line collapse."""

import unittest

import numpy as np

from line_collapse import TileOverflowError, collapse


class CollapseTests(unittest.TestCase):
    """Covers line_collapse.collapse on fixed four-cell lines."""

    def assertCollapses(self, line, expected) -> None:
        arr = np.array(line, dtype=np.int64)
        changed = collapse(arr)
        self.assertEqual(arr.tolist(), expected)
        self.assertEqual(changed, line != expected)

    def test_single_tile_slides_to_edge(self) -> None:
        self.assertCollapses([0, 0, 2, 0], [2, 0, 0, 0])

    def test_gap_between_equal_tiles_still_merges(self) -> None:
        self.assertCollapses([2, 0, 2, 0], [4, 0, 0, 0])

    def test_packed_line_without_pairs_is_a_no_op(self) -> None:
        self.assertCollapses([2, 4, 2, 4], [2, 4, 2, 4])

    def test_each_tile_merges_once(self) -> None:
        self.assertCollapses([2, 2, 2, 2], [4, 4, 0, 0])

    def test_merge_in_middle(self) -> None:
        self.assertCollapses([2, 4, 4, 2], [2, 8, 2, 0])

    def test_move_without_merge(self) -> None:
        self.assertCollapses([2, 0, 4, 2], [2, 4, 2, 0])

    def test_leading_pair_of_three_merges_first(self) -> None:
        self.assertCollapses([0, 2, 2, 2], [4, 2, 0, 0])

    def test_merged_tile_does_not_merge_again(self) -> None:
        self.assertCollapses([2, 2, 4, 0], [4, 4, 0, 0])

    def test_empty_line(self) -> None:
        self.assertCollapses([0, 0, 0, 0], [0, 0, 0, 0])

    def test_plain_list_is_updated_in_place(self) -> None:
        line = [0, 4, 0, 4]
        self.assertTrue(collapse(line))
        self.assertEqual(line, [8, 0, 0, 0])

    def test_writes_through_a_reversed_view(self) -> None:
        row = np.array([4, 0, 2, 2], dtype=np.int64)
        self.assertTrue(collapse(row[::-1]))
        self.assertEqual(row.tolist(), [0, 0, 4, 4])

    def test_slide_preserves_sum_and_merge_preserves_sum(self) -> None:
        for line in ([0, 2, 0, 8], [2, 2, 4, 8], [16, 16, 16, 0], [0, 0, 0, 2]):
            arr = np.array(line, dtype=np.int64)
            collapse(arr)
            self.assertEqual(int(arr.sum()), sum(line), line)

    def test_merges_replace_pairs_with_double(self) -> None:
        arr = np.array([8, 8, 2, 2], dtype=np.int64)
        collapse(arr)
        self.assertEqual(sorted(v for v in arr.tolist() if v), [4, 16])

    def test_merge_past_integer_ceiling_raises(self) -> None:
        big = 2 ** 62
        arr = np.array([big, big, 0, 0], dtype=np.int64)
        with self.assertRaises(TileOverflowError):
            collapse(arr)
        self.assertEqual(arr.tolist(), [big, big, 0, 0])

    def test_python_ints_have_no_ceiling(self) -> None:
        line = [2 ** 70, 2 ** 70]
        self.assertTrue(collapse(line))
        self.assertEqual(line, [2 ** 71, 0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
