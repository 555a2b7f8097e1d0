"""Tests for jump-list position arithmetic.

Covers absolute/relative position translation for untraversed and traversed
lists, and translating displayed counts back into real traversal counts.
"""

from __future__ import annotations

import unittest

from vessel.host.protocol import BACK, FORWARD
from vessel.jumplist.jump import (
    Jump,
    absolute_position,
    current_marker,
    real_count,
    relative_offset,
)


def _line_map(rels: list[int], current_line: int | None) -> dict[int, Jump]:
    return {
        lnum: Jump(current=lnum == current_line, pos=lnum, rel=rel, bufnr=1, lnum=lnum)
        for lnum, rel in enumerate(rels, start=1)
    }


class PositionTranslationTests(unittest.TestCase):
    def test_absolute_position_counts_from_most_recent_end(self) -> None:
        self.assertEqual([absolute_position(i, 3) for i in (1, 2, 3)], [3, 2, 1])

    def test_current_marker_is_one_when_list_was_not_traversed(self) -> None:
        self.assertEqual(current_marker(3, 3), 1)
        self.assertEqual(current_marker(0, 0), 1)

    def test_current_marker_follows_traversal_index(self) -> None:
        self.assertEqual(current_marker(5, 2), 3)
        self.assertEqual(current_marker(5, 0), 5)

    def test_relative_offset_is_negated_position_when_untraversed(self) -> None:
        self.assertEqual([relative_offset(pos, 3, 3) for pos in (1, 2, 3)], [-1, -2, -3])

    def test_relative_offset_is_distance_from_current_when_traversed(self) -> None:
        # raw index 3 of 5 is current (pos 3)
        self.assertEqual([relative_offset(pos, 5, 2) for pos in (1, 2, 3, 4, 5)], [2, 1, 0, -1, -2])


class RealCountTests(unittest.TestCase):
    def test_back_moves_down_the_list_and_returns_target_distance(self) -> None:
        line_map = _line_map([-1, -3, -7], current_line=1)

        result = real_count(line_map, 1, BACK, 3)
        self.assertTrue(result.ok)
        self.assertEqual(result.count, 3)

        self.assertEqual(real_count(line_map, 2, BACK, 3).count, 7)

    def test_forward_moves_up_the_list(self) -> None:
        line_map = _line_map([2, 1, 0, -1, -2], current_line=3)

        self.assertEqual(real_count(line_map, 2, FORWARD, 5).count, 2)
        self.assertEqual(real_count(line_map, 1, BACK, 5).count, 1)

    def test_out_of_bound_target_is_reported_as_failure(self) -> None:
        line_map = _line_map([-1, -2, -3], current_line=1)

        forward = real_count(line_map, 1, FORWARD, 3)
        self.assertFalse(forward.ok)
        self.assertEqual(forward.error, "invalid count (out of bound): 1")

        back = real_count(line_map, 3, BACK, 3)
        self.assertFalse(back.ok)
        self.assertEqual(back.error, "invalid count (out of bound): 3")

    def test_missing_current_line_counts_from_top(self) -> None:
        line_map = _line_map([-2, -3], current_line=None)

        self.assertEqual(real_count(line_map, 1, BACK, 2).count, 2)
        self.assertFalse(real_count(line_map, 1, FORWARD, 2).ok)

    def test_empty_map_is_always_out_of_bound(self) -> None:
        self.assertFalse(real_count({}, 1, BACK, 1).ok)

    def test_every_displayed_line_round_trips_from_current_line(self) -> None:
        rels = [3, 1, 0, -2, -5]
        line_map = _line_map(rels, current_line=3)

        for lnum, jump in line_map.items():
            if jump.current:
                continue
            direction = BACK if lnum > 3 else FORWARD
            result = real_count(line_map, abs(lnum - 3), direction, len(rels))
            self.assertTrue(result.ok)
            self.assertEqual(result.count, abs(jump.rel))


if __name__ == "__main__":
    unittest.main()
