import unittest

from barnframe.core.placement import HIGH_IMPACT, IMPACT_BANDS, validate_opening_placement
from barnframe.core.protection import compute_protection, covered_length, protect_wall
from barnframe.models import Alignment, BuildingDimensions, Opening, OpeningKind, WallPosition


def make(id, kind, wall, width, height, y_offset=0.0, alignment=Alignment.CENTER, x_offset=0.0):
    return Opening(
        id=id, kind=kind, wall=wall, alignment=alignment,
        x_offset=x_offset, y_offset=y_offset, width=width, height=height,
    )


class WallProtectionTests(unittest.TestCase):
    def setUp(self):
        self.dims = BuildingDimensions(width=30, length=40, height=14)

    def test_segment_is_buffered_and_clamped(self):
        door = make("d1", OpeningKind.DOOR, WallPosition.FRONT, 3, 7,
                    alignment=Alignment.LEFT, x_offset=0.5)
        protection = protect_wall([door], self.dims, WallPosition.FRONT)

        self.assertEqual(len(protection.protected_segments), 1)
        segment = protection.protected_segments[0]
        self.assertEqual(segment.segment_id, "front-lock-d1")
        self.assertEqual(segment.locked_by, ["d1"])
        self.assertAlmostEqual(segment.start, 0.0)
        self.assertAlmostEqual(segment.end, 4.5)
        self.assertFalse(segment.can_modify)
        self.assertAlmostEqual(protection.total_locked_length, 4.5)
        self.assertAlmostEqual(protection.available_length, 25.5)
        self.assertEqual(len(protection.restrictions), 3)

    def test_nearly_full_wall_is_critical(self):
        rollup = make("r1", OpeningKind.ROLLUP_DOOR, WallPosition.FRONT, 27, 12)
        protection = protect_wall([rollup], self.dims, WallPosition.FRONT)

        self.assertAlmostEqual(protection.total_locked_length, 29.0)
        self.assertAlmostEqual(protection.available_length, 1.0)
        self.assertTrue(protection.restrictions[-1].startswith("CRITICAL: Only 1.0ft"))

    def test_overlapping_locks_count_once(self):
        dims = BuildingDimensions(width=10, length=40, height=14)
        openings = [
            make("w1", OpeningKind.WINDOW, WallPosition.FRONT, 3, 4, y_offset=3,
                 alignment=Alignment.LEFT, x_offset=2),
            make("w2", OpeningKind.WINDOW, WallPosition.FRONT, 3, 4, y_offset=3,
                 alignment=Alignment.LEFT, x_offset=2.5),
        ]
        protection = protect_wall(openings, dims, WallPosition.FRONT)

        spans = [(s.start, s.end) for s in protection.protected_segments]
        self.assertEqual(spans, [(1.0, 6.0), (1.5, 6.5)])
        self.assertAlmostEqual(protection.total_locked_length, 5.5)
        self.assertAlmostEqual(protection.available_length, 4.5)
        self.assertFalse(any(r.startswith("CRITICAL") for r in protection.restrictions))

    def test_covered_length(self):
        self.assertEqual(covered_length([]), 0.0)
        self.assertAlmostEqual(covered_length([(5, 7), (0, 2), (1, 3)]), 5.0)
        self.assertAlmostEqual(covered_length([(0, 2), (2, 4)]), 4.0)

    def test_every_wall_is_reported(self):
        window = make("w1", OpeningKind.WINDOW, WallPosition.LEFT, 3, 4, y_offset=3)
        walls = compute_protection([window], self.dims)

        self.assertEqual(set(walls), set(WallPosition))
        self.assertEqual(walls[WallPosition.FRONT].protected_segments, [])
        self.assertEqual(walls[WallPosition.FRONT].restrictions, [])
        self.assertAlmostEqual(walls[WallPosition.FRONT].available_length, 30.0)
        self.assertAlmostEqual(walls[WallPosition.LEFT].total_locked_length, 5.0)
        self.assertAlmostEqual(walls[WallPosition.LEFT].available_length, 35.0)

    def test_protection_is_recomputed_per_call(self):
        window = make("w1", OpeningKind.WINDOW, WallPosition.LEFT, 3, 4, y_offset=3)
        first = compute_protection([window], self.dims)
        self.assertEqual(compute_protection([], self.dims)[WallPosition.LEFT].protected_segments, [])
        self.assertEqual(compute_protection([window], self.dims), first)


class PlacementTests(unittest.TestCase):
    def test_small_window_is_valid(self):
        window = make("w1", OpeningKind.WINDOW, WallPosition.FRONT, 3, 4, y_offset=3)
        check = validate_opening_placement(window, 40, 14)
        self.assertTrue(check.valid)
        self.assertEqual(check.errors, [])
        self.assertEqual(check.structural_impact, IMPACT_BANDS[0][1])

    def test_opening_past_right_edge(self):
        window = make("w1", OpeningKind.WINDOW, WallPosition.FRONT, 3, 4, y_offset=3,
                      alignment=Alignment.RIGHT, x_offset=-1)
        check = validate_opening_placement(window, 40, 14)
        self.assertFalse(check.valid)
        self.assertEqual(check.errors, ["Opening extends beyond right edge of wall"])

    def test_opening_above_wall_top(self):
        window = make("w1", OpeningKind.WINDOW, WallPosition.FRONT, 3, 4, y_offset=12)
        check = validate_opening_placement(window, 40, 14)
        self.assertIn("Opening extends above wall top", check.errors)

    def test_moderate_impact_band(self):
        # 84 / 560 = 0.15
        door = make("r1", OpeningKind.ROLLUP_DOOR, WallPosition.FRONT, 12, 7)
        check = validate_opening_placement(door, 40, 14)
        self.assertTrue(check.valid)
        self.assertEqual(check.structural_impact, IMPACT_BANDS[1][1])

    def test_large_opening_is_high_impact(self):
        door = make("r1", OpeningKind.ROLLUP_DOOR, WallPosition.FRONT, 20, 14)
        check = validate_opening_placement(door, 40, 14)
        self.assertAlmostEqual(check.impact_ratio, 0.5)
        self.assertEqual(check.structural_impact, HIGH_IMPACT)
        self.assertFalse(check.valid)
        self.assertEqual(check.errors, ["Opening may compromise structural integrity"])


if __name__ == "__main__":
    unittest.main()
