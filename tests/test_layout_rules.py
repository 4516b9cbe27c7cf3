import unittest
from datetime import datetime, timezone

from barnframe.core.registry import create_default_registry
from barnframe.core.scanner import SpaceLayoutScanner
from barnframe.models import (
    Alignment, BuildingDimensions, ClearanceKind, ConstraintKind, ElementKind,
    GenerationConfig, Opening, OpeningKind, PathType, Severity, WallPosition,
)

STAMP = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make(id, kind, wall, width, height, y_offset=0.0, alignment=Alignment.CENTER, x_offset=0.0):
    return Opening(
        id=id, kind=kind, wall=wall, alignment=alignment,
        x_offset=x_offset, y_offset=y_offset, width=width, height=height,
    )


def barn_openings():
    return [
        make("d1", OpeningKind.DOOR, WallPosition.FRONT, 3, 7),
        make("r1", OpeningKind.ROLLUP_DOOR, WallPosition.BACK, 12, 10),
        make("w1", OpeningKind.WINDOW, WallPosition.LEFT, 3, 4, y_offset=3,
             alignment=Alignment.LEFT, x_offset=5),
        make("w2", OpeningKind.WINDOW, WallPosition.RIGHT, 3, 5, y_offset=1),
    ]


class ScanTests(unittest.TestCase):
    def setUp(self):
        self.dims = BuildingDimensions(width=30, length=40, height=14)
        self.scanner = SpaceLayoutScanner(create_default_registry())
        self.snapshot = self.scanner.scan(barn_openings(), self.dims, computed_at=STAMP)

    def test_clearance_zones(self):
        ids = [z.id for z in self.snapshot.clearance_zones]
        self.assertEqual(ids, [
            "swing-d1", "emergency-d1",
            "emergency-r1",
            "operation-w1",
            "operation-w2", "emergency-w2",
        ])
        self.assertTrue(all(z.is_protected for z in self.snapshot.clearance_zones))

        swing, egress = self.snapshot.clearance_zones[:2]
        self.assertEqual(swing.kind, ClearanceKind.DOOR_SWING)
        self.assertAlmostEqual(swing.bounds.left, 12.0)
        self.assertAlmostEqual(swing.bounds.right, 18.0)
        self.assertAlmostEqual(swing.bounds.front, 3.0)
        self.assertEqual(egress.kind, ClearanceKind.EMERGENCY_EGRESS)
        self.assertAlmostEqual(egress.bounds.left, 11.0)
        self.assertAlmostEqual(egress.bounds.right, 19.0)
        self.assertAlmostEqual(egress.bounds.front, 4.0)

    def test_access_path_between_entries(self):
        paths = self.snapshot.access_paths
        self.assertEqual(len(paths), 1)
        path = paths[0]
        self.assertEqual(path.id, "path-d1-r1")
        self.assertEqual(path.path_type, PathType.EMERGENCY)
        self.assertAlmostEqual(path.minimum_width, 12.0)
        self.assertAlmostEqual(path.current_width, 26.0)
        self.assertFalse(path.is_blocked)

    def test_ventilation_areas(self):
        areas = self.snapshot.ventilation_areas
        self.assertEqual([a.window_id for a in areas], ["w1", "w2"])
        self.assertAlmostEqual(areas[0].ventilation_capacity, 600.0)
        self.assertAlmostEqual(areas[0].airflow_zone.front, 6.0)
        self.assertFalse(any(a.is_obstructed for a in areas))

    def test_structural_elements(self):
        elements = self.snapshot.structural_elements
        headers = [e for e in elements if e.kind == ElementKind.HEADER]
        columns = [e for e in elements if e.kind == ElementKind.COLUMN]

        self.assertEqual([h.id for h in headers], ["header-r1"])
        header = headers[0]
        self.assertAlmostEqual(header.dimensions.width, 14.0)
        self.assertAlmostEqual(header.dimensions.height, 1.0)
        self.assertAlmostEqual(header.position.x, 13.0)
        self.assertAlmostEqual(header.position.y, 10.5)

        self.assertEqual(len(columns), 4)
        self.assertAlmostEqual(columns[3].position.x, 30.0)
        self.assertAlmostEqual(columns[3].position.y, 40.0)
        self.assertTrue(all(c.dimensions.height == 14 for c in columns))
        self.assertFalse(any(e.can_modify for e in elements))

    def test_layout_constraints(self):
        constraints = self.snapshot.layout_constraints
        by_kind = {}
        for c in constraints:
            by_kind.setdefault(c.kind, []).append(c)

        self.assertEqual(len(by_kind[ConstraintKind.CLEARANCE]), 4)
        self.assertEqual(len(by_kind[ConstraintKind.ACCESS]), 3)
        self.assertEqual(len(by_kind[ConstraintKind.STRUCTURAL]), 1)

        severities = {c.id: c.severity for c in by_kind[ConstraintKind.CLEARANCE]}
        self.assertEqual(severities["clearance-d1"], Severity.CRITICAL)
        self.assertEqual(severities["clearance-w1"], Severity.IMPORTANT)
        self.assertEqual(severities["clearance-w2"], Severity.CRITICAL)

        self.assertTrue(all(not c.can_override for c in by_kind[ConstraintKind.ACCESS]))
        structural = by_kind[ConstraintKind.STRUCTURAL][0]
        self.assertEqual(structural.id, "structural-r1")
        self.assertEqual(structural.severity, Severity.CRITICAL)
        # Ratio 120/420 affects integrity but does not need engineering
        self.assertTrue(structural.can_override)
        self.assertAlmostEqual(structural.affected_area.top, 14.0)

    def test_scan_is_deterministic(self):
        again = self.scanner.scan(barn_openings(), self.dims, computed_at=STAMP)
        self.assertEqual(self.snapshot, again)

    def test_empty_building_only_has_corner_columns(self):
        snapshot = self.scanner.scan([], self.dims, computed_at=STAMP)
        self.assertEqual(snapshot.clearance_zones, [])
        self.assertEqual(snapshot.layout_constraints, [])
        self.assertEqual(len(snapshot.structural_elements), 4)


class AccessBlockingTests(unittest.TestCase):
    def setUp(self):
        self.scanner = SpaceLayoutScanner(create_default_registry())
        self.openings = [
            make("r1", OpeningKind.ROLLUP_DOOR, WallPosition.FRONT, 12, 10),
            make("r2", OpeningKind.ROLLUP_DOOR, WallPosition.BACK, 12, 10),
        ]

    def test_narrow_building_blocks_path(self):
        dims = BuildingDimensions(width=15, length=40, height=14)
        with self.assertLogs("barnframe.rules.layout.access", level="WARNING"):
            snapshot = self.scanner.scan(self.openings, dims, computed_at=STAMP)

        path = snapshot.access_paths[0]
        self.assertEqual(path.path_type, PathType.EMERGENCY)
        self.assertAlmostEqual(path.current_width, 11.0)
        self.assertAlmostEqual(path.minimum_width, 12.0)
        self.assertTrue(path.is_blocked)
        self.assertIn("Path currently blocked or too narrow", path.restrictions)

    def test_wide_building_keeps_path_open(self):
        dims = BuildingDimensions(width=20, length=20, height=14)
        snapshot = self.scanner.scan(self.openings, dims, computed_at=STAMP)
        self.assertFalse(snapshot.access_paths[0].is_blocked)

    def test_door_and_other_opening_make_no_path(self):
        dims = BuildingDimensions(width=20, length=20, height=14)
        openings = [
            make("d1", OpeningKind.DOOR, WallPosition.FRONT, 3, 7),
            make("x1", OpeningKind.OTHER, WallPosition.BACK, 2, 2),
        ]
        snapshot = self.scanner.scan(openings, dims, computed_at=STAMP)
        self.assertEqual(snapshot.access_paths, [])


class RuleSelectionTests(unittest.TestCase):
    def setUp(self):
        self.dims = BuildingDimensions(width=30, length=40, height=14)
        self.scanner = SpaceLayoutScanner(create_default_registry())

    def test_disabled_rule_is_skipped(self):
        config = GenerationConfig(disabled_rules=["layout.ventilation"])
        snapshot = self.scanner.scan(barn_openings(), self.dims, config, computed_at=STAMP)
        self.assertEqual(snapshot.ventilation_areas, [])
        self.assertEqual(len(snapshot.clearance_zones), 6)

    def test_enabled_rules_bring_their_dependencies(self):
        config = GenerationConfig(enabled_rules=["layout.constraints"])
        with self.assertLogs("barnframe.core.registry", level="WARNING"):
            snapshot = self.scanner.scan(barn_openings(), self.dims, config, computed_at=STAMP)
        self.assertEqual(len(snapshot.clearance_zones), 6)
        self.assertEqual(snapshot.access_paths, [])
        self.assertEqual(snapshot.ventilation_areas, [])
        self.assertEqual(len(snapshot.layout_constraints), 8)

    def test_disabling_clearance_keeps_egress_constraints(self):
        door = [make("d1", OpeningKind.DOOR, WallPosition.FRONT, 3, 7)]
        full = self.scanner.scan(door, self.dims, computed_at=STAMP)
        config = GenerationConfig(disabled_rules=["layout.clearance_zones"])
        with self.assertLogs("barnframe.core.registry", level="WARNING"):
            partial = self.scanner.scan(door, self.dims, config, computed_at=STAMP)

        ids = [c.id for c in partial.layout_constraints]
        self.assertEqual(ids, ["clearance-d1", "access-emergency-d1"])
        self.assertEqual(ids, [c.id for c in full.layout_constraints])


if __name__ == "__main__":
    unittest.main()
