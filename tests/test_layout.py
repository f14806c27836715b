import unittest

from slidemenu_ui.geometry import Rect
from slidemenu_ui.layout import (
    DEFAULT_DIMENSIONS,
    NOT_READY,
    MeasureSpec,
    SlideMenuDimensions,
    SlideMenuLayout,
    compute_snapshot,
    resolve_size,
    validate_dimensions,
)


class DimensionValidationTests(unittest.TestCase):
    def test_defaults(self) -> None:
        self.assertEqual(validate_dimensions(), DEFAULT_DIMENSIONS)
        self.assertEqual(DEFAULT_DIMENSIONS.full_size.width_mm, 31.0)
        self.assertEqual(DEFAULT_DIMENSIONS.full_size.height_mm, 18.0)

    def test_partial_override(self) -> None:
        dims = validate_dimensions({"side_mm": 12, "zone_height_mm": 12})
        self.assertEqual(dims.side_mm, 12.0)
        self.assertEqual(dims.zone_height_mm, 12.0)
        self.assertEqual(dims.additional_left_mm, DEFAULT_DIMENSIONS.additional_left_mm)

    def test_rejects_unknown_dimension(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown dimension"):
            validate_dimensions({"depth_mm": 1.0})

    def test_rejects_non_numeric_and_negative(self) -> None:
        with self.assertRaisesRegex(ValueError, "number of millimeters"):
            validate_dimensions({"side_mm": "9"})
        with self.assertRaisesRegex(ValueError, "number of millimeters"):
            validate_dimensions({"side_mm": True})
        with self.assertRaisesRegex(ValueError, ">= 0"):
            validate_dimensions({"additional_top_mm": -1})
        with self.assertRaisesRegex(ValueError, "side_mm"):
            validate_dimensions({"side_mm": 0})

    def test_rejects_zone_outside_clip_area(self) -> None:
        with self.assertRaisesRegex(ValueError, "zone_width_mm"):
            validate_dimensions({"zone_width_mm": 12.0})
        with self.assertRaisesRegex(ValueError, "zone_height_mm"):
            validate_dimensions({"zone_height_mm": 9.5})

    def test_direct_construction_is_validated(self) -> None:
        with self.assertRaisesRegex(ValueError, "zone_width_mm"):
            SlideMenuDimensions(zone_width_mm=30.0)
        with self.assertRaisesRegex(ValueError, "zone_height_mm"):
            SlideMenuDimensions(zone_height_mm=20.0)
        with self.assertRaisesRegex(ValueError, ">= 0"):
            SlideMenuDimensions(additional_left_mm=-1.0)
        with self.assertRaisesRegex(ValueError, ">= 0"):
            SlideMenuDimensions(stroke_width_mm=float("nan"))
        with self.assertRaisesRegex(ValueError, "side_mm"):
            SlideMenuDimensions(side_mm=0.0)
        with self.assertRaisesRegex(ValueError, "number of millimeters"):
            SlideMenuDimensions(side_mm="9")  # type: ignore[arg-type]

    def test_zero_top_margin_is_allowed(self) -> None:
        dims = SlideMenuDimensions(additional_top_mm=0.0)
        self.assertEqual(validate_dimensions({"additional_top_mm": 0}), dims)



class MeasureTests(unittest.TestCase):
    def test_resolve_size_modes(self) -> None:
        self.assertEqual(resolve_size(113, MeasureSpec()), 113)
        self.assertEqual(resolve_size(113, MeasureSpec("exactly", 80)), 80)
        self.assertEqual(resolve_size(113, MeasureSpec("at_most", 80)), 80)
        self.assertEqual(resolve_size(60, MeasureSpec("at_most", 80)), 60)

    def test_measure_spec_validation(self) -> None:
        with self.assertRaisesRegex(ValueError, "measure mode"):
            MeasureSpec("fill", 10)  # type: ignore[arg-type]
        with self.assertRaisesRegex(ValueError, ">= 0"):
            MeasureSpec("exactly", -1)

    def test_layout_measure_reports_square_size(self) -> None:
        layout = SlideMenuLayout()
        self.assertEqual(layout.measure(MeasureSpec(), MeasureSpec(), 2.0), (113, 113))


class SlideMenuLayoutTests(unittest.TestCase):
    def test_snapshot_uses_widget_relative_coordinates(self) -> None:
        snapshot = compute_snapshot(DEFAULT_DIMENSIONS, Rect.from_size(100, 200, 113, 113), 2.0)
        self.assertTrue(snapshot.ready)
        self.assertEqual(snapshot.own, Rect(0, 0, 113, 113))
        self.assertEqual(snapshot.clip, Rect(-139, -113, 252, 113))
        self.assertEqual(snapshot.left_zone, Rect(-113, 0, 0, 113))
        self.assertEqual(snapshot.right_zone, Rect(113, 0, 226, 113))
        self.assertEqual(snapshot.origin, (100, 200))
        self.assertEqual(snapshot.density, 2.0)

    def test_clip_covers_zones_taller_than_short_bounds(self) -> None:
        dims = validate_dimensions({"additional_top_mm": 0.0})
        snapshot = compute_snapshot(dims, Rect.from_size(183, 187, 10, 10), 2.0)
        self.assertEqual(snapshot.left_zone, Rect(-113, -103, 0, 10))
        self.assertEqual(snapshot.right_zone, Rect(10, -103, 123, 10))
        self.assertEqual(snapshot.clip, Rect(-139, -103, 149, 10))
        self.assertTrue(snapshot.clip.contains_rect(snapshot.left_zone))
        self.assertTrue(snapshot.clip.contains_rect(snapshot.right_zone))


    def test_recompute_is_idempotent(self) -> None:
        layout = SlideMenuLayout()
        bounds = Rect.from_size(10, 10, 113, 113)
        first = layout.recompute(bounds, 2.0)
        second = layout.recompute(bounds, 2.0)
        self.assertEqual(first, second)

    def test_ensure_ready_runs_once(self) -> None:
        layout = SlideMenuLayout()
        first = layout.ensure_ready(Rect.from_size(0, 0, 113, 113), 2.0)
        again = layout.ensure_ready(Rect.from_size(50, 50, 57, 57), 1.0)
        self.assertIs(first, again)
        forced = layout.recompute(Rect.from_size(50, 50, 57, 57), 1.0)
        self.assertEqual(forced.own, Rect(0, 0, 57, 57))
        self.assertIs(layout.snapshot, forced)

    def test_missing_bounds_leave_layout_not_ready(self) -> None:
        layout = SlideMenuLayout()
        with self.assertLogs("slidemenu_ui.layout", level="WARNING"):
            snapshot = layout.ensure_ready(None, 2.0)
        self.assertIs(snapshot, NOT_READY)
        self.assertFalse(layout.ready)
        self.assertTrue(snapshot.left_zone.is_empty())
        self.assertTrue(snapshot.clip.is_empty())

    def test_non_positive_density_leaves_layout_not_ready(self) -> None:
        layout = SlideMenuLayout()
        with self.assertLogs("slidemenu_ui.layout", level="WARNING"):
            layout.recompute(Rect.from_size(0, 0, 113, 113), 0.0)
        self.assertFalse(layout.ready)

    def test_reset(self) -> None:
        layout = SlideMenuLayout()
        layout.recompute(Rect.from_size(0, 0, 113, 113), 2.0)
        layout.reset()
        self.assertFalse(layout.ready)


if __name__ == "__main__":
    unittest.main()
