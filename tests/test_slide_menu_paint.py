import unittest

from slidemenu_ui.config import SlideMenuConfig
from slidemenu_ui.controls.paint import (
    FillRectCommand,
    LabelCommand,
    StrokeCircleCommand,
    build_slide_menu_batch,
)
from slidemenu_ui.geometry import Rect
from slidemenu_ui.layout import DEFAULT_DIMENSIONS, NOT_READY, compute_snapshot
from slidemenu_ui.style.theme import DEFAULT_THEME


class SlideMenuPaintTests(unittest.TestCase):
    def setUp(self) -> None:
        self.snapshot = compute_snapshot(DEFAULT_DIMENSIONS, Rect.from_size(40, 60, 113, 113), 2.0)
        self.config = SlideMenuConfig(left_text="Keep", right_text=None)

    def test_not_ready_layout_paints_nothing(self) -> None:
        batch = build_slide_menu_batch(NOT_READY, "left_pending", self.config, DEFAULT_THEME)
        self.assertEqual(batch.commands, ())
        self.assertTrue(batch.clip.is_empty())

    def test_idle_paints_background_and_circle(self) -> None:
        batch = build_slide_menu_batch(self.snapshot, "idle", self.config, DEFAULT_THEME)
        self.assertEqual(batch.clip, self.snapshot.clip)
        self.assertEqual(batch.origin, (40, 60))
        self.assertEqual(len(batch.commands), 2)
        background, circle = batch.commands
        self.assertEqual(background, FillRectCommand(rect=self.snapshot.clip, color_hex=DEFAULT_THEME.background))
        assert isinstance(circle, StrokeCircleCommand)
        self.assertEqual((circle.cx, circle.cy), (56.5, 56.5))
        # 1mm stroke at density 2 is 13px; the ring stays inside the square.
        self.assertEqual(circle.stroke_width, 13.0)
        self.assertAlmostEqual(circle.radius, 56.5 - 6.5)

    def test_left_pending_highlights_left_zone_with_label(self) -> None:
        batch = build_slide_menu_batch(self.snapshot, "left_pending", self.config, DEFAULT_THEME)
        self.assertEqual(len(batch.commands), 4)
        zone, label = batch.commands[2], batch.commands[3]
        self.assertEqual(zone, FillRectCommand(rect=self.snapshot.left_zone, color_hex=DEFAULT_THEME.left_zone))
        assert isinstance(label, LabelCommand)
        self.assertEqual(label.text, "Keep")
        self.assertEqual(label.rect, self.snapshot.left_zone)

    def test_right_pending_without_text_skips_label(self) -> None:
        batch = build_slide_menu_batch(self.snapshot, "right_pending", self.config, DEFAULT_THEME)
        self.assertEqual(len(batch.commands), 3)
        self.assertEqual(
            batch.commands[2],
            FillRectCommand(rect=self.snapshot.right_zone, color_hex=DEFAULT_THEME.right_zone),
        )

    def test_batch_is_a_pure_function_of_inputs(self) -> None:
        first = build_slide_menu_batch(self.snapshot, "left_pending", self.config, DEFAULT_THEME)
        second = build_slide_menu_batch(self.snapshot, "left_pending", self.config, DEFAULT_THEME)
        self.assertEqual(first, second)


if __name__ == "__main__":
    unittest.main()
