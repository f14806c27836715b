import unittest

from slidemenu_ui.style.theme import DEFAULT_THEME, parse_hex_color, validate_theme_tokens


class SlideMenuThemeTests(unittest.TestCase):
    def test_validate_theme_defaults(self) -> None:
        self.assertEqual(validate_theme_tokens(), DEFAULT_THEME)

    def test_validate_theme_accepts_partial_override(self) -> None:
        theme = validate_theme_tokens({"left_zone": "#112233", "font_size_px": 16})
        self.assertEqual(theme.left_zone, "#112233")
        self.assertEqual(theme.font_size_px, 16.0)
        self.assertEqual(theme.right_zone, DEFAULT_THEME.right_zone)

    def test_validate_theme_rejects_unknown_token(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown theme token"):
            validate_theme_tokens({"button_bg_idle": "#112233"})

    def test_validate_theme_rejects_invalid_hex_color(self) -> None:
        with self.assertRaisesRegex(ValueError, "hex color"):
            validate_theme_tokens({"circle_stroke": "blue"})

    def test_validate_theme_rejects_bad_font(self) -> None:
        with self.assertRaisesRegex(ValueError, "positive number"):
            validate_theme_tokens({"font_size_px": 0})
        with self.assertRaisesRegex(ValueError, "font_family"):
            validate_theme_tokens({"font_family": "  "})

    def test_parse_hex_color(self) -> None:
        self.assertEqual(parse_hex_color("#112233"), (17, 34, 51, 255))
        self.assertEqual(parse_hex_color("#11223344"), (17, 34, 51, 68))
        with self.assertRaisesRegex(ValueError, "#RRGGBB"):
            parse_hex_color("112233")

    def test_default_background_is_opaque_green(self) -> None:
        self.assertEqual(parse_hex_color(DEFAULT_THEME.background), (0x40, 0x81, 0x33, 255))



if __name__ == "__main__":
    unittest.main()
