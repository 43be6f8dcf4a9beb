"""
Unit tests for the bounded lightness search.
Run from project root: python -m pytest tests/ -v
"""
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestSolveLightness(unittest.TestCase):
    def test_already_met_returns_start(self):
        from contrast_palette.color import hex_to_color, hsl_to_color
        from contrast_palette.generation import solve_lightness

        res = solve_lightness(hex_to_color("#e7e4e4"), 180, 10, 10, 4.5)
        self.assertTrue(res.met)
        self.assertEqual(res.lightness, 10)
        self.assertEqual(res.iterations, 0)
        self.assertEqual(res.color, hsl_to_color(180, 10, 10))
        self.assertEqual(res.hex, "#171c1c")

    def test_darkens_against_light_color(self):
        from contrast_palette.generation import solve_lightness

        res = solve_lightness("#e7e4e4", 90, 50, 40, 3.0)
        self.assertTrue(res.met)
        self.assertEqual(res.lightness, 36)
        self.assertEqual(res.iterations, 2)
        self.assertEqual(res.hex, "#5c8a2e")
        self.assertGreaterEqual(res.ratio, 3.0)

    def test_direction_near_black(self):
        from contrast_palette.color import BLACK
        from contrast_palette.generation import search_direction, solve_lightness

        self.assertEqual(search_direction(BLACK), 1)
        for start in (10, 30, 50, 71):
            res = solve_lightness(BLACK, 200, 40, start, 7.0)
            self.assertGreaterEqual(res.lightness, start)

    def test_direction_near_white(self):
        from contrast_palette.color import WHITE
        from contrast_palette.generation import search_direction, solve_lightness

        self.assertEqual(search_direction(WHITE), -1)
        for start in (90, 70, 50, 33):
            res = solve_lightness(WHITE, 20, 60, start, 7.0)
            self.assertLessEqual(res.lightness, start)

    def test_unreachable_stops_at_upper_bound(self):
        from contrast_palette.color import BLACK, hsl_to_color
        from contrast_palette.generation import MAX_LIGHTNESS, solve_lightness

        res = solve_lightness(BLACK, 0, 0, 50, 21.0)
        self.assertFalse(res.met)
        self.assertEqual(res.lightness, MAX_LIGHTNESS)
        self.assertEqual(res.iterations, 24)
        self.assertEqual(res.color, hsl_to_color(0, 0, MAX_LIGHTNESS))
        self.assertLess(res.ratio, res.target)

    def test_unreachable_stops_at_lower_bound(self):
        from contrast_palette.color import WHITE, hsl_to_color
        from contrast_palette.generation import MIN_LIGHTNESS, solve_lightness

        res = solve_lightness(WHITE, 0, 0, 50, 21.0)
        self.assertFalse(res.met)
        self.assertEqual(res.lightness, MIN_LIGHTNESS)
        self.assertEqual(res.color, hsl_to_color(0, 0, MIN_LIGHTNESS))

    def test_odd_start_lands_on_boundary_color(self):
        from contrast_palette.color import BLACK, hsl_to_color
        from contrast_palette.generation import solve_lightness

        res = solve_lightness(BLACK, 0, 0, 97, 21.0)
        self.assertEqual(res.lightness, 98)
        self.assertEqual(res.iterations, 1)
        self.assertEqual(res.color, hsl_to_color(0, 0, 98))

    def test_start_clamped_into_bounds(self):
        from contrast_palette.color import BLACK, WHITE
        from contrast_palette.generation import solve_lightness

        self.assertEqual(solve_lightness(BLACK, 0, 0, 100, 1.0).lightness, 98)
        self.assertEqual(solve_lightness(WHITE, 0, 0, 0, 1.0).lightness, 2)

    def test_bounds_hold_for_mid_gray_fixed(self):
        from contrast_palette.generation import MAX_LIGHTNESS, MIN_LIGHTNESS, solve_lightness

        for fixed in ("#777777", "#808080", "#b0b0b0", "#3a3a3a"):
            for hue in range(0, 360, 45):
                res = solve_lightness(fixed, hue, 80, 50, 7.0)
                self.assertTrue(MIN_LIGHTNESS <= res.lightness <= MAX_LIGHTNESS)
                self.assertEqual(res.met, res.ratio >= 7.0)

    def test_deterministic(self):
        from contrast_palette.generation import solve_lightness

        a = solve_lightness("#1b1e2a", 300, 70, 60, 3.0)
        b = solve_lightness("#1b1e2a", 300, 70, 60, 3.0)
        self.assertEqual(a, b)

    def test_invalid_inputs(self):
        from contrast_palette.generation import solve_lightness

        with self.assertRaises(ValueError):
            solve_lightness("#zzzzzz", 0, 0, 50, 3.0)
        with self.assertRaises(ValueError):
            solve_lightness("#000000", 0, 0, 50, 0.5)
        with self.assertRaises(ValueError):
            solve_lightness("#000000", 0, 120, 50, 3.0)
