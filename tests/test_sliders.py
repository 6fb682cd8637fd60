import unittest
from unittest.mock import patch

from eqquiz.constants import GAIN_LEVELS
from eqquiz.render.sliders import (
    equalization_from_slider_state,
    level_from_position,
    render_panel,
    slider_position,
    slider_state,
)


class SliderTests(unittest.TestCase):
    def test_known_positions(self):
        self.assertEqual(slider_position(0), 62)
        self.assertEqual(slider_position(12), 17)
        self.assertEqual(slider_position(-12), 107)

    def test_position_round_trip(self):
        for level in range(-12, 13):
            self.assertEqual(level_from_position(slider_position(level)), level)

    def test_slider_state_round_trip(self):
        eq = (12, 0, -12, 0, 0, 12, 0, 0, -12, 0)
        state = slider_state(eq)
        self.assertEqual(len(state), 10)
        self.assertEqual(state[0]["band"], 32)
        self.assertEqual(equalization_from_slider_state(state), eq)

    def test_panel_marks_one_knob_per_band(self):
        eq = (12, 0, -12, 0, 0, 12, 0, 0, -12, 0)
        text = render_panel(eq, title="[1]")
        lines = text.splitlines()
        self.assertEqual(lines[0], "[1]")
        self.assertIn("16k", lines[1])
        self.assertEqual(len(lines), 2 + len(GAIN_LEVELS))
        self.assertEqual(text.count("o"), 10)
        self.assertEqual(lines[2].count("o"), 2)

    def test_panel_is_drawn_from_knob_state(self):
        raised = [{"band": 32, "y": slider_position(12), "data-level": "12"} for _ in range(10)]
        with patch("eqquiz.render.sliders.slider_state", return_value=raised):
            lines = render_panel((0,) * 10).splitlines()
        self.assertEqual(lines[1].count("o"), 10)
        self.assertNotIn("o", lines[2])


if __name__ == "__main__":
    unittest.main()
