import unittest

from mcda.scale import describe_intensity, position_from_ratio, preference_text, ratio_from_position


class TestJudgmentScale(unittest.TestCase):
    def test_ratio_from_position(self) -> None:
        self.assertEqual(ratio_from_position(0), 1.0)
        self.assertEqual(ratio_from_position(2), 3.0)
        self.assertEqual(ratio_from_position(8), 9.0)
        self.assertEqual(ratio_from_position(12), 9.0)
        self.assertAlmostEqual(ratio_from_position(-2), 1.0 / 3.0, places=12)
        self.assertAlmostEqual(ratio_from_position(-8), 1.0 / 9.0, places=12)

    def test_position_from_ratio(self) -> None:
        self.assertEqual(position_from_ratio(1.0), 0)
        self.assertEqual(position_from_ratio(9.0), 8)
        self.assertEqual(position_from_ratio(1.0 / 3.0), -2)
        self.assertEqual(position_from_ratio(20.0), 8)
        self.assertEqual(position_from_ratio(0.0), 0)

    def test_positions_round_trip(self) -> None:
        for position in range(-8, 9):
            self.assertEqual(position_from_ratio(ratio_from_position(position)), position)

    def test_describe_intensity(self) -> None:
        self.assertTrue(describe_intensity(1).startswith("Equal importance"))
        self.assertTrue(describe_intensity(5.2).startswith("Strong importance"))
        self.assertEqual(describe_intensity(0), "")
        self.assertEqual(describe_intensity(12), "")

    def test_preference_text(self) -> None:
        self.assertEqual(preference_text("Cost", "Risk", 3.0), "Cost is 3x more important than Risk")
        self.assertEqual(preference_text("Cost", "Risk", 0.2), "Risk is 5x more important than Cost")
        self.assertEqual(preference_text("Cost", "Risk", 1.0), "Both criteria are equally important")
