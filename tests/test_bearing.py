"""
Tests for bearings and compass directions.
"""

import unittest

from stuvgeo.geo import bearing_great_circle, bearing_rhumb, compass_direction

ORIGIN = {"lat": 0, "lng": 0}


class TestBearings(unittest.TestCase):
    """Test rhumb-line and great-circle bearings."""

    def test_cardinal_directions(self):
        """Test bearings towards the four cardinal points."""
        cases = [
            ({"lat": 1, "lng": 0}, 0.0),
            ({"lat": 0, "lng": 1}, 90.0),
            ({"lat": -1, "lng": 0}, 180.0),
            ({"lat": 0, "lng": -1}, 270.0),
        ]
        for dest, expected in cases:
            self.assertAlmostEqual(bearing_rhumb(ORIGIN, dest), expected, places=9)
            self.assertAlmostEqual(bearing_great_circle(ORIGIN, dest), expected, places=9)

    def test_range(self):
        """Test that bearings stay in [0, 360)."""
        for dest in ({"lat": -1, "lng": -1}, {"lat": 1, "lng": -0.001}, {"lat": 45, "lng": 170}):
            for bearing in (bearing_rhumb(ORIGIN, dest), bearing_great_circle(ORIGIN, dest)):
                self.assertGreaterEqual(bearing, 0)
                self.assertLess(bearing, 360)

    def test_rhumb_crosses_antimeridian(self):
        """Test that the rhumb line takes the short way over 180°."""
        self.assertAlmostEqual(bearing_rhumb({"lat": 0, "lng": 179}, {"lat": 0, "lng": -179}), 90.0)
        self.assertAlmostEqual(bearing_rhumb({"lat": 0, "lng": -179}, {"lat": 0, "lng": 179}), 270.0)

    def test_great_circle_differs_from_rhumb(self):
        """Test that the two bearings disagree on a long east-west leg."""
        start, end = {"lat": 50, "lng": -5}, {"lat": 50, "lng": 40}
        self.assertAlmostEqual(bearing_rhumb(start, end), 90.0)
        self.assertLess(bearing_great_circle(start, end), 80.0)


class TestCompassDirection(unittest.TestCase):
    """Test 16-point compass labels."""

    def test_diagonals(self):
        """Test the intercardinal points and their rough labels."""
        cases = [
            ({"lat": 1, "lng": 1}, "NE", "N"),
            ({"lat": -1, "lng": 1}, "SE", "E"),
            ({"lat": -1, "lng": -1}, "SW", "S"),
            ({"lat": 1, "lng": -1}, "NW", "W"),
        ]
        for dest, exact, rough in cases:
            for mode in ("rhumbline", "circle"):
                direction = compass_direction(ORIGIN, dest, mode=mode)
                self.assertEqual((direction.exact, direction.rough), (exact, rough), (dest, mode))

    def test_cardinals(self):
        """Test the cardinal labels."""
        self.assertEqual(compass_direction(ORIGIN, {"lat": -1, "lng": 0}).exact, "S")
        self.assertEqual(compass_direction(ORIGIN, {"lat": 0, "lng": -1}).rough, "W")

    def test_bearing_attached(self):
        """Test that the underlying bearing is returned."""
        direction = compass_direction(ORIGIN, {"lat": 0, "lng": 1})
        self.assertAlmostEqual(direction.bearing, 90.0)
        self.assertEqual(direction.exact, "E")

    def test_unknown_mode(self):
        """Test that an unknown mode is refused."""
        with self.assertRaises(ValueError):
            compass_direction(ORIGIN, {"lat": 1, "lng": 1}, mode="loxodrome")


if __name__ == '__main__':
    unittest.main()
